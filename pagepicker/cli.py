"""Command line entry point for the PDF page extraction tool."""

import argparse
import logging
import sys

from .service import PageExtractionService

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _pdf_paths(paths):
    selected = []
    for path in paths:
        if path.lower().endswith('.pdf'):
            selected.append(path)
        else:
            logger.warning(f"Skipping non-PDF file: {path}")
    return selected


def cmd_info(args) -> int:
    service = PageExtractionService()
    for f in service.describe_files(_pdf_paths(args.files)):
        print(f"{f.name}\t{f.pages} page(s)\t{f.path}")
    return 0


def cmd_extract(args) -> int:
    files = _pdf_paths(args.files)
    if not files:
        print("No PDF files selected", file=sys.stderr)
        return 1

    service = PageExtractionService()
    outcomes = service.extract_pages(files, args.pages)
    for outcome in outcomes:
        status = "OK" if outcome.success else "FAILED"
        print(f"[{status}] {outcome.file}: {outcome.message}")
    return 0 if all(o.success for o in outcomes) else 1


def cmd_serve(args) -> int:
    from .http_server import run_server
    run_server(host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pagepicker',
        description='Extract selected pages of PDF files into an "output" folder beside each file.',
    )
    parser.add_argument('--version', action='version', version=PageExtractionService.VERSION)
    subparsers = parser.add_subparsers(dest='command', required=True)

    info = subparsers.add_parser('info', help='Show the page count of PDF files')
    info.add_argument('files', nargs='+', help='PDF files to inspect')
    info.set_defaults(func=cmd_info)

    extract = subparsers.add_parser('extract', help='Extract pages from PDF files')
    extract.add_argument('files', nargs='+', help='Source PDF files')
    extract.add_argument(
        '-p', '--pages', required=True,
        help='Page range: single pages, comma lists or dash ranges (e.g. "2-4" or "1,3,5")',
    )
    extract.set_defaults(func=cmd_extract)

    serve = subparsers.add_parser('serve', help='Run the HTTP server')
    serve.add_argument('--host', default=None, help='Bind address (default: HTTP_HOST)')
    serve.add_argument('--port', type=int, default=None, help='Port (default: HTTP_PORT)')
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
