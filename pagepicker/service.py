"""Page extraction service: file selection and the extraction batch."""

import logging
import os
import tempfile
import time
from typing import Iterable, List, Optional, Sequence

from .backends.base import PdfBackend
from .backends.pymupdf_backend import PyMuPDFBackend
from .config import ExtractionConfig, get_config
from .errors import (
    DirectoryCreationError,
    ExtractionError,
    InvalidRangeError,
    MergeError,
    PathResolutionError,
)
from .models import FileDescriptor, PageRangeSpec, ProcessOutcome
from .reporting.outcome_collector import OutcomeCollector
from .utils.filenames import page_file_name, range_file_name, sanitize_name, split_base_name
from .utils.page_range import parse_page_range

logger = logging.getLogger(__name__)


def _resolve_path(path: str) -> str:
    try:
        return os.path.abspath(path)
    except (OSError, ValueError) as e:
        raise PathResolutionError(str(e))


def _ensure_dir(path: str) -> None:
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(str(e))


class PageExtractionService:
    """Selects PDF files and writes the requested pages of each to disk."""

    VERSION = "0.0.1"

    def __init__(
        self,
        backend: Optional[PdfBackend] = None,
        config: Optional[ExtractionConfig] = None,
    ):
        self.backend = backend or PyMuPDFBackend()
        self.config = config or get_config().extraction

    def describe_files(self, paths: Iterable[str]) -> List[FileDescriptor]:
        """
        Build a FileDescriptor for each path.

        Paths that cannot be made absolute are skipped. The page count is
        best effort: an unreadable file gets the configured default count.
        """
        files = []
        for path in paths:
            try:
                abs_path = _resolve_path(path)
            except PathResolutionError as e:
                logger.warning(f"Cannot resolve absolute path for {path}: {e}")
                continue

            try:
                pages = self.backend.page_count(abs_path)
            except Exception as e:
                pages = self.config.default_page_count
                logger.warning(
                    f"Cannot read page count of {abs_path} ({e}), using {pages}"
                )

            files.append(FileDescriptor(
                name=os.path.basename(abs_path),
                path=abs_path,
                pages=pages,
            ))

        return files

    def extract_pages(
        self,
        file_paths: Sequence[str],
        page_range: str,
    ) -> List[ProcessOutcome]:
        """
        Extract the pages selected by ``page_range`` from every file.

        Never raises for per-file problems; each failure becomes a failed
        ProcessOutcome. A malformed range yields a single failed outcome with
        an empty file label and no file is processed.
        """
        collector = OutcomeCollector()

        try:
            spec = parse_page_range(page_range)
        except InvalidRangeError as e:
            collector.failed("", f"Failed to parse page range: {e}")
            return collector.outcomes

        logger.info(
            f"Extracting pages {page_range!r} from {len(file_paths)} file(s), "
            f"contiguous={spec.is_contiguous}"
        )
        start_time = time.time()

        page_strs = spec.as_strings()
        for path in file_paths:
            try:
                self._process_file(path, spec, page_strs, collector)
            except Exception as e:
                logger.exception(f"Unexpected error processing {path}: {e}")
                collector.failed(os.path.basename(path), f"Processing failed: {e}")

        summary = collector.summary()
        logger.info(
            f"Finished in {int((time.time() - start_time) * 1000)}ms: "
            f"{summary['succeeded']} succeeded, {summary['failed']} failed"
        )
        return collector.outcomes

    def _process_file(
        self,
        path: str,
        spec: PageRangeSpec,
        page_strs: Sequence[str],
        collector: OutcomeCollector,
    ) -> None:
        label = os.path.basename(path)

        try:
            abs_path = _resolve_path(path)
        except PathResolutionError as e:
            collector.failed(label, f"Failed to resolve absolute path: {e}")
            return

        out_dir = os.path.join(os.path.dirname(abs_path), self.config.output_dir_name)
        try:
            _ensure_dir(out_dir)
        except DirectoryCreationError as e:
            collector.failed(label, f"Failed to create output directory: {e}")
            return

        stem, ext = split_base_name(abs_path)
        safe_name = sanitize_name(stem)

        if not spec.is_contiguous:
            self._extract_each_page(abs_path, out_dir, safe_name, ext, label, page_strs, collector)
        elif not spec.pages:
            collector.failed(label, "Page range selects no pages")
        else:
            self._extract_range(abs_path, out_dir, safe_name, ext, label, spec, page_strs, collector)

    def _extract_range(
        self,
        abs_path: str,
        out_dir: str,
        safe_name: str,
        ext: str,
        label: str,
        spec: PageRangeSpec,
        page_strs: Sequence[str],
        collector: OutcomeCollector,
    ) -> None:
        out_name = range_file_name(safe_name, spec.first, spec.last, ext)
        out_path = os.path.join(out_dir, out_name)

        # Page files go to a scratch dir; only the merged file lands in out_dir
        with tempfile.TemporaryDirectory(prefix=".pagepicker-", dir=out_dir) as work_dir:
            try:
                intermediates = self.backend.extract_pages(abs_path, work_dir, page_strs, safe_name)
            except ExtractionError as e:
                collector.failed(label, f"Failed to extract pages: {e}")
                return

            try:
                self.backend.merge_files(intermediates, out_path, append=False)
            except MergeError as e:
                collector.failed(label, f"Failed to merge extracted pages: {e}")
                return

            if self.config.keep_intermediate_files:
                self._keep_intermediates(intermediates, out_dir)

        collector.succeeded(label, f"Saved to: {out_name}")

    def _extract_each_page(
        self,
        abs_path: str,
        out_dir: str,
        safe_name: str,
        ext: str,
        label: str,
        page_strs: Sequence[str],
        collector: OutcomeCollector,
    ) -> None:
        for page in page_strs:
            try:
                self.backend.extract_pages(abs_path, out_dir, [page], safe_name)
            except ExtractionError as e:
                collector.failed(label, f"Failed to extract page {page}: {e}")
                continue
            collector.succeeded(label, f"Saved to: {page_file_name(safe_name, page, ext)}")

    def _keep_intermediates(self, paths: Sequence[str], out_dir: str) -> None:
        for path in dict.fromkeys(paths):
            target = os.path.join(out_dir, os.path.basename(path))
            try:
                os.replace(path, target)
            except OSError as e:
                logger.warning(f"Could not keep intermediate file {target}: {e}")
