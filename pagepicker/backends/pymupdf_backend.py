"""PDF page operations backed by PyMuPDF."""

import logging
import os
from typing import List, Sequence

import pymupdf

from .base import PdfBackend
from ..errors import ExtractionError, MergeError
from ..utils.filenames import page_file_name

logger = logging.getLogger(__name__)


class PyMuPDFBackend(PdfBackend):
    """PdfBackend implementation using pymupdf documents."""

    def page_count(self, path: str) -> int:
        try:
            doc = pymupdf.open(path)
        except Exception as e:
            raise ValueError(f"Invalid or corrupted PDF file: {e}")

        try:
            if not doc.is_pdf:
                raise ValueError(f"Not a PDF file: {path}")
            try:
                count = doc.page_count
            except Exception as e:
                raise ValueError(f"Invalid or corrupted PDF file: {e}")
            if count == 0:
                raise ValueError(f"No pages found in {path}")
            return count
        finally:
            doc.close()

    def extract_pages(
        self,
        source_path: str,
        output_dir: str,
        pages: Sequence[str],
        output_stem: str,
    ) -> List[str]:
        ext = os.path.splitext(source_path)[1]

        try:
            src = pymupdf.open(source_path)
        except Exception as e:
            raise ExtractionError(f"Cannot open {source_path}: {e}")

        written = []
        try:
            total_pages = src.page_count
            for page in pages:
                try:
                    page_num = int(page)
                except ValueError:
                    raise ExtractionError(f"Invalid page number: '{page}'")
                if page_num < 1 or page_num > total_pages:
                    raise ExtractionError(
                        f"Page {page_num} out of range (document has {total_pages} pages)"
                    )

                out_path = os.path.join(output_dir, page_file_name(output_stem, page, ext))
                single = pymupdf.open()
                try:
                    single.insert_pdf(src, from_page=page_num - 1, to_page=page_num - 1)
                    single.save(out_path)
                except Exception as e:
                    raise ExtractionError(f"Failed to write page {page_num}: {e}")
                finally:
                    single.close()

                logger.debug(f"Wrote page {page_num} of {source_path} to {out_path}")
                written.append(out_path)
        finally:
            src.close()

        return written

    def merge_files(
        self,
        input_paths: Sequence[str],
        output_path: str,
        append: bool = False,
    ) -> str:
        if not input_paths:
            raise MergeError("No input files to merge")

        inputs = list(input_paths)
        if append and os.path.exists(output_path):
            inputs.insert(0, output_path)

        merged = pymupdf.open()
        try:
            for path in inputs:
                try:
                    part = pymupdf.open(path)
                except Exception as e:
                    raise MergeError(f"Cannot open {path}: {e}")
                try:
                    merged.insert_pdf(part)
                finally:
                    part.close()

            try:
                if append and os.path.exists(output_path):
                    # output_path is one of the inputs; write beside it first
                    tmp_path = output_path + ".tmp"
                    merged.save(tmp_path)
                    os.replace(tmp_path, output_path)
                else:
                    merged.save(output_path)
            except Exception as e:
                raise MergeError(f"Failed to write {output_path}: {e}")
        finally:
            merged.close()

        return output_path
