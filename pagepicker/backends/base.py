"""Base backend interface for PDF page operations."""

from abc import ABC, abstractmethod
from typing import List, Sequence


class PdfBackend(ABC):
    """Abstract base class for the PDF library operations the extractor needs."""

    @abstractmethod
    def page_count(self, path: str) -> int:
        """
        Count the pages of a PDF file.

        Args:
            path: Path to the PDF file

        Returns:
            Number of pages

        Raises:
            ValueError: If the file is unreadable or not a valid PDF
        """
        pass

    @abstractmethod
    def extract_pages(
        self,
        source_path: str,
        output_dir: str,
        pages: Sequence[str],
        output_stem: str,
    ) -> List[str]:
        """
        Write each requested page of a PDF to its own file.

        Args:
            source_path: Path to the source PDF
            output_dir: Existing directory receiving the page files
            pages: 1-indexed page numbers as strings
            output_stem: File name prefix; files are named
                         ``{output_stem}_page_{n}{ext}``

        Returns:
            Paths of the written files, in request order

        Raises:
            ExtractionError: If a page number is invalid or writing fails
        """
        pass

    @abstractmethod
    def merge_files(
        self,
        input_paths: Sequence[str],
        output_path: str,
        append: bool = False,
    ) -> str:
        """
        Concatenate PDF files into one.

        Args:
            input_paths: PDFs to combine, in order
            output_path: Destination file
            append: Append to ``output_path`` if it already exists instead of
                    overwriting it

        Returns:
            The output path

        Raises:
            MergeError: If the input list is empty or reading/writing fails
        """
        pass
