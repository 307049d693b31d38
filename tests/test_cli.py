"""Tests for the command line interface."""

import pytest
import pymupdf

from pagepicker.cli import build_parser, main


def create_test_pdf(path, num_pages=5):
    doc = pymupdf.open()
    for i in range(num_pages):
        page = doc.new_page(width=612, height=792)
        page.insert_text(pymupdf.Point(72, 72), f"Page {i + 1}", fontsize=12)
    doc.save(str(path))
    doc.close()
    return str(path)


class TestCli:
    """Tests for the pagepicker command."""

    def test_info(self, tmp_path, capsys):
        path = create_test_pdf(tmp_path / "doc.pdf", num_pages=3)

        assert main(["info", path]) == 0

        out = capsys.readouterr().out
        assert "doc.pdf\t3 page(s)" in out

    def test_extract_success(self, tmp_path, capsys):
        path = create_test_pdf(tmp_path / "doc.pdf")

        assert main(["extract", path, "--pages", "2-4"]) == 0

        out = capsys.readouterr().out
        assert "[OK] doc.pdf: Saved to: doc_p2-4.pdf" in out
        assert (tmp_path / "output" / "doc_p2-4.pdf").exists()

    def test_extract_failure_exit_code(self, tmp_path, capsys):
        path = create_test_pdf(tmp_path / "doc.pdf")

        assert main(["extract", path, "-p", "x"]) == 1
        assert "[FAILED]" in capsys.readouterr().out

    def test_extract_skips_non_pdf(self, tmp_path, capsys):
        assert main(["extract", str(tmp_path / "notes.txt"), "-p", "1"]) == 1
        assert "No PDF files selected" in capsys.readouterr().err

    def test_pages_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["extract", "doc.pdf"])
