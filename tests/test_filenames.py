"""Tests for output file naming."""

import re

import pytest

from pagepicker.utils.filenames import (
    page_file_name,
    range_file_name,
    sanitize_name,
    split_base_name,
)

SAFE_NAME = re.compile(r"^[A-Za-z0-9_\-一-龥]*$")


class TestSanitizeName:
    """Tests for filesystem-safe base names."""

    def test_plain_name_unchanged(self):
        assert sanitize_name("Report-2024_v2") == "Report-2024_v2"

    def test_spaces_and_punctuation(self):
        assert sanitize_name("my report (final).v2") == "my_report__final__v2"

    def test_cjk_kept(self):
        assert sanitize_name("年度报告 2024") == "年度报告_2024"

    def test_emoji_replaced(self):
        assert sanitize_name("a😀b") == "a_b"

    @pytest.mark.parametrize("name,expected", [
        ("café", "caf_"),
        ("한글", "__"),
        ("１２", "__"),
        ("a/b\\c", "a_b_c"),
    ])
    def test_unsupported_characters(self, name, expected):
        assert sanitize_name(name) == expected

    def test_cjk_range_bounds(self):
        assert sanitize_name("一龥") == "一龥"
        assert sanitize_name("䷿龦") == "__"

    def test_length_preserved(self):
        name = "Quarterly (Q3) résumé – final!.draft"
        assert len(sanitize_name(name)) == len(name)

    def test_output_alphabet(self):
        name = "x y.z(1)[2]{3}#$%&@!~`'\"+=;:,<>?é😀中文"
        assert SAFE_NAME.match(sanitize_name(name))


class TestFileNames:
    """Tests for extracted file names."""

    def test_split_base_name(self):
        assert split_base_name("/tmp/docs/My File.pdf") == ("My File", ".pdf")

    def test_split_base_name_keeps_inner_dots(self):
        assert split_base_name("a/b.c.PDF") == ("b.c", ".PDF")

    def test_page_file_name(self):
        assert page_file_name("doc", "3", ".pdf") == "doc_page_3.pdf"

    def test_range_file_name(self):
        assert range_file_name("doc", 2, 4, ".pdf") == "doc_p2-4.pdf"
