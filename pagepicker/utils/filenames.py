"""Filesystem-safe naming for extracted page files."""

import os
from typing import Tuple

_KEEP_PUNCTUATION = "-_"


def _is_safe_char(ch: str) -> bool:
    if ch.isascii() and (ch.isalnum() or ch in _KEEP_PUNCTUATION):
        return True
    # Common CJK unified ideographs
    return "\u4e00" <= ch <= "\u9fa5"


def sanitize_name(name: str) -> str:
    """Replace every character outside [A-Za-z0-9_-] and common CJK with '_'."""
    return "".join(ch if _is_safe_char(ch) else "_" for ch in name)


def split_base_name(path: str) -> Tuple[str, str]:
    """Return (stem, extension) of the path's base name."""
    return os.path.splitext(os.path.basename(path))


def page_file_name(stem: str, page: str, ext: str) -> str:
    return f"{stem}_page_{page}{ext}"


def range_file_name(stem: str, first: int, last: int, ext: str) -> str:
    return f"{stem}_p{first}-{last}{ext}"
