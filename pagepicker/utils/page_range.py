"""Utility functions for page selection."""

import re
from typing import List

from ..errors import InvalidRangeError
from ..models import PageRangeSpec


_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: str, what: str, token: str) -> int:
    text = value.strip()
    if not _INTEGER.fullmatch(text):
        raise InvalidRangeError(f"Invalid {what} '{value}' in '{token}'")
    try:
        return int(text)
    except ValueError as e:
        raise InvalidRangeError(f"Invalid {what} '{value}' in '{token}'") from e


def parse_page_range(expression: str) -> PageRangeSpec:
    """
    Parse a page range expression into a PageRangeSpec.

    Args:
        expression: Comma separated tokens, each a page ("3") or a dash
                    range ("2-5"). Pages are 1-indexed.

    Returns:
        PageRangeSpec with pages in expression order (duplicates kept) and
        is_contiguous set only if no token was a single page.

    Raises:
        InvalidRangeError: If a token is not an integer or a ``start-end`` pair
    """
    pages: List[int] = []
    is_contiguous = True

    for token in expression.split(','):
        if '-' in token:
            bounds = token.split('-')
            if len(bounds) != 2:
                raise InvalidRangeError(f"Invalid page range: '{token}'")
            start = _parse_int(bounds[0], "start page", token)
            end = _parse_int(bounds[1], "end page", token)
            # start > end expands to nothing
            pages.extend(range(start, end + 1))
        else:
            pages.append(_parse_int(token, "page number", token))
            is_contiguous = False

    return PageRangeSpec(pages=tuple(pages), is_contiguous=is_contiguous)
