"""Plain records passed between the parser, the executor and its callers."""

from dataclasses import dataclass, asdict
from typing import Dict, Any, Tuple


@dataclass(frozen=True)
class FileDescriptor:
    """A selected PDF file with best-effort page count."""
    name: str
    path: str
    pages: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PageRangeSpec:
    """
    Parsed page range expression.

    ``pages`` keeps expression order and duplicates. ``is_contiguous`` is true
    only when every token of the expression was a dash range.
    """
    pages: Tuple[int, ...]
    is_contiguous: bool

    @property
    def first(self) -> int:
        return self.pages[0]

    @property
    def last(self) -> int:
        return self.pages[-1]

    def as_strings(self) -> Tuple[str, ...]:
        return tuple(str(p) for p in self.pages)


@dataclass(frozen=True)
class ProcessOutcome:
    """Result of one unit of work: a whole file or a single page."""
    file: str
    success: bool
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
