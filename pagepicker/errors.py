"""Exception types raised while parsing ranges and writing page files."""


class PagePickerError(Exception):
    """Base class for all page extraction errors."""


class InvalidRangeError(PagePickerError, ValueError):
    """The page range expression is malformed."""


RangeParseError = InvalidRangeError


class PathResolutionError(PagePickerError):
    """An input path could not be turned into an absolute path."""


class DirectoryCreationError(PagePickerError):
    """The output directory could not be created."""


class ExtractionError(PagePickerError):
    """The PDF library could not extract a requested page."""


class MergeError(PagePickerError):
    """The PDF library could not combine the extracted pages."""
