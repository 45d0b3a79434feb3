"""Exceptions raised while turning an uploaded file into a dataset.

Every upload failure derives from DatasetLoadError so callers can reject an
upload with a single except clause.
"""


class DatasetLoadError(Exception):
    """Raised when an upload cannot be turned into a dataset."""

    pass


class FormatError(DatasetLoadError):
    """Raised for unsupported extensions and content that cannot be decoded."""

    pass


class FileTooLargeError(DatasetLoadError):
    """Raised when a file exceeds the client-side size limit."""

    pass


class FileReadError(DatasetLoadError):
    """Raised when the file cannot be read from disk."""

    pass
