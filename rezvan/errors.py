"""Exceptions raised by the document model."""


class EditorError(Exception):
    """Base class for document-structure errors."""


class OutOfRange(EditorError, IndexError):
    """A row index lies outside the document."""


class InvalidOffset(EditorError, ValueError):
    """A column offset is not a valid character boundary for the row."""


class NoDestination(EditorError):
    """The document has no file name to save to."""

    def __init__(self, message: str = "no file name specified"):
        super().__init__(message)
