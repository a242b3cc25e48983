"""Exception types raised by the bookmark editor."""


class BookmarkError(Exception):
    """Base class for all bookmark editing failures."""


class DeserializationError(BookmarkError):
    """
    Raised when a bookmark file is not a readable property list.

    The message is the parser's diagnostic as is; the offending file
    is kept in path.
    """

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class SerializationError(BookmarkError):
    """Raised when in-memory bookmarks cannot be encoded as a property list."""


class UsageError(BookmarkError):
    """Raised when a required command-line argument is missing or empty."""
