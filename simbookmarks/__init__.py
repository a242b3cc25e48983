"""Editing of Safari bookmark files inside iOS Simulator SDKs."""

from .config import Config
from .errors import (
    BookmarkError,
    DeserializationError,
    SerializationError,
    UsageError,
)
from .locator import find_bookmark_files, list_simulator_sdks, short_path
from .models import EditResult, EditStatus
from .store import BookmarkStore, dump_bookmarks, load_bookmarks

__all__ = [
    # Configuration
    'Config',
    # Errors
    'BookmarkError',
    'DeserializationError',
    'SerializationError',
    'UsageError',
    # Discovery
    'find_bookmark_files',
    'list_simulator_sdks',
    'short_path',
    # Editing
    'BookmarkStore',
    'EditResult',
    'EditStatus',
    'dump_bookmarks',
    'load_bookmarks',
]
