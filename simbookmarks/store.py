"""Loading, editing and saving of one bookmark property list."""

# ============================================================
# Imports
# ============================================================

import os
import plistlib
import shutil
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

from .errors import DeserializationError, SerializationError
from .models import TITLE_KEY, new_item


# ============================================================
# Configuration
# ============================================================

BINARY_HEADER = b"bplist00"
BACKUP_SUFFIX = ".orig"


# ============================================================
# Property List IO
# ============================================================

def detect_format(data: bytes) -> plistlib.PlistFormat:
    """Return the plistlib format matching the raw file contents."""
    if data[:len(BINARY_HEADER)] == BINARY_HEADER:
        return plistlib.FMT_BINARY
    return plistlib.FMT_XML


def load_bookmarks(path: Path | str) -> tuple[list[Any], plistlib.PlistFormat]:
    """
    Read a bookmark file.

    Returns:
        The item list and the format the file was written in

    Raises:
        OSError: The file cannot be read
        DeserializationError: The contents are not a property list array
    """
    with open(path, "rb") as f:
        data = f.read()

    try:
        items = plistlib.loads(data)
    except (ValueError, ExpatError, AttributeError, TypeError) as e:
        # Malformed <date> values surface as AttributeError from plistlib
        raise DeserializationError(str(e), path=path) from e

    if not isinstance(items, list):
        raise DeserializationError(
            f"expected an array of bookmarks, found {type(items).__name__}", path=path,
        )

    return items, detect_format(data)


def dump_bookmarks(items: list[Any], fmt: plistlib.PlistFormat) -> bytes:
    """Encode items in the given format, keeping each item's key order."""
    try:
        return plistlib.dumps(items, fmt=fmt, sort_keys=False)
    except (TypeError, ValueError, OverflowError) as e:
        raise SerializationError(str(e)) from e


# ============================================================
# Backups
# ============================================================

def backup_path(path: Path | str) -> Path:
    return Path(f"{path}{BACKUP_SUFFIX}")


def backup_once(path: Path | str) -> bool:
    """
    Copy path to its .orig sidecar unless the sidecar already exists.

    Returns:
        True if a backup was created by this call
    """
    backup = backup_path(path)
    if backup.exists():
        return False
    shutil.copyfile(path, backup)
    return True


def restore_backup(path: Path | str) -> None:
    """Overwrite path with the contents of its .orig sidecar."""
    shutil.copyfile(backup_path(path), path)


def is_writable(path: Path | str) -> bool:
    return os.access(path, os.W_OK)


# ============================================================
# Store
# ============================================================

class BookmarkStore:
    """
    In-memory edit session for one bookmark file.

    Items are kept as plain dicts so keys this tool does not know about
    survive a load/save round trip untouched.
    """

    def __init__(self, path: Path | str, items: list[Any], fmt: plistlib.PlistFormat):
        self.path = Path(path)
        self.items = items
        self.fmt = fmt
        self.modified = False
        self.saved = False

    @classmethod
    def load(cls, path: Path | str) -> "BookmarkStore":
        """Create a store from the file at path."""
        items, fmt = load_bookmarks(path)
        return cls(path, items, fmt)

    def __len__(self) -> int:
        return len(self.items)

    def prepend(self, title: str, url: str) -> None:
        """Insert a new bookmark at the top of the list."""
        self.items.insert(0, new_item(title, url))
        self.modified = True

    def remove_by_title(self, title: str) -> bool:
        """
        Remove the first item whose Title equals title exactly.

        Returns:
            True if an item was removed
        """
        for index, item in enumerate(self.items):
            if isinstance(item, dict) and item.get(TITLE_KEY) == title:
                del self.items[index]
                self.modified = True
                return True
        return False

    def is_writable(self) -> bool:
        """Check if the process may write the bookmark file."""
        return is_writable(self.path)

    def save(self, path: Path | str | None = None,
             fmt: plistlib.PlistFormat | None = None) -> bool:
        """
        Write the items back to disk.

        The first save of a path copies the untouched file to a .orig
        sidecar. The file is then overwritten in place using the format
        observed at load time unless fmt overrides it.

        Args:
            path: Destination, defaults to the loaded path
            fmt: Format override

        Returns:
            True if a backup was created by this save
        """
        target = Path(path) if path is not None else self.path

        # Encode first so a serialization failure leaves the file untouched
        data = dump_bookmarks(self.items, fmt if fmt is not None else self.fmt)

        created_backup = backup_once(target) if target.exists() else False
        with open(target, "wb") as f:
            f.write(data)

        self.saved = True
        return created_backup
