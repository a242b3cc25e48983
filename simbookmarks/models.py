"""Domain models for simulator bookmark editing."""

# ============================================================
# Imports
# ============================================================

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


# ============================================================
# Item Keys
# ============================================================

TITLE_KEY = "Title"
URL_KEY = "URL"
LEGACY_TITLE_KEY = "iPhoneTitle"
LEGACY_URL_KEY = "iPhoneURL"


# ============================================================
# Bookmark Items
# ============================================================

def new_item(title: str, url: str) -> dict[str, Any]:
    """Create a bookmark item using the canonical keys."""
    return {TITLE_KEY: title, URL_KEY: url}


def display_fields(item: Any) -> tuple[str | None, str | None]:
    """
    Return the (title, url) pair shown for an item.

    Canonical keys win; legacy iPhone keys are used as a fallback.
    Values that are missing, empty or not strings come back as None.
    """
    if not isinstance(item, dict):
        return None, None
    return (
        _first_text(item, TITLE_KEY, LEGACY_TITLE_KEY),
        _first_text(item, URL_KEY, LEGACY_URL_KEY),
    )


def _first_text(item: dict[str, Any], *keys: str) -> str | None:
    for key in keys:
        value = item.get(key)
        if isinstance(value, str) and value:
            return value
    return None


# ============================================================
# Edit Results
# ============================================================

class EditStatus(Enum):
    """Outcome of processing one bookmark file."""

    EDITED = "Edited"
    EDITED_DRYRUN = "Would edit"
    RESTORED = "Restored"
    RESTORED_DRYRUN = "Would restore"
    UNCHANGED = "Unchanged"
    SKIPPED_NO_BACKUP = "Skipped (no backup)"


@dataclass(frozen=True)
class EditResult:
    """
    Result of processing a bookmark file.

    Attributes:
        path: Absolute path of the bookmark file
        status: What happened to it
    """

    path: Path
    status: EditStatus

    def is_change(self) -> bool:
        """Check if the file was (or, in a dry run, would be) changed."""
        return self.status in (
            EditStatus.EDITED,
            EditStatus.EDITED_DRYRUN,
            EditStatus.RESTORED,
            EditStatus.RESTORED_DRYRUN,
        )
