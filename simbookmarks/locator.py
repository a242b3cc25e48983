"""Discovery of per-locale bookmark files inside simulator SDKs."""

import os
from pathlib import Path

from .config import Config


# --------------------------------------------------------------------------- #
# Configuration
# --------------------------------------------------------------------------- #

SAFARI_APP_SUBPATH = Path("Applications") / "MobileSafari.app"


# --------------------------------------------------------------------------- #
# Discovery
# --------------------------------------------------------------------------- #

def list_simulator_sdks(config: Config) -> list[str]:
    """Return SDK directory names under the SDK root, skipping hidden entries.

    Order follows the filesystem. A missing SDK root yields an empty list.
    """
    try:
        entries = os.scandir(config.sdk_root)
    except (FileNotFoundError, NotADirectoryError):
        return []

    with entries:
        return [entry.name for entry in entries if not entry.name.startswith(".")]


def bookmark_filename(locale: str) -> str:
    return f"StaticBookmarks-{locale}.plist"


def find_bookmark_files(config: Config, locale: str) -> list[Path]:
    """Return existing bookmark files for locale, one per SDK at most."""
    paths = []
    for sdk in list_simulator_sdks(config):
        candidate = config.sdk_root / sdk / SAFARI_APP_SUBPATH / bookmark_filename(locale)
        if candidate.exists():
            paths.append(candidate)
    return paths


# --------------------------------------------------------------------------- #
# Display
# --------------------------------------------------------------------------- #

def short_path(config: Config, path: Path | str) -> str:
    """Strip the SDK root prefix from path for display."""
    text = str(path)
    root_prefix = str(config.sdk_root).rstrip(os.sep) + os.sep
    if text.startswith(root_prefix):
        return text[len(root_prefix):]
    return text
