"""Remove command implementation."""

# ============================================================
# Imports
# ============================================================

import argparse
from pathlib import Path

from .commands import changed_status, ensure_all_writable, locate, report, require_text, summarize
from .config import Config
from .locator import short_path
from .models import EditResult, EditStatus
from .output import print_detail
from .store import BookmarkStore


# ============================================================
# Entry Point
# ============================================================

def execute_rm(config: Config, args: argparse.Namespace) -> int:
    """Remove the first bookmark titled args.title from every file of the locale."""
    title = require_text(args.title, "bookmark title")

    paths = locate(config)
    ensure_all_writable(config, paths)

    results = []
    for path in paths:
        result = remove_bookmark(config, path, title)
        report(config, result)
        results.append(result)

    return summarize(results, "edited")


# ============================================================
# Editing
# ============================================================

def remove_bookmark(config: Config, path: Path, title: str) -> EditResult:
    """Load path and drop the matching bookmark, saving only if one was removed."""
    store = BookmarkStore.load(path)
    if not store.remove_by_title(title):
        return EditResult(path=path, status=EditStatus.UNCHANGED)

    if not config.dryrun:
        if store.save() and config.verbose:
            print_detail(f"Backed up {short_path(config, path)} to .orig")

    return EditResult(path=path, status=changed_status(config, EditStatus.EDITED, EditStatus.EDITED_DRYRUN))
