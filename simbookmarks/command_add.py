"""Add command implementation."""

# ============================================================
# Imports
# ============================================================

import argparse
import sys
from pathlib import Path

from .commands import changed_status, locate, report, require_text, summarize, writable_only
from .config import Config
from .locator import short_path
from .models import EditResult, EditStatus
from .output import print_detail
from .store import BookmarkStore


# ============================================================
# Entry Point
# ============================================================

def execute_add(config: Config, args: argparse.Namespace) -> int:
    """Prepend a bookmark to every writable bookmark file of the locale."""
    title = require_text(args.title, "bookmark title")
    url = args.url if args.url is not None else read_url_from_stdin()
    url = require_text(url, "bookmark URL (pass -u or pipe it on stdin)")

    results = []
    for path in writable_only(config, locate(config)):
        result = add_bookmark(config, path, title, url)
        report(config, result)
        results.append(result)

    return summarize(results, "edited")


# ============================================================
# Input
# ============================================================

def read_url_from_stdin() -> str | None:
    """Read a URL piped on stdin; None when stdin is a terminal."""
    if sys.stdin is None or sys.stdin.isatty():
        return None
    return sys.stdin.read().strip()


# ============================================================
# Editing
# ============================================================

def add_bookmark(config: Config, path: Path, title: str, url: str) -> EditResult:
    """Load path, prepend the bookmark and save unless this is a dry run."""
    store = BookmarkStore.load(path)
    store.prepend(title, url)

    if not config.dryrun:
        if store.save() and config.verbose:
            print_detail(f"Backed up {short_path(config, path)} to .orig")

    return EditResult(path=path, status=changed_status(config, EditStatus.EDITED, EditStatus.EDITED_DRYRUN))
