"""Helpers shared by the editing commands."""

# ============================================================
# Imports
# ============================================================

from pathlib import Path

from .config import Config
from .errors import BookmarkError, UsageError
from .locator import find_bookmark_files, short_path
from .models import EditResult, EditStatus
from .output import print_detail, print_result, print_warning
from .store import is_writable


# ============================================================
# Argument Checks
# ============================================================

def require_text(value: str | None, name: str) -> str:
    """Return value, or raise UsageError when it is missing or blank."""
    if value is None or not value.strip():
        raise UsageError(f"missing {name}")
    return value


# ============================================================
# File Discovery
# ============================================================

def locate(config: Config) -> list[Path]:
    """Find bookmark files for the configured locale."""
    paths = find_bookmark_files(config, config.locale)
    if config.verbose:
        print_detail(f"Found {len(paths)} bookmark file(s) for {config.locale} under {config.sdk_root}")
    return paths


def ensure_all_writable(config: Config, paths: list[Path]) -> None:
    """Raise before any write if one of paths is read-only."""
    for path in paths:
        if not is_writable(path):
            raise BookmarkError(f"{short_path(config, path)} is not writable")


def writable_only(config: Config, paths: list[Path]) -> list[Path]:
    """
    Drop read-only paths, warning about each one.

    Raises:
        BookmarkError: Files were found but none of them is writable
    """
    writable = []
    for path in paths:
        if is_writable(path):
            writable.append(path)
        else:
            print_warning(f"skipping read-only {short_path(config, path)}")

    if paths and not writable:
        raise BookmarkError(f"no writable bookmark file found for {config.locale}")
    return writable


# ============================================================
# Reporting
# ============================================================

def report(config: Config, result: EditResult) -> None:
    """Print the status line for a processed file."""
    if result.is_change():
        print_result(result.status.value, short_path(config, result.path))
    elif config.verbose:
        print_detail(f"{result.status.value}: {short_path(config, result.path)}")


def summarize(results: list[EditResult], noun: str) -> int:
    """
    Turn a batch of results into an exit status.

    Returns:
        0 if at least one file changed, otherwise 1 after a warning
    """
    if any(result.is_change() for result in results):
        return 0
    print_warning(f"no bookmarks {noun}")
    return 1


def changed_status(config: Config, status: EditStatus, dryrun_status: EditStatus) -> EditStatus:
    return dryrun_status if config.dryrun else status
