"""Restore command implementation."""

# ============================================================
# Imports
# ============================================================

import argparse
from pathlib import Path

from .commands import changed_status, ensure_all_writable, locate, report, summarize
from .config import Config
from .models import EditResult, EditStatus
from .store import backup_path, restore_backup


# ============================================================
# Entry Point
# ============================================================

def execute_restore(config: Config, args: argparse.Namespace) -> int:
    """Put the .orig backup of every bookmark file of the locale back in place."""
    paths = locate(config)
    ensure_all_writable(config, [path for path in paths if backup_path(path).exists()])

    results = []
    for path in paths:
        result = restore_file(config, path)
        report(config, result)
        results.append(result)

    return summarize(results, "restored")


def restore_file(config: Config, path: Path) -> EditResult:
    """Copy the backup over path; the backup itself is kept."""
    if not backup_path(path).exists():
        return EditResult(path=path, status=EditStatus.SKIPPED_NO_BACKUP)

    if not config.dryrun:
        restore_backup(path)

    return EditResult(path=path, status=changed_status(config, EditStatus.RESTORED, EditStatus.RESTORED_DRYRUN))
