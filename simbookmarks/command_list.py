"""List and sdks command implementations."""

# ============================================================
# Imports
# ============================================================

import argparse

from .commands import locate
from .config import Config
from .locator import list_simulator_sdks, short_path
from .models import display_fields
from .output import print_bookmark, print_detail, print_header, print_info, print_warning
from .store import BookmarkStore


# ============================================================
# Entry Points
# ============================================================

def execute_list(config: Config, args: argparse.Namespace) -> int:
    """Print the bookmarks of every file of the locale, one block per file."""
    paths = locate(config)
    if not paths:
        print_warning(f"no bookmark files found for {config.locale}")
        return 1

    for index, path in enumerate(paths):
        if index:
            print_info("")
        store = BookmarkStore.load(path)
        if config.verbose:
            print_detail(f"{short_path(config, path)}: {len(store)} item(s), {store.fmt.name}")
        print_header(f"{short_path(config, path)}:")

        # Entries without both a title and a URL are not displayable
        for item in store.items:
            title, url = display_fields(item)
            if title is not None and url is not None:
                print_bookmark(title, url)

    return 0


def execute_sdks(config: Config, args: argparse.Namespace) -> int:
    """Print the installed simulator SDKs."""
    sdks = list_simulator_sdks(config)
    if not sdks and config.verbose:
        print_detail(f"No simulator SDKs under {config.sdk_root}")
    for sdk in sdks:
        print_info(sdk)
    return 0
