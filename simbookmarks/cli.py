"""Command-line entry point for editing simulator Safari bookmarks.

Every command works on all StaticBookmarks files of the selected locale
across the installed iOS Simulator SDKs.
"""

import argparse
import sys

from .command_add import execute_add
from .command_list import execute_list, execute_sdks
from .command_restore import execute_restore
from .command_rm import execute_rm
from .config import DEFAULT_LOCALE, Config
from .errors import BookmarkError, UsageError
from .output import print_error, print_info, print_usage


# --------------------------------------------------------------------------- #
# Configuration
# --------------------------------------------------------------------------- #

PROG = "sim-bookmarks"

COMMANDS = {
    "add":     execute_add,
    "rm":      execute_rm,
    "list":    execute_list,
    "restore": execute_restore,
    "sdks":    execute_sdks,
}

# Commands that write bookmark files
EDITING_COMMANDS = ("add", "rm", "restore")

LOCALE_FLAGS = ("-l", "--locale")

USAGE = (
    f'usage: {PROG} add "<title>" [-u <url>] | rm "<title>" | list | restore | sdks'
    " [-l <locale>] [--dry-run] [-v]"
)


class CommandParser(argparse.ArgumentParser):
    """Argument parser that reports bad arguments as UsageError."""

    def error(self, message):
        raise UsageError(message)


def build_parser(command):
    """Create the argument parser for one command."""
    parser = CommandParser(prog=f"{PROG} {command}")
    if command in ("add", "rm"):
        parser.add_argument("title", nargs="?", help="bookmark title")
    if command == "add":
        parser.add_argument(
            "-u", "--url",
            help="bookmark URL (read from stdin when omitted and stdin is not a terminal)",
        )
    parser.add_argument(
        "-l", "--locale", default=DEFAULT_LOCALE,
        help=f"bookmark locale (default: {DEFAULT_LOCALE})",
    )
    if command in EDITING_COMMANDS:
        parser.add_argument(
            "--dry-run", action="store_true",
            help="report what would change without writing files",
        )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="print diagnostics to stderr",
    )
    return parser


def split_command(argv):
    """
    Separate the command name from its arguments.

    Locale options may precede the command and are handed on to the
    command's parser.

    Returns:
        (command, arguments), with command None when none is recognized
    """
    leading = []
    index = 0
    while index < len(argv):
        arg = argv[index]
        if arg in LOCALE_FLAGS:
            leading.extend(argv[index:index + 2])
            index += 2
        elif arg.startswith("-l") or arg.startswith("--locale="):
            leading.append(arg)
            index += 1
        else:
            break

    if index >= len(argv) or argv[index] not in COMMANDS:
        return None, []
    return argv[index], leading + argv[index + 1:]


# --------------------------------------------------------------------------- #
# Main
# --------------------------------------------------------------------------- #

def main(argv=None, config=None):
    """Parse arguments and dispatch the requested command."""
    argv = sys.argv[1:] if argv is None else list(argv)

    command, command_args = split_command(argv)
    if command is None:
        print_usage(USAGE)
        sys.exit(0)

    try:
        args = build_parser(command).parse_args(command_args)

        # Initialize configuration
        config = config or Config()
        config.locale = args.locale
        config.dryrun = getattr(args, "dry_run", False)
        config.verbose = args.verbose

        # Dispatch command
        if not config.locale:
            raise UsageError("missing locale")
        status = COMMANDS[command](config, args)
    except KeyboardInterrupt:
        print_info("\nInterrupted")
        sys.exit(130)
    except (BookmarkError, OSError) as e:
        print_error(describe_error(e))
        sys.exit(1)

    sys.exit(status)


def describe_error(error):
    """Prefix the failing file, when known, to an error message."""
    path = getattr(error, "path", None)
    return f"{path}: {error}" if path is not None else str(error)


if __name__ == "__main__":
    main()
