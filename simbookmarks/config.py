"""Configuration management."""

# ============================================================
# Imports
# ============================================================

import subprocess
from pathlib import Path


# ============================================================
# Constants
# ============================================================

DEFAULT_DEVELOPER_DIR = Path("/Applications/Xcode.app/Contents/Developer")
SIMULATOR_SDKS_SUBPATH = Path("Platforms/iPhoneSimulator.platform/Developer/SDKs")
DEFAULT_LOCALE = "en_US"


# ============================================================
# Configuration
# ============================================================

class Config:
    """Configuration paths and global state."""

    def __init__(self, sdk_root: Path | str | None = None):
        # Directory holding one entry per installed simulator SDK
        if sdk_root is None:
            self.sdk_root = resolve_developer_dir() / SIMULATOR_SDKS_SUBPATH
        else:
            self.sdk_root = Path(sdk_root).absolute()

        # Runtime flags
        self.locale = DEFAULT_LOCALE
        self.dryrun = False
        self.verbose = False


# ============================================================
# Developer Directory
# ============================================================

def resolve_developer_dir() -> Path:
    """
    Locate the active Xcode developer directory.

    Falls back to the default Xcode location when xcode-select is
    unavailable or reports nothing.
    """
    try:
        result = subprocess.run(
            ["xcode-select", "-p"],
            capture_output=True, text=True, check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return DEFAULT_DEVELOPER_DIR

    developer_dir = result.stdout.strip()
    return Path(developer_dir) if developer_dir else DEFAULT_DEVELOPER_DIR
