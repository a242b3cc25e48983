"""Shared fixtures: a throwaway simulator SDK tree with bookmark files."""

import plistlib

import pytest

from simbookmarks.config import Config
from simbookmarks.locator import SAFARI_APP_SUBPATH, bookmark_filename

SAMPLE_ITEMS = [
    {"Title": "A", "URL": "u1"},
    {"Title": "B", "URL": "u2"},
]


def write_bookmarks(sdk_root, sdk, items, locale="en_US", fmt=plistlib.FMT_XML):
    """Create the bookmark file for sdk and return its path."""
    app_dir = sdk_root / sdk / SAFARI_APP_SUBPATH
    app_dir.mkdir(parents=True, exist_ok=True)
    path = app_dir / bookmark_filename(locale)
    path.write_bytes(plistlib.dumps(items, fmt=fmt, sort_keys=False))
    return path


def read_bookmarks(path):
    return plistlib.loads(path.read_bytes())


@pytest.fixture
def sdk_root(tmp_path):
    root = tmp_path / "SDKs"
    root.mkdir()
    return root


@pytest.fixture
def config(sdk_root):
    return Config(sdk_root=sdk_root)


@pytest.fixture
def bookmark_file(sdk_root):
    return write_bookmarks(sdk_root, "iPhoneSimulator6.1.sdk", SAMPLE_ITEMS)
