from simbookmarks.config import Config
from simbookmarks.locator import find_bookmark_files, list_simulator_sdks, short_path

from tests.conftest import SAMPLE_ITEMS, write_bookmarks


def test_missing_sdk_root_yields_no_sdks(tmp_path):
    config = Config(sdk_root=tmp_path / "absent")

    assert list_simulator_sdks(config) == []
    assert find_bookmark_files(config, "en_US") == []


def test_hidden_entries_are_skipped(sdk_root, config):
    (sdk_root / ".DS_Store").write_text("")
    (sdk_root / "iPhoneSimulator6.1.sdk").mkdir()
    (sdk_root / "iPhoneSimulator7.0.sdk").mkdir()

    assert sorted(list_simulator_sdks(config)) == ["iPhoneSimulator6.1.sdk", "iPhoneSimulator7.0.sdk"]


def test_only_existing_locale_files_are_returned(sdk_root, config):
    english = write_bookmarks(sdk_root, "iPhoneSimulator6.1.sdk", SAMPLE_ITEMS)
    write_bookmarks(sdk_root, "iPhoneSimulator7.0.sdk", SAMPLE_ITEMS, locale="de_DE")
    (sdk_root / "iPhoneSimulator5.0.sdk").mkdir()

    assert find_bookmark_files(config, "en_US") == [english]
    assert len(find_bookmark_files(config, "de_DE")) == 1
    assert find_bookmark_files(config, "fr_FR") == []


def test_files_follow_sdk_order(sdk_root, config):
    for sdk in ("iPhoneSimulator6.1.sdk", "iPhoneSimulator7.0.sdk"):
        write_bookmarks(sdk_root, sdk, SAMPLE_ITEMS)

    sdks = list_simulator_sdks(config)
    paths = find_bookmark_files(config, "en_US")

    assert [path.relative_to(sdk_root).parts[0] for path in paths] == sdks


def test_short_path_strips_sdk_root(sdk_root, config, bookmark_file):
    assert short_path(config, bookmark_file) == (
        "iPhoneSimulator6.1.sdk/Applications/MobileSafari.app/StaticBookmarks-en_US.plist"
    )
    assert short_path(config, "/elsewhere/file.plist") == "/elsewhere/file.plist"


def test_relative_sdk_root_is_made_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = write_bookmarks(tmp_path / "SDKs", "iPhoneSimulator6.1.sdk", SAMPLE_ITEMS)

    config = Config(sdk_root="SDKs")

    assert config.sdk_root.is_absolute()
    found = find_bookmark_files(config, "en_US")
    assert len(found) == 1
    assert found[0].samefile(path)
    assert all(candidate.is_absolute() for candidate in found)
