import types

import pytest

from format_tiles.core.config import Settings
from format_tiles.modules.tiles.release import get_moodle_release, get_tiles_plugin_release, parse_release


@pytest.mark.parametrize(
    "release,expected",
    [
        ("4.3.2+ (Build: 20231222)", 4.3),
        ("4.1", 4.1),
        ("3.11.8 (Build: 20220711)", 3.11),
        ("10.0.1", 10.0),
    ],
)
def test_parse_release_returns_major_minor(release, expected):
    assert parse_release(release) == pytest.approx(expected)


@pytest.mark.parametrize("release", ["", None, "v4.3", "4", "release 4.3", ".4.3"])
def test_parse_release_falls_back_to_zero(release):
    assert parse_release(release) == 0.0


def test_get_moodle_release_reads_configured_release():
    assert get_moodle_release(Settings(MOODLE_RELEASE="4.2.5 (Build: 20231009)")) == pytest.approx(4.2)


def test_get_moodle_release_unparseable():
    assert get_moodle_release(Settings(MOODLE_RELEASE="unknown")) == 0.0


def test_get_tiles_plugin_release_reads_version_descriptor():
    assert get_tiles_plugin_release() == pytest.approx(4.3)


def test_get_tiles_plugin_release_without_release():
    descriptor = types.ModuleType("format_tiles_version")
    assert get_tiles_plugin_release(descriptor) == 0.0
