from __future__ import annotations

import re
from types import ModuleType
from typing import Optional

from format_tiles import version as plugin_version
from format_tiles.core.config import Settings, settings as default_settings

_RELEASE_PATTERN = re.compile(r"^(\d+\.\d+)")


def parse_release(release: Optional[str]) -> float:
    """Major release as a float, e.g. "4.3.2+ (Build: 20231222)" gives 4.3.

    Anything unparseable gives 0.0.
    """
    match = _RELEASE_PATTERN.match(release or "")
    if not match:
        return 0.0
    return float(match.group(1))


def get_moodle_release(config: Settings = default_settings) -> float:
    return parse_release(config.MOODLE_RELEASE)


def get_tiles_plugin_release(descriptor: ModuleType = plugin_version) -> float:
    return parse_release(getattr(descriptor, "RELEASE", ""))
