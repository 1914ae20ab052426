from __future__ import annotations

import re
from typing import Optional

from sqlalchemy.orm import Session

from format_tiles.core.constants import DEFAULT_TILE_COLOUR, HEX_COLOUR_PATTERN, PLUGIN
from format_tiles.crud.config import get_config, get_config_flag
from format_tiles.models.course import Course

_HEX_COLOUR = re.compile(HEX_COLOUR_PATTERN, re.IGNORECASE)


def is_valid_colour(value: Optional[str]) -> bool:
    return bool(value) and _HEX_COLOUR.fullmatch(value) is not None


def current_theme_name(db: Session, course: Optional[Course] = None) -> str:
    if course is not None and course.theme:
        return course.theme
    return get_config(db, "core", "theme") or "boost"


def get_tile_base_colour(db: Session, course_colour: Optional[str] = "", theme_name: Optional[str] = None) -> str:
    """Base colour for the tiles of a course.

    Uses the course colour (or the plugin default) unless the site follows
    the theme colour, in which case the theme's brand colour is used.
    """
    if not get_config_flag(db, PLUGIN, "followthemecolour"):
        if is_valid_colour(course_colour):
            result = course_colour
        else:
            result = get_config(db, PLUGIN, "tilecolour1")
    else:
        theme_plugin = f"theme_{theme_name or current_theme_name(db)}"
        # Boost and most derived themes use brandcolor, Essential uses themecolor.
        result = get_config(db, theme_plugin, "brandcolor") or get_config(db, theme_plugin, "themecolor")

    if not is_valid_colour(result):
        result = DEFAULT_TILE_COLOUR
    return result
