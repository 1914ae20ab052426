from __future__ import annotations

import logging

from format_tiles.core.constants import PLUGIN, SKIP_WIDTH_CHECK_KEY, session_width_key
from format_tiles.core.errors import InvalidValueError
from format_tiles.crud.config import get_config_flag
from format_tiles.modules.tiles.access import require_course_access
from format_tiles.modules.tiles.environment import TilesEnvironment
from format_tiles.modules.tiles.navigation import using_js_nav

logger = logging.getLogger("tiles")


def _stored_width(env: TilesEnvironment, course_id: int) -> int:
    value = env.session.get(session_width_key(course_id))
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def get_tilefitter_extra_css(env: TilesEnvironment, course_id: int) -> str:
    """Inline CSS which fits the tiles to the screen width before JS runs.

    On first load the client has not reported its width yet, so the tiles are
    hidden until JS has arranged them and posted the width back (see
    set_session_width). Later loads cap the width at the stored value so the
    tiles do not move once the page is shown. The skipcheck parameter lets a
    user stuck behind the hidden tiles escape for the rest of the session.
    """
    if not using_js_nav(env):
        return ""
    if not get_config_flag(env.db, PLUGIN, "fittilestowidth"):
        return ""
    if env.client.is_mobile:
        return ""
    if env.param_int("skipcheck") or SKIP_WIDTH_CHECK_KEY in env.session:
        if SKIP_WIDTH_CHECK_KEY not in env.session:
            logger.debug("[Tiles] User %s skipped width check for this session", env.user.id)
        env.session[SKIP_WIDTH_CHECK_KEY] = 1
        return ""

    width = _stored_width(env, course_id)
    if width == 0:
        return f".format-tiles.course-{course_id}.jsenabled:not(.editing) ul.tiles {{opacity: 0;}}"
    return f".format-tiles.course-{course_id}.jsenabled ul.tiles {{max-width: {width}px;}}"


def set_session_width(env: TilesEnvironment, course_id: int, width: int) -> bool:
    if width < 0:
        raise InvalidValueError("width must not be negative")
    require_course_access(env, course_id)
    env.session[session_width_key(course_id)] = int(width)
    logger.debug("[Tiles] Stored width %spx for course %s", width, course_id)
    return True
