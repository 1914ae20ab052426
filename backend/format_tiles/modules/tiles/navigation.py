from __future__ import annotations

import logging

from format_tiles.core.constants import PLUGIN, STOP_JS_NAV_PREFERENCE
from format_tiles.crud.config import get_config_flag
from format_tiles.crud.preferences import get_user_preference, set_user_preference, unset_user_preference
from format_tiles.modules.tiles.environment import TilesEnvironment

logger = logging.getLogger("tiles")


def using_js_nav(env: TilesEnvironment) -> bool:
    stop_js_nav = get_user_preference(env.db, env.user.id, STOP_JS_NAV_PREFERENCE, "0")
    if stop_js_nav and stop_js_nav.strip() not in {"", "0"}:
        return False
    # Legacy browsers cannot run the animated navigation.
    return get_config_flag(env.db, PLUGIN, "usejavascriptnav") and not env.client.is_legacy_browser


def set_js_nav_preference(env: TilesEnvironment, enabled: bool) -> bool:
    if enabled:
        unset_user_preference(env.db, env.user.id, STOP_JS_NAV_PREFERENCE)
    else:
        set_user_preference(env.db, env.user.id, STOP_JS_NAV_PREFERENCE, "1")
    logger.info("[Tiles] JS navigation %s for user %s", "enabled" if enabled else "disabled", env.user.id)
    return using_js_nav(env)
