from __future__ import annotations

from typing import Optional

from format_tiles.core.constants import PLUGIN
from format_tiles.crud.config import get_config
from format_tiles.modules.tiles.environment import TilesEnvironment
from format_tiles.modules.tiles.models import ModalAllowList


def _split_tokens(value: Optional[str]) -> frozenset[str]:
    if not value:
        return frozenset()
    return frozenset(token.strip() for token in value.split(",") if token.strip())


def allowed_modal_modules(env: TilesEnvironment) -> ModalAllowList:
    """Which modules and resource types the site allows to open in a modal.

    Phones, tablets and legacy browsers cannot host the modal, so they always
    get an empty allow-list. Read from config on every call.
    """
    if env.client.is_handheld or env.client.is_legacy_browser:
        return ModalAllowList()
    return ModalAllowList(
        resources=_split_tokens(get_config(env.db, PLUGIN, "modalresources")),
        modules=_split_tokens(get_config(env.db, PLUGIN, "modalmodules")),
    )
