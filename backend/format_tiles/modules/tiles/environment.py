from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, MutableMapping

from sqlalchemy.orm import Session

from format_tiles.core.config import Settings, settings as default_settings
from format_tiles.models.user import User
from format_tiles.modules.tiles.useragent import ClientInfo


@dataclass
class TilesEnvironment:
    """Collaborators for a single request: store, user, client, session and parameters."""

    db: Session
    user: User
    client: ClientInfo = field(default_factory=ClientInfo)
    session: MutableMapping[str, Any] = field(default_factory=dict)
    params: Mapping[str, Any] = field(default_factory=dict)
    settings: Settings = field(default_factory=lambda: default_settings)

    def param_int(self, name: str, default: int = 0) -> int:
        value = self.params.get(name)
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default
