from __future__ import annotations

from sqlalchemy.orm import Session

from format_tiles.models.config_plugin import ConfigPlugin


def get_config(db: Session, plugin: str, name: str) -> str | None:
    entry = (
        db.query(ConfigPlugin)
        .filter(ConfigPlugin.plugin == plugin, ConfigPlugin.name == name)
        .first()
    )
    return entry.value if entry else None


def set_config(db: Session, plugin: str, name: str, value: str | None) -> None:
    entry = (
        db.query(ConfigPlugin)
        .filter(ConfigPlugin.plugin == plugin, ConfigPlugin.name == name)
        .first()
    )
    if value is None:
        if entry is not None:
            db.delete(entry)
            db.commit()
        return
    if entry is None:
        entry = ConfigPlugin(plugin=plugin, name=name, value=str(value))
        db.add(entry)
    else:
        entry.value = str(value)
    db.commit()


def get_config_flag(db: Session, plugin: str, name: str) -> bool:
    value = get_config(db, plugin, name)
    if value is None:
        return False
    return value.strip() not in {"", "0"}
