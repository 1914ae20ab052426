from __future__ import annotations

from sqlalchemy.orm import Session

from format_tiles.models.user import UserPreference


def get_user_preference(db: Session, user_id: int, name: str, default: str | None = None) -> str | None:
    preference = (
        db.query(UserPreference)
        .filter(UserPreference.user_id == user_id, UserPreference.name == name)
        .first()
    )
    return preference.value if preference else default


def set_user_preference(db: Session, user_id: int, name: str, value: str) -> UserPreference:
    preference = (
        db.query(UserPreference)
        .filter(UserPreference.user_id == user_id, UserPreference.name == name)
        .first()
    )
    if preference is None:
        preference = UserPreference(user_id=user_id, name=name, value=str(value))
        db.add(preference)
    else:
        preference.value = str(value)
    db.commit()
    db.refresh(preference)
    return preference


def unset_user_preference(db: Session, user_id: int, name: str) -> bool:
    deleted = (
        db.query(UserPreference)
        .filter(UserPreference.user_id == user_id, UserPreference.name == name)
        .delete()
    )
    db.commit()
    return bool(deleted)
