from __future__ import annotations

from sqlalchemy import or_
from sqlalchemy.orm import Session

from format_tiles.models.user import User, UserCapability


def has_capability(db: Session, user: User, capability: str, course_id: int | None = None) -> bool:
    if user.is_siteadmin:
        return True
    query = db.query(UserCapability).filter(
        UserCapability.user_id == user.id,
        UserCapability.capability == capability,
    )
    if course_id is None:
        query = query.filter(UserCapability.course_id.is_(None))
    else:
        query = query.filter(or_(UserCapability.course_id == course_id, UserCapability.course_id.is_(None)))
    return db.query(query.exists()).scalar()


def get_user(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def can_access_course(db: Session, user: User, course_id: int) -> bool:
    if user.is_siteadmin:
        return True
    query = db.query(UserCapability).filter(
        UserCapability.user_id == user.id,
        UserCapability.course_id == course_id,
    )
    return db.query(query.exists()).scalar()
