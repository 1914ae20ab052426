from __future__ import annotations

from sqlalchemy.orm import Session, joinedload

from format_tiles.models.course import Course
from format_tiles.models.course_module import CourseModule, CourseModuleCompletion
from format_tiles.models.module_instances import PageInstance, UrlInstance

INSTANCE_MODELS = {
    "page": PageInstance,
    "url": UrlInstance,
}


def get_course(db: Session, course_id: int) -> Course | None:
    return db.query(Course).filter(Course.id == course_id).first()


def get_course_module(db: Session, course_id: int, cm_id: int) -> CourseModule | None:
    return (
        db.query(CourseModule)
        .options(joinedload(CourseModule.section), joinedload(CourseModule.course))
        .filter(CourseModule.id == cm_id, CourseModule.course_id == course_id)
        .first()
    )


def get_completion(db: Session, cm_id: int, user_id: int) -> CourseModuleCompletion | None:
    return (
        db.query(CourseModuleCompletion)
        .filter(
            CourseModuleCompletion.coursemodule_id == cm_id,
            CourseModuleCompletion.user_id == user_id,
        )
        .first()
    )


def get_instance(db: Session, modname: str, instance_id: int):
    model = INSTANCE_MODELS.get(modname)
    if model is None:
        return None
    return db.query(model).filter(model.id == instance_id).first()


def get_course_module_by_context(db: Session, context_id: int) -> CourseModule | None:
    return (
        db.query(CourseModule)
        .options(joinedload(CourseModule.section))
        .filter(CourseModule.context_id == context_id)
        .first()
    )
