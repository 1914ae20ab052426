from __future__ import annotations

from format_tiles.core.errors import AuthorizationError, NotFoundError
from format_tiles.crud.access import can_access_course, has_capability
from format_tiles.crud.course import get_course
from format_tiles.models.course import Course
from format_tiles.models.course_module import CourseModule
from format_tiles.modules.tiles.environment import TilesEnvironment

VIEW_HIDDEN_ACTIVITIES = "moodle/course:viewhiddenactivities"
VIEW_COURSE = "moodle/course:view"


def require_capability(env: TilesEnvironment, capability: str, course_id: int) -> None:
    if not has_capability(env.db, env.user, capability, course_id):
        raise AuthorizationError(capability)


def require_course_access(env: TilesEnvironment, course_id: int) -> Course:
    """Load the course and check the user takes part in it (or administers the site)."""
    course = get_course(env.db, course_id)
    if course is None:
        raise NotFoundError(f"Course {course_id} not found")
    if not can_access_course(env.db, env.user, course_id):
        raise AuthorizationError(VIEW_COURSE)
    return course


def is_user_visible(env: TilesEnvironment, cm: CourseModule) -> bool:
    if cm.visible and cm.section.visible:
        return True
    return has_capability(env.db, env.user, VIEW_HIDDEN_ACTIVITIES, cm.course_id)
