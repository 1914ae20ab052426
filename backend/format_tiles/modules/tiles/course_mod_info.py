from __future__ import annotations

import logging
from typing import Optional

from format_tiles.core.constants import CompletionState, CompletionTracking, ResourceDisplay
from format_tiles.core.errors import NotFoundError
from format_tiles.crud import course as crud_course
from format_tiles.models.course import Course
from format_tiles.models.course_module import CourseModule
from format_tiles.modules.tiles.access import is_user_visible, require_capability
from format_tiles.modules.tiles.embed import check_modify_embedded_url, get_final_display_type
from format_tiles.modules.tiles.environment import TilesEnvironment
from format_tiles.modules.tiles.modal import allowed_modal_modules
from format_tiles.modules.tiles.models import CourseModuleInfo
from format_tiles.modules.tiles.resources import get_mod_resource_icon_name, plugin_file_url

logger = logging.getLogger("tiles")


def _completion_state(env: TilesEnvironment, course: Course, cm: CourseModule) -> Optional[int]:
    if cm.completion == CompletionTracking.NONE or env.user.is_guest:
        return None
    if not course.enablecompletion:
        return None
    record = crud_course.get_completion(env.db, cm.id, env.user.id)
    return record.completionstate if record else CompletionState.INCOMPLETE


def get_course_mod_info(env: TilesEnvironment, course_id: int, cm_id: int) -> Optional[CourseModuleInfo]:
    """Information about a course module, including whether it may open in a modal.

    Used when deciding how to handle a click on an activity. Returns None if
    the module exists but the user cannot see it.
    """
    course = crud_course.get_course(env.db, course_id)
    if course is None:
        raise NotFoundError(f"Course {course_id} not found")
    cm = crud_course.get_course_module(env.db, course_id, cm_id)
    if cm is None:
        raise NotFoundError(f"Course module {cm_id} not found")
    require_capability(env, f"mod/{cm.modname}:view", course_id)

    if not is_user_visible(env, cm):
        logger.debug("[Tiles] Module %s is not visible to user %s", cm.id, env.user.id)
        return None

    is_resource = cm.modname == "resource"
    completion_state = _completion_state(env, course, cm)

    resource_type = get_mod_resource_icon_name(env.db, cm.context_id) if is_resource else ""
    modal_allowed = allowed_modal_modules(env).allows(cm.modname, resource_type)
    file_url = plugin_file_url(env.db, cm.context_id, env.settings.WWWROOT) if is_resource else ""

    if modal_allowed and cm.modname == "url":
        url = crud_course.get_instance(env.db, "url", cm.instance)
        if url is None:
            raise NotFoundError(f"url instance {cm.instance} not found")
        if get_final_display_type(url, env.settings.WWWROOT) != ResourceDisplay.EMBED:
            modal_allowed = False
        file_url = check_modify_embedded_url(url.externalurl) or url.externalurl

    return CourseModuleInfo(
        id=cm.id,
        courseid=course_id,
        modulecontextid=cm.context_id,
        coursecontextid=course.context_id,
        name=cm.name,
        modname=cm.modname,
        sectionnumber=cm.sectionnum,
        sectionid=cm.section_id,
        completionenabled=completion_state is not None,
        completionstate=completion_state,
        iscomplete=completion_state in CompletionState.done_states(),
        ismanualcompletion=cm.completion == CompletionTracking.MANUAL,
        resourcetype=resource_type,
        pluginfileurl=file_url,
        modalallowed=modal_allowed,
    )
