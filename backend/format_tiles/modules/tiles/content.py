from __future__ import annotations

from typing import Any, Mapping, Optional

from format_tiles.core.config import Settings, settings as default_settings
from format_tiles.core.constants import TextFormat
from format_tiles.core.errors import NotFoundError
from format_tiles.crud import course as crud_course
from format_tiles.modules.tiles.access import is_user_visible, require_capability
from format_tiles.modules.tiles.environment import TilesEnvironment
from format_tiles.modules.tiles.formatting import FormatOptions, format_text, html_div

PLUGINFILE_PLACEHOLDER = "@@PLUGINFILE@@/"
RENDERABLE_MODULES = {"page"}


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def rewrite_pluginfile_urls(
    text: str,
    context_id: int,
    component: str,
    filearea: str,
    itemid: Optional[int],
    wwwroot: str,
    file: str = "pluginfile.php",
) -> str:
    base_url = f"{wwwroot}/{file}/{context_id}/{component}/{filearea}/"
    if itemid is not None:
        base_url += f"{itemid}/"
    return text.replace(PLUGINFILE_PLACEHOLDER, base_url)


def format_cm_content_text(
    modname: str,
    record: Any,
    context_id: int,
    config: Settings = default_settings,
) -> str:
    """HTML for a module's intro and content with embedded file links resolved.

    The record is a module instance row (or mapping) such as a page. The text
    comes from course authors, so it is not cleaned.
    """
    component = f"mod_{modname}"
    text = ""
    intro = _field(record, "intro")
    if intro is not None:
        text += rewrite_pluginfile_urls(intro, context_id, component, "intro", None, config.WWWROOT)
    content = _field(record, "content")
    if content is not None:
        text += html_div(
            rewrite_pluginfile_urls(
                content, context_id, component, "content", _field(record, "revision"), config.WWWROOT
            )
        )

    text_format = _field(record, "contentformat")
    if text_format is None:
        text_format = _field(record, "introformat")
    if text_format is None:
        text_format = TextFormat.HTML
    options = FormatOptions(noclean=True, overflowdiv=True, context_id=context_id)
    return format_text(text, text_format, options)


def get_course_mod_content(env: TilesEnvironment, course_id: int, cm_id: int) -> Optional[str]:
    course = crud_course.get_course(env.db, course_id)
    if course is None:
        raise NotFoundError(f"Course {course_id} not found")
    cm = crud_course.get_course_module(env.db, course_id, cm_id)
    if cm is None:
        raise NotFoundError(f"Course module {cm_id} not found")
    require_capability(env, f"mod/{cm.modname}:view", course_id)
    if not is_user_visible(env, cm):
        return None
    if cm.modname not in RENDERABLE_MODULES:
        raise NotFoundError(f"Module type {cm.modname} has no content to display")
    record = crud_course.get_instance(env.db, cm.modname, cm.instance)
    if record is None:
        raise NotFoundError(f"{cm.modname} instance {cm.instance} not found")
    return format_cm_content_text(cm.modname, record, cm.context_id, env.settings)
