from __future__ import annotations

from pathlib import PurePosixPath
from typing import Optional
from urllib.parse import quote

from sqlalchemy.orm import Session

from format_tiles.core.errors import NotFoundError
from format_tiles.crud.course import get_course_module_by_context
from format_tiles.crud.files import get_area_files
from format_tiles.models.stored_file import StoredFile
from format_tiles.modules.tiles.access import is_user_visible, require_capability
from format_tiles.modules.tiles.environment import TilesEnvironment

RESOURCE_COMPONENT = "mod_resource"
RESOURCE_FILEAREA = "content"

MIMETYPE_ICON_NAMES = {
    "powerpoint": "ppt",
    "document": "doc",
    "spreadsheet": "xls",
    "archive": "zip",
    "application/pdf": "pdf",
    "mp3": "mp3",
    "mpeg": "mp4",
    "image/jpeg": "image",
    "image/png": "image",
    "image/gif": "image",
    "image/svg+": "image",
    "text/plain": "txt",
    "text/html": "html",
}

EXTENSION_ALIASES = {
    "docx": "doc",
    "odf": "doc",
    "xlsx": "xls",
    "ods": "xls",
    "pptx": "ppt",
    "odp": "ppt",
}


def get_mod_resource_file(db: Session, context_id: int) -> Optional[StoredFile]:
    """First real file in a resource module's content area, if any."""
    for stored in get_area_files(db, context_id, RESOURCE_COMPONENT, RESOURCE_FILEAREA):
        if stored.filesize and stored.filename != "." and stored.mimetype:
            return stored
    return None


def get_mod_resource_icon_name(db: Session, context_id: int) -> Optional[str]:
    """Icon type for a resource module, e.g. 'doc' or 'pdf'."""
    stored = get_mod_resource_file(db, context_id)
    if stored is None:
        return None
    name = MIMETYPE_ICON_NAMES.get(stored.mimetype)
    if name is None:
        name = PurePosixPath(stored.filename).suffix.lstrip(".")
    return EXTENSION_ALIASES.get(name, name)


def get_visible_resource_icon_name(env: TilesEnvironment, context_id: int) -> Optional[str]:
    cm = get_course_module_by_context(env.db, context_id)
    if cm is None:
        raise NotFoundError(f"No course module for context {context_id}")
    require_capability(env, f"mod/{cm.modname}:view", cm.course_id)
    if not is_user_visible(env, cm):
        raise NotFoundError(f"Course module {cm.id} not found")
    return get_mod_resource_icon_name(env.db, context_id)


def make_pluginfile_url(wwwroot: str, stored: StoredFile) -> str:
    filepath = stored.filepath or "/"
    return (
        f"{wwwroot}/pluginfile.php/{stored.context_id}/{stored.component}/{stored.filearea}"
        f"/{stored.itemid}{quote(filepath)}{quote(stored.filename)}"
    )


def plugin_file_url(db: Session, context_id: int, wwwroot: str) -> str:
    stored = get_mod_resource_file(db, context_id)
    if stored is None:
        return ""
    return make_pluginfile_url(wwwroot, stored)
