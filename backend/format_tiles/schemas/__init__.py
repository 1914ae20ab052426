from format_tiles.schemas.course_module_info import CourseModuleInfoRead
from format_tiles.schemas.tiles import (
    JsNavPreferenceStatus,
    JsNavPreferenceUpdate,
    ModalAllowListRead,
    ModuleContentRead,
    ReleaseRead,
    ResourceIconRead,
    SessionWidthStatus,
    SessionWidthUpdate,
    TileColourRead,
)

__all__ = [
    "CourseModuleInfoRead",
    "JsNavPreferenceStatus",
    "JsNavPreferenceUpdate",
    "ModalAllowListRead",
    "ModuleContentRead",
    "ReleaseRead",
    "ResourceIconRead",
    "SessionWidthStatus",
    "SessionWidthUpdate",
    "TileColourRead",
]
