from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from format_tiles.api.v1.deps import get_environment
from format_tiles.modules.tiles.access import require_course_access
from format_tiles.modules.tiles.colour import current_theme_name, get_tile_base_colour
from format_tiles.modules.tiles.content import get_course_mod_content
from format_tiles.modules.tiles.course_mod_info import get_course_mod_info
from format_tiles.modules.tiles.environment import TilesEnvironment
from format_tiles.modules.tiles.modal import allowed_modal_modules
from format_tiles.modules.tiles.navigation import set_js_nav_preference
from format_tiles.modules.tiles.release import get_moodle_release, get_tiles_plugin_release
from format_tiles.modules.tiles.resources import get_visible_resource_icon_name
from format_tiles.modules.tiles.tilefitter import get_tilefitter_extra_css, set_session_width
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

router = APIRouter()


@router.get("/modal-modules", response_model=ModalAllowListRead)
def get_modal_modules(env: TilesEnvironment = Depends(get_environment)):
    return allowed_modal_modules(env).to_payload()


@router.get("/courses/{course_id}/modules/{cm_id}", response_model=CourseModuleInfoRead | None)
def get_module_info(course_id: int, cm_id: int, env: TilesEnvironment = Depends(get_environment)):
    return get_course_mod_info(env, course_id, cm_id)


@router.get("/courses/{course_id}/modules/{cm_id}/content", response_model=ModuleContentRead)
def get_module_content(course_id: int, cm_id: int, env: TilesEnvironment = Depends(get_environment)):
    html = get_course_mod_content(env, course_id, cm_id)
    if html is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Module not available")
    return {"id": cm_id, "html": html}


@router.get("/courses/{course_id}/tilefitter.css", response_class=PlainTextResponse)
def get_tilefitter_css(course_id: int, env: TilesEnvironment = Depends(get_environment)):
    require_course_access(env, course_id)
    return PlainTextResponse(get_tilefitter_extra_css(env, course_id), media_type="text/css")


@router.post("/courses/{course_id}/session-width", response_model=SessionWidthStatus)
def post_session_width(
    course_id: int,
    payload: SessionWidthUpdate,
    env: TilesEnvironment = Depends(get_environment),
):
    return {"status": set_session_width(env, course_id, payload.width)}


@router.get("/courses/{course_id}/base-colour", response_model=TileColourRead)
def get_base_colour(course_id: int, env: TilesEnvironment = Depends(get_environment)):
    course = require_course_access(env, course_id)
    colour = get_tile_base_colour(env.db, course.basecolour, current_theme_name(env.db, course))
    return {"courseid": course_id, "colour": colour}


@router.get("/modules/{context_id}/resource-icon", response_model=ResourceIconRead)
def get_resource_icon(context_id: int, env: TilesEnvironment = Depends(get_environment)):
    return {"modulecontextid": context_id, "icon": get_visible_resource_icon_name(env, context_id)}


@router.put("/preferences/js-nav", response_model=JsNavPreferenceStatus)
def put_js_nav_preference(payload: JsNavPreferenceUpdate, env: TilesEnvironment = Depends(get_environment)):
    return {"usingjsnav": set_js_nav_preference(env, payload.enabled)}


@router.get("/release", response_model=ReleaseRead)
def get_release(env: TilesEnvironment = Depends(get_environment)):
    return {"moodle": get_moodle_release(env.settings), "tiles": get_tiles_plugin_release()}
