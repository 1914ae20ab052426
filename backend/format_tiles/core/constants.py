PLUGIN = "format_tiles"

DEFAULT_TILE_COLOUR = "#1670CC"
HEX_COLOUR_PATTERN = r"^#[a-f0-9]{6}$"

SKIP_WIDTH_CHECK_KEY = "format_tiles_skip_width_check"
STOP_JS_NAV_PREFERENCE = "format_tiles_stopjsnav"


def session_width_key(course_id: int) -> str:
    return f"format_tiles_width_{course_id}"


class DeviceType:
    MOBILE = "mobile"
    TABLET = "tablet"
    DEFAULT = "default"


class CompletionTracking:
    NONE = 0
    MANUAL = 1
    AUTOMATIC = 2


class CompletionState:
    INCOMPLETE = 0
    COMPLETE = 1
    COMPLETE_PASS = 2
    COMPLETE_FAIL = 3

    @classmethod
    def done_states(cls) -> set[int]:
        return {cls.COMPLETE, cls.COMPLETE_PASS}


class ResourceDisplay:
    AUTO = 0
    EMBED = 1
    FRAME = 2
    NEW = 3
    DOWNLOAD = 4
    OPEN = 5
    POPUP = 6


class TextFormat:
    MOODLE = 0
    HTML = 1
    PLAIN = 2
    MARKDOWN = 4
