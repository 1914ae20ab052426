from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from format_tiles.core.constants import DeviceType

_PHONES = re.compile(
    r"android .+ mobile|avantgo|bada/|blackberry|blazer|compal|elaine|fennec|hiptop|iemobile|ip(hone|od)|iris"
    r"|kindle|lge |maemo|midp|mmp|mobile.+firefox|netfront|opera m(ob|in)i|palm( os)?|phone|p(ixi|re)/"
    r"|plucker|pocket|psp|series(4|6)0|symbian|treo|up\.(browser|link)|vodafone|wap|windows (ce|phone)"
    r"|xda|xiino",
    re.IGNORECASE,
)
_TABLETS = re.compile(
    r"Tablet browser|android|iPad|iProd|GT-P1000|GT-I9000|SHW-M180S|SGH-T849|SCH-I800|Build/ERE27|sholest",
    re.IGNORECASE,
)
_LEGACY_IE = re.compile(r"MSIE \d+|Trident/\d+")


@dataclass(frozen=True)
class ClientInfo:
    device_type: str = DeviceType.DEFAULT
    is_legacy_browser: bool = False

    @property
    def is_mobile(self) -> bool:
        return self.device_type == DeviceType.MOBILE

    @property
    def is_handheld(self) -> bool:
        return self.device_type in {DeviceType.MOBILE, DeviceType.TABLET}


def get_device_type(user_agent: Optional[str]) -> str:
    if not user_agent:
        return DeviceType.DEFAULT
    if _PHONES.search(user_agent):
        return DeviceType.MOBILE
    if _TABLETS.search(user_agent):
        return DeviceType.TABLET
    return DeviceType.DEFAULT


def is_legacy_browser(user_agent: Optional[str]) -> bool:
    return bool(user_agent) and _LEGACY_IE.search(user_agent) is not None


def classify_user_agent(user_agent: Optional[str]) -> ClientInfo:
    return ClientInfo(
        device_type=get_device_type(user_agent),
        is_legacy_browser=is_legacy_browser(user_agent),
    )
