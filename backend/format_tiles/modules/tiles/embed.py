from __future__ import annotations

import mimetypes
import re
from typing import Optional
from urllib.parse import parse_qs, urlparse

from format_tiles.core.constants import ResourceDisplay
from format_tiles.models.module_instances import UrlInstance

_VIDEO_ID = re.compile(r"^[\w-]+$")

EMBED_MIMETYPES = {
    "image/gif",
    "image/jpeg",
    "image/png",
    "image/svg+xml",
    "application/x-shockwave-flash",
    "video/x-flv",
    "video/x-ms-wm",
    "video/quicktime",
    "video/mpeg",
    "video/mp4",
    "audio/mp3",
    "audio/mpeg",
    "audio/x-realaudio-plugin",
    "x-realaudio-plugin",
}

DOWNLOAD_MIMETYPES = {
    "application/zip",
    "application/x-tar",
    "application/g-zip",
    "application/pdf",
    "text/html",
}


def _host(url: str) -> str:
    host = (urlparse(url).hostname or "").lower()
    for prefix in ("www.", "m."):
        if host.startswith(prefix):
            host = host[len(prefix):]
    return host


def check_modify_embedded_url(url: Optional[str]) -> Optional[str]:
    """Embeddable player URL for links to known video providers, else None."""
    if not url:
        return None
    parsed = urlparse(url.strip())
    host = _host(url.strip())
    path_parts = [part for part in parsed.path.split("/") if part]

    video_id = None
    if host == "youtube.com" and parsed.path == "/watch":
        video_id = (parse_qs(parsed.query).get("v") or [None])[0]
        provider = "https://www.youtube.com/embed/"
    elif host == "youtu.be" and path_parts:
        video_id = path_parts[0]
        provider = "https://www.youtube.com/embed/"
    elif host == "vimeo.com" and path_parts and path_parts[-1].isdigit():
        video_id = path_parts[-1]
        provider = "https://player.vimeo.com/video/"
    else:
        return None

    if not video_id or not _VIDEO_ID.match(video_id):
        return None
    return f"{provider}{video_id}"


def guess_url_mimetype(url: str) -> str:
    path = urlparse(url).path
    if not path or path.endswith("/"):
        return "text/html"
    mimetype, _ = mimetypes.guess_type(path)
    return mimetype or "document/unknown"


def get_final_display_type(url: UrlInstance, wwwroot: str) -> int:
    """Display mode for a URL module, resolving the automatic mode."""
    if url.display != ResourceDisplay.AUTO:
        return url.display

    externalurl = url.externalurl or ""
    if externalurl.startswith(wwwroot) and "file.php" not in externalurl and ".php" in externalurl:
        # Pages of the site itself keep their navigation.
        return ResourceDisplay.OPEN

    mimetype = guess_url_mimetype(externalurl)
    if mimetype in DOWNLOAD_MIMETYPES:
        return ResourceDisplay.DOWNLOAD
    if mimetype in EMBED_MIMETYPES:
        return ResourceDisplay.EMBED
    return ResourceDisplay.OPEN
