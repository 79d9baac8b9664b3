"""Extraction of YouTube video ids from pasted links."""

from __future__ import annotations

import re

_VIDEO_ID_PATTERN = re.compile(
    r"(?:youtube\.com/(?:watch\?v=|embed/|v/|live/)|youtu\.be/)([A-Za-z0-9_-]{11})"
)
_EMBED_URL_TEMPLATE = "https://www.youtube.com/embed/{video_id}"


def extract_video_id(link: str) -> str | None:
    """Return the 11-character video id found in ``link`` or ``None``.

    Watch, short (youtu.be), embed, ``/v/`` and ``/live/`` links are
    recognized anywhere in the string, so tracking parameters and a missing
    scheme are tolerated.
    """
    if not link:
        return None
    match = _VIDEO_ID_PATTERN.search(link)
    return match.group(1) if match else None


def build_embed_url(video_id: str) -> str:
    return _EMBED_URL_TEMPLATE.format(video_id=video_id)
