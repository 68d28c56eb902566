from __future__ import annotations

from typing import FrozenSet

from media_preview.config import AppConfig
from media_preview.constants import DEFAULT_MEDIA_TYPES, IMAGE_MEDIA_TYPES, SVG_MEDIA_TYPE, VIDEO_MEDIA_TYPES


def supported_media_types(config: AppConfig) -> FrozenSet[str]:
    types = set(DEFAULT_MEDIA_TYPES)
    types.update(config.media_types.extra_types)
    if config.media_types.allow_svg:
        types.add(SVG_MEDIA_TYPE)
    types.difference_update(config.media_types.disabled_types)
    return frozenset(types)


def media_type_for(mimetype: str) -> str:
    if mimetype in IMAGE_MEDIA_TYPES or mimetype == SVG_MEDIA_TYPE:
        return "image"
    if mimetype in VIDEO_MEDIA_TYPES:
        return "video"
    raise ValueError(f"Unsupported media type: {mimetype}")
