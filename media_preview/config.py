from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from media_preview.constants import ALBUM_CAP, NOMEDIA_MARKER


class DiscoveryConfig(BaseModel):
    album_cap: int = Field(default=ALBUM_CAP, ge=1)
    nomedia_marker: str = Field(default=NOMEDIA_MARKER, min_length=1)
    max_depth: Optional[int] = Field(default=None, ge=0)


class MediaTypesConfig(BaseModel):
    extra_types: List[str] = Field(default_factory=list)
    disabled_types: List[str] = Field(default_factory=list)
    allow_svg: bool = False


class AppConfig(BaseModel):
    log_dir: Path = Field(default_factory=lambda: Path.home() / ".media_preview" / "logs")
    log_level: str = "INFO"
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    media_types: MediaTypesConfig = Field(default_factory=MediaTypesConfig)

    def ensure_dirs(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)
