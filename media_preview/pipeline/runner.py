from __future__ import annotations

from pathlib import Path
from typing import List

from loguru import logger

from media_preview.config import AppConfig
from media_preview.scan.discover import MediaDiscovery
from media_preview.scan.media_info import supported_media_types
from media_preview.scan.records import MediaRecord
from media_preview.storage.local import open_folder
from media_preview.utils.paths import VirtualRootMapper


def find_preview_media(config: AppConfig, input_dir: Path) -> List[MediaRecord]:
    root = open_folder(input_dir)
    discovery = MediaDiscovery(
        VirtualRootMapper(root.fs_path),
        album_cap=config.discovery.album_cap,
        nomedia_marker=config.discovery.nomedia_marker,
        max_depth=config.discovery.max_depth,
    )
    records = discovery.discover(root, supported_media_types(config))
    logger.info("Discovery complete for {}: {} media files", input_dir, len(records))
    return records
