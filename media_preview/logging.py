from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger


def setup_logging(log_dir: Path, level: str = "INFO") -> None:
    log_dir.mkdir(parents=True, exist_ok=True)
    logger.remove()
    logger.add(
        log_dir / "media_preview.log",
        rotation="10 MB",
        retention="10 days",
        level=level,
    )
    logger.add(sys.stderr, level=level)
