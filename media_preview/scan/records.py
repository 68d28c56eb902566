from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Union


@dataclass(frozen=True)
class MediaRecord:
    path: str
    file_id: Union[int, str]
    mimetype: str
    mtime: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "fileid": self.file_id,
            "mimetype": self.mimetype,
            "mtime": self.mtime,
        }
