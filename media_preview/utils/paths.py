from __future__ import annotations

from pathlib import Path, PurePath

from media_preview.storage.base import StorageNode


class VirtualRootMapper:
    """Maps storage nodes to paths relative to the folder a discovery started from."""

    def __init__(self, root: Path) -> None:
        self.root = PurePath(root)

    def to_virtual_path(self, node: StorageNode) -> str:
        relative = PurePath(node.path).relative_to(self.root)
        if relative == PurePath("."):
            return ""
        return relative.as_posix()
