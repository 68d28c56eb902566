from __future__ import annotations

import mimetypes
import os
import stat
from pathlib import Path
from typing import List

from media_preview.constants import FALLBACK_MIME_TYPE, MIME_TYPE_OVERRIDES
from media_preview.storage.base import StorageFile, StorageFolder, StorageNode


def guess_mimetype(path: Path) -> str:
    override = MIME_TYPE_OVERRIDES.get(path.suffix.lower())
    if override:
        return override
    mimetype, _ = mimetypes.guess_type(path.name)
    return mimetype or FALLBACK_MIME_TYPE


class _LocalNode:
    def __init__(self, path: Path, local: bool = True) -> None:
        self._path = Path(path)
        self._local = local

    @property
    def name(self) -> str:
        return self._path.name

    @property
    def path(self) -> str:
        return str(self._path)

    @property
    def fs_path(self) -> Path:
        return self._path

    def node_type(self) -> str:
        mode = self._path.stat().st_mode
        if stat.S_ISDIR(mode):
            return "dir"
        if stat.S_ISREG(mode):
            return "file"
        raise OSError(f"Unsupported node type: {self._path}")

    def is_local(self) -> bool:
        return self._local

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"


class LocalFile(_LocalNode, StorageFile):
    def mimetype(self) -> str:
        return guess_mimetype(self._path)

    def file_id(self) -> int:
        return self._path.stat().st_ino

    def mtime(self) -> float:
        return self._path.stat().st_mtime


class LocalFolder(_LocalNode, StorageFolder):
    def is_readable(self) -> bool:
        return os.access(self._path, os.R_OK | os.X_OK)

    def list_children(self) -> List[StorageNode]:
        children: List[StorageNode] = []
        for entry in sorted(self._path.iterdir(), key=lambda p: p.name):
            if entry.is_dir():
                children.append(LocalFolder(entry, local=self._local))
            else:
                children.append(LocalFile(entry, local=self._local))
        return children

    def node_exists(self, name: str) -> bool:
        return (self._path / name).exists()


def open_folder(path: Path, local: bool = True) -> LocalFolder:
    return LocalFolder(Path(path).expanduser().resolve(), local=local)
