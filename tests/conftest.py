from __future__ import annotations

from pathlib import PurePath
from typing import List, Optional

import pytest
from loguru import logger

from media_preview.scan.discover import MediaDiscovery
from media_preview.storage.base import StorageFile, StorageFolder, StorageNode
from media_preview.utils.paths import VirtualRootMapper

JPEG = "image/jpeg"
PNG = "image/png"


class _FakeNode:
    parent: Optional["FakeFolder"] = None

    def __init__(self, name: str, local: bool = True, type_error: Optional[Exception] = None) -> None:
        self._name = name
        self._local = local
        self._type_error = type_error

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str:
        if self.parent is None:
            return self._name
        return f"{self.parent.path}/{self._name}"

    def is_local(self) -> bool:
        return self._local

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"


class FakeFile(_FakeNode, StorageFile):
    def __init__(
        self,
        name: str,
        mimetype: str = JPEG,
        local: bool = True,
        error: Optional[Exception] = None,
        type_error: Optional[Exception] = None,
        mtime: float = 1700000000.0,
    ) -> None:
        super().__init__(name, local=local, type_error=type_error)
        self._mimetype = mimetype
        self._error = error
        self._mtime = mtime
        self.inspected = 0

    def node_type(self) -> str:
        if self._type_error:
            raise self._type_error
        return "file"

    def mimetype(self) -> str:
        self.inspected += 1
        if self._error:
            raise self._error
        return self._mimetype

    def file_id(self) -> str:
        return f"id:{self.path}"

    def mtime(self) -> float:
        return self._mtime


class FakeFolder(_FakeNode, StorageFolder):
    def __init__(
        self,
        name: str,
        *children: StorageNode,
        readable: bool = True,
        local: bool = True,
        list_error: Optional[Exception] = None,
        marker_error: Optional[Exception] = None,
        type_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(name, local=local, type_error=type_error)
        self.children: List[StorageNode] = list(children)
        for child in self.children:
            child.parent = self
        self._readable = readable
        self._list_error = list_error
        self._marker_error = marker_error
        self.listed = 0

    def node_type(self) -> str:
        if self._type_error:
            raise self._type_error
        return "dir"

    def is_readable(self) -> bool:
        return self._readable

    def list_children(self) -> List[StorageNode]:
        self.listed += 1
        if self._list_error:
            raise self._list_error
        return list(self.children)

    def node_exists(self, name: str) -> bool:
        if self._marker_error:
            raise self._marker_error
        return any(child.name == name for child in self.children)


def images(prefix: str, count: int, mimetype: str = JPEG) -> List[FakeFile]:
    return [FakeFile(f"{prefix}{index}.jpg", mimetype=mimetype) for index in range(1, count + 1)]


@pytest.fixture
def discovery() -> MediaDiscovery:
    return MediaDiscovery(VirtualRootMapper(PurePath("root")))


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger.remove()
