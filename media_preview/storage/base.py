from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Union

FileId = Union[int, str]


class StorageNode(ABC):
    """An entry yielded by a storage backend: either a file or a folder."""

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def path(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def node_type(self) -> str:
        """Return ``"file"`` or ``"dir"``. May raise if the entry cannot be inspected."""
        raise NotImplementedError

    @abstractmethod
    def is_local(self) -> bool:
        raise NotImplementedError


class StorageFile(StorageNode):
    @abstractmethod
    def mimetype(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def file_id(self) -> FileId:
        raise NotImplementedError

    @abstractmethod
    def mtime(self) -> float:
        raise NotImplementedError


class StorageFolder(StorageNode):
    @abstractmethod
    def is_readable(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def list_children(self) -> List[StorageNode]:
        raise NotImplementedError

    @abstractmethod
    def node_exists(self, name: str) -> bool:
        raise NotImplementedError
