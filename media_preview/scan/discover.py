"""Preview media discovery.

Walks a folder tree looking for enough previewable media to fill an album
thumbnail grid. The walk is deliberately incomplete: at any folder below the
root it stops once ``album_cap`` pictures have been found, it only drills
further down when a folder yielded nothing, and two or more levels deep it
stops visiting sibling folders as soon as one of them produced a picture.
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Protocol

from loguru import logger

from media_preview.constants import ALBUM_CAP, NOMEDIA_MARKER
from media_preview.errors import NotFoundServiceError
from media_preview.scan.records import MediaRecord
from media_preview.storage.base import StorageFile, StorageFolder, StorageNode
from media_preview.utils.paths import VirtualRootMapper


class NodeKind(Enum):
    FILE = "file"
    DIR = "dir"
    UNCLASSIFIABLE = ""


class PathMapper(Protocol):
    def to_virtual_path(self, node: StorageNode) -> str:
        ...


class MediaDiscovery:
    def __init__(
        self,
        path_mapper: PathMapper,
        album_cap: int = ALBUM_CAP,
        nomedia_marker: str = NOMEDIA_MARKER,
        max_depth: Optional[int] = None,
    ) -> None:
        self.path_mapper = path_mapper
        self.album_cap = album_cap
        self.nomedia_marker = nomedia_marker
        self.max_depth = max_depth

    def discover(self, root: StorageFolder, supported_media_types: Iterable[str]) -> List[MediaRecord]:
        """Return the media files which can be previewed, starting from ``root``.

        Raises NotFoundServiceError if the root folder itself cannot be listed.
        Problems confined to sub-folders or single files are skipped.
        """
        types = frozenset(supported_media_types)
        results: List[MediaRecord] = []
        self._search_folder(root, 0, types, results)
        logger.debug("Found {} media files under {}", len(results), root.path)
        return results

    def _search_folder(
        self,
        folder: StorageFolder,
        depth: int,
        types: FrozenSet[str],
        results: List[MediaRecord],
    ) -> int:
        album_image_counter = 0
        sub_folders: List[StorageFolder] = []

        for node in self._get_nodes(folder, depth):
            kind = self.classify(node)
            if kind is NodeKind.DIR:
                if self._allowed_sub_folder(node):
                    sub_folders.append(node)
            elif kind is NodeKind.FILE:
                record = self.qualify(node, types)
                if record is None:
                    continue
                results.append(record)
                album_image_counter += 1
                if self.have_enough_pictures(album_image_counter, depth):
                    break

        self._search_sub_folders(sub_folders, depth, album_image_counter, types, results)
        return album_image_counter

    def _get_nodes(self, folder: StorageFolder, depth: int) -> List[StorageNode]:
        """List a folder's children.

        An unusable root is fatal. Below the root, a folder which cannot be
        listed simply contributes nothing.
        """
        try:
            readable = folder.is_readable()
            usable = readable and folder.is_local()
            nodes = list(folder.list_children()) if usable else []
        except Exception as exc:
            return self._recover_from_get_nodes_error(folder, depth, exc)
        if depth == 0 and not usable:
            reason = "is not on local storage" if readable else "is not readable"
            self._log_and_raise_not_found(f"Folder {folder.path} {reason}")
        return nodes

    def _recover_from_get_nodes_error(self, folder: StorageFolder, depth: int, exc: Exception) -> List[StorageNode]:
        if depth == 0:
            self._log_and_raise_not_found(str(exc), exc)
        logger.debug("Ignoring sub-folder {}: {}", folder, exc)
        return []

    @staticmethod
    def _log_and_raise_not_found(message: str, cause: Optional[Exception] = None) -> None:
        logger.error(message)
        raise NotFoundServiceError(message) from cause

    @staticmethod
    def classify(node: StorageNode) -> NodeKind:
        try:
            return NodeKind(node.node_type())
        except Exception:
            return NodeKind.UNCLASSIFIABLE

    def _allowed_sub_folder(self, folder: StorageFolder) -> bool:
        try:
            return not folder.node_exists(self.nomedia_marker)
        except Exception as exc:
            logger.debug("Ignoring sub-folder {}: {}", folder, exc)
            return False

    def qualify(self, file: StorageFile, types: FrozenSet[str]) -> Optional[MediaRecord]:
        """Build the record for ``file`` if it is a local file of a supported type."""
        try:
            mimetype = file.mimetype()
            if not (file.is_local() and mimetype in types):
                return None
            return MediaRecord(
                path=self.path_mapper.to_virtual_path(file),
                file_id=file.file_id(),
                mimetype=mimetype,
                mtime=file.mtime(),
            )
        except Exception as exc:
            logger.debug("Skipping file {}: {}", file, exc)
            return None

    def have_enough_pictures(self, album_image_counter: int, depth: int) -> bool:
        # The root level is always scanned in full
        if depth == 0:
            return False
        return album_image_counter == self.album_cap

    def _search_sub_folders(
        self,
        sub_folders: List[StorageFolder],
        depth: int,
        album_image_counter: int,
        types: FrozenSet[str],
        results: List[MediaRecord],
    ) -> None:
        if not self.folder_needs_to_be_searched(sub_folders, depth, album_image_counter):
            return
        sub_depth = depth + 1
        if self.max_depth is not None and sub_depth > self.max_depth:
            logger.debug("Not descending below depth {}", self.max_depth)
            return
        for sub_folder in sub_folders:
            count = self._search_folder(sub_folder, sub_depth, types, results)
            if self.abort_search(sub_depth, count):
                break

    @staticmethod
    def folder_needs_to_be_searched(sub_folders: List[StorageFolder], depth: int, album_image_counter: int) -> bool:
        return bool(sub_folders) and (depth == 0 or album_image_counter == 0)

    @staticmethod
    def abort_search(depth: int, count: int) -> bool:
        return depth > 1 and count > 0


def discover_media(
    root: StorageFolder,
    supported_media_types: Iterable[str],
    path_mapper: Optional[PathMapper] = None,
    **options,
) -> List[MediaRecord]:
    if path_mapper is None:
        path_mapper = VirtualRootMapper(Path(root.path))
    return MediaDiscovery(path_mapper, **options).discover(root, supported_media_types)
