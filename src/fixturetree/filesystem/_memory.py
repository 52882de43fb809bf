# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Dictionary-backed filesystem backend.

Every node lives in one table keyed by normalized path; a directory is a node
without content. Error types mirror what the host backend raises, so scope
and policy tests can run against either.

Example usage::

    from fixturetree import setup_tree
    from fixturetree.filesystem import InMemoryFilesystem

    fs = InMemoryFilesystem()
    setup_tree("/", lambda root: root.file("a.txt", content="hi"), filesystem=fs)
    assert fs.read_bytes("a.txt") == b"hi"
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from ._path import normalize_path, parent_paths, validate_path
from ._types import FileEntry, FileStat, WriteMode, WriteResult, now

__all__ = ["InMemoryFilesystem"]


@dataclass(slots=True, frozen=True)
class _Node:
    content: bytes | None
    modified_at: datetime

    @property
    def is_directory(self) -> bool:
        return self.content is None


def _root_table() -> dict[str, _Node]:
    return {"": _Node(content=None, modified_at=now())}


def _parent_of(normalized: str) -> str:
    return normalized.rpartition("/")[0]


@dataclass(slots=True)
class InMemoryFilesystem:
    """``Filesystem`` kept entirely in process memory."""

    _nodes: dict[str, _Node] = field(default_factory=_root_table)

    @property
    def root(self) -> str:
        return "/"

    def _key(self, path: str) -> str:
        normalized = normalize_path(path)
        validate_path(normalized)
        return normalized

    def _node(self, path: str) -> tuple[str, _Node]:
        key = self._key(path)
        try:
            return key, self._nodes[key]
        except KeyError:
            raise FileNotFoundError(path) from None

    def exists(self, path: str) -> bool:
        return self._key(path) in self._nodes

    def stat(self, path: str) -> FileStat:
        key, node = self._node(path)
        return FileStat(
            path=key,
            is_file=not node.is_directory,
            is_directory=node.is_directory,
            size_bytes=len(node.content or b""),
            modified_at=node.modified_at,
        )

    def list(self, path: str = ".") -> Sequence[FileEntry]:
        key, node = self._node(path)
        if not node.is_directory:
            raise NotADirectoryError(f"Not a directory: {path}")
        children = (
            FileEntry(
                name=child_key.rpartition("/")[2],
                path=child_key,
                is_file=not child.is_directory,
                is_directory=child.is_directory,
            )
            for child_key, child in self._nodes.items()
            if child_key and _parent_of(child_key) == key
        )
        return sorted(children, key=lambda entry: entry.name)

    def read_bytes(self, path: str) -> bytes:
        _, node = self._node(path)
        if node.content is None:
            raise IsADirectoryError(f"Is a directory: {path}")
        return node.content

    def write_bytes(
        self,
        path: str,
        content: bytes,
        *,
        mode: WriteMode = "overwrite",
    ) -> WriteResult:
        key = self._key(path)
        existing = self._nodes.get(key)
        if not key or (existing is not None and existing.is_directory):
            raise IsADirectoryError(f"Is a directory: {path or '/'}")
        parent = self._nodes.get(_parent_of(key))
        if parent is None or not parent.is_directory:
            msg = f"Parent directory does not exist: {_parent_of(key)}"
            raise FileNotFoundError(msg)
        if mode == "create" and existing is not None:
            raise FileExistsError(f"File already exists: {path}")

        self._nodes[key] = _Node(content=bytes(content), modified_at=now())
        return WriteResult(path=key, bytes_written=len(content), mode=mode)

    def mkdir(
        self,
        path: str,
        *,
        parents: bool = True,
        exist_ok: bool = True,
    ) -> None:
        key = self._key(path)
        if not key:
            return

        existing = self._nodes.get(key)
        if existing is not None:
            if not existing.is_directory:
                raise FileExistsError(f"A file exists at path: {path}")
            if not exist_ok:
                raise FileExistsError(f"Directory already exists: {path}")
            return

        missing = [key]
        for ancestor in reversed(list(parent_paths(key))):
            node = self._nodes.get(ancestor)
            if node is None:
                missing.append(ancestor)
            elif node.is_directory:
                break
            else:
                raise FileExistsError(f"A file exists at path: {ancestor}")
        if len(missing) > 1 and not parents:
            msg = f"Parent directory does not exist: {_parent_of(key)}"
            raise FileNotFoundError(msg)

        stamp = now()
        for directory in missing:
            self._nodes[directory] = _Node(content=None, modified_at=stamp)
