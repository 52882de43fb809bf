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

"""Filesystem backend writing fixtures into a real directory.

Paths are confined to the root: a path that resolves outside it (through a
symlink, for instance) is refused with ``PermissionError`` before anything is
touched. Errors otherwise come straight from the operating system.

Example usage::

    from fixturetree.filesystem import HostFilesystem

    fs = HostFilesystem(_root="/tmp/pytest-of-me/test_build0/fixture")
    fs.mkdir("src")
    fs.write_bytes("src/main.py", b"print('hello')")
    assert fs.read_bytes("src/main.py") == b"print('hello')"
"""

from __future__ import annotations

import os
import stat as stat_mode
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from uuid import uuid4

from ._path import normalize_path, validate_path
from ._types import FileEntry, FileStat, WriteMode, WriteResult

__all__ = ["HostFilesystem"]


@dataclass(slots=True)
class HostFilesystem:
    """``Filesystem`` rooted at a host directory.

    The root does not need to exist up front; ``mkdir("")`` creates it.
    Overwrites are staged in a hidden sibling file and renamed into place, so
    a reader sees either the previous or the complete new content.
    """

    _root: str

    @property
    def root(self) -> str:
        return str(Path(self._root).resolve())

    def _locate(self, path: str) -> tuple[str, Path]:
        """Return the normalized path and its confined host location.

        Raises:
            InvalidPathError: ``..`` segments or limits exceeded.
            PermissionError: The location escapes the root.
        """
        normalized = normalize_path(path)
        base = Path(self._root).resolve()
        if not normalized:
            return normalized, base
        validate_path(normalized)
        target = (base / normalized).resolve()
        if not target.is_relative_to(base):
            msg = f"Path escapes root directory: {path}"
            raise PermissionError(msg)
        return normalized, target

    def exists(self, path: str) -> bool:
        """True when ``path`` exists; a path escaping the root is an error."""
        _, target = self._locate(path)
        return target.exists()

    def stat(self, path: str) -> FileStat:
        normalized, target = self._locate(path)
        info = os.stat(target)
        is_dir = stat_mode.S_ISDIR(info.st_mode)
        return FileStat(
            path=normalized,
            is_file=not is_dir,
            is_directory=is_dir,
            size_bytes=0 if is_dir else info.st_size,
            modified_at=datetime.fromtimestamp(info.st_mtime, tz=UTC),
        )

    def list(self, path: str = ".") -> Sequence[FileEntry]:
        """Return the direct children of ``path``, sorted by name."""
        normalized, target = self._locate(path)
        prefix = f"{normalized}/" if normalized else ""
        with os.scandir(target) as children:
            entries = [
                FileEntry(
                    name=child.name,
                    path=prefix + child.name,
                    is_file=not child.is_dir(),
                    is_directory=child.is_dir(),
                )
                for child in children
            ]
        return sorted(entries, key=lambda entry: entry.name)

    def read_bytes(self, path: str) -> bytes:
        _, target = self._locate(path)
        return target.read_bytes()

    def write_bytes(
        self,
        path: str,
        content: bytes,
        *,
        mode: WriteMode = "overwrite",
    ) -> WriteResult:
        """Write ``content`` to a file whose parent directory already exists.

        ``mode="create"`` fails with ``FileExistsError`` when the file exists;
        ``"overwrite"`` replaces it atomically.
        """
        normalized, target = self._locate(path)
        if not normalized or target.is_dir():
            msg = f"Is a directory: {path or '/'}"
            raise IsADirectoryError(msg)

        if mode == "create":
            with target.open("xb") as handle:
                _ = handle.write(content)
        else:
            _replace(target, content)
        return WriteResult(path=normalized, bytes_written=len(content), mode=mode)

    def mkdir(
        self,
        path: str,
        *,
        parents: bool = True,
        exist_ok: bool = True,
    ) -> None:
        """Create a directory; an existing file at ``path`` is an error."""
        normalized, target = self._locate(path)
        if not normalized:
            target.mkdir(parents=True, exist_ok=True)
            return
        target.mkdir(parents=parents, exist_ok=exist_ok)


def _replace(target: Path, content: bytes) -> None:
    staged = target.with_name(f".{target.name}.{uuid4().hex}.tmp")
    try:
        _ = staged.write_bytes(content)
        _ = staged.replace(target)
    finally:
        staged.unlink(missing_ok=True)
