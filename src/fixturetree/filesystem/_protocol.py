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

"""Filesystem protocol used by the materializer.

The tree builder never touches ``pathlib`` or ``os`` directly: every
directory creation, read and write goes through a ``Filesystem`` backend.

- ``HostFilesystem``: a real directory on disk (the default)
- ``InMemoryFilesystem``: dictionaries, for unit tests without real I/O
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ._types import FileEntry, FileStat, WriteMode, WriteResult


@runtime_checkable
class Filesystem(Protocol):
    """Backend protocol for fixture materialization.

    All paths are root-relative strings. Backends normalize paths internally
    and refuse paths that escape the root.

    Example::

        def describe(fs: Filesystem, path: str) -> str:
            if not fs.exists(path):
                return "absent"
            return "directory" if fs.stat(path).is_directory else "file"
    """

    @property
    def root(self) -> str:
        """Absolute path of the root directory.

        Virtual backends return an abstract path such as "/".
        """
        ...

    def exists(self, path: str) -> bool:
        """Return True if the path exists as a file or directory."""
        ...

    def stat(self, path: str) -> FileStat:
        """Return metadata for a file or directory.

        Raises:
            FileNotFoundError: Path does not exist.
        """
        ...

    def list(self, path: str = ".") -> Sequence[FileEntry]:
        """List directory contents sorted by name.

        Raises:
            FileNotFoundError: Path does not exist.
            NotADirectoryError: Path is a file.
        """
        ...

    def read_bytes(self, path: str) -> bytes:
        """Return the complete content of a file.

        Raises:
            FileNotFoundError: Path does not exist.
            IsADirectoryError: Path is a directory.
        """
        ...

    def write_bytes(
        self,
        path: str,
        content: bytes,
        *,
        mode: WriteMode = "overwrite",
    ) -> WriteResult:
        """Write raw bytes to a file, replacing any existing content.

        Parent directories must already exist.

        Args:
            path: Relative path from the root.
            content: Complete new content.
            mode: ``"create"`` fails if the file exists, ``"overwrite"``
                replaces existing content (default).

        Raises:
            FileExistsError: mode="create" and the path exists.
            FileNotFoundError: Parent directory missing.
            IsADirectoryError: Path is a directory.
        """
        ...

    def mkdir(
        self,
        path: str,
        *,
        parents: bool = True,
        exist_ok: bool = True,
    ) -> None:
        """Create a directory.

        Raises:
            FileExistsError: Path exists as a file, or exists and
                exist_ok=False.
            FileNotFoundError: Parent missing and parents=False.
        """
        ...


__all__ = ["Filesystem"]
