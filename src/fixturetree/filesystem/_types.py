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

"""Result types returned by ``Filesystem`` backends.

All types are immutable frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Literal

from ..errors import NodeState

WriteMode = Literal["create", "overwrite"]


@dataclass(slots=True, frozen=True)
class FileStat:
    """Node metadata used by the entry policy to tell files from directories.

    Attributes:
        path: Root-relative normalized path.
        is_file: Regular file (anything that is not a directory).
        is_directory: Directory, including the root.
        size_bytes: Content length; always 0 for directories.
        modified_at: Backend timestamp, or None when the backend has none.

    Example::

        node = fs.stat("settings.gradle")
        assert node.state == "file"
    """

    path: str
    is_file: bool
    is_directory: bool
    size_bytes: int
    modified_at: datetime | None = None

    @property
    def state(self) -> NodeState:
        """Node kind as reported in conflict errors."""
        return "directory" if self.is_directory else "file"


@dataclass(slots=True, frozen=True)
class FileEntry:
    """One child of a directory as returned by ``Filesystem.list()``.

    ``name`` is the last segment and ``path`` the root-relative path, so
    ``list("myFiles")`` yields ``name="file1.txt", path="myFiles/file1.txt"``.
    """

    name: str
    path: str
    is_file: bool
    is_directory: bool


@dataclass(slots=True, frozen=True)
class WriteResult:
    """Confirmation returned from ``Filesystem.write_bytes()``.

    Attributes:
        path: Normalized path where content was written.
        bytes_written: Number of bytes written.
        mode: Write mode used ("create" or "overwrite").
    """

    path: str
    bytes_written: int
    mode: WriteMode


def node_state(stat: FileStat | None) -> NodeState:
    """Return ``"absent"`` for missing nodes, otherwise the node kind."""
    return "absent" if stat is None else stat.state


def now() -> datetime:
    """Return current UTC time truncated to milliseconds."""
    value = datetime.now(UTC)
    return value.replace(microsecond=value.microsecond - value.microsecond % 1000)


__all__ = [
    "FileEntry",
    "FileStat",
    "WriteMode",
    "WriteResult",
    "node_state",
    "now",
]
