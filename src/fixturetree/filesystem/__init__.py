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

"""Filesystem backends behind the fixture materializer.

The ``Filesystem`` protocol decouples the tree builder from storage:

- ``HostFilesystem``: a real directory, used by default
- ``InMemoryFilesystem``: dictionary-backed, for fast unit tests

Example usage::

    from fixturetree.filesystem import Filesystem, HostFilesystem

    def file_names(fs: Filesystem, path: str) -> list[str]:
        return [entry.name for entry in fs.list(path) if entry.is_file]

    file_names(HostFilesystem(_root=str(tmp_path)), ".")
"""

from __future__ import annotations

from ._host import HostFilesystem
from ._memory import InMemoryFilesystem
from ._path import (
    MAX_SEGMENT_LENGTH,
    join_path,
    normalize_path,
    parent_paths,
    split_segments,
    validate_name,
    validate_path,
)
from ._protocol import Filesystem
from ._types import FileEntry, FileStat, WriteMode, WriteResult, node_state

__all__ = [
    "MAX_SEGMENT_LENGTH",
    "FileEntry",
    "FileStat",
    "Filesystem",
    "HostFilesystem",
    "InMemoryFilesystem",
    "WriteMode",
    "WriteResult",
    "join_path",
    "node_state",
    "normalize_path",
    "parent_paths",
    "split_segments",
    "validate_name",
    "validate_path",
]
