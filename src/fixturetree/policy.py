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

"""Create/retrieve policy for declared file entries."""

from __future__ import annotations

from enum import Enum
from typing import assert_never

from .errors import MissingTargetError, NodeTypeConflictError, StructuralConflictError
from .filesystem import FileStat, node_state


class FileAction(Enum):
    """How a file declaration treats an entry that may already exist.

    - ``CREATE``: the file must not exist yet; it is created empty.
    - ``GET``: the file must already exist; its content is read back.
    - ``GET_OR_CREATE``: retrieve when present, create otherwise.

    Example::

        root.file("build.gradle", action=FileAction.CREATE, content="...")
        root.file("build.gradle", action=FileAction.GET, content=ORIGINAL)
    """

    CREATE = "create"
    GET = "get"
    GET_OR_CREATE = "get_or_create"


class Resolution(Enum):
    """Outcome of applying a :class:`FileAction` to the current node state."""

    CREATE = "create"
    RETRIEVE = "retrieve"
    CONFLICT = "conflict"


def resolve_entry(existing: FileStat | None, action: FileAction) -> Resolution:
    """Decide whether a declaration creates, retrieves, or conflicts.

    The table is exhaustive:

    ============== ========= =========
    action         absent    present
    ============== ========= =========
    CREATE         CREATE    CONFLICT
    GET            CONFLICT  RETRIEVE
    GET_OR_CREATE  CREATE    RETRIEVE
    ============== ========= =========
    """
    present = existing is not None
    match action:
        case FileAction.CREATE:
            return Resolution.CONFLICT if present else Resolution.CREATE
        case FileAction.GET:
            return Resolution.RETRIEVE if present else Resolution.CONFLICT
        case FileAction.GET_OR_CREATE:
            return Resolution.RETRIEVE if present else Resolution.CREATE
        case _ as unreachable:  # pragma: no cover - exhaustiveness sentinel
            assert_never(unreachable)


def enforce_entry(
    path: str,
    existing: FileStat | None,
    action: FileAction,
) -> Resolution:
    """Resolve a file entry, raising for conflicts and node kind mismatches.

    Returns:
        ``Resolution.CREATE`` or ``Resolution.RETRIEVE``.

    Raises:
        NodeTypeConflictError: ``path`` exists as a directory.
        StructuralConflictError: ``CREATE`` on an existing file.
        MissingTargetError: ``GET`` on an absent file.
    """
    resolution = resolve_entry(existing, action)
    actual = node_state(existing)

    if existing is not None and existing.is_directory:
        msg = f"Cannot declare a file where a directory exists ({action.name})"
        raise NodeTypeConflictError(msg, path=path, expected="file", actual=actual)

    if resolution is Resolution.CONFLICT:
        if action is FileAction.GET:
            msg = "File declared with GET does not exist"
            raise MissingTargetError(msg, path=path, expected="file", actual=actual)
        msg = "File declared with CREATE already exists"
        raise StructuralConflictError(msg, path=path, expected="absent", actual=actual)

    return resolution


__all__ = ["FileAction", "Resolution", "enforce_entry", "resolve_entry"]
