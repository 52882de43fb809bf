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

"""Base exception hierarchy for :mod:`fixturetree`."""

from __future__ import annotations

from typing import Literal

type NodeState = Literal["absent", "file", "directory"]


class FixtureTreeError(Exception):
    """Base class for all fixturetree exceptions.

    Every declaration raises synchronously at the point of failure, so the
    exception always identifies the root-relative path being materialized.
    Catch this class to handle any library-specific failure while letting
    unrelated Python exceptions propagate normally.

    Example:
        Stop a fixture build and report the offending entry::

            try:
                setup_tree(tmp_path, build)
            except FixtureTreeError as e:
                pytest.fail(f"fixture setup failed at {e.path}: {e}")

    Note:
        Subclasses also inherit from a standard exception type (``ValueError``,
        ``LookupError``, ``RuntimeError``) to allow more generic handling.
    """

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class _NodeStateError(FixtureTreeError):
    """Error describing an expected versus actual node state."""

    def __init__(
        self,
        message: str,
        *,
        path: str,
        expected: NodeState,
        actual: NodeState,
    ) -> None:
        super().__init__(
            f"{message} (path={path or '/'!r}, expected={expected}, actual={actual})",
            path=path,
        )
        self.expected: NodeState = expected
        self.actual: NodeState = actual


class StructuralConflictError(_NodeStateError, RuntimeError):
    """Raised when a declaration collides with an existing node.

    The most common cause is ``FileAction.CREATE`` on a name that already
    exists, whether as a file or as a directory.
    """


class NodeTypeConflictError(StructuralConflictError):
    """Raised when a name exists as a directory but is declared as a file.

    Also raised for the reverse: a file sitting where a directory (or an
    intermediate segment of a multi-segment path) is declared.
    """


class MissingTargetError(_NodeStateError, LookupError):
    """Raised when ``FileAction.GET`` names a file that does not exist."""


class InvalidContentStateError(FixtureTreeError, ValueError):
    """Raised when ``ORIGINAL`` content is requested for a brand-new file.

    Only raised when ``TreeOptions.strict_original`` is enabled; by default
    the freshly created file simply keeps its empty content.
    """


class InvalidPathError(FixtureTreeError, ValueError):
    """Raised for names and relative paths that cannot be declared.

    Names must be a single non-empty segment without separators, and
    relative paths may not be absolute or climb with ``..``.
    """


class MaterializationError(FixtureTreeError, RuntimeError):
    """Raised when the underlying filesystem operation fails.

    The originating :class:`OSError` (permission denied, disk full, name too
    long, ...) is available as ``__cause__``. Nothing is retried and already
    materialized siblings are left on disk.
    """

    def __init__(self, message: str, *, path: str, operation: str) -> None:
        super().__init__(message, path=path)
        self.operation = operation


class TreeNotBoundError(FixtureTreeError, RuntimeError):
    """Raised when a :class:`FixtureTree` is used before a root is bound."""


__all__ = [
    "FixtureTreeError",
    "InvalidContentStateError",
    "InvalidPathError",
    "MaterializationError",
    "MissingTargetError",
    "NodeState",
    "NodeTypeConflictError",
    "StructuralConflictError",
    "TreeNotBoundError",
]
