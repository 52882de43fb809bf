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

"""Translate resolved declarations into filesystem effects.

The materializer is the only component that talks to a ``Filesystem``
backend. Every call takes effect before it returns, so a later declaration
observes everything an earlier one wrote.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from .config import TreeOptions
from .errors import MaterializationError, NodeTypeConflictError
from .filesystem import Filesystem, FileStat, normalize_path, parent_paths
from .logging import StructuredLogger, get_logger
from .policy import FileAction, Resolution, enforce_entry

logger: StructuredLogger = get_logger(__name__, context={"component": "materializer"})


@dataclass(slots=True, frozen=True)
class OpenedFile:
    """A file entry after the entry policy has been applied.

    Attributes:
        path: Normalized root-relative path.
        resolution: ``Resolution.CREATE`` or ``Resolution.RETRIEVE``.
        content: Content on disk right after opening (``b""`` when created).
    """

    path: str
    resolution: Resolution
    content: bytes

    @property
    def created(self) -> bool:
        return self.resolution is Resolution.CREATE


@contextmanager
def _io(operation: str, path: str) -> Iterator[None]:
    """Re-raise backend ``OSError`` as :class:`MaterializationError`."""
    try:
        yield
    except OSError as err:
        msg = f"Failed to {operation} {path or '/'!r}: {err}"
        raise MaterializationError(msg, path=path, operation=operation) from err


@dataclass(slots=True)
class Materializer:
    """Apply directory and file declarations to a ``Filesystem`` backend."""

    filesystem: Filesystem
    options: TreeOptions = field(default_factory=TreeOptions)

    @property
    def root(self) -> Path:
        """Absolute root directory of the backend."""
        return Path(self.filesystem.root)

    def resolve(self, path: str) -> Path:
        """Return the absolute host path for a root-relative ``path``."""
        normalized = normalize_path(path)
        return self.root / normalized if normalized else self.root

    def lookup(self, path: str) -> FileStat | None:
        """Return the node at ``path`` or None when absent."""
        with _io("stat", path):
            if not self.filesystem.exists(path):
                return None
            return self.filesystem.stat(path)

    def ensure_directory(self, path: str) -> None:
        """Create ``path`` and any missing parents.

        Existing directories are left untouched.

        Raises:
            NodeTypeConflictError: A file occupies ``path`` or one of its
                parents.
            MaterializationError: The backend failed.
        """
        normalized = normalize_path(path)
        for segment_path in (*parent_paths(normalized), normalized):
            if not segment_path:
                continue
            existing = self.lookup(segment_path)
            if existing is None:
                with _io("create directory", segment_path):
                    self.filesystem.mkdir(segment_path, parents=False, exist_ok=True)
                logger.debug(
                    "Created directory.",
                    event="fixturetree.directory.ensure",
                    context={"path": segment_path, "created": True},
                )
            elif not existing.is_directory:
                msg = "Cannot declare a directory where a file exists"
                raise NodeTypeConflictError(
                    msg, path=segment_path, expected="directory", actual="file"
                )

    def ensure_root(self) -> None:
        """Create the backend root directory if it is missing."""
        with _io("create root directory", ""):
            self.filesystem.mkdir("", parents=True, exist_ok=True)

    def open_file(self, path: str, action: FileAction) -> OpenedFile:
        """Apply ``action`` to the file at ``path``.

        ``CREATE`` resolutions write an empty file immediately; ``RETRIEVE``
        resolutions read the current content back.
        """
        normalized = normalize_path(path)
        resolution = enforce_entry(normalized, self.lookup(normalized), action)

        if resolution is Resolution.CREATE:
            with _io("create file", normalized):
                _ = self.filesystem.write_bytes(normalized, b"", mode="create")
            logger.debug(
                "Created file.",
                event="fixturetree.file.create",
                context={"path": normalized, "action": action.value},
            )
            return OpenedFile(path=normalized, resolution=resolution, content=b"")

        with _io("read file", normalized):
            content = self.filesystem.read_bytes(normalized)
        logger.debug(
            "Retrieved file.",
            event="fixturetree.file.retrieve",
            context={"path": normalized, "action": action.value, "size": len(content)},
        )
        return OpenedFile(path=normalized, resolution=resolution, content=content)

    def write_file(self, opened: OpenedFile, content: bytes) -> None:
        """Write the final ``content`` for a previously opened file.

        Unchanged content is not rewritten.
        """
        if content == opened.content:
            return
        with _io("write file", opened.path):
            result = self.filesystem.write_bytes(opened.path, content)
        logger.debug(
            "Wrote file.",
            event="fixturetree.file.write",
            context={"path": result.path, "bytes_written": result.bytes_written},
        )


__all__ = ["Materializer", "OpenedFile"]
