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

"""Shared path normalization utilities.

Every path handled by the tree builder and its filesystem backends is a
POSIX-style string relative to the tree root, with ``""`` naming the root
itself. These helpers keep that representation canonical and refuse
anything that would climb above the root.

Constants:
    MAX_SEGMENT_LENGTH: Maximum allowed segment length (255 characters)
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from ..errors import InvalidPathError

MAX_SEGMENT_LENGTH: Final[int] = 255

_RESERVED_SEGMENTS: Final[frozenset[str]] = frozenset({".", ".."})


def normalize_path(path: str) -> str:
    """Normalize a relative path by removing redundant slashes and ``.`` segments.

    ``..`` segments are rejected rather than resolved, so a normalized path can
    never point above the root it is relative to.

    Args:
        path: The path string to normalize.

    Returns:
        Normalized path with segments joined by "/", or empty string for root.

    Raises:
        InvalidPathError: If the path contains a ``..`` segment.

    Examples:
        >>> normalize_path("/foo//bar/")
        'foo/bar'
        >>> normalize_path("./foo/./bar")
        'foo/bar'
        >>> normalize_path(".")
        ''
    """
    if not path or path in {".", "/"}:
        return ""
    segments = [s for s in path.strip().replace("\\", "/").split("/") if s and s != "."]
    if ".." in segments:
        msg = f"Path may not contain '..' segments: {path!r}"
        raise InvalidPathError(msg, path=path)
    return "/".join(segments)


def split_segments(path: str) -> list[str]:
    """Split a normalized path into its segments (``[]`` for the root)."""
    normalized = normalize_path(path)
    return normalized.split("/") if normalized else []


def join_path(base: str, *parts: str) -> str:
    """Join path fragments onto ``base`` and normalize the result.

    Examples:
        >>> join_path("", "src", "main.py")
        'src/main.py'
        >>> join_path("a/b", "c/d")
        'a/b/c/d'
    """
    return normalize_path("/".join(p for p in (base, *parts) if p))


def parent_paths(path: str) -> Iterable[str]:
    """Yield every ancestor of ``path`` from the shallowest down, root excluded.

    Examples:
        >>> list(parent_paths("a/b/c"))
        ['a', 'a/b']
    """
    segments = split_segments(path)
    for depth in range(1, len(segments)):
        yield "/".join(segments[:depth])


def validate_name(name: str) -> str:
    """Validate a single file or directory name and return it unchanged.

    Raises:
        InvalidPathError: If the name is empty, reserved, contains a path
            separator, or is too long.
    """
    if not name or name in _RESERVED_SEGMENTS:
        msg = f"Invalid entry name: {name!r}"
        raise InvalidPathError(msg, path=name)
    if "/" in name or "\\" in name:
        msg = f"Entry name may not contain path separators: {name!r}"
        raise InvalidPathError(msg, path=name)
    if len(name) > MAX_SEGMENT_LENGTH:
        msg = f"Entry name exceeds limit of {MAX_SEGMENT_LENGTH} characters."
        raise InvalidPathError(msg, path=name)
    return name


def validate_path(path: str) -> None:
    """Reject normalized paths with a segment longer than MAX_SEGMENT_LENGTH.

    Depth is not limited here; the operating system reports paths that are
    too long when they are written.

    Raises:
        InvalidPathError: A segment exceeds MAX_SEGMENT_LENGTH.
    """
    if not path:
        return
    for segment in path.split("/"):
        if len(segment) > MAX_SEGMENT_LENGTH:
            msg = f"Path segment exceeds limit of {MAX_SEGMENT_LENGTH} characters."
            raise InvalidPathError(msg, path=path)


__all__ = [
    "MAX_SEGMENT_LENGTH",
    "join_path",
    "normalize_path",
    "parent_paths",
    "split_segments",
    "validate_name",
    "validate_path",
]
