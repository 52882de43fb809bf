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

"""Declared file content and its resolution against current file bytes.

Declared content is one of:

- ``bytes``: used verbatim.
- ``str``: encoded with the declaration's encoding (UTF-8 by default).
- ``ORIGINAL``: keep whatever the file currently holds.

The same ``ORIGINAL`` marker is also a valid result of a line edit, where it
keeps a single line unchanged (see :mod:`fixturetree.lines`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from .config import DEFAULT_ENCODING

NEWLINE: Final[bytes] = b"\n"
"""Line terminator appended by ``append_newline``, independent of the host OS."""


class Original(Enum):
    """Marker meaning "leave the current value unchanged"."""

    ORIGINAL = "original"

    def __repr__(self) -> str:
        return "ORIGINAL"


ORIGINAL: Final = Original.ORIGINAL


@dataclass(slots=True, frozen=True)
class Replace:
    """Line edit result substituting ``text`` for the current line."""

    text: str


type TextLike = bytes | str
type ContentSpec = bytes | str | Original
type LineEdit = Replace | Original


def encode_text(value: TextLike, encoding: str | None = None) -> bytes:
    """Return ``value`` as bytes.

    ``bytes`` bypass encoding entirely; ``str`` is encoded with ``encoding``
    or ``DEFAULT_ENCODING``.

    Raises:
        LookupError: Unknown encoding name.
        UnicodeEncodeError: Text not representable in the encoding.
        TypeError: ``value`` is neither bytes nor str.
    """
    if isinstance(value, bytes | bytearray | memoryview):
        return bytes(value)
    if isinstance(value, str):
        return value.encode(encoding or DEFAULT_ENCODING)
    msg = f"Content must be bytes or str, got {type(value).__name__}"
    raise TypeError(msg)


def resolve_content(
    spec: ContentSpec,
    current: bytes,
    *,
    encoding: str | None = None,
) -> bytes:
    """Resolve a single-shot content assignment against ``current``.

    Literal content replaces ``current`` wholesale; ``ORIGINAL`` is a no-op.

    Example::

        resolve_content("hi", b"old")  # b"hi"
        resolve_content(ORIGINAL, b"old")  # b"old"
    """
    match spec:
        case Original():
            return current
        case _:
            return encode_text(spec, encoding)


def append_content(
    current: bytes,
    data: TextLike,
    *,
    encoding: str | None = None,
) -> bytes:
    """Return ``current`` followed by the encoded ``data``."""
    return current + encode_text(data, encoding)


__all__ = [
    "NEWLINE",
    "ORIGINAL",
    "ContentSpec",
    "LineEdit",
    "Original",
    "Replace",
    "TextLike",
    "append_content",
    "encode_text",
    "resolve_content",
]
