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

"""Per-line rewriting of file content.

Lines are delimited by ``"\\n"`` only. A single trailing ``"\\n"`` terminates
the last line rather than opening a new empty one, and is reproduced on
output, so a pass that keeps every line returns the input byte for byte.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .config import DEFAULT_ENCODING
from .content import Original, Replace

type LineEditor = Callable[[int, str], Replace | Original | str]
"""Callable receiving ``(index, line)`` and returning the line's fate."""

_DELIMITER = "\n"


def split_lines(text: str) -> tuple[list[str], bool]:
    """Split ``text`` into lines and report whether it ended with a newline.

    Examples:
        >>> split_lines("")
        ([], False)
        >>> split_lines("a\\n\\nb\\n")
        (['a', '', 'b'], True)
        >>> split_lines("\\n")
        ([''], True)
    """
    if not text:
        return [], False
    trailing = text.endswith(_DELIMITER)
    body = text[:-1] if trailing else text
    return body.split(_DELIMITER), trailing


def join_lines(lines: Sequence[str], trailing_newline: bool) -> str:
    """Inverse of :func:`split_lines`."""
    if not lines:
        return ""
    joined = _DELIMITER.join(lines)
    return f"{joined}{_DELIMITER}" if trailing_newline else joined


def _apply(index: int, line: str, result: Replace | Original | str) -> str:
    match result:
        case Original():
            return line
        case Replace(text=text):
            return text
        case str():
            return result
        case _:
            msg = (
                f"Line edit for line {index} must return Replace, ORIGINAL or str, "
                f"got {type(result).__name__}"
            )
            raise TypeError(msg)


def replace_each_line(
    content: bytes,
    edit: LineEditor,
    *,
    encoding: str | None = None,
) -> bytes:
    """Apply ``edit`` to every line of ``content`` in a single pass.

    ``edit`` is called exactly once per line, in order, with the 0-based
    index and the line text (without its delimiter). Returning ``ORIGINAL``
    keeps the line; ``Replace(text)`` or a plain ``str`` substitutes it.
    Empty content has no lines and ``edit`` is never called.

    Example::

        def bump(index: int, line: str) -> Replace | Original:
            if line.startswith("version="):
                return Replace("version=2")
            return ORIGINAL

        replace_each_line(b"name=x\\nversion=1\\n", bump)
        # b"name=x\\nversion=2\\n"

    Raises:
        UnicodeDecodeError: Content is not valid in ``encoding``.
        TypeError: ``edit`` returned an unsupported value.
    """
    codec = encoding or DEFAULT_ENCODING
    lines, trailing = split_lines(content.decode(codec))
    edited = [
        _apply(index, line, edit(index, line)) for index, line in enumerate(lines)
    ]
    return join_lines(edited, trailing).encode(codec)


__all__ = ["LineEditor", "join_lines", "replace_each_line", "split_lines"]
