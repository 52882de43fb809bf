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

"""Path-scoped declarations of files and directories.

A :class:`DirectoryScope` is bound to one directory and qualifies every
declaration made through it. Nested blocks are plain callables that receive
the child scope (or the :class:`FileContent` of a file) as their argument::

    def project(root: DirectoryScope) -> None:
        root.file("settings.gradle", content="rootProject.name = 'demo'")
        root.file("notes.txt", lambda f: f.append("a").append_newline().append("b"))
        root.directory("src", lambda src: src.file("main.py", content=""))
        root.descend("build/reports/tests")

Each call touches the filesystem before it returns.
"""

from __future__ import annotations

import codecs
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .content import (
    NEWLINE,
    ORIGINAL,
    ContentSpec,
    Original,
    TextLike,
    append_content,
    encode_text,
    resolve_content,
)
from .errors import InvalidContentStateError, InvalidPathError
from .filesystem import join_path, validate_name
from .lines import LineEditor, replace_each_line
from .materializer import Materializer
from .policy import FileAction

type ScopeBlock = Callable[[DirectoryScope], object]
type FileBlock = Callable[[FileContent], object]


class FileContent:
    """Accumulating content of one file inside a nested file block.

    Operations run in call order against the content produced by the
    previous one. The final value is written when the block returns.
    """

    __slots__ = ("_content", "_encoding", "_path")

    def __init__(self, path: str, content: bytes, *, encoding: str) -> None:
        self._path = path
        self._content = content
        self._encoding = encoding

    @property
    def path(self) -> str:
        """Root-relative path of the file."""
        return self._path

    @property
    def encoding(self) -> str:
        """Codec applied to ``str`` values without an explicit encoding."""
        return self._encoding

    @property
    def content(self) -> bytes:
        """Current accumulated content."""
        return self._content

    @content.setter
    def content(self, value: ContentSpec) -> None:
        self._content = resolve_content(value, self._content, encoding=self._encoding)

    @property
    def text(self) -> str:
        """Current content decoded with :attr:`encoding`."""
        return self._content.decode(self._encoding)

    def append(self, data: TextLike, encoding: str | None = None) -> FileContent:
        """Append bytes verbatim or ``str`` encoded with ``encoding``."""
        self._content = append_content(
            self._content, data, encoding=encoding or self._encoding
        )
        return self

    def append_newline(self) -> FileContent:
        """Append a single ``"\\n"``."""
        self._content += NEWLINE
        return self

    def replace_each_line(self, edit: LineEditor) -> FileContent:
        """Rewrite each line with ``edit`` (see :mod:`fixturetree.lines`)."""
        self._content = replace_each_line(self._content, edit, encoding=self._encoding)
        return self

    def __repr__(self) -> str:
        return f"FileContent(path={self._path!r}, size={len(self._content)})"


@dataclass(slots=True, frozen=True)
class DirectoryScope:
    """Declaration handle bound to one directory of the fixture tree."""

    _materializer: Materializer
    _path: str = ""

    @property
    def path(self) -> str:
        """Root-relative path of this directory (``""`` for the root)."""
        return self._path

    def resolve(self, relative: str = "") -> Path:
        """Absolute host path of ``relative`` under this scope."""
        return self._materializer.resolve(join_path(self._path, relative))

    def file(
        self,
        name: str,
        block: FileBlock | None = None,
        *,
        action: FileAction = FileAction.GET_OR_CREATE,
        content: ContentSpec = ORIGINAL,
        encoding: str | None = None,
    ) -> str:
        """Declare a file in this directory.

        ``content`` is applied first, then ``block`` (when given) receives a
        :class:`FileContent` for sequential edits. The resulting content is
        written once, after the block returns.

        Args:
            name: Single path segment naming the file.
            block: Optional callable performing content operations.
            action: Create/retrieve policy for the entry.
            content: ``bytes``, ``str`` or ``ORIGINAL`` (keep current).
            encoding: Codec for ``str`` content in this declaration.

        Returns:
            The root-relative path of the file.

        Raises:
            StructuralConflictError: ``CREATE`` on an existing entry.
            MissingTargetError: ``GET`` on an absent entry.
            NodeTypeConflictError: ``name`` is an existing directory.
            InvalidContentStateError: ``ORIGINAL`` without a block on a newly
                created file while ``strict_original`` is enabled.
            LookupError: ``encoding`` names no known codec.
            UnicodeEncodeError: ``content`` cannot be encoded with ``encoding``.
        """
        path = join_path(self._path, validate_name(name))
        options = self._materializer.options
        codec = encoding or options.default_encoding

        # Rejections happen before open_file writes anything.
        _ = codecs.lookup(codec)
        literal = None if isinstance(content, Original) else encode_text(content, codec)
        if (
            options.strict_original
            and literal is None
            and block is None
            and action is not FileAction.GET
            and self._materializer.lookup(path) is None
        ):
            msg = "ORIGINAL content requested for a file with no prior content"
            raise InvalidContentStateError(msg, path=path)

        opened = self._materializer.open_file(path, action)
        builder = FileContent(
            opened.path,
            opened.content if literal is None else literal,
            encoding=codec,
        )
        if block is not None:
            _ = block(builder)
        self._materializer.write_file(opened, builder.content)
        return opened.path

    def directory(self, name: str, block: ScopeBlock | None = None) -> DirectoryScope:
        """Declare a child directory and optionally populate it.

        The directory is created when missing; an existing directory is
        reused. ``block`` receives the child scope.
        """
        return self._enter(join_path(self._path, validate_name(name)), block)

    def descend(self, relative: str, block: ScopeBlock | None = None) -> DirectoryScope:
        """Enter a slash-delimited chain of directories below this scope.

        ``scope.descend("a/b/c", block)`` is equivalent to three nested
        :meth:`directory` declarations. Missing intermediate directories are
        created and existing ones are reused. The returned scope is bound to
        the deepest segment, so calls chain::

            root.descend("dir1").descend("dir2/dir3", populate)
        """
        if not relative or relative.startswith(("/", "\\")):
            msg = f"Expected a non-empty relative path, got {relative!r}"
            raise InvalidPathError(msg, path=relative)
        parts = relative.replace("\\", "/").split("/")
        segments = [validate_name(part) for part in parts if part]
        return self._enter(join_path(self._path, *segments), block)

    def _enter(self, path: str, block: ScopeBlock | None) -> DirectoryScope:
        self._materializer.ensure_directory(path)
        child = DirectoryScope(self._materializer, path)
        if block is not None:
            _ = block(child)
        return child


__all__ = ["DirectoryScope", "FileBlock", "FileContent", "ScopeBlock"]
