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

"""Entry points binding a fixture tree to its root directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .config import TreeOptions
from .errors import TreeNotBoundError
from .filesystem import Filesystem, HostFilesystem
from .logging import StructuredLogger, get_logger
from .materializer import Materializer
from .scope import DirectoryScope, ScopeBlock

logger: StructuredLogger = get_logger(__name__, context={"component": "fixture_tree"})

type RootPath = str | PathLike[str]


@dataclass(slots=True)
class FixtureTree:
    """Holder for a fixture root directory and its materialization options.

    The root may be bound at construction or later, once the caller's
    disposable directory is known. ``filesystem`` overrides the backend;
    by default a :class:`HostFilesystem` on the root is used.

    Example::

        tree = FixtureTree(tmp_path / "project")
        tree.setup(lambda root: root.file("settings.gradle", content="..."))
        assert tree.resolve("settings.gradle").read_text() == "..."
    """

    root: Path | None = None
    filesystem: Filesystem | None = None
    options: TreeOptions = field(default_factory=TreeOptions)

    def __post_init__(self) -> None:
        if self.root is not None:
            self.root = Path(self.root)

    @property
    def bound(self) -> bool:
        """True once a root directory or filesystem is available."""
        return self.root is not None or self.filesystem is not None

    def bind(self, root: RootPath) -> FixtureTree:
        """Bind the tree to ``root`` and return ``self``."""
        self.root = Path(root)
        return self

    def _materializer(self) -> Materializer:
        if self.filesystem is not None:
            return Materializer(self.filesystem, self.options)
        if self.root is None:
            raise TreeNotBoundError("Fixture tree has no root directory bound.")
        return Materializer(HostFilesystem(_root=str(self.root)), self.options)

    def resolve(self, relative: str = "") -> Path:
        """Absolute path of ``relative`` under the root.

        Raises:
            TreeNotBoundError: No root has been bound yet.
        """
        return self._materializer().resolve(relative)

    def setup(self, block: ScopeBlock | None = None) -> DirectoryScope:
        """Return the root scope, running ``block`` against it first if given.

        The root directory is created when missing.
        """
        materializer = self._materializer()
        materializer.ensure_root()
        scope = DirectoryScope(materializer)
        logger.debug(
            "Materializing fixture tree.",
            event="fixturetree.tree.setup",
            context={"root": str(materializer.root), "has_block": block is not None},
        )
        if block is not None:
            _ = block(scope)
        return scope


def setup_tree(
    root: RootPath,
    block: ScopeBlock | None = None,
    *,
    filesystem: Filesystem | None = None,
    options: TreeOptions | None = None,
) -> DirectoryScope:
    """Materialize ``block`` under ``root`` and return the root scope.

    Example::

        def project(root: DirectoryScope) -> None:
            root.file("settings.gradle", content="rootProject.name = 'demo'")
            root.descend("src/main/java")

        setup_tree(tmp_path, project)
    """
    tree = FixtureTree(
        Path(root),
        filesystem=filesystem,
        options=options if options is not None else TreeOptions(),
    )
    return tree.setup(block)


__all__ = ["FixtureTree", "RootPath", "setup_tree"]
