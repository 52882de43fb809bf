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

"""Declarative builder for file-system trees used as test fixtures.

Example usage::

    from fixturetree import ORIGINAL, FileAction, Replace, setup_tree

    def project(root):
        root.file("settings.gradle", content="rootProject.name = 'demo'")
        root.directory("myFiles", lambda files: files.file("a.txt", content="a"))
        root.file(
            "settings.gradle",
            lambda f: f.replace_each_line(lambda i, line: Replace(line.upper())),
            action=FileAction.GET,
            content=ORIGINAL,
        )

    setup_tree(tmp_path, project)
"""

from __future__ import annotations

from .config import DEFAULT_ENCODING, TreeOptions
from .content import NEWLINE, ORIGINAL, ContentSpec, LineEdit, Original, Replace
from .errors import (
    FixtureTreeError,
    InvalidContentStateError,
    InvalidPathError,
    MaterializationError,
    MissingTargetError,
    NodeTypeConflictError,
    StructuralConflictError,
    TreeNotBoundError,
)
from .lines import LineEditor, replace_each_line
from .logging import configure_logging
from .materializer import Materializer
from .policy import FileAction, Resolution, resolve_entry
from .scope import DirectoryScope, FileContent
from .tree import FixtureTree, setup_tree

__all__ = [
    "DEFAULT_ENCODING",
    "NEWLINE",
    "ORIGINAL",
    "ContentSpec",
    "DirectoryScope",
    "FileAction",
    "FileContent",
    "FixtureTree",
    "FixtureTreeError",
    "InvalidContentStateError",
    "InvalidPathError",
    "LineEdit",
    "LineEditor",
    "MaterializationError",
    "Materializer",
    "MissingTargetError",
    "NodeTypeConflictError",
    "Original",
    "Replace",
    "Resolution",
    "StructuralConflictError",
    "TreeNotBoundError",
    "TreeOptions",
    "configure_logging",
    "replace_each_line",
    "resolve_entry",
    "setup_tree",
]
