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

"""Pytest plugin providing fixture trees bound to disposable directories.

Registered through the ``pytest11`` entry point, so installing the package
makes the fixtures available to any test suite. pytest itself is not a
runtime dependency; it comes from the runner that loads this module, or
from the ``fixturetree[pytest]`` extra::

    def test_sync(fixture_tree: FixtureTree) -> None:
        fixture_tree.setup(lambda root: root.file("a.txt", content="hi"))
        assert fixture_tree.resolve("a.txt").read_text() == "hi"
"""

from __future__ import annotations

from pathlib import Path

import pytest

from .config import TreeOptions
from .filesystem import InMemoryFilesystem
from .tree import FixtureTree


@pytest.fixture
def fixture_tree_options() -> TreeOptions:
    """Options for the trees below; override to change encoding or strictness."""

    return TreeOptions.from_env()


@pytest.fixture
def fixture_tree(tmp_path: Path, fixture_tree_options: TreeOptions) -> FixtureTree:
    """Return a :class:`FixtureTree` rooted in a fresh temporary directory."""

    return FixtureTree(tmp_path / "fixture", options=fixture_tree_options)


@pytest.fixture
def memory_fixture_tree(fixture_tree_options: TreeOptions) -> FixtureTree:
    """Return a :class:`FixtureTree` backed by an :class:`InMemoryFilesystem`."""

    return FixtureTree(filesystem=InMemoryFilesystem(), options=fixture_tree_options)
