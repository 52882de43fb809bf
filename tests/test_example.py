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

"""End-to-end declaration of a small build project fixture."""

from __future__ import annotations

from textwrap import dedent

from fixturetree import ORIGINAL, DirectoryScope, FileAction, FileContent, FixtureTree
from fixturetree.filesystem import Filesystem
from tests.helpers import read_tree

_BUILD_SCRIPT = dedent(
    """\
    plugins {
      id 'lifecycle-base'
    }

    tasks.create('syncFiles', Sync) {
      from(file('myFiles'))
      into("$buildDir/synced")
    }"""
)


def _file2(f: FileContent) -> None:
    _ = f.append("some text content").append_newline()
    _ = f.append("some text content with specified encoding", "utf-8").append_newline()
    _ = f.append(b"some byte array content").append_newline()


def _dir1(d: DirectoryScope) -> None:
    def assign(f: FileContent) -> None:
        f.content = b"assign content"

    def extend(f: FileContent) -> None:
        _ = f.append_newline().append("additional content")
        _ = f.replace_each_line(
            lambda _, text: "changed content" if text == "assign content" else ORIGINAL
        )

    _ = d.file("file1.txt", assign)
    _ = d.file("file1.txt", extend, action=FileAction.GET, content=ORIGINAL)


def _my_files(d: DirectoryScope) -> None:
    _ = d.file("file1.txt", content="some text in here")
    _ = d.file("file2.txt", _file2)
    _ = d.directory("dir1", _dir1)
    _ = d.descend(
        "dir1/dir2/dir3",
        lambda d3: d3.file("file1.txt", content="nested dir content"),
    )
    _ = d.descend("dir1/dir2/dir3")
    _ = d.descend("dir1/dir2", lambda d2: d2.file("file1.txt", content="dir2 content"))


def _build_script(f: FileContent) -> None:
    f.content = _BUILD_SCRIPT.encode()


def _project(root: DirectoryScope) -> None:
    _ = root.file(
        "settings.gradle", content="rootProject.name = 'example-dsl-project'"
    )
    _ = root.file("build.gradle", _build_script)
    _ = root.directory("myFiles", _my_files)


def test_project_layout(fs: Filesystem) -> None:
    _ = FixtureTree(filesystem=fs).setup(_project)

    assert read_tree(fs) == {
        "settings.gradle": b"rootProject.name = 'example-dsl-project'",
        "build.gradle": _BUILD_SCRIPT.encode(),
        "myFiles": None,
        "myFiles/file1.txt": b"some text in here",
        "myFiles/file2.txt": (
            b"some text content\n"
            b"some text content with specified encoding\n"
            b"some byte array content\n"
        ),
        "myFiles/dir1": None,
        "myFiles/dir1/file1.txt": b"changed content\nadditional content",
        "myFiles/dir1/dir2": None,
        "myFiles/dir1/dir2/file1.txt": b"dir2 content",
        "myFiles/dir1/dir2/dir3": None,
        "myFiles/dir1/dir2/dir3/file1.txt": b"nested dir content",
    }
