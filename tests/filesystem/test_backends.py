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

"""Tests for the host and in-memory Filesystem backends."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from fixturetree.filesystem import HostFilesystem, InMemoryFilesystem
from tests.helpers import FilesystemValidationSuite


class TestHostFilesystem(FilesystemValidationSuite):
    @pytest.fixture
    def fs(self, tmp_path: Path) -> HostFilesystem:
        root = tmp_path / "fs"
        root.mkdir()
        return HostFilesystem(_root=str(root))

    def test_root_is_absolute(self, fs: HostFilesystem, tmp_path: Path) -> None:
        assert Path(fs.root) == (tmp_path / "fs").resolve()

    def test_writes_land_on_disk(self, fs: HostFilesystem) -> None:
        _ = fs.write_bytes("data.txt", b"on disk")
        assert (Path(fs.root) / "data.txt").read_bytes() == b"on disk"

    def test_overwrite_leaves_no_temporary_files(self, fs: HostFilesystem) -> None:
        _ = fs.write_bytes("data.txt", b"one")
        _ = fs.write_bytes("data.txt", b"two")
        assert sorted(os.listdir(fs.root)) == ["data.txt"]

    def test_symlink_escape_is_rejected(
        self, fs: HostFilesystem, tmp_path: Path
    ) -> None:
        outside = tmp_path / "outside"
        outside.mkdir()
        (Path(fs.root) / "link").symlink_to(outside, target_is_directory=True)

        with pytest.raises(PermissionError, match="escapes root"):
            _ = fs.write_bytes("link/file.txt", b"x")
        with pytest.raises(PermissionError, match="escapes root"):
            _ = fs.exists("link/file.txt")
        assert list(outside.iterdir()) == []

    def test_mkdir_root_creates_missing_root(self, tmp_path: Path) -> None:
        fs = HostFilesystem(_root=str(tmp_path / "later" / "root"))
        fs.mkdir("")
        assert (tmp_path / "later" / "root").is_dir()


class TestInMemoryFilesystem(FilesystemValidationSuite):
    @pytest.fixture
    def fs(self) -> InMemoryFilesystem:
        return InMemoryFilesystem()

    def test_root_is_virtual(self, fs: InMemoryFilesystem) -> None:
        assert fs.root == "/"

    def test_instances_are_isolated(self) -> None:
        first = InMemoryFilesystem()
        second = InMemoryFilesystem()
        _ = first.write_bytes("a.txt", b"a")
        assert second.exists("a.txt") is False

    def test_mkdir_through_file_raises(self, fs: InMemoryFilesystem) -> None:
        _ = fs.write_bytes("a", b"")
        with pytest.raises(FileExistsError, match="A file exists"):
            fs.mkdir("a/b")
