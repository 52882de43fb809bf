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

"""Tests for shared path normalization utilities."""

from __future__ import annotations

import pytest

from fixturetree.errors import InvalidPathError
from fixturetree.filesystem import (
    MAX_SEGMENT_LENGTH,
    join_path,
    normalize_path,
    parent_paths,
    split_segments,
    validate_name,
    validate_path,
)


class TestNormalizePath:
    @pytest.mark.parametrize("root", ["", ".", "/", "./", "//"])
    def test_root_spellings_normalize_to_empty(self, root: str) -> None:
        assert normalize_path(root) == ""

    def test_simple_path(self) -> None:
        assert normalize_path("foo/bar") == "foo/bar"

    def test_strips_leading_and_trailing_slashes(self) -> None:
        assert normalize_path("/foo/bar/") == "foo/bar"

    def test_removes_empty_and_dot_segments(self) -> None:
        assert normalize_path("foo//./bar") == "foo/bar"

    def test_backslashes_are_separators(self) -> None:
        assert normalize_path("foo\\bar") == "foo/bar"

    def test_parent_segments_are_rejected(self) -> None:
        with pytest.raises(InvalidPathError, match=r"'\.\.'"):
            _ = normalize_path("foo/../../etc")


class TestSegments:
    def test_split_root(self) -> None:
        assert split_segments("") == []

    def test_split_nested(self) -> None:
        assert split_segments("/a/b/c/") == ["a", "b", "c"]

    def test_join_skips_empty_base(self) -> None:
        assert join_path("", "src", "main.py") == "src/main.py"

    def test_join_multi_segment_parts(self) -> None:
        assert join_path("a/b", "c/d") == "a/b/c/d"

    def test_parent_paths(self) -> None:
        assert list(parent_paths("a/b/c")) == ["a", "a/b"]

    def test_parent_paths_of_single_segment(self) -> None:
        assert list(parent_paths("a")) == []


class TestValidateName:
    def test_valid_name_returned(self) -> None:
        assert validate_name("file1.txt") == "file1.txt"

    @pytest.mark.parametrize("name", ["", ".", ".."])
    def test_reserved_names_rejected(self, name: str) -> None:
        with pytest.raises(InvalidPathError):
            _ = validate_name(name)

    @pytest.mark.parametrize("name", ["a/b", "a\\b", "/a"])
    def test_separators_rejected(self, name: str) -> None:
        with pytest.raises(InvalidPathError, match="separators"):
            _ = validate_name(name)

    def test_long_name_rejected(self) -> None:
        with pytest.raises(InvalidPathError):
            _ = validate_name("x" * (MAX_SEGMENT_LENGTH + 1))


class TestValidatePath:
    def test_root_is_valid(self) -> None:
        validate_path("")

    def test_depth_is_not_limited(self) -> None:
        validate_path("/".join(["d"] * 100))

    def test_segment_length_limit(self) -> None:
        with pytest.raises(InvalidPathError, match="segment"):
            validate_path("a/" + "x" * (MAX_SEGMENT_LENGTH + 1))
