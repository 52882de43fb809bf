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

"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from fixturetree import errors
from fixturetree.errors import (
    FixtureTreeError,
    InvalidContentStateError,
    InvalidPathError,
    MaterializationError,
    MissingTargetError,
    NodeTypeConflictError,
    StructuralConflictError,
    TreeNotBoundError,
)


@pytest.mark.parametrize(
    ("error_type", "builtin"),
    [
        (StructuralConflictError, RuntimeError),
        (NodeTypeConflictError, RuntimeError),
        (MissingTargetError, LookupError),
        (InvalidContentStateError, ValueError),
        (InvalidPathError, ValueError),
        (MaterializationError, RuntimeError),
        (TreeNotBoundError, RuntimeError),
    ],
)
def test_errors_share_library_and_builtin_bases(
    error_type: type[Exception], builtin: type[Exception]
) -> None:
    assert issubclass(error_type, FixtureTreeError)
    assert issubclass(error_type, builtin)


def test_node_state_error_describes_states() -> None:
    error = MissingTargetError(
        "File not found", path="dir/a.txt", expected="file", actual="absent"
    )

    assert error.path == "dir/a.txt"
    assert str(error) == (
        "File not found (path='dir/a.txt', expected=file, actual=absent)"
    )


def test_root_path_renders_as_slash() -> None:
    error = NodeTypeConflictError("Conflict", path="", expected="directory", actual="file")
    assert "path='/'" in str(error)


def test_type_conflict_is_caught_as_structural_conflict() -> None:
    with pytest.raises(StructuralConflictError):
        raise NodeTypeConflictError(
            "Conflict", path="d", expected="file", actual="directory"
        )


def test_materialization_error_keeps_operation() -> None:
    error = MaterializationError("Failed", path="a.txt", operation="write file")

    assert error.operation == "write file"
    assert error.path == "a.txt"


def test_path_defaults_to_none() -> None:
    assert TreeNotBoundError("unbound").path is None


def test_public_names_exported() -> None:
    assert set(errors.__all__) >= {
        "FixtureTreeError",
        "StructuralConflictError",
        "MissingTargetError",
        "InvalidContentStateError",
    }
