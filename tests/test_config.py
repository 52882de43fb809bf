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

"""Tests for tree options."""

from __future__ import annotations

import pytest

from fixturetree.config import DEFAULT_ENCODING, TreeOptions


def test_defaults() -> None:
    options = TreeOptions()

    assert options.default_encoding == DEFAULT_ENCODING == "utf-8"
    assert options.strict_original is False


def test_unknown_encoding_rejected() -> None:
    with pytest.raises(ValueError, match="no-such-codec"):
        _ = TreeOptions(default_encoding="no-such-codec")


def test_options_are_frozen() -> None:
    options = TreeOptions()
    with pytest.raises(AttributeError):
        options.strict_original = True  # type: ignore[misc]


class TestFromEnv:
    def test_empty_env_gives_defaults(self) -> None:
        assert TreeOptions.from_env({}) == TreeOptions()

    def test_reads_encoding(self) -> None:
        options = TreeOptions.from_env({"FIXTURETREE_DEFAULT_ENCODING": "latin-1"})
        assert options.default_encoding == "latin-1"

    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_truthy_strict_flag(self, value: str) -> None:
        options = TreeOptions.from_env({"FIXTURETREE_STRICT_ORIGINAL": value})
        assert options.strict_original is True

    @pytest.mark.parametrize("value", ["", "0", "false", "Off", "no"])
    def test_falsy_strict_flag(self, value: str) -> None:
        options = TreeOptions.from_env({"FIXTURETREE_STRICT_ORIGINAL": value})
        assert options.strict_original is False

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIXTURETREE_STRICT_ORIGINAL", "1")
        monkeypatch.delenv("FIXTURETREE_DEFAULT_ENCODING", raising=False)

        assert TreeOptions.from_env() == TreeOptions(strict_original=True)

    def test_invalid_encoding_from_env(self) -> None:
        with pytest.raises(ValueError):
            _ = TreeOptions.from_env({"FIXTURETREE_DEFAULT_ENCODING": "bogus"})
