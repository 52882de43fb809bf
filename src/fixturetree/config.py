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

"""Tree-wide options for fixture materialization."""

from __future__ import annotations

import codecs
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

DEFAULT_ENCODING: Final[str] = "utf-8"

_ENCODING_ENV = "FIXTURETREE_DEFAULT_ENCODING"
_STRICT_ORIGINAL_ENV = "FIXTURETREE_STRICT_ORIGINAL"


def _coerce_flag(value: str | None) -> bool:
    if value is None:
        return False
    lowered = value.strip().lower()
    return lowered not in {"", "0", "false", "off", "no"}


@dataclass(slots=True, frozen=True)
class TreeOptions:
    """Options shared by every scope of one fixture tree.

    Attributes:
        default_encoding: Codec used for ``str`` content when a declaration
            does not pass its own ``encoding``.
        strict_original: When True, requesting ``ORIGINAL`` content for a file
            that the same declaration just created raises
            ``InvalidContentStateError`` instead of leaving it empty.

    Example::

        options = TreeOptions(default_encoding="latin-1")
        setup_tree(tmp_path, build, options=options)
    """

    default_encoding: str = DEFAULT_ENCODING
    strict_original: bool = False

    def __post_init__(self) -> None:
        try:
            _ = codecs.lookup(self.default_encoding)
        except LookupError:
            msg = f"Unknown text encoding: {self.default_encoding!r}"
            raise ValueError(msg) from None

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> TreeOptions:
        """Build options from ``FIXTURETREE_*`` environment variables."""

        env = env if env is not None else os.environ
        return cls(
            default_encoding=env.get(_ENCODING_ENV) or DEFAULT_ENCODING,
            strict_original=_coerce_flag(env.get(_STRICT_ORIGINAL_ENV)),
        )


__all__ = ["DEFAULT_ENCODING", "TreeOptions"]
