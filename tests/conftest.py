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

from __future__ import annotations

from pathlib import Path

import pytest

from fixturetree.filesystem import Filesystem, HostFilesystem, InMemoryFilesystem


def pytest_configure(config: pytest.Config) -> None:
    """Load the fixture plugin when the ``pytest11`` entry point is absent."""

    if not config.pluginmanager.has_plugin("fixturetree"):
        _ = config.pluginmanager.import_plugin("fixturetree.pytest_plugin")


@pytest.fixture(params=["host", "memory"])
def fs(request: pytest.FixtureRequest, tmp_path: Path) -> Filesystem:
    """Return an empty backend of each kind; the host root does not exist yet."""

    if request.param == "host":
        return HostFilesystem(_root=str(tmp_path / "root"))
    return InMemoryFilesystem()
