# Copyright 2025 Roger Cibrian
#
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

"""Public API return types for versionkit.

This module defines dataclasses for return values from the orchestration
functions in versionkit.core. All dataclasses are frozen (immutable) to
prevent accidental mutation of return values.

Example:
    Using result types:
        ```python
        from versionkit.core import inspect_version
        from versionkit.results import InspectResult

        result: InspectResult = inspect_version("v1.4")
        print(result.canonical)  # "1.4.0"
        ```

Note:
    Only public API return types belong in this module. Domain types
    (like SemanticVersion) stay with their related logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Relation = Literal["older", "same", "newer"]


@dataclass(frozen=True)
class InspectResult:
    """Result from inspecting a single version string.

    Attributes:
        raw: The input string.
        canonical: Canonical rendering of the parsed version.
        kind: "strict" for compliant semantic versions, "loose" otherwise.
        is_strict: True if the input matched the strict grammar.
        is_stable: True for strict versions with major > 0 and no
            pre-release tags; always False for loose versions.
        major: Major version number.
        minor: Minor version number.
        patch: Patch level.
        prerelease: Pre-release tags (empty for loose versions).
        build: Build metadata ("" when absent or loose).
    """

    raw: str
    canonical: str
    kind: str
    is_strict: bool
    is_stable: bool
    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...]
    build: str


@dataclass(frozen=True)
class CompareResult:
    """Result from comparing two version strings.

    Attributes:
        left: Left-hand input.
        right: Right-hand input.
        result: -1, 0 or 1.
        relation: Where left stands relative to right.
    """

    left: str
    right: str
    result: int
    relation: Relation


@dataclass(frozen=True)
class UpdateResult:
    """Result from an update check.

    Attributes:
        current: Installed version (None if nothing is installed).
        candidate: Offered version.
        strategy: Policy strategy used for the decision.
        update: True if the candidate should be installed.
    """

    current: str | None
    candidate: str
    strategy: str
    update: bool
