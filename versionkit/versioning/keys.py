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

"""String-level version comparison helpers for versionkit.

This module is source-agnostic: it does NOT read plugin descriptors or
files. It only parses and compares raw version strings consistently, going
through RelaxedVersion so that strict semantic versions get full precedence
rules and everything else falls back to numeric triples.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key
from typing import Any

from versionkit.logging import Logger, get_global_logger
from versionkit.versioning.relaxed import RelaxedVersion

__all__ = [
    "compare_any",
    "is_newer_any",
    "is_compatible_update_any",
    "version_key_any",
    "sort_versions",
]


def _describe(result: int) -> str:
    if result < 0:
        return "older than"
    if result > 0:
        return "newer than"
    return "the same as"


def compare_any(a: str, b: str, *, logger: Logger | None = None) -> int:
    """Compare two version strings.

    Returns -1 if a < b, 0 if equal, 1 if a > b.

    Raises:
        NoVersionFound: If either string contains no version number.
    """
    logger = logger or get_global_logger()

    va = RelaxedVersion.parse(a)
    vb = RelaxedVersion.parse(b)
    result = va.compare(vb)

    logger.debug(
        "VERSION",
        f"{a!r} ({va.kind}) is {_describe(result)} {b!r} ({vb.kind})",
    )
    return result


def is_newer_any(
    remote: str,
    current: str | None,
    *,
    logger: Logger | None = None,
) -> bool:
    """Decide if 'remote' should be considered newer than 'current'.

    Returns True iff remote > current. Any version is newer than None.
    """
    logger = logger or get_global_logger()

    if current is None:
        logger.verbose("VERSION", f"No current version. Treat {remote!r} as newer")
        return True

    return compare_any(remote, current, logger=logger) > 0


def is_compatible_update_any(
    remote: str,
    current: str | None,
    *,
    logger: Logger | None = None,
) -> bool:
    """Decide if 'remote' is newer than 'current' with the same major version.

    Returns True when there is no current version.
    """
    logger = logger or get_global_logger()

    if current is None:
        logger.verbose("VERSION", f"No current version. Treat {remote!r} as newer")
        return True

    compatible = RelaxedVersion.parse(remote).is_compatible_update_for(
        RelaxedVersion.parse(current)
    )
    logger.debug(
        "VERSION",
        f"{remote!r} is {'' if compatible else 'not '}a compatible update for {current!r}",
    )
    return compatible


_RelaxedKey = cmp_to_key(RelaxedVersion.compare)


def version_key_any(s: str) -> Any:
    """Compute a sort key for a version string.

    Example:
        >>> sorted(["1.10.0", "v1.3", "1.2.0-rc.1"], key=version_key_any)
        ['1.2.0-rc.1', 'v1.3', '1.10.0']
    """
    return _RelaxedKey(RelaxedVersion.parse(s))


def sort_versions(versions: Iterable[str], *, reverse: bool = False) -> list[str]:
    """Sort raw version strings from oldest to newest (newest first if reverse)."""
    return sorted(versions, key=version_key_any, reverse=reverse)
