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

"""Validation of pre-release tags and build metadata tokens.

Both kinds of token share one grammar: characters from ``[A-Za-z0-9.-]``,
at least one of them, and no doubled ``-`` or ``.``.

Pre-release input is flattened on validation: every accepted string is split
on ``-`` and the fragments are stored as individual tags, so
``"alpha-alpha.1"`` becomes ``("alpha", "alpha.1")``.
"""

from __future__ import annotations

from collections.abc import Iterable
import re

from versionkit.exceptions import InvalidIdentifier

__all__ = ["is_valid_identifier", "validate_build_metadata", "validate_prerelease_tags"]

_TOKEN = re.compile(r"(?!.*--)(?!.*\.\.)[A-Za-z0-9.-]+")


def is_valid_identifier(token: str) -> bool:
    """Return True if token satisfies the pre-release/build token grammar."""
    return isinstance(token, str) and _TOKEN.fullmatch(token) is not None


def validate_build_metadata(build: str | None) -> str:
    """Validate a build metadata token.

    Args:
        build: Build metadata without the leading "+". None or "" means
            no build metadata.

    Returns:
        The token unchanged, or "" when absent.

    Raises:
        InvalidIdentifier: If the token violates the grammar.
    """
    if not build:
        return ""
    if not is_valid_identifier(build):
        raise InvalidIdentifier(build, kind="build metadata")
    return build


def validate_prerelease_tags(tags: str | Iterable[str] | None) -> tuple[str, ...]:
    """Validate pre-release input and flatten it into individual tags.

    Args:
        tags: A single pre-release string, a sequence of them, or None.

    Returns:
        Tags in order of appearance after splitting each input on "-".
        Empty fragments left by a leading or trailing "-" are dropped.

    Raises:
        InvalidIdentifier: If any input string violates the grammar.
    """
    if not tags:
        return ()
    if isinstance(tags, str):
        tags = [tags]

    valid: list[str] = []
    for pre in tags:
        if not is_valid_identifier(pre):
            raise InvalidIdentifier(pre, kind="pre-release tag")
        valid.extend(fragment for fragment in pre.split("-") if fragment)
    return tuple(valid)
