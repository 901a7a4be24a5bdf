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

"""Strict semantic version parsing and precedence.

A light implementation of Semantic Versioning for version numbers of the
form MAJOR.MINOR.PATCH-PRERELEASE+BUILD:

1. MAJOR version: incompatible API changes,
2. MINOR version: functionality added in a backwards-compatible manner,
3. PATCH version: backwards-compatible bug fixes.

Pre-release and build metadata labels are optional extensions.

Precedence
----------
Versions compare by major, minor and patch first. With those equal, a
version without pre-release tags outranks one with tags. Two tagged
versions compare on private copies of their tag lists sorted with
``natural_compare``:

- lists of equal length are decided by their first sorted tags only
- otherwise tags are compared pairwise up to the shorter length and, when
  all of those tie, the longer list wins

Build metadata never affects precedence.

Equality
--------
``==`` is looser than ``compare() == 0``: two versions are equal when
major, minor, patch and build metadata match and their pre-release tag
lists share at least one tag (or are both empty). Because pre-release input
is split on "-", ``1.0.0-alpha-alpha.1`` and ``1.0.0-alpha.1-alpha`` hold
the same tags in a different order and are equal.

Examples
--------
    >>> SemanticVersion.parse("1.0.0-alpha") < SemanticVersion.parse("1.0.0")
    True
    >>> str(SemanticVersion(1, 2, 2, "alpha.1", "546"))
    '1.2.2-alpha.1+546'
    >>> is_well_formed("01.2.3")
    False
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from versionkit.exceptions import InvalidVersionFormat
from versionkit.versioning.identifiers import (
    validate_build_metadata,
    validate_prerelease_tags,
)
from versionkit.versioning.natural import natural_compare, natural_key

__all__ = ["SemanticVersion", "is_well_formed"]

_NUMBER = r"0|[1-9][0-9]*"

_STRICT = re.compile(
    r"(?!.*--)(?!.*\+\+)(?!.*\.\.)(?!.*\+-)(?!.*-\+)"
    r"(?!.*[+-](?![A-Za-z0-9]))"
    rf"(?P<major>{_NUMBER})\.(?P<minor>{_NUMBER})\.(?P<patch>{_NUMBER})"
    r"(?:-(?P<prerelease>[A-Za-z0-9.-]+))?"
    r"(?:\+(?P<build>[A-Za-z0-9.-]+))?"
)


def _match(version: object) -> re.Match[str] | None:
    if not isinstance(version, str):
        return None
    return _STRICT.fullmatch(version)


def is_well_formed(version: object) -> bool:
    """Return True if version is a strictly compliant semantic version string."""
    return _match(version) is not None


def _compare_prerelease(left: tuple[str, ...], right: tuple[str, ...]) -> int:
    if not left and not right:
        return 0
    if not left:
        return 1
    if not right:
        return -1

    left_sorted = sorted(left, key=natural_key)
    right_sorted = sorted(right, key=natural_key)

    if len(left_sorted) == len(right_sorted):
        return natural_compare(left_sorted[0], right_sorted[0])

    for mine, theirs in zip(left_sorted, right_sorted):
        result = natural_compare(mine, theirs)
        if result:
            return result
    return 1 if len(left_sorted) > len(right_sorted) else -1


@dataclass(frozen=True, eq=False)
class SemanticVersion:
    """Immutable semantic version value.

    Attributes:
        major: Major version number (non-negative).
        minor: Minor version number (non-negative).
        patch: Patch level (non-negative).
        prerelease: Pre-release tags. The constructor also accepts a single
            string or any sequence of strings; input is validated and split
            on "-" into a flat tuple.
        build: Build metadata without the leading "+", "" when absent.

    Raises:
        InvalidVersionFormat: If a numeric component is negative or not an int.
        InvalidIdentifier: If a pre-release tag or the build metadata is
            malformed.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: str = ""

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidVersionFormat(
                    value, f"{name} version must be a non-negative integer: {value!r}"
                )
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(
            self, "prerelease", validate_prerelease_tags(self.prerelease)
        )
        object.__setattr__(self, "build", validate_build_metadata(self.build))

    # ----------------------------
    # Construction
    # ----------------------------

    @classmethod
    def parse(cls, version: str) -> SemanticVersion:
        """Parse a strictly compliant version string.

        Args:
            version: Version in flat string format, e.g. "1.2.3-rc.1+build.5".

        Returns:
            The parsed SemanticVersion.

        Raises:
            InvalidVersionFormat: If the whole string does not match the
                grammar (leading "v", two components, leading zeros, ...).
        """
        m = _match(version)
        if m is None:
            raise InvalidVersionFormat(version)
        return cls(
            int(m.group("major")),
            int(m.group("minor")),
            int(m.group("patch")),
            m.group("prerelease") or (),
            m.group("build") or "",
        )

    @classmethod
    def try_parse(cls, version: str) -> SemanticVersion | None:
        """Like parse(), but return None instead of raising."""
        if _match(version) is None:
            return None
        return cls.parse(version)

    # ----------------------------
    # Queries
    # ----------------------------

    @property
    def release(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def is_stable(self) -> bool:
        """True if the major version is above zero and there are no pre-release tags."""
        return self.major > 0 and not self.prerelease

    def has_prerelease_tag(self, tag: str) -> bool:
        return tag in self.prerelease

    def has_build_meta_tag(self, build: str) -> bool:
        return self.build == build

    # ----------------------------
    # Precedence
    # ----------------------------

    def compare(self, other: SemanticVersion) -> int:
        """Compare precedence with another version.

        Returns:
            -1, 0 or 1 as this version sorts before, with, or after other.
        """
        for mine, theirs in zip(self.release, other.release):
            if mine != theirs:
                return -1 if mine < theirs else 1
        return _compare_prerelease(self.prerelease, other.prerelease)

    def is_greater_than(self, other: SemanticVersion) -> bool:
        return self.compare(other) > 0

    def is_less_than(self, other: SemanticVersion) -> bool:
        return self.compare(other) < 0

    def is_update_for(self, other: SemanticVersion) -> bool:
        """True if this version is newer than other."""
        return self.is_greater_than(other)

    def is_update_compatible_for(self, other: SemanticVersion) -> bool:
        """True if this version is newer than other and shares its major version."""
        return self.is_update_for(other) and self.major == other.major

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) >= 0

    # ----------------------------
    # Equality
    # ----------------------------

    def _prerelease_matches(self, other: tuple[str, ...]) -> bool:
        if not self.prerelease and not other:
            return True
        # At least one tag must correspond
        return not set(self.prerelease).isdisjoint(other)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        if self.release != other.release:
            return False
        if not self._prerelease_matches(other.prerelease):
            return False
        return self.build == other.build

    def __hash__(self) -> int:
        # Tags are left out: equal versions may hold different tag lists
        return hash((self.major, self.minor, self.patch, self.build))

    # ----------------------------
    # Rendering
    # ----------------------------

    def __str__(self) -> str:
        out = f"{self.major}.{self.minor}.{self.patch}"
        for tag in self.prerelease:
            out += f"-{tag}"
        if self.build:
            out += f"+{self.build}"
        return out
