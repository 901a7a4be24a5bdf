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

"""Best-effort version extraction for strings found in the wild.

RelaxedVersion holds one of two variants:

- ``"strict"``: the string was a compliant semantic version; the parsed
  SemanticVersion is kept and every comparison delegates to it.
- ``"loose"``: a bare (major, minor, patch) triple pulled out of the first
  ``X.Y.Z`` (or ``X.Y``, with patch 0) found anywhere in the string.
  Pre-release and build semantics do not apply.

When either side of a comparison is loose, both compare as plain numeric
triples.

Example:
    >>> v = RelaxedVersion.parse("MyPlugin v1.4 (build 77)")
    >>> v.kind, str(v)
    ('loose', '1.4.0')
    >>> RelaxedVersion.parse("1.4.0-rc.1").is_semver
    True
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Literal

from versionkit.exceptions import InvalidVersionFormat, NoVersionFound
from versionkit.versioning.semver import SemanticVersion, is_well_formed

__all__ = ["RelaxedVersion", "VersionKind"]

VersionKind = Literal["strict", "loose"]

# Matches start at the beginning of a digit run; the leftmost one wins
_THREE_PARTS = re.compile(r"(?<![0-9])([0-9]+)\.([0-9]+)\.([0-9]+)")
_TWO_PARTS = re.compile(r"(?<![0-9])([0-9]+)\.([0-9]+)")


def _extract_loose(text: str) -> tuple[int, int, int] | None:
    m = _THREE_PARTS.search(text)
    if m:
        return int(m.group(1)), int(m.group(2)), int(m.group(3))
    m = _TWO_PARTS.search(text)
    if m:
        return int(m.group(1)), int(m.group(2)), 0
    return None


@dataclass(frozen=True, eq=False)
class RelaxedVersion:
    """Version value that tolerates non-compliant input.

    Build instances with parse(), try_parse() or from_parts() rather than
    calling the constructor directly.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch level (0 when the source only had two components).
        semver: The wrapped SemanticVersion for the strict variant, else None.

    Raises:
        InvalidVersionFormat: If semver is given and its major, minor and
            patch differ from the components.
    """

    major: int
    minor: int
    patch: int
    semver: SemanticVersion | None = None

    def __post_init__(self) -> None:
        if self.semver is not None and self.semver.release != self.release:
            raise InvalidVersionFormat(
                self.semver,
                f"components {self.release} do not match wrapped version {self.semver}",
            )

    @classmethod
    def parse(cls, version: str) -> RelaxedVersion:
        """Extract a version from a string.

        Args:
            version: Any string that may contain a version number.

        Returns:
            A strict RelaxedVersion if the string is a compliant semantic
            version, otherwise a loose one.

        Raises:
            NoVersionFound: If no "X.Y" or "X.Y.Z" number appears anywhere.
        """
        semver = SemanticVersion.try_parse(version)
        if semver is not None:
            return cls.from_semver(semver)

        triple = _extract_loose(version) if isinstance(version, str) else None
        if triple is None:
            raise NoVersionFound(version)
        return cls(*triple)

    @classmethod
    def try_parse(cls, version: str) -> RelaxedVersion | None:
        """Like parse(), but return None when no version can be found."""
        if not isinstance(version, str):
            return None
        if not is_well_formed(version) and _extract_loose(version) is None:
            return None
        return cls.parse(version)

    @classmethod
    def from_semver(cls, semver: SemanticVersion) -> RelaxedVersion:
        """Wrap an existing SemanticVersion as a strict RelaxedVersion."""
        return cls(semver.major, semver.minor, semver.patch, semver)

    @classmethod
    def from_parts(cls, major: int, minor: int, patch: int) -> RelaxedVersion:
        """Build a strict RelaxedVersion from numeric components."""
        return cls.from_semver(SemanticVersion(major, minor, patch))

    @staticmethod
    def is_strict_semver(version: str) -> bool:
        """True if version is a strictly compliant semantic version string."""
        return is_well_formed(version)

    # ----------------------------
    # Queries
    # ----------------------------

    @property
    def kind(self) -> VersionKind:
        return "strict" if self.semver is not None else "loose"

    @property
    def is_semver(self) -> bool:
        return self.semver is not None

    @property
    def release(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    # ----------------------------
    # Comparison
    # ----------------------------

    def compare(self, other: RelaxedVersion) -> int:
        """Compare with another version.

        Returns:
            -1, 0 or 1. Semantic precedence when both sides are strict,
            plain numeric triple comparison otherwise.
        """
        if self.semver is not None and other.semver is not None:
            return self.semver.compare(other.semver)
        return (self.release > other.release) - (self.release < other.release)

    def is_greater_than(self, other: RelaxedVersion) -> bool:
        return self.compare(other) > 0

    def is_less_than(self, other: RelaxedVersion) -> bool:
        return self.compare(other) < 0

    def is_update_for(self, other: RelaxedVersion) -> bool:
        """True if this version is newer than other."""
        return self.is_greater_than(other)

    def is_compatible_update_for(self, other: RelaxedVersion) -> bool:
        """True if this version is newer than other with the same major version."""
        return self.is_update_for(other) and self.major == other.major

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RelaxedVersion):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RelaxedVersion):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RelaxedVersion):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RelaxedVersion):
            return NotImplemented
        return self.compare(other) >= 0

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, RelaxedVersion):
            return NotImplemented
        if self.semver is not None and other.semver is not None:
            return self.semver == other.semver
        return self.release == other.release

    def __hash__(self) -> int:
        return hash(self.release)

    def __str__(self) -> str:
        if self.semver is not None:
            return str(self.semver)
        return f"{self.major}.{self.minor}.{self.patch}"
