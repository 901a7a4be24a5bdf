"""
Version parsing, validation and comparison for versionkit.

This package provides the version value types and the algorithms that
order them. Everything here is pure string parsing and arithmetic: no
file or network I/O, no logging from the value types, and every value is
immutable once constructed (safe to share between threads).

Modules
-------
natural : module
    Numeric-aware string comparison used to order pre-release tags.
identifiers : module
    Grammar checks for pre-release tags and build metadata.
semver : module
    Strict parser and the SemanticVersion value type with its precedence.
relaxed : module
    RelaxedVersion, a best-effort extractor for non-compliant strings.
keys : module
    String-level helpers (compare_any, is_newer_any, sort_versions).

Public API
----------
SemanticVersion : dataclass
    Strict MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD] version.
RelaxedVersion : dataclass
    Strict-or-loose wrapper for arbitrary version strings.
is_well_formed : function
    Check a string against the strict grammar without raising.
natural_compare : function
    Compare two strings treating digit runs as numbers.
compare_any, is_newer_any, is_compatible_update_any : functions
    Compare raw version strings.

Examples
--------
Strict parsing and precedence:

    >>> from versionkit.versioning import SemanticVersion
    >>> SemanticVersion.parse("1.0.0-beta.2") < SemanticVersion.parse("1.0.0-beta.11")
    True

Relaxed extraction:

    >>> from versionkit.versioning import RelaxedVersion
    >>> str(RelaxedVersion.parse("v1.0"))
    '1.0.0'

Notes
-----
- ``==`` on SemanticVersion is looser than precedence: versions whose
  pre-release tags merely overlap compare equal.
- Mixed strict/loose comparisons use numeric triples only, so sorting a
  mixture of both kinds is not guaranteed to be a total order.
"""

from .identifiers import validate_build_metadata, validate_prerelease_tags
from .keys import (
    compare_any,
    is_compatible_update_any,
    is_newer_any,
    sort_versions,
    version_key_any,
)
from .natural import natural_compare, natural_key
from .relaxed import RelaxedVersion, VersionKind
from .semver import SemanticVersion, is_well_formed

__all__ = [
    "SemanticVersion",
    "RelaxedVersion",
    "VersionKind",
    "is_well_formed",
    "natural_compare",
    "natural_key",
    "validate_build_metadata",
    "validate_prerelease_tags",
    "compare_any",
    "is_newer_any",
    "is_compatible_update_any",
    "version_key_any",
    "sort_versions",
]
