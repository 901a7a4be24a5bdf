"""
versionkit - semantic version parsing, validation and comparison

A small library (and the ``vkit`` CLI) for working with version strings as
published by plugins and other third-party components.

versionkit provides:
  - Strict Semantic Versioning parsing with a full-string grammar
  - Precedence with natural (numeric-aware) ordering of pre-release tags
  - Relaxed extraction of "X.Y.Z" / "X.Y" versions from arbitrary text
  - Update decisions (newer / compatible) driven by an optional YAML config
  - Reading the declared version of a plugin from its plugin.yml

Quick Start
-----------
Describe a version string:

    $ vkit check 1.2.3-rc.1+build.5

Decide whether a candidate is a compatible update:

    $ vkit update 1.3.2 1.4.0 --strategy compatible

For full CLI documentation:

    $ vkit --help

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
core : module
    High-level orchestration functions.
config : package
    YAML configuration loading and merging.
versioning : package
    Semantic and relaxed version values, natural ordering, sort keys.
policy : package
    Update policies.
plugin : module
    Plugin descriptors as a source of version strings.

Public API
----------
    from versionkit import SemanticVersion, RelaxedVersion
    from versionkit.versioning import compare_any, sort_versions
    from versionkit.config import load_effective_config
    from versionkit.core import check_update

For more details, see the individual module docstrings.

"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"

from versionkit.exceptions import (
    ConfigError,
    InvalidIdentifier,
    InvalidVersionFormat,
    NoVersionFound,
    VersionError,
    VersionKitError,
)
from versionkit.versioning import (
    RelaxedVersion,
    SemanticVersion,
    compare_any,
    is_well_formed,
    natural_compare,
    sort_versions,
)

__all__ = [
    "__version__",
    "ConfigError",
    "InvalidIdentifier",
    "InvalidVersionFormat",
    "NoVersionFound",
    "VersionError",
    "VersionKitError",
    "RelaxedVersion",
    "SemanticVersion",
    "compare_any",
    "is_well_formed",
    "natural_compare",
    "sort_versions",
]
