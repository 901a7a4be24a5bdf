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

"""Core orchestration for versionkit.

This module provides the high-level functions behind the CLI commands. They
combine the version value types with the glue modules (plugin descriptors,
update policy, logging) and return structured results.

Design Principles:

- Each function has a single, clear responsibility
- Functions return frozen dataclasses for easy testing and extension
- Error handling uses exceptions; the CLI layer formats them for display

Example:
    Programmatic usage:
        ```python
        from versionkit.core import check_update
        from versionkit.policy import UpdatePolicy

        result = check_update(
            "1.3.2",
            "1.4.0",
            policy=UpdatePolicy(strategy="compatible"),
        )
        print(result.update)  # True
        ```

"""

from __future__ import annotations

from pathlib import Path

from versionkit.logging import Logger, get_global_logger
from versionkit.plugin import load_plugin_descriptor
from versionkit.policy import UpdatePolicy, should_update
from versionkit.results import CompareResult, InspectResult, UpdateResult
from versionkit.versioning import RelaxedVersion, SemanticVersion, compare_any

_RELATIONS = {-1: "older", 0: "same", 1: "newer"}


def inspect_version(
    raw: str,
    *,
    strict: bool = False,
    logger: Logger | None = None,
) -> InspectResult:
    """Parse a version string and describe it.

    Args:
        raw: Version string to inspect.
        strict: If True, only accept strictly compliant versions.
        logger: Logger for progress output (defaults to the global logger).

    Returns:
        InspectResult describing the parsed version.

    Raises:
        InvalidVersionFormat: If strict is True and raw is not compliant.
        NoVersionFound: If strict is False and raw holds no version number.

    """
    logger = logger or get_global_logger()

    if strict:
        version = RelaxedVersion.from_semver(SemanticVersion.parse(raw))
    else:
        version = RelaxedVersion.parse(raw)

    logger.verbose("VERSION", f"{raw!r} parsed as {version.kind} version {version}")

    semver = version.semver
    return InspectResult(
        raw=raw,
        canonical=str(version),
        kind=version.kind,
        is_strict=semver is not None,
        is_stable=semver.is_stable() if semver is not None else False,
        major=version.major,
        minor=version.minor,
        patch=version.patch,
        prerelease=semver.prerelease if semver is not None else (),
        build=semver.build if semver is not None else "",
    )


def compare_versions(
    left: str, right: str, *, logger: Logger | None = None
) -> CompareResult:
    """Compare two version strings.

    Raises:
        NoVersionFound: If either string holds no version number.
    """
    result = compare_any(left, right, logger=logger)
    return CompareResult(
        left=left, right=right, result=result, relation=_RELATIONS[result]
    )


def check_update(
    current: str | None,
    candidate: str,
    *,
    policy: UpdatePolicy,
    logger: Logger | None = None,
) -> UpdateResult:
    """Decide whether candidate should replace current under policy."""
    decision = should_update(
        candidate=candidate, current=current, policy=policy, logger=logger
    )
    return UpdateResult(
        current=current,
        candidate=candidate,
        strategy=policy.strategy,
        update=decision,
    )


def inspect_plugin(path: Path, *, logger: Logger | None = None) -> InspectResult:
    """Inspect the version declared by a plugin descriptor.

    Args:
        path: Descriptor file or directory containing plugin.yml.
        logger: Logger for progress output (defaults to the global logger).

    Raises:
        ConfigError: If the descriptor cannot be read.
        NoVersionFound: If the declared version holds no version number.

    """
    descriptor = load_plugin_descriptor(path, logger=logger)
    return inspect_version(descriptor.declared_version(), logger=logger)
