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

"""Update decision policy for versionkit.

Determines whether a candidate version should replace the currently
installed one, based on version precedence and the configured policy.

Example:
    Check if a candidate is an acceptable update:

        from versionkit.policy.updates import should_update, UpdatePolicy

        decision = should_update(
            candidate="1.4.0",
            current="1.3.2",
            policy=UpdatePolicy(
                strategy="compatible",
                allow_prerelease=False,
                relaxed=True,
            ),
        )

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from versionkit.logging import Logger, get_global_logger
from versionkit.versioning import RelaxedVersion, SemanticVersion

Strategy = Literal["newer", "compatible"]
STRATEGIES: tuple[Strategy, ...] = ("newer", "compatible")


@dataclass(frozen=True)
class UpdatePolicy:
    strategy: Strategy = "newer"
    allow_prerelease: bool = False
    relaxed: bool = True


def _parse(version: str, policy: UpdatePolicy) -> RelaxedVersion:
    if policy.relaxed:
        return RelaxedVersion.parse(version)
    return RelaxedVersion.from_semver(SemanticVersion.parse(version))


def should_update(
    *,
    candidate: str,
    current: str | None,
    policy: UpdatePolicy,
    logger: Logger | None = None,
) -> bool:
    """Decide whether a candidate version should replace the current one.

    Args:
        candidate: Version being offered.
        current: Version installed now (None if nothing is installed).
        policy: UpdatePolicy controlling the decision.
        logger: Logger for decision output (defaults to the global logger).

    Returns:
        True if the candidate should be installed, False otherwise.

    Raises:
        NoVersionFound: If a string holds no version (relaxed policy).
        InvalidVersionFormat: If a string is not strictly compliant
            (non-relaxed policy).

    """
    logger = logger or get_global_logger()

    new = _parse(candidate, policy)

    if new.semver is not None and new.semver.prerelease and not policy.allow_prerelease:
        logger.verbose(
            "POLICY", f"Refusing pre-release {candidate!r} (allow_prerelease=False)"
        )
        return False

    # Nothing installed yet: take the first acceptable version
    if current is None:
        logger.verbose("POLICY", f"No current version; accepting {candidate!r}")
        return True

    old = _parse(current, policy)

    if policy.strategy == "compatible":
        decision = new.is_compatible_update_for(old)
    else:
        decision = new.is_update_for(old)

    logger.verbose(
        "POLICY",
        f"{candidate!r} vs {current!r} (strategy={policy.strategy}): "
        f"{'update' if decision else 'no update'}",
    )
    return decision
