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

"""Exception hierarchy for versionkit.

This module defines a custom exception hierarchy that allows library users
to distinguish between different types of errors:

- InvalidVersionFormat: A string is not a strictly compliant semantic version
- InvalidIdentifier: A pre-release tag or build metadata token is malformed
- NoVersionFound: The relaxed extractor found no version number at all
- ConfigError: Configuration or plugin descriptor problems (YAML parse,
  missing fields, invalid policy values)

All exceptions inherit from VersionKitError, allowing users to catch all
versionkit errors with a single except clause if needed. The three version
errors additionally share the VersionError base.

Example:
    Catching specific error types:
        ```python
        from versionkit.exceptions import InvalidVersionFormat
        from versionkit.versioning import SemanticVersion

        try:
            version = SemanticVersion.parse("01.2.3")
        except InvalidVersionFormat as e:
            print(f"Not a semantic version: {e.version}")
        ```

    Catching all versionkit errors:
        ```python
        from versionkit.exceptions import VersionKitError

        try:
            result = check_update("1.0.0", "v1.1", policy=policy)
        except VersionKitError as e:
            print(f"versionkit error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "VersionKitError",
    "VersionError",
    "InvalidVersionFormat",
    "InvalidIdentifier",
    "NoVersionFound",
    "ConfigError",
]


class VersionKitError(Exception):
    """Base exception for all versionkit errors.

    All versionkit-specific exceptions inherit from this class, allowing users
    to catch all versionkit errors with a single except clause if needed.
    """

    pass


class VersionError(VersionKitError):
    """Base exception for errors raised while constructing version values."""

    pass


class InvalidVersionFormat(VersionError):
    """Raised when a string does not match the strict version grammar.

    The full string must match ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]``;
    any leading or trailing noise is rejected as well.

    Attributes:
        version: The offending input.
    """

    def __init__(self, version: object, message: str | None = None) -> None:
        self.version = version
        super().__init__(
            message
            or f"Invalid version (not Semantic Versioning compliant): {version!r}"
        )


class InvalidIdentifier(VersionError):
    """Raised when a pre-release tag or build metadata token is malformed.

    Tokens are restricted to ``[A-Za-z0-9.-]`` and must not contain ``--``
    or ``..``.

    Attributes:
        identifier: The offending token.
    """

    def __init__(self, identifier: object, kind: str = "identifier") -> None:
        self.identifier = identifier
        self.kind = kind
        super().__init__(f"Invalid {kind}: {identifier!r}")


class NoVersionFound(VersionError):
    """Raised when no version number can be located anywhere in a string.

    Attributes:
        text: The string that was searched.
    """

    def __init__(self, text: object) -> None:
        self.text = text
        super().__init__(f"Invalid version number: {text!r}")


class ConfigError(VersionKitError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - YAML parsing (syntax errors, invalid structure)
    - Missing configuration or plugin descriptor files
    - Missing or empty ``version`` field in a plugin descriptor
    - Unknown update policy strategies or non-boolean policy flags

    Example:
        Catching configuration errors:
            ```python
            from versionkit.exceptions import ConfigError

            try:
                config = load_effective_config(Path("invalid.yaml"))
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass
