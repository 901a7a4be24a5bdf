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

"""Host plugin descriptors as a source of version strings.

A host application describes each plugin in a ``plugin.yml`` file:

    name: FakePlugin
    version: 1.0.0
    main: org.example.fake.FakePlugin

The only thing versionkit reads from it is the declared version string;
the descriptor is never modified. Anything exposing
``declared_version() -> str`` satisfies the VersionSource protocol and can
be passed to the helpers below.

Example:
    Read a descriptor and check its version:
        ```python
        from pathlib import Path
        from versionkit.plugin import load_plugin_descriptor, semver_from_source

        descriptor = load_plugin_descriptor(Path("plugins/FakePlugin"))
        version = semver_from_source(descriptor)
        if version is None:
            print(f"{descriptor.name} does not use semantic versioning")
        ```
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import yaml

from versionkit.config.loader import load_yaml_file
from versionkit.exceptions import ConfigError
from versionkit.logging import Logger, get_global_logger
from versionkit.versioning import RelaxedVersion, SemanticVersion, is_well_formed

DESCRIPTOR_NAME = "plugin.yml"


class VersionSource(Protocol):
    """Anything that can report a declared version string."""

    def declared_version(self) -> str: ...


@dataclass(frozen=True)
class PluginDescriptor:
    """Metadata read from a plugin descriptor.

    Attributes:
        name: Plugin name ("" when not declared).
        version: Declared version string, exactly as written.
        main: Entry point declared by the plugin, if any.
        path: Descriptor file the data came from.
    """

    name: str
    version: str
    main: str | None = None
    path: Path | None = None

    def declared_version(self) -> str:
        return self.version


class _DescriptorLoader(yaml.SafeLoader):
    """Safe loader that keeps numeric scalars as their source text."""


# "version: 1.10" must stay "1.10", not the float 1.1
for _tag in ("tag:yaml.org,2002:int", "tag:yaml.org,2002:float"):
    _DescriptorLoader.add_constructor(_tag, yaml.SafeLoader.construct_yaml_str)


def load_plugin_descriptor(
    path: Path, *, logger: Logger | None = None
) -> PluginDescriptor:
    """Load a plugin descriptor.

    Args:
        path: A descriptor file, or a directory containing ``plugin.yml``.
        logger: Logger for progress output (defaults to the global logger).

    Returns:
        The parsed PluginDescriptor.

    Raises:
        ConfigError: If the file is missing, is not valid YAML, is not a
            mapping, or declares no version.
    """
    logger = logger or get_global_logger()

    path = Path(path)
    if path.is_dir():
        path = path / DESCRIPTOR_NAME

    logger.verbose("PLUGIN", f"Loading descriptor: {path}")
    if not path.exists():
        raise ConfigError(f"plugin descriptor not found: {path}")
    data = load_yaml_file(path, loader=_DescriptorLoader)
    if not isinstance(data, dict):
        raise ConfigError(f"top-level YAML must be a mapping (dict): {path}")

    raw_version = data.get("version")
    if not isinstance(raw_version, str) or not raw_version.strip():
        raise ConfigError(f"plugin descriptor has no 'version' field: {path}")

    main = data.get("main")
    descriptor = PluginDescriptor(
        name=str(data.get("name") or ""),
        version=raw_version.strip(),
        main=str(main) if main is not None else None,
        path=path,
    )
    logger.debug(
        "PLUGIN", f"name={descriptor.name!r} version={descriptor.version!r}"
    )
    return descriptor


def semver_from_source(source: VersionSource) -> SemanticVersion | None:
    """Strict version declared by source, or None if it is not compliant."""
    return SemanticVersion.try_parse(source.declared_version())


def version_from_source(source: VersionSource) -> RelaxedVersion | None:
    """Relaxed version declared by source, or None if it has no version number."""
    return RelaxedVersion.try_parse(source.declared_version())


def is_semver_source(source: VersionSource) -> bool:
    return is_well_formed(source.declared_version())
