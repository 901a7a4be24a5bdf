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

"""Configuration loading for versionkit.

This module loads an optional ``versionkit.yaml`` and merges it over the
built-in defaults. Dicts are merged recursively and lists/scalars are
replaced (last wins).

Public API:

- load_effective_config: Load and merge configuration
- policy_from_config: Build an UpdatePolicy from a merged configuration

Example:
    Basic usage:

        from pathlib import Path
        from versionkit.config import load_effective_config, policy_from_config

        config = load_effective_config(Path("versionkit.yaml"))
        policy = policy_from_config(config)
        print(policy.strategy)  # "compatible"

"""

from .loader import load_effective_config, policy_from_config

__all__ = ["load_effective_config", "policy_from_config"]
