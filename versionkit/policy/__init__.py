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

"""Update policy for versionkit.

Modules:

updates : module
    Update policies for deciding when a candidate version replaces the
    installed one.

Public API:

UpdatePolicy : class
    Configuration for update decisions.
should_update : function
    Determine if a candidate version should be installed based on policy.

Example:
    from versionkit.policy import UpdatePolicy, should_update

    policy = UpdatePolicy(strategy="compatible")

    update_it = should_update(
        candidate="2.0.0",
        current="1.9.3",
        policy=policy,
    )
    print(f"Should update: {update_it}")  # False, major version changed

"""

from .updates import STRATEGIES, Strategy, UpdatePolicy, should_update

__all__ = ["STRATEGIES", "Strategy", "UpdatePolicy", "should_update"]
