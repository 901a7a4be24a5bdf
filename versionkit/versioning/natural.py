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

"""Numeric-aware ("natural") string comparison.

Strings are split into maximal runs of ASCII digits and non-digits. Digit
runs compare by numeric value (leading zeros ignored, no size limit), other
runs compare by ASCII ordinal, and a digit run always sorts before a
non-digit run.

Example:
    >>> natural_compare("test2", "test10")
    -1
    >>> sorted(["beta.11", "beta.2", "alpha"], key=natural_key)
    ['alpha', 'beta.2', 'beta.11']
"""

from __future__ import annotations

from functools import cmp_to_key
import re

__all__ = ["natural_compare", "natural_key"]

_RUN = re.compile(r"[0-9]+|[^0-9]+")


def _is_digit_run(run: str) -> bool:
    return "0" <= run[0] <= "9"


def _compare_digit_runs(a: str, b: str) -> int:
    """Compare two digit runs by value without converting them to int."""
    a = a.lstrip("0")
    b = b.lstrip("0")
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    return (a > b) - (a < b)


def natural_compare(a: str, b: str) -> int:
    """Compare two strings treating embedded digit runs as numbers.

    Args:
        a: Left-hand string.
        b: Right-hand string.

    Returns:
        A negative number if a sorts first, zero if both are equal under
        this ordering (e.g. "test01" and "test1"), positive otherwise.
    """
    runs_a = _RUN.findall(a)
    runs_b = _RUN.findall(b)

    for run_a, run_b in zip(runs_a, runs_b):
        digits_a = _is_digit_run(run_a)
        digits_b = _is_digit_run(run_b)

        if digits_a and digits_b:
            result = _compare_digit_runs(run_a, run_b)
            if result:
                return result
            continue

        if digits_a != digits_b:
            return -1 if digits_a else 1

        # A run that is a strict prefix of the other sorts first
        if run_a != run_b:
            return -1 if run_a < run_b else 1

    return (len(runs_a) > len(runs_b)) - (len(runs_a) < len(runs_b))


natural_key = cmp_to_key(natural_compare)
