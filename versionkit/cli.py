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

"""Command-line interface for versionkit.

This module provides the main CLI entry point for the vkit tool, offering
commands for inspecting, comparing and sorting version strings, making
update decisions and reading plugin descriptors.

Commands:

    check: Parse a version string and describe it
    compare: Compare two version strings
    sort: Sort version strings from oldest to newest
    update: Decide whether a candidate version should replace the current one
    plugin: Inspect the version declared in a plugin.yml

Example:
    Check a version string:
        ```bash
        $ vkit check 1.2.3-rc.1+build.5
        ```

    Is a candidate a compatible update?
        ```bash
        $ vkit update 1.3.2 1.4.0 --strategy compatible
        ```

    Enable debug output:
        ```bash
        $ vkit compare v1.2 1.2.0-rc.1 --debug
        ```

Exit Codes:

- 0: Success (for 'update': an update should be installed)
- 1: Error, or for 'update': no update

Note:
    Each command has its own handler function (cmd_<command>).
    Verbose mode shows full tracebacks on errors for debugging.
    Debug mode implies verbose mode.

"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import sys
import traceback

from versionkit.config import load_effective_config, policy_from_config
from versionkit.core import check_update, compare_versions, inspect_plugin, inspect_version
from versionkit.exceptions import ConfigError, VersionError, VersionKitError
from versionkit.logging import get_logger, set_global_logger
from versionkit.policy import STRATEGIES, UpdatePolicy
from versionkit.results import InspectResult
from versionkit.versioning import sort_versions


def _configure_logger(args: argparse.Namespace):
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)
    return logger


def _report_error(err: Exception, args: argparse.Namespace) -> int:
    print(f"Error: {err}")
    if args.verbose or args.debug:
        traceback.print_exc()
    return 1


def _print_inspect(result: InspectResult) -> None:
    print("=" * 70)
    print("VERSION")
    print("=" * 70)
    print(f"Input:        {result.raw}")
    print(f"Canonical:    {result.canonical}")
    print(f"Kind:         {result.kind}")
    print(f"Major:        {result.major}")
    print(f"Minor:        {result.minor}")
    print(f"Patch:        {result.patch}")
    if result.prerelease:
        print(f"Pre-release:  {', '.join(result.prerelease)}")
    if result.build:
        print(f"Build:        {result.build}")
    print(f"Stable:       {'yes' if result.is_stable else 'no'}")
    print("=" * 70)


def cmd_check(args: argparse.Namespace) -> int:
    """Handler for 'vkit check' command.

    Args:
        args: Parsed command-line arguments containing the version string
            and the strict flag.

    Returns:
        Exit code (0 if a version was recognised, 1 otherwise).

    """
    logger = _configure_logger(args)

    try:
        result = inspect_version(args.version, strict=args.strict, logger=logger)
    except VersionError as err:
        return _report_error(err, args)

    _print_inspect(result)
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'vkit compare' command.

    Prints the comparison result (-1, 0 or 1) followed by a readable
    sentence.
    """
    logger = _configure_logger(args)

    try:
        result = compare_versions(args.left, args.right, logger=logger)
    except VersionError as err:
        return _report_error(err, args)

    symbol = {"older": "<", "same": "==", "newer": ">"}[result.relation]
    print(result.result)
    print(f"{result.left} {symbol} {result.right}")
    return 0


def cmd_sort(args: argparse.Namespace) -> int:
    """Handler for 'vkit sort' command. Prints one version per line."""
    _configure_logger(args)

    try:
        ordered = sort_versions(args.versions, reverse=args.reverse)
    except VersionError as err:
        return _report_error(err, args)

    for item in ordered:
        print(item)
    return 0


def cmd_update(args: argparse.Namespace) -> int:
    """Handler for 'vkit update' command.

    The policy comes from the configuration file (explicit --config or a
    versionkit.yaml found upward from the working directory); command-line
    flags override it.

    Returns:
        Exit code (0 if the candidate should be installed, 1 if not or on
        error).

    """
    logger = _configure_logger(args)

    try:
        cfg = load_effective_config(
            Path(args.config) if args.config else None, logger=logger
        )
        policy = policy_from_config(cfg)
    except ConfigError as err:
        return _report_error(err, args)

    policy = UpdatePolicy(
        strategy=args.strategy or policy.strategy,
        allow_prerelease=args.allow_prerelease or policy.allow_prerelease,
        relaxed=policy.relaxed and not args.strict,
    )
    logger.debug("POLICY", f"Effective policy: {policy}")

    try:
        result = check_update(args.current, args.candidate, policy=policy, logger=logger)
    except VersionError as err:
        return _report_error(err, args)

    if result.update:
        print(f"[UPDATE] {result.candidate} replaces {result.current}")
        return 0
    print(f"[NO UPDATE] {result.candidate} does not replace {result.current}")
    return 1


def cmd_plugin(args: argparse.Namespace) -> int:
    """Handler for 'vkit plugin' command."""
    logger = _configure_logger(args)

    try:
        result = inspect_plugin(Path(args.path), logger=logger)
    except VersionKitError as err:
        return _report_error(err, args)

    _print_inspect(result)
    return 0


def _add_output_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )


def _package_version() -> str:
    try:
        return version("versionkit")
    except PackageNotFoundError:
        from versionkit import __version__

        return __version__


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the vkit CLI.

    This function is registered as the 'vkit' console script in pyproject.toml.
    """
    parser = argparse.ArgumentParser(
        prog="vkit",
        description="versionkit - parse, validate and compare version strings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"vkit {_package_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'check' command
    parser_check = subparsers.add_parser(
        "check",
        help="Parse a version string and describe it",
        description="Parse a version string strictly, falling back to relaxed extraction.",
    )
    parser_check.add_argument("version", help="Version string to check")
    parser_check.add_argument(
        "--strict",
        action="store_true",
        help="Fail unless the string is a compliant semantic version",
    )
    _add_output_flags(parser_check)
    parser_check.set_defaults(func=cmd_check)

    # 'compare' command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare two version strings",
        description="Print -1, 0 or 1 as LEFT is older than, the same as, or newer than RIGHT.",
    )
    parser_compare.add_argument("left", help="Left-hand version")
    parser_compare.add_argument("right", help="Right-hand version")
    _add_output_flags(parser_compare)
    parser_compare.set_defaults(func=cmd_compare)

    # 'sort' command
    parser_sort = subparsers.add_parser(
        "sort",
        help="Sort version strings from oldest to newest",
    )
    parser_sort.add_argument("versions", nargs="+", help="Version strings to sort")
    parser_sort.add_argument(
        "--reverse",
        action="store_true",
        help="Print newest first",
    )
    _add_output_flags(parser_sort)
    parser_sort.set_defaults(func=cmd_sort)

    # 'update' command
    parser_update = subparsers.add_parser(
        "update",
        help="Decide whether a candidate version should replace the current one",
        description="Exit with 0 if CANDIDATE should replace CURRENT under the update policy, 1 otherwise.",
    )
    parser_update.add_argument("current", help="Currently installed version")
    parser_update.add_argument("candidate", help="Candidate version")
    parser_update.add_argument(
        "--config",
        default=None,
        help="Path to a versionkit.yaml (default: search upward from the working directory)",
    )
    parser_update.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default=None,
        help="Override the policy strategy (newer or compatible)",
    )
    parser_update.add_argument(
        "--allow-prerelease",
        action="store_true",
        help="Accept pre-release candidates",
    )
    parser_update.add_argument(
        "--strict",
        action="store_true",
        help="Require compliant semantic versions (no relaxed extraction)",
    )
    _add_output_flags(parser_update)
    parser_update.set_defaults(func=cmd_update)

    # 'plugin' command
    parser_plugin = subparsers.add_parser(
        "plugin",
        help="Inspect the version declared in a plugin descriptor",
    )
    parser_plugin.add_argument(
        "path",
        help="Path to plugin.yml or a directory containing it",
    )
    _add_output_flags(parser_plugin)
    parser_plugin.set_defaults(func=cmd_plugin)

    # Parse and dispatch
    args = parser.parse_args(argv)

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
