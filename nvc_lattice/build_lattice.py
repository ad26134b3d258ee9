#!/usr/bin/env python3

#    Copyright 2026 Two Sigma Open Source, LLC
#
#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the specific language governing permissions and
#    limitations under the License.

"""Compile the Lattice iCEcube2 simulation libraries for nvc.

***** This script is deprecated and no longer maintained *****
Use `nvc --install ise' instead.

Steps:
1. Deprecation guard - refuse to run unless --force-run is given
2. Resolve root      - search root from the command line (default /opt/lscc)
3. Locate            - find the iCEcube2 installation with a vhdl/ directory
4. Prepare lib dir   - create ~/.nvc/lib if missing
5. Compile           - analyse the three VITAL sources into the 'ice' library

The first failure at any step stops the run with exit status 1. Nothing
created before the failure is cleaned up.
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from .config import (
    DEFAULT_SEARCH_ROOT,
    DEPRECATED,
    ICE_LIBRARY_JOBS,
    ICE_LIBRARY_TITLE,
    REPLACEMENT_COMMAND,
    BuildPaths,
    RunSettings,
)
from .exceptions import (
    DeprecatedToolError,
    InstallationNotFoundError,
    LatticeLibsError,
)
from .library_dir import ensure_lib_dir
from .locator import locate
from .runner import CommandRunner, SubprocessRunner, run_jobs


def parse_args(argv: Sequence[str] | None = None) -> RunSettings:
    """Parse command-line arguments into run settings."""
    parser = argparse.ArgumentParser(
        description="Compile the Lattice iCEcube2 simulation libraries for nvc "
        f"(deprecated: use `{REPLACEMENT_COMMAND}' instead)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --force-run                         # Search /opt/lscc
  %(prog)s --force-run ~/lscc                  # Search another directory
""",
    )
    parser.add_argument(
        "search_root",
        nargs="?",
        type=Path,
        default=DEFAULT_SEARCH_ROOT,
        help=f"Directory containing the iCEcube2 installation (default: {DEFAULT_SEARCH_ROOT})",
    )
    parser.add_argument(
        "--force-run",
        action="store_true",
        help="Run the deprecated build anyway",
    )
    # Arguments past the search root are ignored so the exit status stays 0 or 1
    args, _ = parser.parse_known_args(argv)

    return RunSettings(search_root=args.search_root, force_run=args.force_run)


def check_deprecation(settings: RunSettings) -> None:
    """Raise DeprecatedToolError unless the guard is disabled or bypassed."""
    if DEPRECATED and not settings.force_run:
        raise DeprecatedToolError(REPLACEMENT_COMMAND)


def put_title(what: str) -> None:
    """Print a section title."""
    print()
    print(f"------ {what} ------")


def prepare_paths(settings: RunSettings, home: Path | None = None) -> BuildPaths:
    """Locate the installation and create the library directory.

    Args:
        settings: Parsed command-line settings
        home: Home directory override (default: the invoking user's home)

    Returns:
        Resolved installation and library directories
    """
    installation = locate(settings.search_root)
    print(f"Using iCEcube2 installation in {installation}")

    lib_dir = ensure_lib_dir(home)
    return BuildPaths(installation=installation, lib_dir=lib_dir)


def run_sequence(
    settings: RunSettings, runner: CommandRunner, home: Path | None = None
) -> BuildPaths:
    """Run the full build after the deprecation guard has been passed."""
    paths = prepare_paths(settings, home)

    put_title(ICE_LIBRARY_TITLE)
    run_jobs(ICE_LIBRARY_JOBS, paths, runner)
    return paths


def print_deprecation_notice(error: DeprecatedToolError) -> None:
    """Print the deprecation banner."""
    print("***** This script is deprecated and no longer maintained *****")
    print()
    print(f"Use `{error.replacement}' instead.")
    print("Pass --force-run if you really want to run it.")


def main(
    argv: Sequence[str] | None = None,
    runner: CommandRunner | None = None,
    home: Path | None = None,
) -> int:
    """Build the Lattice simulation libraries.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])
        runner: Command runner (default: real subprocesses)
        home: Home directory override (default: the invoking user's home)

    Returns:
        0 on success, 1 on any failure
    """
    settings = parse_args(argv)
    if runner is None:
        runner = SubprocessRunner()

    try:
        check_deprecation(settings)
        run_sequence(settings, runner, home)
    except DeprecatedToolError as e:
        print_deprecation_notice(e)
        return 1
    except InstallationNotFoundError as e:
        print(e)
        print("Try passing the installation directory as an argument")
        return 1
    except LatticeLibsError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
