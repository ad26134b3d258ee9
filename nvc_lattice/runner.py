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

"""Run the nvc compiler over the vendor simulation sources.

Each step prints the assembled command line, runs it to completion with the
parent's standard streams, and raises on a non-zero exit status. Steps run
strictly one after another; the first failure stops the sequence.
"""

import shlex
import subprocess
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Protocol

from .config import NVC_ANALYSE_FLAGS, NVC_BINARY, BuildPaths, CompileJob
from .exceptions import CommandExecutionError

# Exit statuses a POSIX shell reports when a command cannot be started
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127


class CommandRunner(Protocol):
    """Capability to execute an external command and report its exit status."""

    def run(self, command: Sequence[str]) -> int:
        """Run command with inherited standard streams and return its status."""
        ...


class SubprocessRunner:
    """Run commands as real child processes."""

    def run(self, command: Sequence[str]) -> int:
        """Run command synchronously, streaming its output to the console.

        A command that cannot be started is reported and mapped to the
        status a shell would give it (127 not found, 126 not executable).
        """
        try:
            result = subprocess.run(list(command))
        except FileNotFoundError:
            print(f"Error: {command[0]} not found - is it installed and on PATH?")
            return EXIT_NOT_FOUND
        except PermissionError:
            print(f"Error: {command[0]} is not executable")
            return EXIT_NOT_EXECUTABLE
        return result.returncode


def build_nvc_command(
    work_lib: str,
    source_filename: str,
    source_dir: Path,
    lib_dir: Path,
) -> list[str]:
    """Assemble the nvc argument list for analysing one source file.

    Args:
        work_lib: Work library name (e.g., 'ice')
        source_filename: VHDL file name relative to source_dir
        source_dir: Vendor VHDL source directory
        lib_dir: Root directory for compiled libraries

    Returns:
        Argument list, e.g. ['nvc', '--work=/home/u/.nvc/lib/ice', '-a',
        '--relaxed', '/opt/lscc/iCEcube2/vhdl/vcomponent_vital.vhd']
    """
    return [
        NVC_BINARY,
        f"--work={lib_dir / work_lib}",
        *NVC_ANALYSE_FLAGS,
        str(source_dir / source_filename),
    ]


def run_step(
    work_lib: str,
    source_filename: str,
    source_dir: Path,
    lib_dir: Path,
    runner: CommandRunner,
) -> None:
    """Compile one source file, raising CommandExecutionError on failure."""
    command = build_nvc_command(work_lib, source_filename, source_dir, lib_dir)
    print(shlex.join(command))
    # Keep our own output ahead of the child's on the shared stream
    sys.stdout.flush()

    returncode = runner.run(command)
    if returncode != 0:
        raise CommandExecutionError(command, returncode)


def run_jobs(
    jobs: Iterable[CompileJob],
    paths: BuildPaths,
    runner: CommandRunner,
) -> None:
    """Run compile jobs in order, stopping at the first failure."""
    for job in jobs:
        run_step(
            job.work_lib,
            job.source_filename,
            paths.source_dir,
            paths.lib_dir,
            runner,
        )
