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

"""Custom exceptions for library build errors.

Exceptions
==========

This module defines the exception types raised while locating the vendor
installation, preparing the library directory and running the compiler.
Every one of them is fatal: the command-line entry point prints the message
and exits with status 1.
"""

import shlex
from collections.abc import Sequence
from pathlib import Path


class LatticeLibsError(Exception):
    """Base exception for all library build failures.

    All tool-specific exceptions inherit from this base class,
    allowing the entry point to catch them with a single handler.
    """

    pass


class DeprecatedToolError(LatticeLibsError):
    """The tool refused to run because it is deprecated."""

    def __init__(self, replacement: str):
        """Initialize deprecation error.

        Args:
            replacement: Command users should run instead
        """
        super().__init__(
            f"This script is deprecated and no longer maintained. "
            f"Use `{replacement}' instead."
        )
        self.replacement = replacement


class InstallationNotFoundError(LatticeLibsError):
    """No iCEcube2 installation could be found under the search root.

    Also raised when the search root itself does not exist or cannot be
    listed, in which case `reason` describes the problem.
    """

    def __init__(self, search_root: Path, reason: str | None = None):
        """Initialize not-found error with the searched location.

        Args:
            search_root: Directory that was scanned
            reason: Optional description of why the scan itself failed
        """
        message = f"Cannot find iCEcube2 install under {search_root}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.search_root = search_root
        self.reason = reason


class DirectoryCreationError(LatticeLibsError):
    """The compiled library directory could not be created."""

    def __init__(self, path: Path, reason: str = ""):
        """Initialize directory creation error.

        Args:
            path: Directory that could not be created
            reason: Description of the underlying OS error
        """
        message = f"Cannot create library directory {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path


class CommandExecutionError(LatticeLibsError):
    """An external compiler invocation exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int):
        """Initialize command error with the failed invocation.

        Args:
            command: Argument list that was executed
            returncode: Exit status reported for the command
        """
        super().__init__(
            f"Command failed with exit code {returncode}: {shlex.join(command)}"
        )
        self.command = list(command)
        self.returncode = returncode
