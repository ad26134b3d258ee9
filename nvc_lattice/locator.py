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

"""Locate an iCEcube2 installation under a search root.

The search root's direct children are scanned in raw directory-listing
order (no sorting). A child qualifies when its name starts with
``iCEcube2``, is not hidden, and it contains a ``vhdl`` subdirectory.
When several children qualify, the last one listed wins.
"""

import os
from collections.abc import Iterator
from pathlib import Path

from .config import INSTALL_PREFIX, VHDL_SUBDIR
from .exceptions import InstallationNotFoundError


def is_candidate_name(name: str) -> bool:
    """Return True if a directory entry name looks like an iCEcube2 install."""
    if name.startswith("."):
        return False
    return name.startswith(INSTALL_PREFIX)


def iter_installations(search_root: Path) -> Iterator[Path]:
    """Yield every qualifying installation in directory-listing order.

    Args:
        search_root: Directory whose immediate children are scanned

    Raises:
        InstallationNotFoundError: If the search root cannot be listed
    """
    try:
        entries = os.listdir(search_root)
    except OSError as e:
        raise InstallationNotFoundError(
            search_root, reason=e.strerror or str(e)
        ) from e

    for name in entries:
        if not is_candidate_name(name):
            continue
        candidate = search_root / name
        # os.path.isdir answers False for entries we cannot stat
        if os.path.isdir(candidate / VHDL_SUBDIR):
            yield candidate


def locate(search_root: Path) -> Path:
    """Find the iCEcube2 installation to build from.

    Args:
        search_root: Directory whose immediate children are scanned

    Returns:
        The last qualifying installation in directory-listing order

    Raises:
        InstallationNotFoundError: If nothing qualifies or the root is unreadable
    """
    match = None
    for installation in iter_installations(search_root):
        match = installation  # Last one wins

    if match is None:
        raise InstallationNotFoundError(search_root)
    return match
