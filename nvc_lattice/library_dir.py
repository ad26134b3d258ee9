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

"""Prepare the per-user directory that receives compiled libraries."""

from pathlib import Path

from .config import LIB_DIR_PARTS
from .exceptions import DirectoryCreationError


def lib_dir_path(home: Path | None = None) -> Path:
    """Return ~/.nvc/lib for the given (or current) home directory."""
    if home is None:
        home = Path.home()
    return home.joinpath(*LIB_DIR_PARTS)


def ensure_lib_dir(home: Path | None = None) -> Path:
    """Create the library directory and any missing parents.

    Succeeds silently if the directory already exists.

    Args:
        home: Home directory override (default: the invoking user's home)

    Returns:
        Path to the library directory

    Raises:
        DirectoryCreationError: If the directory cannot be created
    """
    lib_dir = lib_dir_path(home)
    try:
        lib_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(lib_dir, reason=e.strerror or str(e)) from e
    return lib_dir
