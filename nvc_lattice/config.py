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

"""Central configuration for the Lattice library build.

Configuration
=============

This module holds the fixed paths, compiler flags and compile job list used
by the builder, plus the immutable value objects threaded between steps.

Organization:
    - Deprecation guard
    - Vendor installation layout
    - Compiler invocation
    - Compile jobs
    - Run-time values (RunSettings, BuildPaths)

Usage:
    >>> from nvc_lattice.config import ICE_LIBRARY_JOBS
    >>> [job.source_filename for job in ICE_LIBRARY_JOBS]
    ['vcomponent_vital.vhd', 'sb_ice_syn_vital.vhd', 'sb_ice_lc_vital.vhd']
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Final

# ============================================================================
# Deprecation Guard
# ============================================================================

DEPRECATED: Final[bool] = True
"""Refuse to run unless --force-run is given. Set to False to drop the guard."""

REPLACEMENT_COMMAND: Final[str] = "nvc --install ise"
"""Command that supersedes this tool, named in the deprecation notice."""

# ============================================================================
# Vendor Installation Layout
# ============================================================================

DEFAULT_SEARCH_ROOT: Final[Path] = Path("/opt/lscc")
"""Directory scanned for iCEcube2 installations when none is given."""

INSTALL_PREFIX: Final[str] = "iCEcube2"
"""Name prefix identifying an iCEcube2 installation directory."""

VHDL_SUBDIR: Final[str] = "vhdl"
"""Subdirectory of the installation holding the VITAL model sources."""

LIB_DIR_PARTS: Final[tuple[str, ...]] = (".nvc", "lib")
"""Location of compiled libraries relative to the user's home directory."""

# ============================================================================
# Compiler Invocation
# ============================================================================

NVC_BINARY: Final[str] = "nvc"
"""Compiler executable, looked up on PATH."""

NVC_ANALYSE_FLAGS: Final[tuple[str, ...]] = ("-a", "--relaxed")
"""Flags placed between --work and the source file."""

# ============================================================================
# Compile Jobs
# ============================================================================


@dataclass(frozen=True)
class CompileJob:
    """One compiler invocation: a source file analysed into a work library."""

    work_lib: str
    source_filename: str


ICE_LIBRARY_TITLE: Final[str] = "ICE library"

# Order matters: later files depend on the component declarations
ICE_LIBRARY_JOBS: Final[tuple[CompileJob, ...]] = (
    CompileJob("ice", "vcomponent_vital.vhd"),
    CompileJob("ice", "sb_ice_syn_vital.vhd"),
    CompileJob("ice", "sb_ice_lc_vital.vhd"),
)

# ============================================================================
# Run-time Values
# ============================================================================


@dataclass(frozen=True)
class RunSettings:
    """Options parsed from the command line."""

    search_root: Path = DEFAULT_SEARCH_ROOT
    force_run: bool = False  # Bypass the deprecation guard


@dataclass(frozen=True)
class BuildPaths:
    """Directories resolved once at startup and passed to every step."""

    installation: Path
    lib_dir: Path

    @property
    def source_dir(self) -> Path:
        """Directory holding the vendor VHDL sources."""
        return self.installation / VHDL_SUBDIR
