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

"""nvc-lattice - Lattice iCEcube2 simulation library builder for nvc.

This package compiles the VITAL simulation models shipped with a Lattice
iCEcube2 installation into an nvc work library under ~/.nvc/lib.

Note: this tool is deprecated. Use `nvc --install ise` instead.
"""

from ._version import __version__

__all__ = [
    "__version__",
]
