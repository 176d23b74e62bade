"""Draw import for TabX.

Draws and motions are produced outside TabX; this package defines the
provider interface and resolves returned draws into rounds.
"""

# TabX
# Copyright (C) 2025  TabX developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from tabx.draw.importer import (
    DrawImport,
    DrawImporter,
    check_draw_preconditions,
    import_draw,
)
from tabx.draw.provider import (
    DrawProvider,
    DrawRequest,
    JsonDrawProvider,
    MotionProvider,
    StaticMotionProvider,
    build_draw_request,
)

__all__ = [
    "DrawImport",
    "DrawImporter",
    "DrawProvider",
    "DrawRequest",
    "JsonDrawProvider",
    "MotionProvider",
    "StaticMotionProvider",
    "build_draw_request",
    "check_draw_preconditions",
    "import_draw",
]
