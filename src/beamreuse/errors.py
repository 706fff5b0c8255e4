lic_ = """
   Copyright 2025 Richard Tjörnhammar

   Licensed under the Apache License, Version 2.0 (the "License");
   you may not use this file except in compliance with the License.
   You may obtain a copy of the License at

       http://www.apache.org/licenses/LICENSE-2.0

   Unless required by applicable law or agreed to in writing, software
   distributed under the License is distributed on an "AS IS" BASIS,
   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
   See the License for the specific language governing permissions and
   limitations under the License.
"""

__all__ = [
    "BeamReuseError",
    "InvalidSpacing",
    "InvalidLatticeType",
    "DegenerateLattice",
    "UnachievableColorCount",
    "AmbiguousAnchor",
]


class BeamReuseError(ValueError):
    """Base class for all invalid-input errors raised by beamreuse."""


class InvalidSpacing(BeamReuseError):
    """Zero or non-positive spacing where a strictly positive one is required."""


class InvalidLatticeType(BeamReuseError):
    """Unsupported lattice type or lattice geometry tag."""


class DegenerateLattice(BeamReuseError):
    """Too few distinct coordinate values to infer the beam spacing."""


class UnachievableColorCount(BeamReuseError):
    """Colour count that is not an integer in [1, grid_max**2] or has no reuse matrix."""


class AmbiguousAnchor(UserWarning):
    """Both an anchor coordinate and an anchor index were given."""
