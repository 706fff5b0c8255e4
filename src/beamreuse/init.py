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
import math, time, logging, threading, warnings
from typing import List, Tuple, Dict, Optional, Callable, Sequence, Union
import numpy as np

from .errors import *

# -----------------------
# User-configurable parameters (tune these)
# -----------------------
#
# Reuse-matrix search radius. Candidates grow as grid_max**4,
# the default suits colour counts in the tens.
DEFAULT_GRID_MAX = 25
# Smallest batch of determinants computed by one cache extension
DEFAULT_MIN_BATCH_COLOURS = 10

# Colouring
DEFAULT_N_COLOURS = 4
DEFAULT_LATTICE_TYPE = "triangular"
DEFAULT_PRECISION_DIGITS = 7

# Lattice generation: columns per row (M) and rows (N) before filtering
DEFAULT_LATTICE_BOUND = 70

LATTICE_TYPES = ("square", "triangular")
LATTICE_GEOMETRIES = ("regular", "rect", "square", "hex")

# Shape transforms applied to candidate reuse matrices (rows are basis vectors)
SHAPE_TRANSFORMS = {
    "square": np.eye(2),
    "triangular": np.array([[1.0, 0.0],
                            [math.cos(math.radians(60.0)), math.sin(math.radians(60.0))]]),
}

# Maps normalised u-v beam positions onto an integer grid. For the triangular
# case the v axis points north-east with a 60 degree inclination.
NORMALISATION_SHEARS = {
    "square": np.eye(2),
    "triangular": np.array([[1.0, -0.5],
                            [0.0, 1.0]]),
}

# physical constants
speed_of_light = 299792458
