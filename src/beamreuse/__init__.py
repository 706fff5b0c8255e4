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
from .errors import *
from .lattice import (generate_lattice, generate_regular_lattice, generate_rect_lattice,
                      generate_square_lattice, generate_hex_lattice)
from .reuse import ReuseMatrixCache, DEFAULT_CACHE, search_reuse_matrices
from .coloring import assign_colors, generate_colors, reuse_matrix
