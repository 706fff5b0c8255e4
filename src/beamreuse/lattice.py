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
from .init import *

# -----------------------
# Regular lattice point generation
# -----------------------
def generate_regular_lattice(dx: float,
                             dy: float,
                             ds: float,
                             f_cond: Optional[Callable[[float, float], bool]] = None,
                             dx0: float = 0.0,
                             dy0: float = 0.0,
                             M: int = DEFAULT_LATTICE_BOUND,
                             N: Optional[int] = None) -> np.ndarray:
    desc_ = """
    Generate a regular lattice of points.

    dx, dy : element spacing on the x and y axis
    ds     : displacement along x between consecutive rows
    f_cond : f(x, y) -> bool, keep the element at (x, y) when true.
             Defaults to keeping every element.
    dx0, dy0 : origin of the lattice
    M      : elements generated per side of each row before filtering
    N      : rows generated per side before filtering, defaults to M

    Returns an (n, 2) array, rows outer and columns inner, both ascending.
    Each row window is re-centred on x = 0 so that sheared rows do not drift.
    """
    if dx <= 0 or dy <= 0:
        raise InvalidSpacing(f"Lattice spacings must be strictly positive, got dx={dx}, dy={dy}")
    if N is None:
        N = M
    if M < 0 or N < 0:
        raise ValueError(f"Lattice bounds must be non-negative, got M={M}, N={N}")

    n = np.arange(-N, N + 1)
    m = np.arange(-M, M + 1)
    # column shift per row, round half to even
    shift = np.rint(n * ds / dx)
    nn, mm = np.meshgrid(n, m, indexing="ij")
    mm = mm - shift[:, None]

    x = (mm * dx + nn * ds + dx0).ravel()
    y = (nn * dy + dy0).ravel()
    if f_cond is not None:
        keep = np.fromiter((bool(f_cond(xi, yi)) for xi, yi in zip(x, y)),
                           dtype=bool, count=x.size)
        x, y = x[keep], y[keep]
    return np.column_stack([x, y])

def generate_rect_lattice(spacing_x: float, spacing_y: float, f_cond=None, **kwargs) -> np.ndarray:
    """
    Rectangular lattice, different spacing along x and y.
    See generate_regular_lattice for f_cond and keyword arguments.
    """
    return generate_regular_lattice(spacing_x, spacing_y, 0.0, f_cond, **kwargs)

def generate_square_lattice(spacing: float, f_cond=None, **kwargs) -> np.ndarray:
    return generate_regular_lattice(spacing, spacing, 0.0, f_cond, **kwargs)

def generate_hex_lattice(spacing: float, f_cond=None, **kwargs) -> np.ndarray:
    """
    Hexagonal lattice with equal distance between neighbouring points.
    Rows are spacing*sqrt(3)/2 apart and every other row is shifted
    by half a period.
    """
    dx, dy, ds = spacing * np.array([1.0, math.sqrt(3.0) / 2.0, 0.5])
    return generate_regular_lattice(dx, dy, ds, f_cond, **kwargs)

# -----------------------
# Dispatcher: generate_lattice
# -----------------------
_GENERATORS = {
    "regular": generate_regular_lattice,
    "rect": generate_rect_lattice,
    "square": generate_square_lattice,
    "hex": generate_hex_lattice,
}

def generate_lattice(geometry: str, *spacing, **kwargs) -> np.ndarray:
    """
    geometry : one of 'regular' (dx, dy, ds), 'rect' (sx, sy),
               'square' (s) or 'hex' (s)
    Remaining positional and keyword arguments go to the selected generator.
    """
    try:
        generator = _GENERATORS[geometry]
    except KeyError:
        raise InvalidLatticeType(
            f"Unknown lattice geometry '{geometry}', expected one of {LATTICE_GEOMETRIES}"
        ) from None
    return generator(*spacing, **kwargs)
