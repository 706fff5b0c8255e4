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
"""
Frequency colouring of beam lattices.

References:
 [1] C. de Almeida, R. Palazzo, "On the frequency allocation for mobile radio
     telephone systems", Proc. 6th Int. Symp. on Personal, Indoor and Mobile
     Radio Communications, 1995, vol. 1, pp. 96-99.
 [2] P. Angeletti, "Simple implementation of vectorial modulo operation based
     on fundamental parallelepiped", Electronics Letters, vol. 48, no. 3,
     pp. 159-160, 2012. doi: 10.1049/el.2011.3667
"""
from .init import *
from .reuse import ReuseMatrixCache, DEFAULT_CACHE, check_lattice_type, check_colour_count

logger = logging.getLogger(__name__)

def reuse_matrix(lattice_type: str = DEFAULT_LATTICE_TYPE,
                 n_colours: int = DEFAULT_N_COLOURS,
                 cache: Optional[ReuseMatrixCache] = None) -> np.ndarray:
    """
    Reuse matrix for n_colours on the given lattice type, computed on demand
    and memoised in cache (the shared DEFAULT_CACHE when None).
    """
    cache = DEFAULT_CACHE if cache is None else cache
    return cache.get_or_compute(lattice_type, n_colours)

def min_axis_spacing(values: np.ndarray, precision_digits: int = DEFAULT_PRECISION_DIGITS) -> float:
    """Smallest gap between the distinct values after rounding to precision_digits."""
    uniq = np.unique(np.round(np.asarray(values, dtype=float), precision_digits))
    if uniq.size < 2:
        raise DegenerateLattice(
            f"Need at least two distinct coordinate values to infer the beam spacing, got {uniq.size}"
        )
    return float(np.min(np.diff(uniq)))

def grid_indices(beam_centers: np.ndarray, spacing: Tuple[float, float], shear: np.ndarray) -> np.ndarray:
    """Map u-v beam centers onto their integer grid indices, (n,2) int array."""
    normalised = np.asarray(beam_centers, dtype=float) / np.asarray(spacing, dtype=float)
    return np.rint(normalised @ shear.T).astype(int)

def fold_indices(indices: np.ndarray, F: np.ndarray,
                 precision_digits: int = DEFAULT_PRECISION_DIGITS) -> np.ndarray:
    desc_ = """
    Vectorial modulo of integer grid indices by the lattice generated by the
    columns of F, see [2]. Every index is reduced to its representative in
    the fundamental parallelepiped of F. Rounding before the floor keeps
    indices lying on a cell boundary from dropping into the previous cell.
    """
    v = np.asarray(indices)
    cell = np.floor(np.round(v @ np.linalg.inv(F).T, precision_digits))
    return np.rint(v - cell @ F.T).astype(int)

def _resolve_anchor(beam_centers: np.ndarray, anchor_coord, anchor_index) -> Optional[np.ndarray]:
    if anchor_coord is not None:
        if anchor_index is not None:
            warnings.warn("Both anchor_index and anchor_coord were given, disregarding anchor_index",
                          AmbiguousAnchor, stacklevel=3)
        return np.asarray(anchor_coord, dtype=float).reshape(2)
    if anchor_index is not None:
        n_beams = beam_centers.shape[0]
        if not -n_beams <= anchor_index < n_beams:
            raise IndexError(f"anchor_index {anchor_index} out of range for {n_beams} beams")
        return beam_centers[anchor_index]
    return None

def assign_colors(beam_centers,
                  n_colours: int = DEFAULT_N_COLOURS,
                  lattice_type: str = DEFAULT_LATTICE_TYPE,
                  precision_digits: int = DEFAULT_PRECISION_DIGITS,
                  anchor_coord=None,
                  anchor_index: Optional[int] = None,
                  cache: Optional[ReuseMatrixCache] = None) -> np.ndarray:
    desc_ = """
    Colour breakdown for a lattice of beam centers.

    beam_centers     : sequence of (u, v) pairs or an (n,2) array
    n_colours        : number of colours to divide the lattice in
    lattice_type     : 'triangular' or 'square'
    precision_digits : digits kept when inferring the spacing and when flooring
    anchor_coord     : (u, v) whose colour class becomes colour 1
    anchor_index     : beam whose colour class becomes colour 1,
                       ignored with a warning when anchor_coord is also given
    cache            : ReuseMatrixCache to draw matrices from, DEFAULT_CACHE if None

    Returns an int array with one colour in 1..n_colours per beam, in input
    order. Colours are numbered by first occurrence in the input, after the
    anchor class when an anchor is given.
    """
    check_lattice_type(lattice_type)
    cache = DEFAULT_CACHE if cache is None else cache
    n_colours = check_colour_count(n_colours, cache.grid_max)

    centers = np.asarray(beam_centers, dtype=float).reshape(-1, 2)
    n_beams = centers.shape[0]
    anchor = _resolve_anchor(centers, anchor_coord, anchor_index)

    if n_colours == 1:
        return np.ones(n_beams, dtype=int)

    minU_dist = min_axis_spacing(centers[:, 0], precision_digits)
    minV_dist = min_axis_spacing(centers[:, 1], precision_digits)
    if lattice_type == "triangular":
        # neighbouring rows are offset by half a period
        beamU_spacing = 2 * minU_dist
    else:
        beamU_spacing = minU_dist
    shear = NORMALISATION_SHEARS[lattice_type]
    F = cache.get_or_compute(lattice_type, n_colours)
    logger.debug("Colouring %d beams, %s lattice, spacing (%g, %g), reuse matrix %s",
                 n_beams, lattice_type, beamU_spacing, minV_dist, F.tolist())

    spacing = (beamU_spacing, minV_dist)
    folded = fold_indices(grid_indices(centers, spacing, shear), F, precision_digits)

    registered: Dict[Tuple[int, int], int] = {}
    if anchor is not None:
        anchor_vec = fold_indices(grid_indices(anchor[None, :], spacing, shear), F, precision_digits)[0]
        registered[tuple(anchor_vec.tolist())] = 1

    colours = np.empty(n_beams, dtype=int)
    for n, vec in enumerate(folded.tolist()):
        colours[n] = registered.setdefault(tuple(vec), len(registered) + 1)
    return colours

generate_colors = assign_colors


if __name__ == '__main__' :
    from .lattice import generate_hex_lattice
    from .visualise import plot_beam_colours

    logging.basicConfig(level=logging.INFO)
    beams = generate_hex_lattice(0.01, lambda u, v: u*u + v*v <= 0.08**2, M=20)
    colours = assign_colors(beams, 4, lattice_type="triangular")
    print(len(beams), "beams,", np.bincount(colours)[1:], "beams per colour")
    plot_beam_colours(beams, colours, "beam_colours.png", title="4-colour triangular reuse")
