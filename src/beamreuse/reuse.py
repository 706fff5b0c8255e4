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
Reuse (colouring) matrices: 2x2 integer lattice generating matrices whose
determinant equals the number of colours. Beams whose integer grid index
differ by a vector of the generated sublattice share a colour.
"""
from .init import *

logger = logging.getLogger(__name__)

def check_lattice_type(lattice_type: str) -> str:
    if lattice_type not in LATTICE_TYPES:
        raise InvalidLatticeType(
            f"The specified lattice type ({lattice_type}) is not recognized, "
            f"it should be either 'triangular' or 'square'"
        )
    return lattice_type

def check_colour_count(n_colours: int, grid_max: int = DEFAULT_GRID_MAX) -> int:
    if int(n_colours) != n_colours:
        raise UnachievableColorCount(f"The number of colours must be an integer, got {n_colours}")
    if n_colours < 1 or n_colours > grid_max**2:
        raise UnachievableColorCount(
            f"Cannot generate {n_colours} colours, the count must lie in [1, {grid_max**2}] "
            f"for grid_max={grid_max}"
        )
    return int(n_colours)

def _norm2(v):
    return np.sum(v * v, axis=-1)

# -----------------------
# Brute-force search
# -----------------------
def search_reuse_matrices(lattice_type: str,
                          max_colours: int,
                          grid_max: int = DEFAULT_GRID_MAX) -> List[Optional[np.ndarray]]:
    desc_ = """
    Compute the best lattice generating matrix for every colour count
    (determinant) from 1 up to max_colours.

    All candidate matrices [[x1, y1], [x2, y2]] with x1, y1, y2 in [0, grid_max]
    and x2 in [-grid_max, grid_max] are scored at once. Candidates with long
    basis vectors relative to their determinant, or with basis vectors far from
    orthogonal, are pruned. The survivors are mapped through the lattice shape
    and ranked by co-channel reuse distance (larger first), then by Frobenius
    norm (smaller first), then by enumeration order.

    Returns a list whose entry k-1 is the read-only 2x2 integer matrix (the
    transpose of the winning candidate) for k colours, or None when no candidate
    survived the pruning for that determinant.
    """
    check_lattice_type(lattice_type)
    check_colour_count(max_colours, grid_max)
    shape = SHAPE_TRANSFORMS[lattice_type]

    t0 = time.time()
    # no entry may exceed ceil(sqrt(t_det) + 3), so the scan window only
    # depends on the largest reachable determinant
    reach = min(grid_max, int(math.ceil(math.sqrt(min(max_colours, grid_max**2)) + 3)))
    pos = np.arange(0, reach + 1)
    full = np.arange(-reach, reach + 1)
    # enumeration order x1, y1, x2, y2 with y2 running fastest
    x1, y1, x2, y2 = (a.ravel() for a in np.meshgrid(pos, pos, full, pos, indexing="ij"))

    t_det = x1 * y2 - y1 * x2
    largest = np.maximum(np.maximum(np.abs(x1), np.abs(y1)), np.maximum(np.abs(x2), np.abs(y2)))
    keep = (t_det >= 1) & (t_det <= max_colours) & (t_det <= grid_max**2)
    keep &= largest <= np.ceil(np.sqrt(np.maximum(t_det, 0)) + 3)
    x1, y1, x2, y2, t_det = x1[keep], y1[keep], x2[keep], y2[keep], t_det[keep]

    # too acute or too obtuse bases give elongated reuse cells
    angle = np.abs(np.arctan2(y1, x1) - np.arctan2(y2, x2))
    keep = np.abs(np.pi / 2 - angle) <= np.pi / 4
    x1, y1, x2, y2, t_det = x1[keep], y1[keep], x2[keep], y2[keep], t_det[keep]

    mats = np.stack([np.stack([x1, y1], axis=-1),
                     np.stack([x2, y2], axis=-1)], axis=1)       # (k,2,2)
    dmat = mats @ shape
    r0, r1 = dmat[:, 0, :], dmat[:, 1, :]
    # minimum squared distance is one of the basis vectors or their sum or difference
    dmin = np.rint(np.min(np.stack([_norm2(r0), _norm2(r1),
                                    _norm2(r0 + r1), _norm2(r1 - r0)]), axis=0)).astype(int)
    frobe = np.rint(np.sum(dmat * dmat, axis=(1, 2))).astype(int)

    # lexsort uses the last key as primary
    order = np.lexsort((np.arange(t_det.size), frobe, -dmin, t_det))
    sorted_det = t_det[order]
    first = np.ones(order.size, dtype=bool)
    first[1:] = sorted_det[1:] != sorted_det[:-1]

    table: List[Optional[np.ndarray]] = [None] * max_colours
    for w in order[first]:
        F = np.ascontiguousarray(mats[w].T)
        F.flags.writeable = False
        table[t_det[w] - 1] = F

    missing = [k + 1 for k, F in enumerate(table) if F is None]
    if missing:
        logger.warning("No %s reuse matrix found for colour counts %s with grid_max=%d",
                       lattice_type, missing, grid_max)
    logger.info("Computed %s reuse matrices up to %d colours in %.2f s",
                lattice_type, max_colours, time.time() - t0)
    return table

# -----------------------
# Memoised table
# -----------------------
class ReuseMatrixCache(object):
    """
    Growable table of reuse matrices, one per lattice type, indexed by colour
    count. Entries are computed once and never recomputed; the table only
    shrinks through reset(). Each lattice type is guarded by its own lock so
    that an extension runs the whole search exclusively, while counts already
    resident are returned without locking.
    """
    def __init__(self, grid_max: int = DEFAULT_GRID_MAX,
                 min_batch: int = DEFAULT_MIN_BATCH_COLOURS):
        if grid_max < 1:
            raise ValueError(f"grid_max must be positive, got {grid_max}")
        self.grid_max = int(grid_max)
        self.min_batch = int(min_batch)
        self.tables_: Dict[str, List[Optional[np.ndarray]]] = {t: [] for t in LATTICE_TYPES}
        self.locks_ = {t: threading.Lock() for t in LATTICE_TYPES}

    def populated(self, lattice_type: str) -> int:
        """Number of colour counts already resident for lattice_type."""
        return len(self.tables_[check_lattice_type(lattice_type)])

    def get_or_compute(self, lattice_type: str, n_colours: int) -> np.ndarray:
        check_lattice_type(lattice_type)
        n_colours = check_colour_count(n_colours, self.grid_max)
        # reset() swaps in a fresh list, so a table read here stays intact
        table = self.tables_[lattice_type]
        if n_colours > len(table):
            with self.locks_[lattice_type]:
                table = self.tables_[lattice_type]
                if n_colours > len(table):
                    self._extend(lattice_type, max(n_colours, self.min_batch))
                F = table[n_colours - 1]
        else:
            logger.debug("Reuse matrix cache hit: %s, %d colours", lattice_type, n_colours)
            F = table[n_colours - 1]
        if F is None:
            raise UnachievableColorCount(
                f"No {lattice_type} reuse matrix with {n_colours} colours exists "
                f"within grid_max={self.grid_max}"
            )
        return F

    def _extend(self, lattice_type: str, max_colours: int):
        # caller holds the lattice type lock
        table = self.tables_[lattice_type]
        max_colours = min(max_colours, self.grid_max**2)
        logger.debug("Extending %s reuse matrix cache from %d to %d colours",
                     lattice_type, len(table), max_colours)
        found = search_reuse_matrices(lattice_type, max_colours, self.grid_max)
        table.extend(found[len(table):])

    def preseed(self, max_colours: int, lattice_types: Sequence[str] = LATTICE_TYPES):
        """Populate the table ahead of time to amortise the search."""
        check_colour_count(max_colours, self.grid_max)
        for lattice_type in lattice_types:
            check_lattice_type(lattice_type)
            with self.locks_[lattice_type]:
                if max_colours > len(self.tables_[lattice_type]):
                    self._extend(lattice_type, max_colours)
        return self

    def reset(self, lattice_type: Optional[str] = None):
        for t in (LATTICE_TYPES if lattice_type is None else (check_lattice_type(lattice_type),)):
            with self.locks_[t]:
                self.tables_[t] = []

# Shared instance for callers that do not pass their own cache
DEFAULT_CACHE = ReuseMatrixCache()
