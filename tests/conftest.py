import numpy as np
import pytest

from beamreuse.reuse import ReuseMatrixCache


@pytest.fixture(scope="session")
def cache():
    """Reuse matrix cache shared by the tests, seeded up to 30 colours."""
    return ReuseMatrixCache().preseed(30)


def reuse_distance2(F, lattice_type):
    """Squared co-channel distance of the sublattice generated by the columns of F."""
    from beamreuse.init import SHAPE_TRANSFORMS
    d = np.asarray(F).T @ SHAPE_TRANSFORMS[lattice_type]
    vecs = [d[0], d[1], d[0] + d[1], d[1] - d[0]]
    return min(float(v @ v) for v in vecs)


def min_same_colour_distance2(beams, colours):
    beams = np.asarray(beams)
    best = np.inf
    for c in np.unique(colours):
        pts = beams[colours == c]
        if len(pts) < 2:
            continue
        diff = pts[:, None, :] - pts[None, :, :]
        d2 = np.sum(diff**2, axis=-1)
        np.fill_diagonal(d2, np.inf)
        best = min(best, d2.min())
    return best
