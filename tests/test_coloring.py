import math
import warnings

import numpy as np
import numpy.testing as npt
import pytest

from beamreuse.coloring import (
    assign_colors,
    generate_colors,
    reuse_matrix,
    min_axis_spacing,
    fold_indices,
)
from beamreuse.errors import (
    AmbiguousAnchor,
    DegenerateLattice,
    InvalidLatticeType,
    UnachievableColorCount,
)
from beamreuse.lattice import generate_hex_lattice, generate_square_lattice

from conftest import min_same_colour_distance2


@pytest.fixture(scope="module")
def hex_beams():
    return generate_hex_lattice(1.0, M=6)


@pytest.fixture(scope="module")
def square_window():
    """8 x 8 square lattice with spacing 0.5."""
    return generate_square_lattice(0.5, lambda x, y: 0 <= x < 4 and 0 <= y < 4, M=10)


class TestSingleColour:

    def test_all_ones(self, hex_beams, cache):
        colours = assign_colors(hex_beams, 1, cache=cache)
        assert colours.shape == (len(hex_beams),)
        assert np.all(colours == 1)

    @pytest.mark.parametrize("lattice_type", ["square", "triangular"])
    def test_single_beam(self, lattice_type, cache):
        npt.assert_array_equal(assign_colors([(0.1, 0.2)], 1, lattice_type, cache=cache), [1])

    def test_no_beams(self, cache):
        assert assign_colors([], 1, cache=cache).shape == (0,)


class TestSquareLattice:

    def test_four_equal_classes(self, square_window, cache):
        assert len(square_window) == 64
        colours = assign_colors(square_window, 4, "square", cache=cache)
        npt.assert_array_equal(np.bincount(colours)[1:], [16, 16, 16, 16])

    def test_same_colour_separation(self, square_window, cache):
        colours = assign_colors(square_window, 4, "square", cache=cache)
        assert min_same_colour_distance2(square_window, colours) >= (2 * 0.5)**2 - 1e-9

    @pytest.mark.parametrize("n", [2, 3, 5, 9])
    def test_uses_every_colour(self, n, cache):
        beams = generate_square_lattice(1.0, M=6)
        colours = assign_colors(beams, n, "square", cache=cache)
        assert set(colours.tolist()) == set(range(1, n + 1))


class TestTriangularLattice:

    @pytest.mark.parametrize("n", [3, 4, 7])
    def test_reuse_distance(self, hex_beams, n, cache):
        colours = assign_colors(hex_beams, n, "triangular", cache=cache)
        assert set(colours.tolist()) == set(range(1, n + 1))
        assert min_same_colour_distance2(hex_beams, colours) >= n - 1e-6

    def test_default_is_triangular_four_colours(self, hex_beams, cache):
        npt.assert_array_equal(assign_colors(hex_beams, cache=cache),
                               assign_colors(hex_beams, 4, "triangular", cache=cache))

    def test_scale_invariant(self, hex_beams, cache):
        a = assign_colors(hex_beams, 7, cache=cache)
        b = assign_colors(hex_beams * 0.013, 7, cache=cache)
        npt.assert_array_equal(a, b)

    def test_accepts_tuples(self, hex_beams, cache):
        beams = [tuple(p) for p in hex_beams]
        npt.assert_array_equal(assign_colors(beams, 3, cache=cache),
                               assign_colors(hex_beams, 3, cache=cache))


class TestFolding:

    def test_first_occurrence_numbering(self, hex_beams, cache):
        colours = assign_colors(hex_beams, 7, cache=cache)
        assert colours[0] == 1
        assert list(dict.fromkeys(colours.tolist())) == list(range(1, 8))

    def test_triangular_translation_periodic(self, hex_beams, cache):
        F = reuse_matrix("triangular", 7, cache=cache)
        for a, b in (F[:, 0], F[:, 1], F[:, 0] - 2 * F[:, 1]):
            # integer grid step (a, b) in u-v for unit hex spacing
            shift = np.array([a + b / 2.0, b * math.sqrt(3) / 2.0])
            npt.assert_array_equal(assign_colors(hex_beams + shift, 7, cache=cache),
                                   assign_colors(hex_beams, 7, cache=cache))

    def test_square_translation_periodic(self, cache):
        beams = generate_square_lattice(2.0, M=4)
        F = reuse_matrix("square", 5, cache=cache)
        shift = 2.0 * (3 * F[:, 0] - F[:, 1])
        npt.assert_array_equal(assign_colors(beams + shift, 5, "square", cache=cache),
                               assign_colors(beams, 5, "square", cache=cache))

    def test_fold_indices_reduces_modulo_lattice(self, cache):
        F = reuse_matrix("square", 5, cache=cache)
        v = np.array([[0, 0], [1, 2], [-3, 4], [7, -1]])
        shifted = v + np.array([2, -1]) @ F.T
        npt.assert_array_equal(fold_indices(v, F), fold_indices(shifted, F))
        assert len({tuple(r) for r in fold_indices(np.array([[i, j] for i in range(5) for j in range(5)]), F)}) == 5


class TestAnchor:

    def test_anchor_index_gets_first_colour(self, hex_beams, cache):
        colours = assign_colors(hex_beams, 4, anchor_index=10, cache=cache)
        assert colours[10] == 1
        assert set(colours.tolist()) == {1, 2, 3, 4}

    def test_anchor_coord_matches_index(self, hex_beams, cache):
        npt.assert_array_equal(assign_colors(hex_beams, 4, anchor_coord=hex_beams[10], cache=cache),
                               assign_colors(hex_beams, 4, anchor_index=10, cache=cache))

    def test_anchor_on_first_beam_is_default(self, hex_beams, cache):
        npt.assert_array_equal(assign_colors(hex_beams, 7, anchor_index=0, cache=cache),
                               assign_colors(hex_beams, 7, cache=cache))

    def test_same_partition_as_unanchored(self, hex_beams, cache):
        a = assign_colors(hex_beams, 7, cache=cache)
        b = assign_colors(hex_beams, 7, anchor_index=25, cache=cache)
        pairs = set(zip(a.tolist(), b.tolist()))
        assert len(pairs) == 7

    def test_both_anchors_warns_and_coord_wins(self, hex_beams, cache):
        with pytest.warns(AmbiguousAnchor):
            colours = assign_colors(hex_beams, 4, anchor_coord=hex_beams[5], anchor_index=9, cache=cache)
        assert colours[5] == 1

    def test_single_anchor_does_not_warn(self, hex_beams, cache):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assign_colors(hex_beams, 4, anchor_index=3, cache=cache)

    def test_anchor_index_out_of_range(self, hex_beams, cache):
        with pytest.raises(IndexError):
            assign_colors(hex_beams, 4, anchor_index=len(hex_beams), cache=cache)


class TestErrors:

    @pytest.mark.parametrize("n", [1, 4])
    def test_invalid_lattice_type(self, hex_beams, n, cache):
        with pytest.raises(InvalidLatticeType):
            assign_colors(hex_beams, n, lattice_type="hexagonal", cache=cache)

    @pytest.mark.parametrize("n", [0, -3, 2.5])
    def test_invalid_colour_count(self, hex_beams, n, cache):
        with pytest.raises(UnachievableColorCount):
            assign_colors(hex_beams, n, cache=cache)

    def test_colour_count_beyond_search_grid(self, hex_beams, cache):
        with pytest.raises(UnachievableColorCount):
            assign_colors(hex_beams, cache.grid_max**2 + 1, cache=cache)

    def test_single_row_is_degenerate(self, cache):
        with pytest.raises(DegenerateLattice):
            assign_colors([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)], 4, "square", cache=cache)

    def test_min_axis_spacing(self):
        assert min_axis_spacing([0.0, 0.3, 0.1, 0.3 + 1e-9]) == pytest.approx(0.1)
        with pytest.raises(DegenerateLattice):
            min_axis_spacing([1.0, 1.0 + 1e-9])


def test_generate_colors_alias():
    assert generate_colors is assign_colors


def test_reuse_matrix_default_cache():
    F = reuse_matrix("square", 4)
    assert round(np.linalg.det(F)) == 4
    assert reuse_matrix("square", 4) is F
