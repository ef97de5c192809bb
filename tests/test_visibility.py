"""Tests for the diagonal engine."""

from polypart.visibility import blocks, diagonals, in_cone, is_diagonal, visibility_table


def test_l_shape_diagonals(l_shape):
    """Test the full diagonal set of the L-shaped hexagon."""
    contour = list(range(6))
    assert diagonals(l_shape, contour) == [(0, 2), (0, 3), (0, 4), (1, 3), (3, 5)]


def test_diagonal_through_vertex_is_rejected(l_shape):
    """Test that (2,0)-(0,2) is blocked by the notch vertex (1,1)."""
    assert not is_diagonal(l_shape, list(range(6)), 1, 5)


def test_diagonal_outside_polygon_is_rejected(l_shape):
    contour = list(range(6))
    assert not is_diagonal(l_shape, contour, 2, 4)
    assert not is_diagonal(l_shape, contour, 1, 4)


def test_adjacent_positions_are_not_diagonals(square):
    contour = [0, 1, 2, 3]
    assert not is_diagonal(square, contour, 0, 1)
    assert not is_diagonal(square, contour, 3, 0)
    assert not is_diagonal(square, contour, 2, 2)
    assert is_diagonal(square, contour, 0, 2)
    assert is_diagonal(square, contour, 3, 1)


def test_in_cone_reflex_apex():
    """Test the cone of the reflex corner of the L."""
    prev, apex, nxt = (2, 1), (1, 1), (1, 2)
    assert in_cone(prev, apex, nxt, (0, 0))
    assert in_cone(prev, apex, nxt, (0, 2))
    assert not in_cone(prev, apex, nxt, (2, 2))


def test_blocks_ignores_shared_endpoints():
    assert not blocks((0, 0), (1, 1), (1, 1), (2, 0))
    assert blocks((0, 0), (2, 2), (0, 2), (2, 0))
    assert blocks((0, 0), (2, 2), (1, 1), (3, 0))


def test_visibility_table(l_shape):
    table = visibility_table(l_shape, list(range(6)))
    assert table.shape == (6, 6)
    assert (table == table.T).all()
    assert table[0, 1] and table[5, 0]
    assert table[0, 3] and table[3, 5]
    assert not table[1, 5]
    assert table.sum() == 2 * (6 + 5)
