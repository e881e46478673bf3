import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
from sdfkit.grid import BinaryMask
from sdfkit.boundary import is_immediate_interior, is_immediate_exterior, seed_mask


class _ListGrid:
    """Minimal grid exposing only width/height/get."""
    def __init__(self, rows):
        self.rows = rows
    def width(self):
        return len(self.rows[0])
    def height(self):
        return len(self.rows)
    def get(self, x, y):
        return self.rows[y][x]


def _single_pixel(w=5, h=5, x=2, y=2):
    m = np.zeros((h, w), bool)
    m[y, x] = True
    return BinaryMask(m)


def test_single_pixel_classification():
    mask = _single_pixel()
    assert is_immediate_interior(mask, 2, 2)
    assert not is_immediate_exterior(mask, 2, 2)
    for x, y in [(1, 2), (3, 2), (2, 1), (2, 3)]:
        assert is_immediate_exterior(mask, x, y)
        assert not is_immediate_interior(mask, x, y)
    # diagonal neighbours do not count
    for x, y in [(1, 1), (3, 3), (1, 3), (3, 1)]:
        assert not is_immediate_exterior(mask, x, y)


def test_canvas_edge_never_creates_boundary():
    full = BinaryMask(np.ones((8, 8), bool))
    empty = BinaryMask(np.zeros((8, 8), bool))
    for y in range(8):
        for x in range(8):
            assert not is_immediate_interior(full, x, y)
            assert not is_immediate_exterior(full, x, y)
            assert not is_immediate_interior(empty, x, y)
            assert not is_immediate_exterior(empty, x, y)
    assert not seed_mask(full, symmetric=True).any()
    assert not seed_mask(empty, symmetric=True).any()


def test_edge_pixel_next_to_background():
    m = np.zeros((3, 3), bool)
    m[:, 0] = True
    mask = BinaryMask(m)
    # left neighbour is off-canvas (foreground), right neighbour is background
    assert is_immediate_interior(mask, 0, 1)
    assert is_immediate_exterior(mask, 1, 1)
    assert not is_immediate_exterior(mask, 2, 1)


def test_predicates_exclusive_and_match_seed_mask():
    rng = np.random.default_rng(0)
    m = rng.random((9, 12)) > 0.6
    mask = BinaryMask(m)
    interior = seed_mask(mask, symmetric=False)
    both = seed_mask(mask, symmetric=True)
    for y in range(mask.height()):
        for x in range(mask.width()):
            i = is_immediate_interior(mask, x, y)
            e = is_immediate_exterior(mask, x, y)
            assert not (i and e)
            assert interior[y, x] == i
            assert both[y, x] == (i or e)


def test_predicates_accept_any_grid():
    g = _ListGrid([[0, 0, 0],
                   [0, 1, 1],
                   [0, 1, 1]])
    assert is_immediate_interior(g, 1, 1)
    assert not is_immediate_interior(g, 2, 2)
    assert is_immediate_exterior(g, 0, 1)
    assert not is_immediate_exterior(g, 0, 0)
