"""Boundary classification used to seed the distance transform.

A pixel is an *immediate interior* pixel when it is foreground and touches a
background pixel through one of its four axis neighbours, and an *immediate
exterior* pixel in the mirrored case. The canvas edge never creates a
boundary on its own: off-canvas neighbours read as foreground for the
interior test and as background for the exterior test.

The predicates accept anything exposing ``width()``, ``height()`` and
``get(x, y)``.
"""
import numpy as np

_NEIGHBOURS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def _neighbour(mask, x, y, off_canvas):
    if 0 <= x < mask.width() and 0 <= y < mask.height():
        return bool(mask.get(x, y))
    return off_canvas


def is_immediate_interior(mask, x, y):
    if not mask.get(x, y):
        return False
    return any(not _neighbour(mask, x + dx, y + dy, True) for dx, dy in _NEIGHBOURS)


def is_immediate_exterior(mask, x, y):
    if mask.get(x, y):
        return False
    return any(_neighbour(mask, x + dx, y + dy, False) for dx, dy in _NEIGHBOURS)


def seed_mask(mask, symmetric=False):
    """Return the seed set of a whole mask as an HxW bool array.

    Input:
        mask: BinaryMask or 2-D bool array
        symmetric: also seed immediate exterior pixels
    Return:
        seeds: bool array, True where is_immediate_interior holds (or
               is_immediate_exterior, when symmetric)
    """
    m = np.asarray(getattr(mask, "data", mask), dtype=bool)

    inside = np.pad(m, 1, mode="constant", constant_values=True)
    bg_near = ~inside[:-2, 1:-1] | ~inside[2:, 1:-1] | ~inside[1:-1, :-2] | ~inside[1:-1, 2:]
    seeds = m & bg_near

    if symmetric:
        outside = np.pad(m, 1, mode="constant", constant_values=False)
        fg_near = outside[:-2, 1:-1] | outside[2:, 1:-1] | outside[1:-1, :-2] | outside[1:-1, 2:]
        seeds |= ~m & fg_near
    return seeds
