"""Dead-reckoning signed distance transform.

Two raster sweeps propagate, for every pixel, a reference to the boundary
pixel currently believed nearest. Whenever a neighbour offers a shorter path
the reference is adopted and the distance is recomputed as the exact
Euclidean distance to that point, so the result is free of the anisotropy
of plain chamfer transforms while still costing one forward and one
backward pass over a 3x3 window.
"""
import math
import cv2, numpy as np

from .boundary import seed_mask
from .grid import GreyscaleImage, as_mask
from .log import get_logger

logger = get_logger("distance")

BOUNDARY_VALUE = 128
MAX_INTERIOR = 127
MAX_EXTERIOR = 128
QUANTIZED_INFINITY = 255

SQRT2 = math.sqrt(2.0)

# (dx, dy, weight); already-visited neighbours of each sweep
FORWARD_WINDOW = ((-1, -1, SQRT2), (0, -1, 1.0), (1, -1, SQRT2), (-1, 0, 1.0))
BACKWARD_WINDOW = ((1, 1, SQRT2), (0, 1, 1.0), (-1, 1, SQRT2), (1, 0, 1.0))


def _sweep(dist, near, rows, cols, window, quantize):
    h, w = len(dist), len(dist[0])
    for y in rows:
        drow, nrow = dist[y], near[y]
        for x in cols:
            for dx, dy, weight in window:
                nx, ny = x + dx, y + dy
                if not (0 <= nx < w and 0 <= ny < h):
                    continue
                ref = near[ny][nx]
                if ref is None:
                    continue
                if dist[ny][nx] + weight < drow[x]:
                    nrow[x] = ref
                    d = math.hypot(x - ref[0], y - ref[1])
                    drow[x] = min(int(d), QUANTIZED_INFINITY) if quantize else d


def propagate(seeds, cover_edges=False, quantize=False):
    """Run seeding plus the forward and backward sweeps.

    Input:
        seeds: HxW bool array, True on distance-0 pixels
        cover_edges: if False, keep the classic sweep ranges: the forward
                     pass skips row 0 and both outer columns, the backward
                     pass skips the last row and both outer columns. If True
                     every pixel is visited in both passes and off-canvas
                     neighbours are ignored.
        quantize: store intermediate distances as truncated integers in
                  [0, 255] with 255 as "unset", like an 8-bit channel.
                  Otherwise float64 with inf as "unset".
    Return:
        distances: float64 HxW array (inf where no seed was reached)
        nearest: int32 HxWx2 array of (x, y) references, (-1, -1) where unset
    """
    seeds = np.asarray(seeds, dtype=bool)
    if seeds.ndim != 2:
        raise ValueError(f"seeds must be 2-D, got shape {seeds.shape}")
    h, w = seeds.shape
    if h <= 0 or w <= 0:
        raise ValueError(f"grid must have positive extent, got {w}x{h}")

    unset = float(QUANTIZED_INFINITY) if quantize else math.inf
    flags = seeds.tolist()
    dist = [[0.0 if s else unset for s in row] for row in flags]
    near = [[(x, y) if s else None for x, s in enumerate(row)] for y, row in enumerate(flags)]

    if cover_edges:
        fwd_rows, fwd_cols = range(h), range(w)
        bwd_rows, bwd_cols = range(h - 1, -1, -1), range(w - 1, -1, -1)
    else:
        fwd_rows, fwd_cols = range(1, h), range(1, w - 1)
        bwd_rows, bwd_cols = range(h - 2, -1, -1), range(w - 2, 0, -1)

    _sweep(dist, near, fwd_rows, fwd_cols, FORWARD_WINDOW, quantize)
    logger.debug("forward pass done (%dx%d)", w, h)
    _sweep(dist, near, bwd_rows, bwd_cols, BACKWARD_WINDOW, quantize)
    logger.debug("backward pass done (%dx%d)", w, h)

    distances = np.array(dist, dtype=np.float64)
    if quantize:
        # unreached pixels still hold the 8-bit sentinel
        unreached = np.array([[r is None for r in row] for row in near], dtype=bool)
        distances[unreached] = math.inf
    nearest = np.array([[r if r is not None else (-1, -1) for r in row] for row in near],
                       dtype=np.int32).reshape(h, w, 2)
    return distances, nearest


def finalize(mask, distances):
    """Map distance magnitudes to the 8-bit signed encoding.

    Foreground pixels become 128 + min(d, 127), background pixels
    128 - min(d, 128); d is truncated toward zero first.
    """
    m = np.asarray(getattr(mask, "data", mask), dtype=bool)
    distances = np.asarray(distances, dtype=np.float64)
    if m.shape != distances.shape:
        raise ValueError(f"mask shape {m.shape} must match distance shape {distances.shape}")
    mag = np.floor(np.minimum(distances, float(MAX_EXTERIOR)))
    inside = BOUNDARY_VALUE + np.minimum(mag, MAX_INTERIOR)
    outside = BOUNDARY_VALUE - mag
    return np.where(m, inside, outside).astype(np.uint8)


def build_signed_field(mask, symmetric=False, cover_edges=False, quantize=False):
    """Build the 8-bit signed distance field of a binary mask.

    Input:
        mask: BinaryMask, 2-D array, or any grid with width/height/get
        symmetric: seed immediate exterior pixels as well as interior ones
        cover_edges, quantize: see propagate()
    Return:
        GreyscaleImage where 128 marks the boundary, larger values lie
        inside and smaller values outside.
    Note:
        Pixels no seed reaches keep an infinite distance and saturate to
        255 inside or 0 outside.
    """
    mask = as_mask(mask)
    seeds = seed_mask(mask, symmetric)
    logger.debug("building field for %dx%d mask, %d seeds (symmetric=%s)",
                 mask.width(), mask.height(), int(seeds.sum()), symmetric)
    distances, _ = propagate(seeds, cover_edges=cover_edges, quantize=quantize)
    return GreyscaleImage(finalize(mask, distances))


def signed_distance_field(img, symmetric=False, threshold=0, **kwargs):
    """numpy in, numpy out: binarize a gray/BGR image and return the uint8 field.

    Pixels brighter than ``threshold`` are foreground.
    """
    img = np.asarray(img)
    if img.ndim == 3:
        img = cv2.cvtColor(img, cv2.COLOR_BGR2GRAY)
    if img.ndim != 2:
        raise ValueError(f"expected a 2-D image, got shape {img.shape}")
    return build_signed_field(img > threshold, symmetric=symmetric, **kwargs).data
