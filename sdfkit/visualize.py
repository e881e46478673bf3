import cv2
import numpy as np

from .distance import BOUNDARY_VALUE


def _field_array(field):
    f = np.asarray(getattr(field, "data", field))
    if f.dtype != np.uint8 or f.ndim != 2:
        raise ValueError(f"expected a 2-D uint8 field, got {f.dtype} {f.shape}")
    return f


def colorize_field(field, colormap=cv2.COLORMAP_JET):
    """BGR preview of a signed field (blue outside, red inside)."""
    return cv2.applyColorMap(_field_array(field), colormap)


def draw_zero_set(field, color=(0, 255, 0)):
    """Gray-to-BGR copy of the field with boundary pixels (value 128) painted."""
    f = _field_array(field)
    vis = cv2.cvtColor(f, cv2.COLOR_GRAY2BGR)
    vis[f == BOUNDARY_VALUE] = color
    return vis
