# sdfkit - dead-reckoning signed distance fields for binary masks
from .grid import RasterGrid, BinaryMask, GreyscaleImage, as_mask
from .boundary import is_immediate_interior, is_immediate_exterior, seed_mask
from .distance import (build_signed_field, signed_distance_field,
                       propagate, finalize,
                       BOUNDARY_VALUE, MAX_INTERIOR, MAX_EXTERIOR)
from .visualize import colorize_field, draw_zero_set
from .log import get_logger, configure_logging
