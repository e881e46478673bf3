import cv2, numpy as np


class RasterGrid:
    """Fixed-size 2-D pixel grid with bounds-checked access.

    Pixels live in a numpy array indexed ``data[y, x]``; the public accessors
    take ``(x, y)`` like the rest of the package.
    """
    dtype = None

    def __init__(self, data):
        data = np.asarray(data)
        if self.dtype is not None and data.dtype != self.dtype:
            data = data.astype(self.dtype)
        if data.ndim != 2:
            raise ValueError(f"grid data must be 2-D, got shape {data.shape}")
        if data.shape[0] <= 0 or data.shape[1] <= 0:
            raise ValueError(f"grid must have positive extent, got {data.shape[1]}x{data.shape[0]}")
        self.data = data

    @classmethod
    def blank(cls, width, height, fill=0):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid must have positive extent, got {width}x{height}")
        return cls(np.full((height, width), fill, dtype=cls.dtype))

    @classmethod
    def from_raw(cls, values, width, height, flip=False):
        """Build a grid from a flat row-major sequence.

        Args:
            values: width*height pixel values, first row first
            width, height: grid extent
            flip: store row y at row height-1-y (bottom-up scanline order)
        """
        values = np.asarray(values)
        if values.size != width * height:
            raise ValueError(f"expected {width * height} values for a {width}x{height} grid, got {values.size}")
        grid = cls.blank(width, height)
        rows = values.reshape(height, width)
        grid.data[...] = rows[::-1] if flip else rows
        return grid

    def width(self):
        return int(self.data.shape[1])

    def height(self):
        return int(self.data.shape[0])

    @property
    def shape(self):
        return self.data.shape

    def _check(self, x, y):
        if not (0 <= x < self.data.shape[1] and 0 <= y < self.data.shape[0]):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width()}x{self.height()} grid")

    def get(self, x, y):
        self._check(x, y)
        return self.data[y, x].item()

    def set(self, x, y, value):
        self._check(x, y)
        self.data[y, x] = value

    def flip_x(self):
        """Mirror columns in place."""
        self.data[...] = self.data[:, ::-1].copy()
        return self

    def flip_y(self):
        """Mirror rows in place."""
        self.data[...] = self.data[::-1, :].copy()
        return self

    def copy(self):
        return type(self)(self.data.copy())

    def __eq__(self, other):
        if not isinstance(other, RasterGrid):
            return NotImplemented
        return self.data.shape == other.data.shape and bool(np.array_equal(self.data, other.data))

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self.width()}x{self.height()})"


class BinaryMask(RasterGrid):
    """Foreground (True) / background (False) mask."""
    dtype = np.bool_

    def __init__(self, data):
        data = np.asarray(data)
        if data.dtype != np.bool_:
            data = data != 0
        super().__init__(data)

    @classmethod
    def from_image(cls, img, threshold=0):
        """Binarize a gray/BGR image: pixels brighter than threshold are foreground."""
        img = np.asarray(img)
        if img.ndim == 3:
            img = cv2.cvtColor(img, cv2.COLOR_BGR2GRAY)
        return cls(img > threshold)

    @classmethod
    def load(cls, path, threshold=127):
        img = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)
        if img is None:
            raise FileNotFoundError(f"Cannot read {path}")
        return cls.from_image(img, threshold)

    def to_image(self):
        """uint8 copy with foreground at 255."""
        return self.data.astype(np.uint8) * 255


class GreyscaleImage(RasterGrid):
    """8-bit single-channel image."""
    dtype = np.uint8

    @classmethod
    def load(cls, path):
        img = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)
        if img is None:
            raise FileNotFoundError(f"Cannot read {path}")
        return cls(img)

    def save(self, path):
        if not cv2.imwrite(str(path), self.data):
            raise IOError(f"Cannot save image to {path}")


def as_mask(obj):
    """Coerce an array, a BinaryMask or any {width, height, get} grid to a BinaryMask."""
    if isinstance(obj, BinaryMask):
        return obj
    if isinstance(obj, RasterGrid):
        return BinaryMask(obj.data)
    if hasattr(obj, "width") and hasattr(obj, "height") and hasattr(obj, "get"):
        w, h = obj.width(), obj.height()
        if w <= 0 or h <= 0:
            raise ValueError(f"grid must have positive extent, got {w}x{h}")
        data = np.array([[bool(obj.get(x, y)) for x in range(w)] for y in range(h)], dtype=bool)
        return BinaryMask(data)
    return BinaryMask(obj)
