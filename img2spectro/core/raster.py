"""Luma raster buffer and the geometric operations applied before synthesis."""

import numpy as np

from img2spectro.core.luma import rgba_to_luma, as_byte_array
from img2spectro.utils.helpers import InvalidDimension


class RasterBuffer:
    """
    Row-major luma plane with its width and height.

    Every operation replaces the buffer in place and keeps
    len(luma) == width * height.
    """

    def __init__(self, luma, width: int, height: int):
        self.width = 0
        self.height = 0
        self.luma = np.zeros(0, dtype=np.uint8)
        self._replace(as_byte_array(luma).copy(), width, height)

    @classmethod
    def from_rgba(cls, data, width: int, height: int) -> "RasterBuffer":
        """Build a raster from RGBA bytes via luma conversion."""
        return cls(rgba_to_luma(data, width, height), width, height)

    def _replace(self, luma: np.ndarray, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise InvalidDimension(f"Negative raster size: {width}x{height}")
        if luma.size != width * height:
            raise InvalidDimension(
                f"Raster holds {luma.size} values, expected {width}x{height} = {width * height}"
            )
        self.luma = luma
        self.width = width
        self.height = height

    def rows(self) -> np.ndarray:
        """Return the buffer as a (height, width) view."""
        return self.luma.reshape(self.height, self.width)

    def copy(self) -> "RasterBuffer":
        return RasterBuffer(self.luma, self.width, self.height)

    def pad_top(self, n_rows: int) -> None:
        """
        Prepend n_rows of white (255) rows.

        Raises:
            InvalidDimension: If n_rows is negative
        """
        if n_rows < 0:
            raise InvalidDimension(f"Cannot pad by a negative row count: {n_rows}")

        padding = np.full(n_rows * self.width, 255, dtype=np.uint8)
        self._replace(np.concatenate([padding, self.luma]), self.width, self.height + n_rows)

    def invert(self) -> None:
        """Replace each value v with 255 - v."""
        self.luma = 255 - self.luma

    def rotate90_clockwise(self) -> None:
        """
        Rotate the raster a quarter turn clockwise.

        Output row i is original column i read from the last row up to
        the first, so width and height swap.
        """
        rotated = np.rot90(self.rows(), k=-1)
        self._replace(np.ascontiguousarray(rotated).ravel(), self.height, self.width)

    def reflect_horizontal_mirror_extend(self) -> None:
        """
        Append each row's reverse to itself, doubling the width.

        The resulting rows are even-symmetric: row[k] == row[2w-1-k].
        """
        img = self.rows()
        reflected = np.concatenate([img, img[:, ::-1]], axis=1)
        self._replace(reflected.ravel(), self.width * 2, self.height)

    def to_rgba(self) -> bytes:
        """Expand each luma value to an opaque grey RGBA pixel."""
        rgba = np.empty((self.luma.size, 4), dtype=np.uint8)
        rgba[:, 0] = self.luma
        rgba[:, 1] = self.luma
        rgba[:, 2] = self.luma
        rgba[:, 3] = 255
        return rgba.tobytes()

    def __len__(self) -> int:
        return self.luma.size

    def __eq__(self, other) -> bool:
        if not isinstance(other, RasterBuffer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.luma, other.luma)
        )

    def __repr__(self) -> str:
        return f"RasterBuffer(width={self.width}, height={self.height})"
