"""Two-dimensional images of typed pixels, with clamped and bilinear sampling."""

from __future__ import annotations

import enum
import math
from typing import Sequence, Tuple, Union

import numpy as np

from .vecmath import Vector

PixelValue = Union[int, float, Vector]


class PixelType(enum.IntEnum):
    """Pixel formats: the high nibble is the scalar kind, the low nibble the channel count."""

    UCHAR = 0x11
    UCHAR2 = 0x12
    UCHAR4 = 0x14
    FLOAT = 0x21
    FLOAT2 = 0x22
    FLOAT4 = 0x24

    @property
    def channels(self) -> int:
        return self.value & 0x0F

    @property
    def is_float(self) -> bool:
        return (self.value & 0xF0) == 0x20

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(np.float32) if self.is_float else np.dtype(np.uint8)

    @property
    def itemsize(self) -> int:
        """Bytes taken by one pixel."""
        return self.dtype.itemsize * self.channels


class Image:
    """A width x height grid of pixels of one :class:`PixelType`.

    An image of zero width or height is allowed but not valid for sampling.
    """

    def __init__(
        self,
        pixel_type: PixelType,
        width: int = 0,
        height: int = 0,
        data=None,
    ) -> None:
        self._type = PixelType(pixel_type)
        if width < 0 or height < 0:
            raise ValueError(f"image size must not be negative: {width}x{height}")
        channels = self._type.channels
        shape: Tuple[int, ...] = (
            (height, width) if channels == 1 else (height, width, channels)
        )
        if data is None:
            self._data = np.zeros(shape, dtype=self._type.dtype)
            return
        array = np.asarray(data)
        if array.shape != shape:
            if array.size != math.prod(shape):
                raise ValueError(
                    f"data of shape {array.shape} does not fit a "
                    f"{width}x{height} {self._type.name} image"
                )
            array = array.reshape(shape)
        self._data = np.array(array, dtype=self._type.dtype)

    @property
    def pixel_type(self) -> PixelType:
        return self._type

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def channels(self) -> int:
        return self._type.channels

    @property
    def pitch(self) -> int:
        """Bytes per row."""
        return self.width * self._type.itemsize

    @property
    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0

    def _convert(self, raw) -> PixelValue:
        scalar = float if self._type.is_float else int
        if self.channels == 1:
            return scalar(raw)
        return Vector(*(scalar(c) for c in raw))

    def _clamped(self, x, y) -> Tuple[int, int]:
        if not self.is_valid:
            raise ValueError("cannot sample an empty image")
        xi = min(max(int(x), 0), self.width - 1)
        yi = min(max(int(y), 0), self.height - 1)
        return xi, yi

    def pixel(self, x, y) -> PixelValue:
        """Pixel at ``(x, y)``; coordinates are truncated and clamped to the image."""
        xi, yi = self._clamped(x, y)
        return self._convert(self._data[yi, xi])

    def _check_index(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )

    def __getitem__(self, key):
        """``image[x, y]`` gives a pixel; ``image[y]`` gives row ``y`` as a writable view."""
        if isinstance(key, tuple):
            x, y = key
            self._check_index(x, y)
            return self._convert(self._data[y, x])
        if not 0 <= key < self.height:
            raise IndexError(f"row {key} outside image of height {self.height}")
        return self._data[key]

    def __setitem__(self, key, value) -> None:
        if isinstance(key, tuple):
            x, y = key
            self._check_index(x, y)
            if self.channels == 1:
                self._data[y, x] = value
                return
            components = tuple(value)
            if len(components) != self.channels:
                raise ValueError(
                    f"expected {self.channels} components, got {len(components)}"
                )
            self._data[y, x] = components
            return
        if not 0 <= key < self.height:
            raise IndexError(f"row {key} outside image of height {self.height}")
        self._data[key] = value

    def sample_linear(self, x: float, y: float) -> PixelValue:
        """Bilinear sample with pixel centres at half-integer coordinates."""
        x -= 0.5
        y -= 0.5
        x0 = int(x)
        y0 = int(y)
        x1 = x0 + 1
        y1 = y0 + 1
        fx = x - math.floor(x)
        fy = y - math.floor(y)

        def at(px: int, py: int) -> np.ndarray:
            xi, yi = self._clamped(px, py)
            return self._data[yi, xi].astype(np.float64)

        c0, c1, c2, c3 = at(x0, y0), at(x1, y0), at(x0, y1), at(x1, y1)
        result = (1 - fy) * ((1 - fx) * c0 + fx * c1) + fy * (
            (1 - fx) * c2 + fx * c3
        )
        if self.channels == 1:
            return float(result)
        return Vector(*(float(c) for c in result))

    def to_array(self) -> np.ndarray:
        """A copy of the pixel data, shaped (height, width[, channels])."""
        return self._data.copy()

    def copy(self) -> "Image":
        """An independent image holding the same pixels."""
        return Image(self._type, self.width, self.height, self._data)

    def zero(self) -> None:
        """Set every pixel to zero."""
        self._data.fill(0)

    def grid(self, block: Sequence[int] = (8, 8)) -> Tuple[int, int]:
        """Number of ``block``-sized tiles needed to cover the image in x and y."""
        bx, by = block
        if bx <= 0 or by <= 0:
            raise ValueError(f"block size must be positive: {bx}x{by}")
        return (-(-self.width // bx), -(-self.height // by))

    def __repr__(self) -> str:
        return f"Image({self._type.name}, {self.width}, {self.height})"


class FilterMode(enum.Enum):
    """How a :class:`Sampler` reads between pixel centres."""

    POINT = "point"
    LINEAR = "linear"


class Sampler:
    """Reads an image by nearest pixel or bilinearly."""

    def __init__(self, image: Image, filter_mode: FilterMode = FilterMode.POINT) -> None:
        self.image = image
        self.filter_mode = FilterMode(filter_mode)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def __call__(self, x: float, y: float) -> PixelValue:
        if self.filter_mode is FilterMode.POINT:
            return self.image.pixel(x, y)
        return self.image.sample_linear(x, y)