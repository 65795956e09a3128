"""Conversion between package images and Pillow pictures."""

from __future__ import annotations

import numpy as np
from PIL import Image as PILImage

from .image import Image, PixelType


def from_pillow(picture: PILImage.Image) -> Image:
    """An opaque UCHAR4 image (R, G, B, 255) from any Pillow picture."""
    width, height = picture.size
    if width == 0 or height == 0:
        return Image(PixelType.UCHAR4, width, height)
    rgb = picture if picture.mode == "RGB" else picture.convert("RGB")
    array = np.asarray(rgb, dtype=np.uint8)
    alpha = np.full((height, width, 1), 255, dtype=np.uint8)
    return Image(PixelType.UCHAR4, width, height, np.concatenate([array, alpha], axis=2))


def _to_bytes(values: np.ndarray) -> np.ndarray:
    values = values.astype(np.float32)
    # NaN clamps to the upper bound, as the comparison-based clamp does.
    values = np.where(np.isnan(values), np.float32(1.0), values)
    scaled = np.float32(255.0) * np.clip(values, np.float32(0.0), np.float32(1.0))
    return scaled.astype(np.uint8)


def to_pillow(image: Image) -> PILImage.Image:
    """A Pillow picture of ``image``.

    Single-channel images become mode ``L`` and four-channel images mode
    ``RGB`` (alpha is dropped). Float values are clamped to ``[0, 1]`` and
    scaled to bytes by truncation. Two-channel images cannot be shown and
    raise ``ValueError``.
    """
    kind = image.pixel_type
    if kind in (PixelType.FLOAT, PixelType.UCHAR):
        mode = "L"
    elif kind in (PixelType.FLOAT4, PixelType.UCHAR4):
        mode = "RGB"
    else:
        raise ValueError(f"cannot convert a {kind.name} image to a picture")
    if not image.is_valid:
        return PILImage.new(mode, (image.width, image.height))
    data = image.to_array()
    if mode == "RGB":
        data = data[:, :, :3]
    if kind.is_float:
        data = _to_bytes(data)
    return PILImage.fromarray(np.ascontiguousarray(data))