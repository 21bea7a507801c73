"""Flat RGBA frame buffer.

A FrameBuffer holds width * height pixels of 4 bytes each (R, G, B, A),
row-major, starting at the top-left pixel. The byte for channel k of pixel
(x, y) lives at offset (y * width + x) * 4 + k.

The renderer allocates one FrameBuffer per frame and hands it to the
caller; display sinks (PNG export, Matplotlib preview, a test harness) read
it through `data` or `as_array()`.

Example:
    >>> from src.minitrace.core.framebuffer import FrameBuffer
    >>> frame = FrameBuffer.blank(4, 2)
    >>> frame.set_pixel(1, 0, (255, 0, 0, 255))
    >>> frame.pixel(1, 0)
    (255, 0, 0, 255)
    >>> len(frame.data)
    32
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

BYTES_PER_PIXEL = 4


class FrameBuffer:
    """A width x height RGBA8 image stored row-major.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
    """

    def __init__(self, pixels: npt.NDArray[np.uint8]) -> None:
        """Wrap an existing (height, width, 4) uint8 array.

        Args:
            pixels: The pixel array. It is owned by the FrameBuffer afterwards.

        Raises:
            ValueError: If the array does not have shape (height, width, 4)
                with dtype uint8.
        """
        if pixels.ndim != 3 or pixels.shape[2] != BYTES_PER_PIXEL:
            raise ValueError(f"Expected pixels of shape (H, W, 4), got {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"Expected pixels of dtype uint8, got {pixels.dtype}")
        self._pixels = pixels

    @classmethod
    def blank(cls, width: int, height: int) -> FrameBuffer:
        """Create an opaque black frame."""
        _check_dimensions(width, height)
        pixels = np.zeros((height, width, BYTES_PER_PIXEL), dtype=np.uint8)
        pixels[:, :, 3] = 255
        return cls(pixels)

    @classmethod
    def random(cls, width: int, height: int, seed: int | None = None) -> FrameBuffer:
        """Create an opaque frame of random colors.

        The simplest possible "renderer": it exercises the path from a pixel
        buffer to a display sink without any ray tracing.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.
            seed: Seed for the random generator, for reproducible noise.
        """
        _check_dimensions(width, height)
        rng = np.random.default_rng(seed)
        pixels = rng.integers(0, 255, size=(height, width, BYTES_PER_PIXEL), dtype=np.uint8)
        pixels[:, :, 3] = 255
        return cls(pixels)

    @classmethod
    def from_bytes(cls, data: bytes, width: int, height: int) -> FrameBuffer:
        """Create a frame from a flat row-major RGBA byte string.

        Raises:
            ValueError: If len(data) != width * height * 4.
        """
        _check_dimensions(width, height)
        expected = width * height * BYTES_PER_PIXEL
        if len(data) != expected:
            raise ValueError(f"Expected {expected} bytes for {width}x{height}, got {len(data)}")
        pixels = np.frombuffer(data, dtype=np.uint8).reshape(height, width, BYTES_PER_PIXEL)
        return cls(pixels.copy())

    @property
    def width(self) -> int:
        """Get the image width."""
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        """Get the image height."""
        return int(self._pixels.shape[0])

    @property
    def data(self) -> bytes:
        """The flat row-major RGBA bytes, width * height * 4 long."""
        return self._pixels.tobytes()

    def __len__(self) -> int:
        return self._pixels.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrameBuffer):
            return NotImplemented
        return np.array_equal(self._pixels, other._pixels)

    def __repr__(self) -> str:
        return f"FrameBuffer(width={self.width}, height={self.height})"

    def as_array(self) -> npt.NDArray[np.uint8]:
        """Get a copy of the pixels as a (height, width, 4) uint8 array."""
        return self._pixels.copy()

    def offset(self, x: int, y: int) -> int:
        """Byte offset of pixel (x, y) in `data`."""
        self._check_pixel(x, y)
        return (y * self.width + x) * BYTES_PER_PIXEL

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Get the RGBA value of pixel (x, y)."""
        self._check_pixel(x, y)
        r, g, b, a = (int(c) for c in self._pixels[y, x])
        return (r, g, b, a)

    def set_pixel(self, x: int, y: int, rgba: tuple[int, int, int, int]) -> None:
        """Set the RGBA value of pixel (x, y).

        Raises:
            ValueError: If a channel is outside [0, 255].
        """
        self._check_pixel(x, y)
        for i, channel in enumerate(rgba):
            if channel < 0 or channel > 255:
                raise ValueError(f"Channel {i} = {channel} is outside [0, 255]")
        self._pixels[y, x] = rgba

    def validate(self) -> None:
        """Check the frame invariants: 4 bytes per pixel and opaque alpha.

        Raises:
            ValueError: If any pixel is not fully opaque.
        """
        translucent = np.argwhere(self._pixels[:, :, 3] != 255)
        if translucent.size:
            y, x = (int(v) for v in translucent[0])
            raise ValueError(
                f"{len(translucent)} pixels are not opaque, first at ({x}, {y})"
            )

    def _check_pixel(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} frame")


def _check_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"Frame dimensions must be positive, got {width}x{height}")
