"""Image export utilities for rendered frames.

This module converts FrameBuffer objects to Pillow images and writes them
to disk. Frames are already 8-bit RGBA, so no tone mapping or gamma
correction is applied.

Supported formats:
    - PNG (8-bit RGBA via Pillow)

Example:
    >>> from src.minitrace.preview.export import save_png
    >>> from src.minitrace.core.renderer import RenderSettings, render
    >>>
    >>> frame = render(scene, camera, RenderSettings(512, 512))
    >>> save_png(frame, "output.png")
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from src.minitrace.core.framebuffer import FrameBuffer


def frame_to_image(frame: FrameBuffer) -> PILImage.Image:
    """Convert a frame to a Pillow RGBA image.

    Args:
        frame: The frame to convert.

    Returns:
        A new Pillow image of the same size.
    """
    return PILImage.fromarray(frame.as_array())


def save_png(frame: FrameBuffer, filepath: str | Path) -> Path:
    """Save the frame as a PNG file.

    Args:
        frame: The frame to save.
        filepath: Output file path (should end in .png).

    Returns:
        The path written to.
    """
    path = Path(filepath)
    frame_to_image(frame).save(path, format="PNG")
    return path


def load_png(filepath: str | Path) -> FrameBuffer:
    """Load a PNG file into a frame, converting it to RGBA.

    Args:
        filepath: Path to the PNG file.

    Returns:
        A FrameBuffer with the image pixels.
    """
    with PILImage.open(filepath) as image:
        pixels = np.asarray(image.convert("RGBA"), dtype=np.uint8)
    return FrameBuffer(pixels.copy())


def compute_rmse(
    image_a: FrameBuffer | npt.NDArray[np.generic],
    image_b: FrameBuffer | npt.NDArray[np.generic],
) -> float:
    """Compute root mean squared error between two images.

    Args:
        image_a: First frame or image array.
        image_b: Second frame or image array (must have the same shape).

    Returns:
        RMSE value in channel units (0 means identical).

    Raises:
        ValueError: If image shapes don't match.
    """
    a = image_a.as_array() if isinstance(image_a, FrameBuffer) else np.asarray(image_a)
    b = image_b.as_array() if isinstance(image_b, FrameBuffer) else np.asarray(image_b)
    if a.shape != b.shape:
        raise ValueError(f"Image shapes must match: {a.shape} vs {b.shape}")

    diff = a.astype(np.float64) - b.astype(np.float64)
    return float(np.sqrt(np.mean(diff**2)))
