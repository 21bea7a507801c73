"""Preview module for output and visualization.

This module hands finished frames to the outside world:

Components:
    display: Matplotlib-based preview display
    export: PNG export and image comparison utilities

The renderer never depends on this module; it only produces FrameBuffer
objects that these sinks consume.

Example:
    >>> from src.minitrace.preview import save_png, show_frame
    >>> save_png(frame, "output.png")
    >>> show_frame(frame)
"""

from src.minitrace.preview.display import show_frame
from src.minitrace.preview.export import (
    compute_rmse,
    frame_to_image,
    load_png,
    save_png,
)

__all__ = [
    # Display functions
    "show_frame",
    # Export functions
    "save_png",
    "load_png",
    "frame_to_image",
    "compute_rmse",
]
