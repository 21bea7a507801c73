"""Matplotlib-based preview display for rendered frames.

Example:
    >>> from src.minitrace.preview.display import show_frame
    >>> show_frame(frame, title="Demo scene")
"""

from __future__ import annotations

from src.minitrace.core.framebuffer import FrameBuffer


def show_frame(
    frame: FrameBuffer,
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 8),
    block: bool = True,
) -> None:
    """Display a frame as a Matplotlib figure.

    Args:
        frame: The frame to display.
        title: Custom title (default shows the resolution).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until figure is closed.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=figsize)

    # RGBA uint8 is displayed as-is
    ax.imshow(frame.as_array(), interpolation="nearest")
    ax.axis("off")

    if title is None:
        title = f"Render Preview - {frame.width}x{frame.height}"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
