"""Tests for frame export and preview display."""

import math

import matplotlib
import numpy as np
import pytest
from PIL import Image as PILImage

from src.minitrace.core.framebuffer import FrameBuffer
from src.minitrace.preview.export import compute_rmse, frame_to_image, load_png, save_png

matplotlib.use("Agg")


class TestExport:
    """Tests for PNG export."""

    def test_frame_to_image(self):
        frame = FrameBuffer.random(7, 5, seed=0)
        image = frame_to_image(frame)
        assert image.mode == "RGBA"
        assert image.size == (7, 5)
        assert image.getpixel((3, 2)) == frame.pixel(3, 2)

    def test_save_png_round_trip(self, tmp_path):
        frame = FrameBuffer.random(12, 9, seed=5)
        path = save_png(frame, tmp_path / "frame.png")
        assert path.exists()

        with PILImage.open(path) as image:
            assert image.format == "PNG"
            assert image.size == (12, 9)

        assert load_png(path) == frame

    def test_save_png_accepts_str_path(self, tmp_path):
        target = str(tmp_path / "blank.png")
        save_png(FrameBuffer.blank(2, 2), target)
        assert load_png(target).pixel(1, 1) == (0, 0, 0, 255)


class TestRmse:
    """Tests for compute_rmse."""

    def test_identical_frames(self):
        frame = FrameBuffer.random(8, 8, seed=1)
        assert compute_rmse(frame, frame) == 0.0

    def test_known_difference(self):
        black = FrameBuffer.blank(4, 4)
        white = np.full((4, 4, 4), 255, dtype=np.uint8)
        # RGB differ by 255, alpha matches
        assert compute_rmse(black, white) == pytest.approx(255.0 * math.sqrt(0.75))

    def test_shape_mismatch_raises(self):
        with pytest.raises(ValueError, match="shapes must match"):
            compute_rmse(FrameBuffer.blank(4, 4), FrameBuffer.blank(4, 5))


class TestDisplay:
    """Tests for the Matplotlib preview."""

    def test_show_frame_non_blocking(self):
        import matplotlib.pyplot as plt

        from src.minitrace.preview.display import show_frame

        show_frame(FrameBuffer.random(8, 6, seed=2), title="test", block=False)
        fig = plt.gcf()
        assert fig.axes[0].get_title() == "test"
        plt.close("all")

    def test_default_title(self):
        import matplotlib.pyplot as plt

        from src.minitrace.preview.display import show_frame

        show_frame(FrameBuffer.blank(8, 6), block=False)
        assert plt.gcf().axes[0].get_title() == "Render Preview - 8x6"
        plt.close("all")
