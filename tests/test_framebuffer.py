"""Unit tests for the RGBA FrameBuffer."""

import numpy as np
import pytest

from src.minitrace.core.framebuffer import BYTES_PER_PIXEL, FrameBuffer


class TestFrameBufferConstruction:
    """Tests for creating frames."""

    def test_blank_is_opaque_black(self):
        frame = FrameBuffer.blank(4, 3)
        assert frame.width == 4
        assert frame.height == 3
        assert frame.pixel(2, 1) == (0, 0, 0, 255)
        frame.validate()

    def test_length_is_four_bytes_per_pixel(self):
        frame = FrameBuffer.blank(5, 7)
        assert BYTES_PER_PIXEL == 4
        assert len(frame) == 5 * 7 * 4
        assert len(frame.data) == 5 * 7 * 4

    def test_random_is_reproducible_and_opaque(self):
        a = FrameBuffer.random(16, 8, seed=3)
        b = FrameBuffer.random(16, 8, seed=3)
        assert a == b
        a.validate()
        assert not np.all(a.as_array()[:, :, :3] == 0)

    def test_random_seeds_differ(self):
        assert FrameBuffer.random(16, 8, seed=1) != FrameBuffer.random(16, 8, seed=2)

    @pytest.mark.parametrize("width, height", [(0, 4), (4, 0), (-1, 2)])
    def test_invalid_dimensions_raise(self, width, height):
        with pytest.raises(ValueError, match="positive"):
            FrameBuffer.blank(width, height)

    def test_wrong_shape_raises(self):
        with pytest.raises(ValueError, match="shape"):
            FrameBuffer(np.zeros((4, 4, 3), dtype=np.uint8))

    def test_wrong_dtype_raises(self):
        with pytest.raises(ValueError, match="dtype"):
            FrameBuffer(np.zeros((4, 4, 4), dtype=np.float32))

    def test_from_bytes(self):
        data = bytes(range(2 * 1 * 4))
        frame = FrameBuffer.from_bytes(data, 2, 1)
        assert frame.pixel(0, 0) == (0, 1, 2, 3)
        assert frame.pixel(1, 0) == (4, 5, 6, 7)
        assert frame.data == data

    def test_from_bytes_wrong_length_raises(self):
        with pytest.raises(ValueError, match="Expected 8 bytes"):
            FrameBuffer.from_bytes(b"\x00" * 7, 2, 1)


class TestFrameBufferLayout:
    """Tests for the row-major byte layout."""

    def test_offset(self):
        frame = FrameBuffer.blank(10, 5)
        assert frame.offset(0, 0) == 0
        assert frame.offset(3, 0) == 12
        assert frame.offset(0, 1) == 40
        assert frame.offset(9, 4) == (4 * 10 + 9) * 4

    def test_set_pixel_lands_at_offset(self):
        frame = FrameBuffer.blank(3, 2)
        frame.set_pixel(2, 1, (10, 20, 30, 255))
        data = frame.data
        offset = frame.offset(2, 1)
        assert tuple(data[offset : offset + 4]) == (10, 20, 30, 255)

    def test_set_pixel_out_of_range_channel_raises(self):
        frame = FrameBuffer.blank(2, 2)
        with pytest.raises(ValueError, match="outside"):
            frame.set_pixel(0, 0, (256, 0, 0, 255))

    @pytest.mark.parametrize("x, y", [(-1, 0), (2, 0), (0, 2)])
    def test_pixel_out_of_frame_raises(self, x, y):
        frame = FrameBuffer.blank(2, 2)
        with pytest.raises(IndexError):
            frame.pixel(x, y)

    def test_as_array_is_a_copy(self):
        frame = FrameBuffer.blank(2, 2)
        array = frame.as_array()
        array[:] = 7
        assert frame.pixel(0, 0) == (0, 0, 0, 255)

    def test_validate_rejects_translucent_pixels(self):
        frame = FrameBuffer.blank(3, 3)
        frame.set_pixel(1, 2, (0, 0, 0, 128))
        with pytest.raises(ValueError, match=r"first at \(1, 2\)"):
            frame.validate()

    def test_repr(self):
        assert repr(FrameBuffer.blank(3, 2)) == "FrameBuffer(width=3, height=2)"
