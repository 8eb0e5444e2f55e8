"""
framebuffer.py - Software pixel buffer.

Pixels live in a (height, width, 3) uint8 numpy array, row-major, the same
layout the gymnasium observation uses. Every drawing call clips against the
buffer silently, so callers never need to bounds-check near the edges.
"""

import numpy as np

from snake_apple.color import BLACK, WHITE, Color
from snake_apple.errors import FontError


def _channels(color):
    # Keep only the low byte of each channel, like Color.to_packed()
    return (color[0] & 0xFF, color[1] & 0xFF, color[2] & 0xFF)


class Framebuffer:
    def __init__(self, width, height, font=None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Framebuffer needs a positive size, got {width}x{height}")
        self.width = width
        self.height = height
        self.buffer = np.zeros((height, width, 3), dtype=np.uint8)
        self.background_color = BLACK
        self.current_color = WHITE
        self.font = font

    @property
    def size(self):
        return self.width * self.height

    def set_background_color(self, color):
        """Takes effect on the next clear(); existing pixels are left alone."""
        self.background_color = Color(*color)

    def set_current_color(self, packed):
        self.current_color = Color.from_packed(packed)

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def plot(self, x, y, color):
        if self.in_bounds(x, y):
            self.buffer[y, x] = _channels(color)

    def fill_rect(self, x, y, w, h, color):
        """Fill the w x h rectangle anchored at (x, y), clipped to the buffer."""
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + w, self.width), min(y + h, self.height)
        if x0 < x1 and y0 < y1:
            self.buffer[y0:y1, x0:x1] = _channels(color)

    def clear(self):
        self.buffer[:, :] = _channels(self.background_color)

    def get_pixel(self, x, y):
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} buffer")
        r, g, b = self.buffer[y, x]
        return Color(int(r), int(g), int(b))

    def is_point_set(self, x, y):
        if not self.in_bounds(x, y):
            return False
        return self.get_pixel(x, y) == self.current_color

    def to_packed_buffer(self):
        """Flat uint32 array of 0xRRGGBB values, one per pixel, row-major."""
        pixels = self.buffer.reshape(-1, 3).astype(np.uint32)
        return (pixels[:, 0] << 16) | (pixels[:, 1] << 8) | pixels[:, 2]

    def to_rgb_array(self):
        return self.buffer.copy()

    def _require_font(self):
        if self.font is None:
            raise FontError("No glyph rasterizer attached to this framebuffer")
        return self.font

    def text_width(self, text):
        return sum(glyph.advance for glyph in self._require_font().rasterize(text))

    def draw_text(self, text, x, y, color):
        """
        Composite `text` with its top-left pen position at (x, y).

        Each glyph's coverage is used as alpha:
            out = (existing * (255 - alpha) + color * alpha) // 255
        Zero coverage leaves a pixel untouched, so only covered sub-pixels
        change.
        """
        incoming = np.array(_channels(color), dtype=np.uint32)
        pen_x = x
        for glyph in self._require_font().rasterize(text):
            self._blend_glyph(glyph, pen_x + glyph.left, y + glyph.top, incoming)
            pen_x += glyph.advance

    def _blend_glyph(self, glyph, gx, gy, incoming):
        # Clip the glyph box against the buffer
        x0, y0 = max(gx, 0), max(gy, 0)
        x1 = min(gx + glyph.width, self.width)
        y1 = min(gy + glyph.height, self.height)
        if x0 >= x1 or y0 >= y1:
            return

        alpha = glyph.coverage[y0 - gy:y1 - gy, x0 - gx:x1 - gx].astype(np.uint32)[..., np.newaxis]
        existing = self.buffer[y0:y1, x0:x1].astype(np.uint32)
        blended = (existing * (255 - alpha) + incoming * alpha) // 255
        self.buffer[y0:y1, x0:x1] = blended.astype(np.uint8)
