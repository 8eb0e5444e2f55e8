"""
glyphs.py - Font rasterization for Framebuffer.draw_text.

A rasterizer turns a string into a list of Glyph objects. Each glyph carries
an alpha coverage bitmap plus where to place it relative to the pen, so the
framebuffer can composite it onto its own pixels without going through a
pygame Surface.
"""

import logging
from dataclasses import dataclass, replace

import numpy as np
import pygame

from snake_apple.errors import FontError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Glyph:
    coverage: np.ndarray  # (rows, cols) uint8 alpha
    left: int
    top: int
    advance: int

    @property
    def width(self):
        return self.coverage.shape[1]

    @property
    def height(self):
        return self.coverage.shape[0]


class PygameGlyphRasterizer:
    """
    Rasterizes text one character at a time with pygame.font.

    pygame already offsets each character inside its rendered surface by the
    glyph's bearing, so every Glyph has left=0 and top=0. Advances are taken
    from the width of the growing prefix of the string, which keeps the
    kerning and spacing of a whole-string render.
    """

    def __init__(self, font_path=None, size=24):
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            # None selects pygame's bundled default font
            self.font = pygame.font.Font(font_path, size)
        except (pygame.error, OSError) as exc:
            raise FontError(f"Could not load font {font_path or '<default>'}: {exc}") from exc
        self.font_path = font_path
        self.size = size
        self._cache = {}
        logger.debug("Loaded font %s at size %d", font_path or "<default>", size)

    def rasterize(self, text):
        glyphs = []
        pen = 0
        for i, ch in enumerate(text):
            end = self.font.size(text[:i + 1])[0]
            glyphs.append(replace(self._glyph(ch), advance=end - pen))
            pen = end
        return glyphs

    def _glyph(self, ch):
        glyph = self._cache.get(ch)
        if glyph is None:
            # Antialiased with no background gives a per-pixel alpha surface
            surf = self.font.render(ch, True, (255, 255, 255))
            coverage = np.ascontiguousarray(pygame.surfarray.array_alpha(surf).T, dtype=np.uint8)
            metrics = self.font.metrics(ch)
            advance = surf.get_width()
            if metrics and metrics[0] is not None:
                advance = metrics[0][4]
            glyph = Glyph(coverage=coverage, left=0, top=0, advance=advance)
            self._cache[ch] = glyph
        return glyph
