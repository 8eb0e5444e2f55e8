from typing import NamedTuple


class Color(NamedTuple):
    """
    An RGB color. Being a tuple it can be handed to pygame as-is.

    Channels are not validated; anything outside [0, 255] is truncated
    to its low byte by to_packed().
    """

    r: int
    g: int
    b: int

    @classmethod
    def from_packed(cls, value):
        """Unpack a 0xRRGGBB integer."""
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def to_packed(self):
        return ((self.r & 0xFF) << 16) | ((self.g & 0xFF) << 8) | (self.b & 0xFF)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
