"""
Buffer subsystem - bitplanes and drawing primitives.

Modules:
    framebuffer: Paged multi-plane pixel buffer with coordinate transform
    draw: Lines, shapes and glyph blits
"""
from .framebuffer import FrameBuffer, BLANK, PRIMARY
from .draw import DrawBuffer

__all__ = [
    "FrameBuffer",
    "DrawBuffer",
    "BLANK",
    "PRIMARY",
]
