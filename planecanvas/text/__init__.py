"""
Text rendering subsystem.

Modules:
    font: Paged bitmap font table
    bmp_6x8: Built-in 6x8 ASCII font
    bf2: BF2 font file loader
    renderer: Cursor-driven text renderer
"""
from .font import Font, FALLBACK_INDEX
from .bmp_6x8 import BMP_6X8
from .bf2 import load_bf2
from .renderer import TextRenderer

__all__ = ["Font", "FALLBACK_INDEX", "BMP_6X8", "load_bf2", "TextRenderer"]
