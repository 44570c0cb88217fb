"""
planecanvas
===========
A rasterization library for paged, multi-plane monochrome displays
(SSD1306-style OLEDs, multi-color e-paper) driven from a host over a
serial link.

Architecture
------------
The library is organized into layers:

    Canvas          Default color, text cursor, driver hand-off
       │
       ├── DrawBuffer    Lines, shapes, glyph blits
       │      │
       │      └── FrameBuffer    Bitplanes, addressing, transform
       │
       ├── TextRenderer  Cursor-driven text layout
       │      │
       │      └── Font           Paged glyph table (BMP_6X8, load_bf2)
       │
       └── DisplayDriver  Receives finished planes (user supplied)

Quick Start
-----------
    from planecanvas import Canvas, BMP_6X8

    canvas = Canvas(128, 64, font=BMP_6X8)
    canvas.rectangle(0, 0, 127, 63)
    canvas.polygon([(10, 10), (40, 10), (25, 40)], filled=True)
    canvas.text_cursor = (4, 60)
    canvas.text("Hello!")

    plane = canvas.planes[0]   # 128 * 8 bytes, ready for the controller

Module Structure
----------------
    planecanvas/
    ├── canvas.py            High-level interface
    ├── buffer/
    │   ├── framebuffer.py   Bitplanes and coordinate transform
    │   └── draw.py          Shape drawing primitives
    ├── text/
    │   ├── font.py          Paged font table
    │   ├── bmp_6x8.py       Built-in 6x8 ASCII font
    │   ├── bf2.py           BF2 font loader
    │   └── renderer.py      Text layout
    ├── drivers/
    │   └── base.py          DisplayDriver interface
    └── tools/
        └── fontconv.py      BDF font converter
"""

# Core buffer classes
from .buffer import FrameBuffer, DrawBuffer, BLANK, PRIMARY

# Text rendering
from .text import Font, BMP_6X8, TextRenderer, load_bf2

# Driver interface
from .drivers import DisplayDriver

# High-level interface
from .canvas import Canvas

__all__ = [
    # High-level
    "Canvas",
    # Graphics
    "DrawBuffer",
    "FrameBuffer",
    # Text
    "TextRenderer",
    "Font",
    "BMP_6X8",
    "load_bf2",
    # Drivers
    "DisplayDriver",
    # Colors
    "BLANK",
    "PRIMARY",
]

__version__ = "1.0.0"
