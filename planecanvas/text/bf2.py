"""
BF2 Font Loader
===============
Builds a paged Font from a BF2 (Binary Font v2) file.

BF2 is a compact bitmap font format for microcontrollers:
- Fixed-size header (12 bytes)
- Compact glyph index (6 or 8 bytes per entry)
- Packed bitmap data (1 bit per pixel, row-major, MSB first)

Format Layout:
    [Header: 12 bytes]
    [Index: count × entry_size bytes]
    [Bitmap data: variable]

Header Structure (12 bytes):
    - Magic: "B2" (2 bytes)
    - Version: 1 byte
    - Flags: 1 byte (bit 0=proportional, bit 1=32-bit codepoints)
    - Max width: 1 byte
    - Height: 1 byte
    - Glyph count: 2 bytes (little-endian)
    - Bytes per row: 1 byte
    - Default width: 1 byte
    - Reserved: 2 bytes

Index entry:
    - Codepoint: 2 or 4 bytes (little-endian)
    - Width: 1 byte
    - Offset: 3 bytes (little-endian, into bitmap data)

Paged glyphs are column-major with one byte per 8 rows, so each row-major
bitmap is transposed on load. Only codepoints 32..255 are kept; gaps in that
range become blank glyphs. Each cell gets one blank spacing column.
"""

import logging
import struct

from .font import Font, FIRST_CODE

_BF2_MAGIC = b"B2"
_BF2_HEADER_SIZE = 12
_LAST_CODE = 0xFF

log = logging.getLogger(__name__)


def to_paged(data: bytes, w: int, height: int, bpr: int, cell_w: int) -> bytes:
    """Transpose a row-major MSB-first bitmap into column-major pages."""
    out = bytearray(((height + 7) // 8) * cell_w)
    for row in range(height):
        row_off = row * bpr
        page_off = (row >> 3) * cell_w
        bit = 1 << (row & 7)
        for col in range(w):
            if data[row_off + (col >> 3)] & (0x80 >> (col & 7)):
                out[page_off + col] |= bit
    return bytes(out)


def load_bf2(path: str, scale: int = 1) -> Font:
    """
    Load a BF2 font file as a fixed-width paged Font.

    Args:
        path: File system path to the .bf2 font file
        scale: Default scale for the resulting Font

    Raises:
        ValueError: If the file is not a valid BF2 font or has no glyphs
            in the 32..255 range
        OSError: If the file cannot be opened
    """
    with open(path, "rb") as f:
        raw = f.read()

    if raw[:2] != _BF2_MAGIC:
        raise ValueError("Invalid BF2 font file")
    if len(raw) < _BF2_HEADER_SIZE:
        raise ValueError("Truncated BF2 header")

    (_, flags, max_w, height, count,
     bpr, _def_w, _) = struct.unpack("<BBBBHBBH", raw[2:_BF2_HEADER_SIZE])

    prop = bool(flags & 1)
    entry_size = 8 if (flags & 2) else 6
    entry_fmt = "<IBBBB" if entry_size == 8 else "<HBBBB"
    data_start = _BF2_HEADER_SIZE + count * entry_size
    glyph_size = height * bpr

    if len(raw) < data_start:
        raise ValueError("Truncated BF2 index")

    cell_w = max_w + 1
    blank = bytes(((height + 7) // 8) * cell_w)
    glyphs = {}
    for i in range(count):
        off = _BF2_HEADER_SIZE + i * entry_size
        cp, w, o0, o1, o2 = struct.unpack(entry_fmt, raw[off:off + entry_size])
        if not FIRST_CODE <= cp <= _LAST_CODE:
            continue
        start = data_start + (o0 | (o1 << 8) | (o2 << 16))
        bitmap = raw[start:start + glyph_size]
        if len(bitmap) < glyph_size:
            raise ValueError(f"Truncated bitmap for codepoint {cp}")
        glyphs[cp] = to_paged(bitmap, min(w, max_w) if prop else max_w, height, bpr, cell_w)

    if not glyphs:
        raise ValueError("BF2 font has no glyphs in the 32..255 range")

    last = max(glyphs)
    characters = [glyphs.get(cp, blank) for cp in range(FIRST_CODE, last + 1)]
    log.debug("loaded %s: %d glyphs, %dx%d cell", path, len(glyphs), cell_w, height)
    return Font(characters, cell_w, height, scale=scale, name=path)
