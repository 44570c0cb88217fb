#!/usr/bin/env python3
"""
Font Converter
==============
Converts BDF fonts into formats planecanvas can render.

Features:
- Input: BDF fonts (via bdflib)
- Output: BF2 files (for load_bf2) or Python modules holding a paged Font
- Character subsetting with predefined sets
- Preview rendered glyphs in terminal

Requirements:
    pip install planecanvas[tools]

Usage:
    # BDF to BF2
    planecanvas-fontconv spleen-5x8.bdf spleen-5x8.bf2

    # BDF to an importable Python font table
    planecanvas-fontconv spleen-5x8.bdf spleen_5x8.py --name SPLEEN_5X8

    # Preview specific characters
    planecanvas-fontconv spleen-5x8.bdf --preview "Hello"
"""

import argparse
import struct
import sys
from math import ceil
from pathlib import Path

from ..text.bf2 import to_paged

# =============================================================================
# Character Sets
# =============================================================================

# Basic ASCII printable characters (space through tilde)
ASCII_PRINTABLE = set(chr(i) for i in range(0x0020, 0x007F))

# Extended Latin (Latin-1 Supplement)
LATIN_1_SUPPLEMENT = set(chr(i) for i in range(0x00A0, 0x0100))

CHARSETS = {
    'ascii': ASCII_PRINTABLE,
    'latin1': LATIN_1_SUPPLEMENT,
}


# =============================================================================
# BDF Parser (using bdflib)
# =============================================================================

def load_bdf_font(bdf_path: Path) -> tuple[dict, dict]:
    """
    Load a BDF font and return glyphs and properties.

    Returns:
        Tuple of (glyphs dict, properties dict)
        glyphs: {codepoint: {'width': int, 'data': row-major MSB-first bytes}}
    """
    from bdflib import reader

    with open(bdf_path, 'rb') as f:
        font = reader.read_bdf(f)

    props = font.properties
    font_ascent = props.get(b'FONT_ASCENT', 8)
    font_descent = props.get(b'FONT_DESCENT', 0)
    font_height = font_ascent + font_descent

    max_width = 0
    for glyph in font.glyphs:
        max_width = max(max_width, glyph.advance)

    bytes_per_row = ceil(max_width / 8)
    glyphs = {}

    for glyph in font.glyphs:
        if glyph.codepoint is None or glyph.codepoint > 0xFFFF:
            continue

        # BDF data is stored bottom-to-top
        glyph_data = list(reversed(glyph.data))

        # Position glyph in output grid
        glyph_bottom = font_ascent - 1 - glyph.bbY
        glyph_top = glyph_bottom - glyph.bbH + 1

        rows = []
        for y in range(font_height):
            row_bits = 0
            src_row = y - glyph_top
            if 0 <= src_row < len(glyph_data):
                shift = (bytes_per_row * 8) - glyph.bbW
                src_bits = glyph_data[src_row]
                if shift > glyph.bbX:
                    row_bits = src_bits << (shift - glyph.bbX)
                else:
                    row_bits = src_bits >> (glyph.bbX - shift)
                row_bits &= (1 << (bytes_per_row * 8)) - 1
            rows.append(row_bits.to_bytes(bytes_per_row, 'big'))

        glyphs[glyph.codepoint] = {
            'width': glyph.advance,
            'data': b''.join(rows),
        }

    properties = {
        'height': font_height,
        'max_width': max_width,
    }
    return glyphs, properties


# =============================================================================
# Writers
# =============================================================================

BF2_MAGIC = b"B2"
BF2_VERSION = 1
FLAG_PROPORTIONAL = 0x01


def _select(glyphs: dict, charset: set | None) -> list:
    if charset:
        return sorted(ord(c) for c in charset if ord(c) in glyphs)
    return sorted(glyphs)


def write_bf2(output_path: Path, glyphs: dict, properties: dict,
              charset: set | None = None, proportional: bool = True) -> int:
    """
    Write glyphs to BF2 format.

    Args:
        output_path: Output file path
        glyphs: Dict of {codepoint: {'width': int, 'data': bytes}}
        properties: Dict with 'height', 'max_width'
        charset: Optional set of characters to include (None = all)
        proportional: Whether to store per-glyph widths

    Returns:
        Number of glyphs written
    """
    height = properties['height']
    max_width = properties['max_width']
    bytes_per_row = ceil(max_width / 8)

    codepoints = [cp for cp in _select(glyphs, charset) if cp <= 0xFFFF]
    if not codepoints:
        raise ValueError("no glyphs to write")

    widths = [glyphs[cp]['width'] for cp in codepoints]
    default_width = max(set(widths), key=widths.count)
    is_proportional = proportional and len(set(widths)) > 1

    glyph_data = bytearray()
    index_entries = []
    for cp in codepoints:
        glyph = glyphs[cp]
        width = glyph['width'] if is_proportional else 0
        index_entries.append(struct.pack('<HB', cp, width) +
                             len(glyph_data).to_bytes(3, 'little'))
        glyph_data.extend(glyph['data'])

    header = struct.pack(
        '<2sBBBBHBBH',
        BF2_MAGIC,
        BF2_VERSION,
        FLAG_PROPORTIONAL if is_proportional else 0,
        max_width,
        height,
        len(codepoints),
        bytes_per_row,
        default_width,
        0  # reserved
    )

    with open(output_path, 'wb') as f:
        f.write(header)
        for entry in index_entries:
            f.write(entry)
        f.write(glyph_data)
    return len(codepoints)


def write_python(output_path: Path, glyphs: dict, properties: dict,
                 name: str = "FONT") -> int:
    """
    Write codepoints 32..255 as a Python module holding a paged Font.

    Gaps become blank glyphs. Returns the number of table entries.
    """
    height = properties['height']
    max_width = properties['max_width']
    bytes_per_row = ceil(max_width / 8)
    cell_w = max_width + 1

    present = [cp for cp in glyphs if 32 <= cp <= 0xFF]
    if not present:
        raise ValueError("no glyphs in the 32..255 range")

    blank = bytes(ceil(height / 8) * cell_w)
    lines = [
        f'"""{name}: {cell_w}x{height} paged font generated by planecanvas-fontconv."""',
        "",
        "from planecanvas.text.font import Font",
        "",
        f"{name} = Font(",
        "    [",
    ]
    for cp in range(32, max(present) + 1):
        glyph = glyphs.get(cp)
        if glyph is None:
            paged = blank
        else:
            paged = to_paged(glyph['data'], min(glyph['width'], max_width),
                             height, bytes_per_row, cell_w)
        lines.append(f"        {paged!r},  # U+{cp:04X}")
    lines += [
        "    ],",
        f"    width={cell_w},",
        f"    height={height},",
        f"    name={name.lower()!r},",
        ")",
        "",
    ]
    Path(output_path).write_text("\n".join(lines), encoding="utf-8")
    return max(present) - 31


# =============================================================================
# Preview
# =============================================================================

def preview_glyphs(glyphs: dict, properties: dict, text: str) -> str:
    """Return an ASCII art preview of glyphs."""
    height = properties['height']
    bytes_per_row = ceil(properties['max_width'] / 8)

    out = []
    for char in text:
        cp = ord(char)
        glyph = glyphs.get(cp)
        if glyph is None:
            out.append(f"'{char}' (U+{cp:04X}): NOT FOUND")
            continue

        out.append(f"'{char}' (U+{cp:04X}) width={glyph['width']}:")
        data = glyph['data']
        for row in range(height):
            row_bytes = data[row * bytes_per_row:(row + 1) * bytes_per_row]
            out.append("  " + "".join(
                "#" if row_bytes[col >> 3] & (0x80 >> (col & 7)) else "."
                for col in range(glyph['width'])
            ))
    return "\n".join(out)


# =============================================================================
# Main
# =============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Convert BDF fonts to BF2 files or paged Python font tables',
    )
    parser.add_argument('input', type=Path, help='Input BDF font file')
    parser.add_argument('output', type=Path, nargs='?',
                        help='Output .bf2 or .py file (optional for preview-only)')
    parser.add_argument('--charset', action='append', dest='charsets',
                        choices=list(CHARSETS.keys()),
                        help='Predefined charset to include (can repeat)')
    parser.add_argument('--monospace', action='store_true',
                        help='Force monospace BF2 output (no per-glyph widths)')
    parser.add_argument('--name', default='FONT',
                        help='Variable name for Python output (default: FONT)')
    parser.add_argument('--preview', type=str,
                        help='Preview specific characters after loading')

    args = parser.parse_args(argv)

    if args.output is None and not args.preview:
        parser.error("--preview is required when no output file is specified")

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}")
        return 1

    glyphs, properties = load_bdf_font(args.input)
    print(f"Loaded {len(glyphs)} glyphs, {properties['max_width']}x{properties['height']}")

    if args.preview:
        print(preview_glyphs(glyphs, properties, args.preview))

    if args.output is None:
        return 0

    charset = None
    if args.charsets:
        charset = set()
        for name in args.charsets:
            charset.update(CHARSETS[name])

    args.output.parent.mkdir(parents=True, exist_ok=True)
    if args.output.suffix.lower() == '.py':
        if charset:
            glyphs = {cp: g for cp, g in glyphs.items() if chr(cp) in charset}
        count = write_python(args.output, glyphs, properties, args.name)
    else:
        count = write_bf2(args.output, glyphs, properties, charset,
                          proportional=not args.monospace)
    print(f"Created: {args.output} ({count} glyphs)")
    return 0


if __name__ == '__main__':
    sys.exit(main())
