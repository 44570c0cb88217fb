"""
6x8 ASCII bitmap font (space through '~').

Five data columns plus one blank spacing column per glyph, one page tall.
"""

from .font import Font

_GLYPHS = (
    b"\x00\x00\x00\x00\x00",  # ' '
    b"\x00\x00\x5f\x00\x00",  # '!'
    b"\x00\x07\x00\x07\x00",  # '"'
    b"\x14\x7f\x14\x7f\x14",  # '#'
    b"\x24\x2a\x7f\x2a\x12",  # '$'
    b"\x23\x13\x08\x64\x62",  # '%'
    b"\x36\x49\x55\x22\x50",  # '&'
    b"\x00\x05\x03\x00\x00",  # "'"
    b"\x00\x1c\x22\x41\x00",  # '('
    b"\x00\x41\x22\x1c\x00",  # ')'
    b"\x08\x2a\x1c\x2a\x08",  # '*'
    b"\x08\x08\x3e\x08\x08",  # '+'
    b"\x00\x50\x30\x00\x00",  # ','
    b"\x08\x08\x08\x08\x08",  # '-'
    b"\x00\x60\x60\x00\x00",  # '.'
    b"\x20\x10\x08\x04\x02",  # '/'
    b"\x3e\x51\x49\x45\x3e",  # '0'
    b"\x00\x42\x7f\x40\x00",  # '1'
    b"\x42\x61\x51\x49\x46",  # '2'
    b"\x21\x41\x45\x4b\x31",  # '3'
    b"\x18\x14\x12\x7f\x10",  # '4'
    b"\x27\x45\x45\x45\x39",  # '5'
    b"\x3c\x4a\x49\x49\x30",  # '6'
    b"\x01\x71\x09\x05\x03",  # '7'
    b"\x36\x49\x49\x49\x36",  # '8'
    b"\x06\x49\x49\x29\x1e",  # '9'
    b"\x00\x36\x36\x00\x00",  # ':'
    b"\x00\x56\x36\x00\x00",  # ';'
    b"\x08\x14\x22\x41\x00",  # '<'
    b"\x14\x14\x14\x14\x14",  # '='
    b"\x00\x41\x22\x14\x08",  # '>'
    b"\x02\x01\x51\x09\x06",  # '?'
    b"\x32\x49\x79\x41\x3e",  # '@'
    b"\x7e\x11\x11\x11\x7e",  # 'A'
    b"\x7f\x49\x49\x49\x36",  # 'B'
    b"\x3e\x41\x41\x41\x22",  # 'C'
    b"\x7f\x41\x41\x22\x1c",  # 'D'
    b"\x7f\x49\x49\x49\x41",  # 'E'
    b"\x7f\x09\x09\x09\x01",  # 'F'
    b"\x3e\x41\x49\x49\x7a",  # 'G'
    b"\x7f\x08\x08\x08\x7f",  # 'H'
    b"\x00\x41\x7f\x41\x00",  # 'I'
    b"\x20\x40\x41\x3f\x01",  # 'J'
    b"\x7f\x08\x14\x22\x41",  # 'K'
    b"\x7f\x40\x40\x40\x40",  # 'L'
    b"\x7f\x02\x0c\x02\x7f",  # 'M'
    b"\x7f\x04\x08\x10\x7f",  # 'N'
    b"\x3e\x41\x41\x41\x3e",  # 'O'
    b"\x7f\x09\x09\x09\x06",  # 'P'
    b"\x3e\x41\x51\x21\x5e",  # 'Q'
    b"\x7f\x09\x19\x29\x46",  # 'R'
    b"\x46\x49\x49\x49\x31",  # 'S'
    b"\x01\x01\x7f\x01\x01",  # 'T'
    b"\x3f\x40\x40\x40\x3f",  # 'U'
    b"\x1f\x20\x40\x20\x1f",  # 'V'
    b"\x3f\x40\x38\x40\x3f",  # 'W'
    b"\x63\x14\x08\x14\x63",  # 'X'
    b"\x07\x08\x70\x08\x07",  # 'Y'
    b"\x61\x51\x49\x45\x43",  # 'Z'
    b"\x00\x7f\x41\x41\x00",  # '['
    b"\x02\x04\x08\x10\x20",  # '\\'
    b"\x00\x41\x41\x7f\x00",  # ']'
    b"\x04\x02\x01\x02\x04",  # '^'
    b"\x40\x40\x40\x40\x40",  # '_'
    b"\x00\x01\x02\x04\x00",  # '`'
    b"\x20\x54\x54\x54\x78",  # 'a'
    b"\x7f\x48\x44\x44\x38",  # 'b'
    b"\x38\x44\x44\x44\x20",  # 'c'
    b"\x38\x44\x44\x48\x7f",  # 'd'
    b"\x38\x54\x54\x54\x18",  # 'e'
    b"\x08\x7e\x09\x01\x02",  # 'f'
    b"\x0c\x52\x52\x52\x3e",  # 'g'
    b"\x7f\x08\x04\x04\x78",  # 'h'
    b"\x00\x44\x7d\x40\x00",  # 'i'
    b"\x20\x40\x44\x3d\x00",  # 'j'
    b"\x7f\x10\x28\x44\x00",  # 'k'
    b"\x00\x41\x7f\x40\x00",  # 'l'
    b"\x7c\x04\x18\x04\x78",  # 'm'
    b"\x7c\x08\x04\x04\x78",  # 'n'
    b"\x38\x44\x44\x44\x38",  # 'o'
    b"\x7c\x14\x14\x14\x08",  # 'p'
    b"\x08\x14\x14\x18\x7c",  # 'q'
    b"\x7c\x08\x04\x04\x08",  # 'r'
    b"\x48\x54\x54\x54\x20",  # 's'
    b"\x04\x3f\x44\x40\x20",  # 't'
    b"\x3c\x40\x40\x20\x7c",  # 'u'
    b"\x1c\x20\x40\x20\x1c",  # 'v'
    b"\x3c\x40\x30\x40\x3c",  # 'w'
    b"\x44\x28\x10\x28\x44",  # 'x'
    b"\x0c\x50\x50\x50\x3c",  # 'y'
    b"\x44\x64\x54\x4c\x44",  # 'z'
    b"\x00\x08\x36\x41\x00",  # '{'
    b"\x00\x00\x7f\x00\x00",  # '|'
    b"\x00\x41\x36\x08\x00",  # '}'
    b"\x10\x08\x08\x10\x08",  # '~'
)

BMP_6X8 = Font(
    [g + b"\x00" for g in _GLYPHS],
    width=6,
    height=8,
    name="bmp_6x8",
)
