"""
Font - Paged Bitmap Font Table
==============================
A font maps a character index (code - 32) to a paged glyph: bytes read
column-major in chunks of `width`, each byte one 8-pixel column with bit 0
on top. Index 31 ('?' in ASCII order) stands in for any code outside
0..last_character.
"""

FIRST_CODE = 32
FALLBACK_INDEX = 31


class Font:
    """
    Fixed-width paged bitmap font.

    Attributes:
        characters: Glyph bytes, indexed by code - 32
        width: Glyph cell width in pixels (also the chunk width)
        height: Glyph cell height in pixels
        scale: Default integer scale factor
        last_character: Highest valid index
    """

    def __init__(self, characters, width: int, height: int,
                 scale: int = 1, last_character: int | None = None,
                 name: str = ""):
        if width <= 0 or height <= 0:
            raise ValueError("font width and height must be positive")
        if scale <= 0:
            raise ValueError("font scale must be positive")
        if not characters:
            raise ValueError("font has no characters")

        self.characters = [bytes(c) for c in characters]
        self.width = width
        self.height = height
        self.scale = scale
        if last_character is None:
            last_character = len(self.characters) - 1
        self.last_character = min(last_character, len(self.characters) - 1)
        self.name = name

    def index(self, code: int) -> int:
        """Map a character code to a glyph index, with fallback."""
        i = code - FIRST_CODE
        if 0 <= i <= self.last_character:
            return i
        # Tables shorter than the fallback slot fall back to space
        return FALLBACK_INDEX if FALLBACK_INDEX <= self.last_character else 0

    def glyph(self, code: int) -> bytes:
        return self.characters[self.index(code)]

    def __repr__(self):
        return (f"Font({self.name or 'unnamed'} {self.width}x{self.height}, "
                f"{self.last_character + 1} glyphs)")
