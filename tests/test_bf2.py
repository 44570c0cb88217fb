"""
Tests for BF2 font loading and the font converter tool.
"""

import runpy
import struct

import pytest

from planecanvas import Font, load_bf2
from planecanvas.text.bf2 import to_paged
from planecanvas.tools import fontconv


def make_bf2(glyphs, max_w, height, proportional=False, magic=b"B2"):
    """Build BF2 bytes from {codepoint: (width, row-major bytes)}."""
    bpr = (max_w + 7) // 8
    index = b""
    data = b""
    for cp in sorted(glyphs):
        w, bitmap = glyphs[cp]
        index += struct.pack("<HB", cp, w if proportional else 0)
        index += len(data).to_bytes(3, "little")
        data += bitmap
    header = struct.pack("<2sBBBBHBBH", magic, 1, 1 if proportional else 0,
                         max_w, height, len(glyphs), bpr, max_w, 0)
    return header + index + data


# Row-major 3x8 'A'-ish glyph: top row full, sides, bottom-left pixel
GLYPH_ROWS = bytes([0xE0, 0xA0, 0xA0, 0xE0, 0xA0, 0xA0, 0xA0, 0x80])


def test_to_paged_transposes_rows_into_columns():
    paged = to_paged(GLYPH_ROWS, 3, 8, 1, 4)
    assert paged == bytes([0xFF, 0x09, 0x7F, 0x00])


def test_to_paged_multi_page():
    rows = bytes([0x80] + [0x00] * 8 + [0x40])
    paged = to_paged(rows, 2, 10, 1, 3)
    # page 0: col 0 row 0; page 1: col 1 row 9
    assert paged == bytes([0x01, 0x00, 0x00, 0x00, 0x02, 0x00])


def test_load_bf2_builds_paged_font(tmp_path):
    path = tmp_path / "tiny.bf2"
    path.write_bytes(make_bf2({32: (3, bytes(8)), 65: (3, GLYPH_ROWS)}, 3, 8))

    font = load_bf2(str(path), scale=2)

    assert isinstance(font, Font)
    assert (font.width, font.height, font.scale) == (4, 8, 2)
    assert font.last_character == 65 - 32
    assert font.glyph(ord("A")) == bytes([0xFF, 0x09, 0x7F, 0x00])
    # gaps are blank cells
    assert font.glyph(ord("0")) == bytes(4)


def test_load_bf2_proportional_width(tmp_path):
    path = tmp_path / "prop.bf2"
    wide = bytes([0xF0] * 8)
    path.write_bytes(make_bf2({32: (1, bytes(8)), 66: (2, wide)}, 4, 8,
                              proportional=True))
    font = load_bf2(str(path))
    # only the glyph's own 2 columns are copied
    assert font.glyph(ord("B")) == bytes([0xFF, 0xFF, 0x00, 0x00, 0x00])


def test_load_bf2_skips_codepoints_outside_latin1(tmp_path):
    path = tmp_path / "wide.bf2"
    path.write_bytes(make_bf2({33: (3, GLYPH_ROWS), 0x25B2: (3, GLYPH_ROWS)}, 3, 8))
    font = load_bf2(str(path))
    assert font.last_character == 1


def test_load_bf2_rejects_bad_magic(tmp_path):
    path = tmp_path / "bad.bf2"
    path.write_bytes(make_bf2({65: (3, GLYPH_ROWS)}, 3, 8, magic=b"XX"))
    with pytest.raises(ValueError):
        load_bf2(str(path))


def test_load_bf2_rejects_truncated_bitmap(tmp_path):
    path = tmp_path / "short.bf2"
    path.write_bytes(make_bf2({65: (3, GLYPH_ROWS)}, 3, 8)[:-3])
    with pytest.raises(ValueError):
        load_bf2(str(path))


def test_load_bf2_requires_printable_glyphs(tmp_path):
    path = tmp_path / "ctrl.bf2"
    path.write_bytes(make_bf2({7: (3, GLYPH_ROWS)}, 3, 8))
    with pytest.raises(ValueError):
        load_bf2(str(path))


def test_load_bf2_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_bf2(str(tmp_path / "nope.bf2"))


# =============================================================================
# Converter tool
# =============================================================================

GLYPHS = {
    32: {'width': 3, 'data': bytes(8)},
    65: {'width': 3, 'data': GLYPH_ROWS},
}
PROPS = {'height': 8, 'max_width': 3}


def test_write_bf2_is_loadable(tmp_path):
    path = tmp_path / "out.bf2"
    assert fontconv.write_bf2(path, GLYPHS, PROPS) == 2
    font = load_bf2(str(path))
    assert font.glyph(ord("A")) == to_paged(GLYPH_ROWS, 3, 8, 1, 4)


def test_write_bf2_charset_subset(tmp_path):
    path = tmp_path / "sub.bf2"
    assert fontconv.write_bf2(path, GLYPHS, PROPS, charset={"A"}) == 1


def test_write_bf2_without_glyphs_raises(tmp_path):
    with pytest.raises(ValueError):
        fontconv.write_bf2(tmp_path / "x.bf2", GLYPHS, PROPS, charset={"Z"})


def test_write_python_module_defines_font(tmp_path):
    path = tmp_path / "tiny_font.py"
    count = fontconv.write_python(path, GLYPHS, PROPS, name="TINY")
    assert count == 34

    font = runpy.run_path(str(path))["TINY"]
    assert (font.width, font.height) == (4, 8)
    assert font.glyph(ord("A")) == bytes([0xFF, 0x09, 0x7F, 0x00])


def test_preview_renders_ascii_art():
    out = fontconv.preview_glyphs(GLYPHS, PROPS, "AZ")
    lines = out.splitlines()
    assert lines[0].startswith("'A'")
    assert lines[1] == "  ###"
    assert lines[2] == "  #.#"
    assert "NOT FOUND" in lines[-1]


BDF = b"""STARTFONT 2.1
FONT -test-fixed-medium-r-normal--8-80-75-75-c-40-iso10646-1
SIZE 8 75 75
FONTBOUNDINGBOX 4 8 0 -1
STARTPROPERTIES 2
FONT_ASCENT 7
FONT_DESCENT 1
ENDPROPERTIES
CHARS 1
STARTCHAR A
ENCODING 65
SWIDTH 500 0
DWIDTH 4 0
BBX 3 3 0 0
BITMAP
E0
A0
E0
ENDCHAR
ENDFONT
"""


def test_load_bdf_font_places_glyph_on_baseline(tmp_path):
    pytest.importorskip("bdflib")
    path = tmp_path / "tiny.bdf"
    path.write_bytes(BDF)

    glyphs, props = fontconv.load_bdf_font(path)

    assert props == {'height': 8, 'max_width': 4}
    assert glyphs[65]['width'] == 4
    assert glyphs[65]['data'] == bytes([0, 0, 0, 0, 0xE0, 0xA0, 0xE0, 0])


def test_main_requires_output_or_preview(tmp_path):
    with pytest.raises(SystemExit):
        fontconv.main([str(tmp_path / "in.bdf")])


def test_main_reports_missing_input(tmp_path, capsys):
    assert fontconv.main([str(tmp_path / "in.bdf"), str(tmp_path / "o.bf2")]) == 1
    assert "not found" in capsys.readouterr().out
