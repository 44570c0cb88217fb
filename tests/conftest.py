"""
Pytest configuration and fixtures for planecanvas tests.

This module provides:
- Small framebuffers with one and two color planes
- A recording display driver
- lit(), which snapshots every non-blank physical pixel
"""

import pytest

from planecanvas import Canvas, DisplayDriver, DrawBuffer


def lit(fb):
    """Return {(x, y): color} for every non-blank physical pixel."""
    return {
        (x, y): c
        for y in range(fb.rows)
        for x in range(fb.columns)
        if (c := fb.get_pixel(x, y))
    }


class RecordingDriver(DisplayDriver):
    """Driver double that keeps every frame it receives."""

    COLUMNS = 32
    ROWS = 16
    COLORS = 2

    def __init__(self):
        self.frames = []

    def display(self, planes):
        self.frames.append(planes)

    def deinit(self):
        pass


@pytest.fixture
def fb():
    """16x16 buffer, one color plane."""
    return DrawBuffer(16, 16)


@pytest.fixture
def fb2():
    """16x16 buffer, two color planes."""
    return DrawBuffer(16, 16, colors=2)


@pytest.fixture
def driver():
    return RecordingDriver()


@pytest.fixture
def canvas():
    return Canvas(32, 16, colors=2)
