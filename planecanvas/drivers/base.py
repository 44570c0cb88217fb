"""
DisplayDriver - Abstract Base for Display Drivers
=================================================
Defines the interface a display driver exposes to Canvas.

A driver receives the framebuffer planes exactly as they are laid out in
memory (paged, bit 0 = top row of each 8-row page) and is responsible for
getting them onto the panel. Canvas never inspects controller details.

Note: Using duck typing instead of ABC; any object with these attributes
and a display() method works.
"""


class DisplayDriver:
    """
    Abstract base class for paged display drivers.

    Subclasses must implement all methods marked as "abstract".

    Properties:
        COLUMNS: Physical display width in pixels
        ROWS: Physical display height in pixels
        COLORS: Number of color planes the panel accepts
    """

    # Subclasses must define these
    COLUMNS: int = 0
    ROWS: int = 0
    COLORS: int = 1

    def display(self, planes: list) -> None:
        """
        Transmit a full frame.

        Args:
            planes: One bytearray per color plane, each
                COLUMNS * ceil(ROWS / 8) bytes, in color order (1..COLORS)
        """
        raise NotImplementedError

    def deinit(self):
        """Release hardware resources."""
        raise NotImplementedError
