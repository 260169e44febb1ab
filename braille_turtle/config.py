#
# PROJECT: braille-turtle
# MODULE: braille_turtle/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import shutil
from dataclasses import dataclass


@dataclass
class CanvasConfig:
    """Declared canvas size, in pixels."""
    pixel_width: int = 0
    pixel_height: int = 0

    def __post_init__(self):
        if self.pixel_width < 0 or self.pixel_height < 0:
            raise ValueError(
                f"canvas size must be non-negative, got "
                f"{self.pixel_width}x{self.pixel_height}"
            )

    @property
    def cell_size(self):
        """(columns, rows) of character cells this size declares."""
        return (self.pixel_width // 2, self.pixel_height // 4)

    @classmethod
    def detect_terminal(cls) -> 'CanvasConfig':
        """
        Size the canvas to the current terminal.

        Leaves one spare column and two spare rows so printing a full
        frame does not scroll the prompt away.
        """
        tw, th = shutil.get_terminal_size()
        return cls(
            pixel_width=max(0, (tw - 1) * 2),
            pixel_height=max(0, (th - 2) * 4),
        )
