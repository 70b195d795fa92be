"""Monochrome pixel buffer that instructions draw into."""

from __future__ import annotations

import threading


class Display:
    """A grid of on/off pixels; coordinates outside the grid are ignored."""

    def __init__(self, width: int = 128, height: int = 64) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("display dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = [[False] * width for _ in range(height)]
        self._lock = threading.Lock()

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def toggle_pixel(self, x: int, y: int) -> None:
        """Flip the pixel at (x, y)."""
        if self._inside(x, y):
            with self._lock:
                self._pixels[y][x] = not self._pixels[y][x]

    def get_pixel(self, x: int, y: int) -> bool:
        """Return whether the pixel at (x, y) is lit; False outside the grid."""
        if self._inside(x, y):
            with self._lock:
                return self._pixels[y][x]
        return False

    def clear(self) -> None:
        """Turn every pixel off."""
        with self._lock:
            for row in self._pixels:
                row[:] = [False] * self.width

    def lit_pixels(self) -> list[tuple[int, int]]:
        """Return the (x, y) coordinates of all lit pixels, row by row."""
        with self._lock:
            return [
                (x, y)
                for y, row in enumerate(self._pixels)
                for x, lit in enumerate(row)
                if lit
            ]