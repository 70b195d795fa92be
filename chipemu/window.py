"""On-screen window that shows the contents of a Display."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from chipemu.display import Display  # noqa: E402

BACKGROUND = (0, 0, 0, 255)
FOREGROUND = (255, 255, 255, 255)
TITLE = "SDL Display"


class Window:
    """A pygame window that draws a Display scaled up by a whole factor."""

    def __init__(self, display: Display, scale_factor: int = 4) -> None:
        if scale_factor <= 0:
            raise ValueError("scale factor must be positive")
        self.display = display
        self.scale_factor = scale_factor
        pygame.display.init()
        pygame.display.set_caption(TITLE)
        self._screen: pygame.Surface | None = pygame.display.set_mode(self.size)
        self._frame = pygame.Surface((display.width, display.height))

    @property
    def size(self) -> tuple[int, int]:
        """Window size in screen pixels."""
        return (
            self.display.width * self.scale_factor,
            self.display.height * self.scale_factor,
        )

    @property
    def surface(self) -> pygame.Surface:
        """The surface the window presents."""
        if self._screen is None:
            raise RuntimeError("window is closed")
        return self._screen

    def render(self) -> None:
        """Draw the display's pixels into the frame buffer and show it scaled."""
        screen = self.surface
        self._frame.fill(BACKGROUND)
        for point in self.display.lit_pixels():
            self._frame.set_at(point, FOREGROUND)
        screen.fill(BACKGROUND)
        screen.blit(pygame.transform.scale(self._frame, self.size), (0, 0))
        pygame.display.flip()

    def quit_requested(self) -> bool:
        """Drain pending events and report whether a quit was asked for."""
        return any(event.type == pygame.QUIT for event in pygame.event.get())

    def close(self) -> None:
        """Shut the window down."""
        if self._screen is not None:
            self._screen = None
            pygame.display.quit()

    def __enter__(self) -> "Window":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()