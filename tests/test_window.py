import pygame
import pytest

from chipemu.display import Display
from chipemu.window import Window


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield
    pygame.display.quit()


def test_size_is_scaled(headless):
    display = Display(16, 8)
    with Window(display, 3) as window:
        assert window.size == (48, 24)
        assert window.surface.get_size() == (48, 24)


def test_render_draws_lit_pixels_white(headless):
    display = Display(16, 8)
    display.toggle_pixel(2, 3)
    with Window(display, 4) as window:
        window.render()
        surface = window.surface
        for dx in range(4):
            for dy in range(4):
                assert tuple(surface.get_at((8 + dx, 12 + dy))) == (255, 255, 255, 255)
        assert tuple(surface.get_at((0, 0))) == (0, 0, 0, 255)
        assert tuple(surface.get_at((12, 12))) == (0, 0, 0, 255)


def test_render_follows_display_changes(headless):
    display = Display(16, 8)
    display.toggle_pixel(1, 1)
    with Window(display, 2) as window:
        window.render()
        assert tuple(window.surface.get_at((2, 2))) == (255, 255, 255, 255)
        display.clear()
        window.render()
        assert tuple(window.surface.get_at((2, 2))) == (0, 0, 0, 255)


def test_invalid_scale_factor(headless):
    with pytest.raises(ValueError):
        Window(Display(16, 8), 0)


def test_quit_requested(headless):
    with Window(Display(16, 8), 1) as window:
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        assert window.quit_requested() is True
        assert window.quit_requested() is False


def test_render_after_close_raises(headless):
    window = Window(Display(16, 8), 1)
    window.close()
    with pytest.raises(RuntimeError):
        window.render()