import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from genkingdom.menu import (
    BACKGROUND_COLOR,
    BLACK,
    BUTTON_COLOR,
    HOVER_COLOR,
    WHITE,
    MainMenu,
)
from genkingdom.play import PlayState
from genkingdom.states import StateManager


@pytest.fixture(autouse=True)
def _pygame():
    pygame.init()
    yield
    pygame.quit()


class FakeWindow:
    def __init__(self, mouse=(0, 0)):
        self.surface = pygame.Surface((800, 600))
        self.open = True
        self.mouse = mouse

    def close(self):
        self.open = False

    def clear(self, color=(0, 0, 0)):
        self.surface.fill(color)

    def mouse_position(self):
        return self.mouse


def _click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


@pytest.fixture
def menu(tmp_path):
    manager = StateManager()
    state = MainMenu(manager, asset_dir=tmp_path)
    manager.push(state)
    return state


def test_missing_assets_are_reported(tmp_path, capsys):
    MainMenu(StateManager(), asset_dir=tmp_path)
    err = capsys.readouterr().err
    assert "Error loading font" in err
    assert "Error loading logo" in err


def test_quit_event_closes_window(menu):
    window = FakeWindow()
    menu.handle_event(window, pygame.event.Event(pygame.QUIT))
    assert window.open is False


def test_clicking_play_pushes_play_state(menu):
    window = FakeWindow(mouse=(100, 330))
    menu.handle_event(window, _click((100, 330)))
    assert isinstance(menu.manager.current(), PlayState)
    assert len(menu.manager) == 2
    assert window.open is True


def test_clicking_quit_closes_window(menu, capsys):
    window = FakeWindow(mouse=(100, 430))
    menu.handle_event(window, _click((100, 430)))
    assert window.open is False
    assert "Quit button clicked!" in capsys.readouterr().out
    assert menu.manager.current() is menu


def test_clicking_elsewhere_does_nothing(menu):
    window = FakeWindow(mouse=(700, 50))
    menu.handle_event(window, _click((700, 50)))
    assert window.open is True
    assert menu.manager.current() is menu


def test_hovering_highlights_button(menu):
    window = FakeWindow(mouse=(200, 320))
    menu.handle_event(window, pygame.event.Event(pygame.MOUSEMOTION, pos=(200, 320)))
    assert menu.play_button.fill == HOVER_COLOR
    assert menu.play_button.outline == HOVER_COLOR
    assert menu.play_button.text_color == BLACK
    assert menu.quit_button.fill == BUTTON_COLOR
    assert menu.quit_button.text_color == WHITE


def test_leaving_button_restores_colours(menu):
    window = FakeWindow(mouse=(200, 420))
    menu.handle_event(window, pygame.event.Event(pygame.MOUSEMOTION, pos=(200, 420)))
    assert menu.quit_button.fill == HOVER_COLOR
    window.mouse = (700, 50)
    menu.handle_event(window, pygame.event.Event(pygame.MOUSEMOTION, pos=(700, 50)))
    assert menu.quit_button.fill == BUTTON_COLOR
    assert menu.quit_button.outline == WHITE
    assert menu.quit_button.text_color == WHITE


def test_render_draws_background_and_buttons(menu):
    window = FakeWindow()
    menu.render(window)
    assert window.surface.get_at((700, 50))[:3] == BACKGROUND_COLOR
    assert window.surface.get_at((355, 362))[:3] == BUTTON_COLOR
    assert window.surface.get_at((355, 462))[:3] == BUTTON_COLOR
    assert window.surface.get_at((59, 299))[:3] == WHITE


def test_update_leaves_buttons_unchanged(menu):
    window = FakeWindow()
    menu.update(window)
    assert menu.play_button.fill == BUTTON_COLOR
    assert menu.manager.current() is menu