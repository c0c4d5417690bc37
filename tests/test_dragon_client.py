import logging

import pygame
import pytest

from flappy_dragon.config import GameConfig
from flappy_dragon.data_models import InputEvent
from flappy_dragon.dragon_client import DragonClient, cell_rect, map_key


def test_key_bindings():
    assert map_key(pygame.K_SPACE) is InputEvent.FLAP
    assert map_key(pygame.K_p) is InputEvent.RESTART
    assert map_key(pygame.K_q) is InputEvent.QUIT


def test_unbound_key_is_ignored():
    assert map_key(pygame.K_a) is None
    assert map_key(pygame.K_ESCAPE) is None


def test_cell_rect():
    rect = cell_rect(3, 4, 12)
    assert (rect.x, rect.y, rect.width, rect.height) == (36, 48, 12, 12)


def test_window_failure_is_logged_and_reraised(monkeypatch, caplog):
    monkeypatch.setenv("SDL_VIDEODRIVER", "no_such_driver")
    with caplog.at_level(logging.ERROR, logger="flappy_dragon"):
        with pytest.raises(pygame.error):
            DragonClient(GameConfig())
    assert "Pygame failed to initialise" in caplog.text


class _Clock:
    def tick(self, fps):
        return 16


class _BrokenState:
    def tick(self, ctx):
        raise RuntimeError("boom")


def test_run_tears_down_window_when_tick_fails(monkeypatch):
    calls = []
    monkeypatch.setattr(pygame.event, "get", lambda: [])
    monkeypatch.setattr(pygame, "quit", lambda: calls.append("quit"))

    client = DragonClient.__new__(DragonClient)
    client.config = GameConfig()
    client.clock = _Clock()
    client.state = _BrokenState()

    with pytest.raises(RuntimeError, match="boom"):
        client.run()
    assert calls == ["quit"]
