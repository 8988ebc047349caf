import pygame as pg
import pytest

from neonpong.app import App
from neonpong.game import NOT_STARTED, PAUSED, RUNNING


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return App(settings={"ai_difficulty": "Normal", "particle_quality": "Normal", "sound": True})


def key(kind, k):
    return pg.event.Event(kind, key=k)


def test_commands(app):
    assert app.handle_event(key(pg.KEYDOWN, pg.K_SPACE))
    assert app.game.run_state == RUNNING
    app.handle_event(key(pg.KEYDOWN, pg.K_p))
    assert app.game.run_state == PAUSED
    app.handle_event(key(pg.KEYDOWN, pg.K_r))
    assert app.game.run_state == NOT_STARTED


def test_movement_keys(app):
    app.handle_event(key(pg.KEYDOWN, pg.K_w))
    assert app.game.input.up
    app.handle_event(key(pg.KEYUP, pg.K_w))
    assert not app.game.input.up
    app.handle_event(key(pg.KEYDOWN, pg.K_DOWN))
    assert app.game.input.down


def test_mouse_motion_points(app):
    app.handle_event(pg.event.Event(pg.MOUSEMOTION, pos=(30, 123), rel=(0, 0), buttons=(0, 0, 0)))
    assert app.game.input.pointer_y == 123


def test_quit_events(app):
    assert not app.handle_event(pg.event.Event(pg.QUIT))
    assert not app.handle_event(key(pg.KEYDOWN, pg.K_ESCAPE))


def test_settings_hotkeys_update_game(app, capsys):
    app.handle_event(key(pg.KEYDOWN, pg.K_d))
    assert app.game.settings["ai_difficulty"] == "Hard"
    app.handle_event(key(pg.KEYDOWN, pg.K_q))
    assert app.game.settings["particle_quality"] == "High"
    app.handle_event(key(pg.KEYDOWN, pg.K_m))
    assert app.game.settings["sound"] is False
    assert "settings saved" in capsys.readouterr().out


def test_debug_toggle(app):
    app.handle_event(key(pg.KEYDOWN, pg.K_F3))
    assert app.debug
