import random

import pytest

from ghosthunter.state import (
    FRAME_SIZE,
    SHEET_HEIGHT,
    FrameRect,
    GameState,
    Position,
    texture_for_level,
)


def _state():
    return GameState(rng=random.Random(1234))


def test_defaults():
    state = _state()
    assert state.pos == Position(0, 0, 0)
    assert state.rect == FrameRect(0, 0, 42, 42)
    assert state.level == 1
    assert state.texture == "addons/ghost.png"


def test_texture_for_level():
    assert texture_for_level(1) == "addons/ghost.png"
    assert texture_for_level(10) == "addons/ghost.png"
    assert texture_for_level(11) == "addons/fantasmabluelvl2.png"
    assert texture_for_level(20) == "addons/fantasmabluelvl2.png"
    assert texture_for_level(21) == "addons/fantasmanegrolvl3.png"


def test_frame_rect_cycles():
    rect = FrameRect()
    seen = []
    for _ in range(20):
        rect.advance()
        seen.append(rect.top)
        assert rect.top % FRAME_SIZE == 0
        assert rect.top < SHEET_HEIGHT - FRAME_SIZE
    assert 0 in seen
    assert max(seen) > 0


def test_advance_waits_for_interval():
    state = _state()
    assert state.advance(0.1) is False
    assert state.pos.x == 0
    assert state.advance(0.1) is True
    assert state.pos.x == int(state.speed)
    assert state.rect.top == FRAME_SIZE


def test_advance_rejects_negative():
    with pytest.raises(ValueError):
        _state().advance(-1.0)


def test_hit_inside():
    state = _state()
    assert state.hit(10, 10) is True
    assert state.pos.count == 1
    assert state.pos.x == 0
    assert 0 <= state.pos.y < state.height - FRAME_SIZE


def test_hit_outside():
    state = _state()
    state.pos.y = 100
    assert state.hit(FRAME_SIZE, 100) is False
    assert state.hit(5, 99) is False
    assert state.pos.count == 0
    assert state.pos.y == 100


def test_check_bounds_wraps():
    state = _state()
    state.pos.x = state.width
    assert state.check_bounds() is True
    assert state.pos.x == 0
    assert 0 <= state.pos.y < state.height - FRAME_SIZE


def test_check_bounds_inside():
    state = _state()
    state.pos.x = state.width - 1
    state.pos.y = 50
    assert state.check_bounds() is False
    assert state.pos.x == state.width - 1
    assert state.pos.y == 50


def test_level_up():
    state = _state()
    state.pos.count = 10
    assert state.update_level() is True
    assert state.level == 2
    assert state.speed == 20.0
    assert state.texture == "addons/ghost.png"
    assert state.update_level() is False


def test_level_texture_changes_after_ten():
    state = _state()
    state.pos.count = 100
    assert state.update_level() is True
    assert state.level == 11
    assert state.texture == "addons/fantasmabluelvl2.png"


def test_level_capped():
    state = _state()
    state.pos.count = 500
    assert state.update_level() is False
    assert state.level == 1


def test_speed_grows_with_level():
    state = _state()
    speeds = []
    for kills in range(0, 200, 10):
        state.pos.count = kills
        state.update_level()
        speeds.append(state.speed)
    assert speeds == sorted(speeds)
    assert state.level == 20
    assert len(set(speeds)) == 20