"""Integration tests for a drawing session (events -> physics -> raster).

Tests for session:
    - Pen does not paint while the draw trigger is up
    - Press on the canvas clears it, then the pen paints while held
    - Press on a slider knob drags the param; the held trigger still paints
    - Hand pinch draws but never clears
    - Number keys pick colours, C clears, R re-centres
    - compose() overlays the HUD on a copy; the raster stays strokes-only

Run:
    pytest tests/test_session.py -v
"""

import numpy as np
import pytest

from events import InputEvent, MOVE, PRESS, RELEASE, KEY
from hud_sliders import EDIT_K
from params import Params
from session import DrawSession

W, H = 400, 300


@pytest.fixture
def session():
    return DrawSession(W, H, Params())


def _bg(session):
    return np.array(session.params.bg_bgr(), dtype=np.uint8)


def _blank(session):
    return bool(np.all(session.canvas == _bg(session)))


def test_starts_centered_and_blank(session):
    assert session.state.pen.position == (W / 2, H / 2)
    assert _blank(session)


def test_no_paint_without_trigger(session):
    session.apply_events([InputEvent(MOVE, 50.0, 250.0)])
    segs = [session.step() for _ in range(60)]

    assert all(s is None for s in segs)
    assert _blank(session)
    # the pen still chased the pointer
    assert session.state.pen.position != (W / 2, H / 2)


def test_press_clears_then_paints(session):
    session.canvas[100:110, 100:110] = 255
    session.apply_events([InputEvent(PRESS, 200.0, 150.0)])
    assert _blank(session)
    assert session.state.pointer_down

    session.apply_events([InputEvent(MOVE, 300.0, 200.0)])
    segs = [session.step() for _ in range(20)]

    assert all(s is not None for s in segs)
    assert all(s.thickness >= 1.0 for s in segs)
    assert not _blank(session)

    session.apply_events([InputEvent(RELEASE, 300.0, 200.0)])
    assert session.step() is None


def test_slider_drag_keeps_press_and_paints(session):
    p = session.params
    session.apply_events([InputEvent(PRESS, W * (0.06 - 0.01) / 0.19, 10.0)])
    assert session.sliders.editing == EDIT_K
    # grabbing a knob is not a miss, so the page is not cleared
    assert _blank(session)

    session.apply_events([InputEvent(MOVE, float(W), 10.0)])
    session.step()
    assert p.k == pytest.approx(0.2)

    # dragging on down into the canvas still leaves ink, trigger is held
    session.apply_events([InputEvent(MOVE, 200.0, 250.0)])
    segs = [session.step() for _ in range(40)]
    assert all(s is not None for s in segs)
    assert not _blank(session)


def test_hand_pinch_never_clears(session):
    session.canvas[100:110, 100:110] = 255
    session.apply_events([
        InputEvent(MOVE, 200.0, 150.0, from_hand=True),
        InputEvent(PRESS, 200.0, 150.0, from_hand=True),
    ])
    assert session.state.pointer_down
    assert session.canvas[105, 105].max() == 255


def test_events_apply_in_order(session):
    # press + release inside one frame leaves the trigger up
    session.apply_events([
        InputEvent(PRESS, 200.0, 150.0),
        InputEvent(MOVE, 220.0, 160.0),
        InputEvent(RELEASE, 220.0, 160.0),
    ])
    assert not session.state.pointer_down
    assert session.state.pointer == (220.0, 160.0)


def test_keys(session):
    session.apply_events([InputEvent(KEY, key=ord("5"))])
    assert session.state.draw_color == session.params.color_bgr(5)

    # 0, 8, 9 are not colour keys
    session.apply_events([InputEvent(KEY, key=ord("8"))])
    assert session.state.draw_color == session.params.color_bgr(5)

    session.canvas[:] = 0
    session.apply_events([InputEvent(KEY, key=ord("c"))])
    assert _blank(session)


def test_reset_recenters(session):
    session.apply_events([InputEvent(PRESS, 10.0, 280.0), InputEvent(MOVE, 10.0, 280.0)])
    for _ in range(10):
        session.step()

    session.apply_events([InputEvent(KEY, key=ord("r"))])
    assert session.state.pen.position == (W / 2, H / 2)
    assert session.state.pen.velocity == (0.0, 0.0)
    assert not session.state.pointer_down
    assert _blank(session)


def test_compose_keeps_raster_clean(session):
    frame = session.compose()
    assert frame.shape == session.canvas.shape
    assert tuple(frame[3, 300]) == (200, 200, 200)
    assert _blank(session)


def test_compose_pointer_marker(session):
    session.show_pointer = True
    session.apply_events([InputEvent(MOVE, 200.0, 150.0)])
    frame = session.compose()
    assert not np.array_equal(frame[140:160, 185:215], session.canvas[140:160, 185:215])
