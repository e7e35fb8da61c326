# session.py - one drawing session: state + raster + sliders, stepped per frame
from __future__ import annotations

import cv2

from events import MOVE, PRESS, RELEASE, KEY
from hud_sliders import Sliders
from params import Params
from sim import SimulationState
from stroke import draw_stroke, new_canvas, clear_canvas

COLOR_KEYS = {ord(str(i)): i for i in range(1, 8)}


class DrawSession:
    """
    Owns the pen simulation, the persistent raster and the tuning bar.

    Per frame:
        session.apply_events(queue.drain())
        session.step()
        frame = session.compose()
    """

    def __init__(self, width: int, height: int, params: Params | None = None):
        self.width = int(width)
        self.height = int(height)
        self.state = SimulationState(params=params or Params())
        self.sliders = Sliders(self.state.params)
        self.canvas = new_canvas(self.width, self.height, self.state.params.bg_bgr())
        self.last_segment = None
        self.show_pointer = False
        self.state.reset(self.width, self.height)

    @property
    def params(self):
        return self.state.params

    # ---------- canvas ----------
    def clear(self):
        clear_canvas(self.canvas, self.params.bg_bgr())

    def reset(self):
        self.clear()
        self.sliders.release()
        self.state.reset(self.width, self.height)

    # ---------- input ----------
    def apply_events(self, events):
        """Apply queued input in arrival order, before the frame's physics."""
        s = self.state
        for ev in events:
            if ev.kind == MOVE:
                s.pointer = (ev.x, ev.y)
            elif ev.kind == PRESS:
                s.pointer = (ev.x, ev.y)
                s.pointer_down = True
                missed = self.sliders.press(ev.x, ev.y, self.width)
                # pinching is how a hand draws, so it never wipes the page
                if missed and not ev.from_hand:
                    self.clear()
            elif ev.kind == RELEASE:
                s.pointer_down = False
                self.sliders.release()
            elif ev.kind == KEY:
                self.handle_key(ev.key)

    def handle_key(self, key: int):
        if key in COLOR_KEYS:
            self.state.select_color(COLOR_KEYS[key])
        elif key == ord("c") or key == ord("x"):
            self.clear()
        elif key == ord("r"):
            self.reset()

    # ---------- frame ----------
    def step(self):
        """One integrate + render pass. Returns the painted segment or None."""
        s = self.state
        self.sliders.update(s.pointer[0], self.width)

        pen = s.step()

        active = s.pointer_down
        self.last_segment = draw_stroke(
            self.canvas,
            pen.previous_position,
            pen.position,
            pen.velocity,
            s.params,
            s.draw_color,
            active,
        )
        return self.last_segment

    def compose(self):
        """Display frame: raster copy with the HUD on top (raster stays clean)."""
        frame = self.canvas.copy()
        self.sliders.render(frame)
        if self.show_pointer:
            x, y = self.state.pointer
            col = self.state.draw_color if self.state.pointer_down else (160, 160, 160)
            cv2.circle(frame, (int(x), int(y)), 6, col, 1, cv2.LINE_AA)
        return frame
