# hud_sliders.py
# Tuning bar for the pen:
# - Row 1: STIFFNESS knob, row 2: DAMPING knob
# - Press near a knob to grab it, drag horizontally, release to let go
# - Press anywhere else asks for a canvas clear
# - Credit strip along the bottom
import cv2

from params import K_MIN, K_MAX, D_MIN, D_MAX, _clamp, clamp_stiffness, clamp_damping

CREDIT = "Dynadraw / Paul Haeberli, 1989, port by Golan Levin, made hands-free by Oz Ramos"

EDIT_NONE = 0
EDIT_K = 1
EDIT_D = 2


def knob_x(value, lo, hi, width):
    return width * (value - lo) / (hi - lo)


class Sliders:
    def __init__(self, params):
        self.params = params
        self.editing = EDIT_NONE

        self.font = cv2.FONT_HERSHEY_SIMPLEX
        self.font_scale = 0.45
        self.col_bar = (200, 200, 200)     # BGR
        self.col_edge = (0, 0, 0)
        self.col_text = (110, 110, 110)
        self.col_credit_bg = (255, 255, 255)
        self.col_credit_edge = (180, 180, 180)
        self.col_credit = (180, 180, 180)

    @property
    def height(self):
        return self.params.slider_h * 2

    # ---------- input ----------
    def press(self, x, y, width) -> bool:
        """
        Pointer went down at (x, y).
        Returns True when the press missed both knobs (caller clears canvas).
        """
        p = self.params
        sh = p.slider_h
        kx = knob_x(p.k, K_MIN, K_MAX, width)
        dx = knob_x(p.damping, D_MIN, D_MAX, width)

        if abs(x - kx) < p.slider_tol and 0 < y < sh:
            self.editing = EDIT_K
            return False
        if abs(x - dx) < p.slider_tol and sh < y < sh * 2:
            self.editing = EDIT_D
            return False

        self.editing = EDIT_NONE
        return True

    def release(self):
        self.editing = EDIT_NONE

    def update(self, x, width):
        """Call once per frame with the current pointer x."""
        if self.editing == EDIT_NONE or width <= 0:
            return
        t = float(x) / float(width)
        if self.editing == EDIT_K:
            self.params.k = clamp_stiffness(t * (K_MAX - K_MIN) + K_MIN)
        elif self.editing == EDIT_D:
            self.params.damping = clamp_damping(t * (D_MAX - D_MIN) + D_MIN)

    # ---------- render ----------
    def render(self, frame):
        W = frame.shape[1]
        p = self.params
        sh = p.slider_h

        cv2.rectangle(frame, (0, 0), (W - 1, sh * 2), self.col_bar, -1)
        cv2.rectangle(frame, (0, 0), (W - 1, sh * 2), self.col_edge, 1)
        cv2.line(frame, (0, sh), (W - 1, sh), self.col_edge, 1)

        kx = int(_clamp(knob_x(p.k, K_MIN, K_MAX, W), 0, W - 1))
        dx = int(_clamp(knob_x(p.damping, D_MIN, D_MAX, W), 0, W - 1))
        cv2.line(frame, (kx, 0), (kx, sh), self.col_edge, 1)
        cv2.line(frame, (dx, sh), (dx, sh * 2), self.col_edge, 1)

        self._text_right(frame, "STIFFNESS", (kx - 5, sh - 8))
        self._text_right(frame, "DAMPING", (dx - 5, sh * 2 - 8))
        self._text(frame, f"{p.k:.3f}", (kx + 5, sh - 8))
        self._text(frame, f"{p.damping:.3f}", (dx + 5, sh * 2 - 8))

        self._draw_credit(frame)
        return frame

    def _draw_credit(self, frame):
        H, W = frame.shape[:2]
        sh = self.params.slider_h
        cv2.rectangle(frame, (0, H - sh), (W - 1, H - 1), self.col_credit_bg, -1)
        cv2.line(frame, (0, H - sh), (W - 1, H - sh), self.col_credit_edge, 1)
        self._text(frame, CREDIT, (5, H - 7), self.col_credit)

    def _text(self, frame, s, org, col=None):
        cv2.putText(frame, s, (int(org[0]), int(org[1])), self.font, self.font_scale,
                    col or self.col_text, 1, cv2.LINE_AA)

    def _text_right(self, frame, s, org):
        (tw, _), _ = cv2.getTextSize(s, self.font, self.font_scale, 1)
        self._text(frame, s, (org[0] - tw, org[1]))
