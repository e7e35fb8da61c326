# stroke.py - calligraphic stroke onto a persistent raster
from __future__ import annotations

from dataclasses import dataclass
import math
import cv2
import numpy as np

# Sub-pixel fixed point for cv2 drawing calls
SHIFT = 4
_ONE = 1 << SHIFT
_INT_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class StrokeSegment:
    start: tuple[float, float]
    end: tuple[float, float]
    thickness: float


def stroke_thickness(speed: float, params) -> float:
    """
    Chisel-nib width: fast pen -> thin line, slow pen -> thick line.
    Never below 1 px.
    """
    th = params.max_thickness - min(speed * params.ductus, params.max_thickness)
    return max(1.0, th)


def _fixed(p):
    return (int(round(p[0] * _ONE)), int(round(p[1] * _ONE)))


def _fits(*pts):
    # cv2 takes C ints for points
    return all(-_INT_MAX <= c <= _INT_MAX for p in pts for c in p)


def draw_stroke(canvas: np.ndarray, previous, current, velocity, params, color, active: bool):
    """
    Paint one segment from `previous` to `current` onto `canvas` (in place).

    Returns the StrokeSegment that was painted, or None when drawing is
    inactive or the points are non-finite or beyond cv2 int range.
    Nothing is kept: the canvas is the only record.
    """
    if not active:
        return None

    pts = (previous[0], previous[1], current[0], current[1])
    if not all(math.isfinite(float(v)) for v in pts):
        return None

    vx, vy = float(velocity[0]), float(velocity[1])
    speed = math.hypot(vx, vy)
    th = stroke_thickness(speed, params)

    a = _fixed(previous)
    b = _fixed(current)
    if not _fits(a, b):
        return None
    color = tuple(int(c) for c in color)

    # cv2 lines are round-capped already
    cv2.line(canvas, a, b, color, max(1, int(round(th))), cv2.LINE_AA, SHIFT)

    # Little ball at the joint so thick segments don't gap at sharp turns
    if th > 1.0:
        r = int(round(th * 0.5 * _ONE))
        cv2.circle(canvas, b, r, color, -1, cv2.LINE_AA, SHIFT)

    return StrokeSegment(
        start=(float(previous[0]), float(previous[1])),
        end=(float(current[0]), float(current[1])),
        thickness=th,
    )


def new_canvas(w: int, h: int, bg_bgr) -> np.ndarray:
    canvas = np.empty((int(h), int(w), 3), dtype=np.uint8)
    canvas[:] = bg_bgr
    return canvas


def clear_canvas(canvas: np.ndarray, bg_bgr):
    canvas[:] = bg_bgr
