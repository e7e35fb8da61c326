# events.py - input collected from callbacks, applied once per frame
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import cv2

MOVE = "move"
PRESS = "press"
RELEASE = "release"
KEY = "key"


@dataclass(frozen=True)
class InputEvent:
    kind: str
    x: float = 0.0
    y: float = 0.0
    key: int = -1
    from_hand: bool = False


class EventQueue:
    """
    FIFO of InputEvents.

    cv2 callbacks only push here; the frame loop drains everything at the
    start of a frame so input and simulation never interleave.
    """

    def __init__(self):
        self._q = deque()

    def __len__(self):
        return len(self._q)

    def push(self, ev: InputEvent):
        self._q.append(ev)

    def drain(self) -> list[InputEvent]:
        out = list(self._q)
        self._q.clear()
        return out

    # ---------- producers ----------
    def on_mouse(self, event, x, y, flags, param=None):
        """Signature matches cv2.setMouseCallback."""
        if event == cv2.EVENT_MOUSEMOVE:
            self.push(InputEvent(MOVE, float(x), float(y)))
        elif event == cv2.EVENT_LBUTTONDOWN:
            self.push(InputEvent(PRESS, float(x), float(y)))
        elif event == cv2.EVENT_LBUTTONUP:
            self.push(InputEvent(RELEASE, float(x), float(y)))

    def on_key(self, key: int):
        if key is None or key < 0 or key == 255:
            return
        self.push(InputEvent(KEY, key=int(key)))

    def on_hand(self, x, y, pressed: bool | None):
        """pressed: True/False on a pinch edge, None while it holds."""
        if x is None or y is None:
            if pressed is False:
                self.push(InputEvent(RELEASE, from_hand=True))
            return
        self.push(InputEvent(MOVE, float(x), float(y), from_hand=True))
        if pressed is True:
            self.push(InputEvent(PRESS, float(x), float(y), from_hand=True))
        elif pressed is False:
            self.push(InputEvent(RELEASE, float(x), float(y), from_hand=True))
