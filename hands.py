import cv2

import mediapipe as mp

THUMB_TIP = 4
INDEX_TIP = 8

PINCH_OPEN_DIST = 0.12
PINCH_ACTIVE_THRESH = 0.10


def open_camera(max_index=6):
    for i in range(max_index):
        cap = cv2.VideoCapture(i)
        if cap.isOpened():
            ok, _ = cap.read()
            if ok:
                print(f"✅ Using camera index: {i}")
                return cap
        cap.release()
    raise RuntimeError(f"❌ No working camera found (0–{max_index-1}).")


def pinch_amount(lms):
    """0 = open hand, 1 = thumb and index touching. lms in 0..1 image coords."""
    dx = lms[INDEX_TIP][0] - lms[THUMB_TIP][0]
    dy = lms[INDEX_TIP][1] - lms[THUMB_TIP][1]
    d = (dx * dx + dy * dy) ** 0.5
    pinch = 1.0 - min(1.0, max(0.0, d / float(PINCH_OPEN_DIST)))
    if d > PINCH_ACTIVE_THRESH:
        pinch *= 0.85
    return float(max(0.0, min(1.0, pinch)))


class PinchLatch:
    """Hysteresis so a wobbly pinch doesn't stutter the stroke."""

    def __init__(self, pinch_on=0.75, pinch_off=0.55):
        self.pinch_on = float(pinch_on)
        self.pinch_off = float(pinch_off)
        self.down = False

    def update(self, pinch):
        """Returns True on press edge, False on release edge, None otherwise."""
        if not self.down and pinch > self.pinch_on:
            self.down = True
            return True
        if self.down and pinch < self.pinch_off:
            self.down = False
            return False
        return None


class HandPointer:
    """
    MediaPipe hands -> one pointer in canvas pixels.

    process(frame_bgr, canvas_w, canvas_h) returns (x, y, edge). x and y
    are None when no hand is visible; losing the hand mid-pinch releases.
    """

    def __init__(self, det_conf=0.5, track_conf=0.5, mirror=True):
        self.mirror = bool(mirror)
        self.latch = PinchLatch()
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=1,
            model_complexity=1,
            min_detection_confidence=float(det_conf),
            min_tracking_confidence=float(track_conf),
        )

    def process(self, frame_bgr, canvas_w, canvas_h):
        if self.mirror:
            frame_bgr = cv2.flip(frame_bgr, 1)
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)

        res = self.hands.process(frame_rgb)

        if not res.multi_hand_landmarks:
            # hand left the frame: lift the pen
            if self.latch.down:
                self.latch.down = False
                return None, None, False
            return None, None, None

        lms = [(lm.x, lm.y) for lm in res.multi_hand_landmarks[0].landmark]
        edge = self.latch.update(pinch_amount(lms))

        x = lms[INDEX_TIP][0] * canvas_w
        y = lms[INDEX_TIP][1] * canvas_h
        return x, y, edge

    def close(self):
        self.hands.close()
