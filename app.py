# app.py - HANDS-FREE DYNADRAW
import importlib
import time
import cv2

from events import EventQueue
from params import Params
from session import DrawSession

WINDOW_NAME = "Dynadraw"

CANVAS_W = 1280
CANVAS_H = 720

# Start with the camera pointer on (toggle at runtime with H)
ENABLE_HANDS = False


def _init_hands():
    try:
        hands_mod = importlib.import_module("hands")
        cap = hands_mod.open_camera()
        pointer = hands_mod.HandPointer()
        print("✅ Hand pointer enabled (pinch to draw)")
        return cap, pointer
    except ImportError:
        print("⚠️  mediapipe not installed - hand pointer disabled")
        print("   pip install -e .[hands]")
        return None, None
    except Exception as e:
        print(f"⚠️  Hand pointer init failed: {e}")
        return None, None


def _close_hands(cap, pointer):
    if pointer is not None:
        pointer.close()
    if cap is not None:
        cap.release()


def main():
    params = Params()
    session = DrawSession(CANVAS_W, CANVAS_H, params)
    queue = EventQueue()

    cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_AUTOSIZE)
    cv2.setMouseCallback(WINDOW_NAME, queue.on_mouse)

    cap, pointer = _init_hands() if ENABLE_HANDS else (None, None)
    session.show_pointer = pointer is not None

    print("\n" + "=" * 60)
    print("🖌️  DYNADRAW")
    print("=" * 60)
    print("\n📋 CONTROLS:")
    print("   Drag mouse - draw (press off the sliders clears)")
    print("   Top bar - drag STIFFNESS / DAMPING knobs")
    print("   1-7 - Pick colour")
    print("   C/X - Clear | R - Clear and re-centre pen")
    print("   H - Toggle hand pointer (pinch to draw)")
    print("   ESC - Exit")
    print("\n" + "=" * 60 + "\n")

    prev = time.time()
    fps_smooth = 0.0

    while True:
        now = time.time()
        dt = max(1e-6, now - prev)
        prev = now
        fps = 1.0 / dt
        fps_smooth = fps if fps_smooth == 0 else 0.9 * fps_smooth + 0.1 * fps

        if pointer is not None:
            ok, cam = cap.read()
            if ok:
                x, y, edge = pointer.process(cam, CANVAS_W, CANVAS_H)
                queue.on_hand(x, y, edge)

        session.apply_events(queue.drain())
        session.step()

        cv2.imshow(WINDOW_NAME, session.compose())

        key = cv2.waitKey(1) & 0xFF
        if key == 27:
            break
        if key in (ord("h"), ord("H")):
            if pointer is None:
                cap, pointer = _init_hands()
            else:
                _close_hands(cap, pointer)
                cap, pointer = None, None
                queue.on_hand(None, None, False)
                print("✅ Hand pointer off")
            session.show_pointer = pointer is not None
            continue
        queue.on_key(key)

    _close_hands(cap, pointer)
    cv2.destroyAllWindows()

    print(f"\n✅ Dynadraw shutdown complete ({fps_smooth:.1f} fps)")


if __name__ == "__main__":
    main()
