from __future__ import annotations

K_MIN = 0.01
K_MAX = 0.2
D_MIN = 0.250
D_MAX = 0.999


def _clamp(x, a, b):
    return a if x < a else b if x > b else x


def clamp_stiffness(k: float) -> float:
    return float(_clamp(float(k), K_MIN, K_MAX))


def clamp_damping(d: float) -> float:
    return float(_clamp(float(d), D_MIN, D_MAX))


def hex_to_bgr(s: str) -> tuple[int, int, int]:
    """'#ff628c' -> (140, 98, 255) for OpenCV."""
    h = s.lstrip("#")
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    if len(h) != 6:
        raise ValueError(f"Bad hex colour: {s!r}")
    r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    return (b, g, r)


class Params:
    """
    All tunable knobs live here so you don't hunt through code.

    Keyword overrides replace the defaults, e.g. Params(bg="#000000", k=0.1).
    Stiffness and damping always go through their clamps.
    """
    def __init__(self, **overrides):
        # Pen physics
        self._k = 0.06              # bounciness, stiffness of spring
        self._damping = 0.88        # friction (velocity multiplier per frame)
        self.mass = 1.0             # mass of simulated pen

        # Stroke
        self.ductus = 0.5           # relates stroke width to speed
        self.max_thickness = 20.0   # px

        # Canvas look
        self.bg = "#00193c"
        self.colors = [
            "#ffffff", "#ff628c", "#FF9D00", "#fad000",
            "#2ca300", "#2EC4B6", "#5D37F0", "#00193c",
        ]
        self.color_index = 1        # keys 1..7 pick colors[1..7]

        # Slider bar
        self.slider_h = 25          # px per slider row
        self.slider_tol = 40        # grab distance from knob (px)

        for name, value in overrides.items():
            if name in ("k", "stiffness"):
                self.k = value
            elif name == "damping":
                self.damping = value
            elif name.startswith("_") or not hasattr(self, name):
                raise TypeError(f"Unknown param: {name}")
            else:
                setattr(self, name, value)

        if self.mass <= 0:
            raise ValueError("mass must be > 0")

    @property
    def k(self) -> float:
        return self._k

    @k.setter
    def k(self, value: float):
        self._k = clamp_stiffness(value)

    @property
    def damping(self) -> float:
        return self._damping

    @damping.setter
    def damping(self, value: float):
        self._damping = clamp_damping(value)

    def bg_bgr(self) -> tuple[int, int, int]:
        return hex_to_bgr(self.bg)

    def color_bgr(self, index: int | None = None) -> tuple[int, int, int]:
        i = self.color_index if index is None else int(index)
        return hex_to_bgr(self.colors[i % len(self.colors)])
