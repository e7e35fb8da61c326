"""
Damped-spring pen that chases the pointer (Dynadraw).

State:
- position / previous_position: canvas pixels
- velocity: pixels per frame

Each frame the pointer pulls on the pen through a synthetic rubber band:
- Hooke's law: force = -k * (pen - pointer)
- F = ma
- velocity += accel, then velocity *= damping
- position += velocity

Damping multiplies the already-updated velocity. No bounds are put on
position or velocity, so pointer jumps overshoot.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from params import Params


@dataclass(frozen=True)
class PenState:
    position: tuple[float, float] = (0.0, 0.0)
    previous_position: tuple[float, float] = (0.0, 0.0)
    velocity: tuple[float, float] = (0.0, 0.0)

    @classmethod
    def at(cls, x: float, y: float) -> "PenState":
        p = (float(x), float(y))
        return cls(position=p, previous_position=p, velocity=(0.0, 0.0))


def integrate(pen: PenState, pointer, params) -> PenState:
    """
    One explicit-Euler step of the pen toward `pointer`.

    `params` only needs k, damping and mass. Out-of-range values are used
    as given: k=0 freezes the pen, damping=0 kills all inertia.
    """
    px, py = pen.position
    vx, vy = pen.velocity
    mx, my = float(pointer[0]), float(pointer[1])

    # --- Displacement from the cursor ---
    dx = px - mx
    dy = py - my

    # --- Hooke's law ---
    fx = -params.k * dx
    fy = -params.k * dy

    # --- F = ma ---
    ax = fx / params.mass
    ay = fy / params.mass

    # --- Integrate velocity, then damp it ---
    vx = (vx + ax) * params.damping
    vy = (vy + ay) * params.damping

    # --- Integrate position ---
    return PenState(
        position=(px + vx, py + vy),
        previous_position=(px, py),
        velocity=(vx, vy),
    )


@dataclass
class SimulationState:
    """Everything that survives between frames, passed around explicitly."""
    params: Params = field(default_factory=Params)
    pen: PenState = field(default_factory=PenState)
    pointer: tuple[float, float] = (0.0, 0.0)
    pointer_down: bool = False
    draw_color: tuple[int, int, int] = (255, 255, 255)

    def __post_init__(self):
        self.draw_color = self.params.color_bgr()

    def reset(self, w: int, h: int):
        # Pen parked at canvas centre, pointer with it so nothing moves yet
        self.pen = PenState.at(w / 2, h / 2)
        self.pointer = self.pen.position
        self.pointer_down = False

    def select_color(self, index: int):
        self.params.color_index = int(index)
        self.draw_color = self.params.color_bgr()

    def step(self) -> PenState:
        self.pen = integrate(self.pen, self.pointer, self.params)
        return self.pen
