"""A simple flock of movers pushed around a bounded field by a force."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from flocknoise.vector import Vector

MAX_NUM_FORCES = 4
NUM_BIRDS = 25
MAX_SPEED = 8

DEFAULT_WIDTH = 550
DEFAULT_HEIGHT = 200


@dataclass
class Mover:
    """A point mass with position, velocity and accumulated acceleration."""

    pos: Vector = field(default_factory=Vector)
    vel: Vector = field(default_factory=Vector)
    accel: Vector = field(default_factory=Vector)
    drag: Vector = field(default_factory=Vector)
    mass: float = 1.0


class Nest:
    """A field holding a group of movers that wrap and bounce at its edges."""

    Y_DAMPEN = 1.0

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        self.width = int(width)
        self.height = int(height)
        self.rng = rng if rng is not None else random.Random()
        self.movers: list[Mover] = []
        self.initialized = False

    def populate(self, count: int) -> None:
        """Add ``count`` movers at random positions, speeds and masses."""
        for _ in range(count):
            rand_y = self.rng.randrange(-4, 4) * self.rng.random()
            rand_mass = self.rng.randrange(2, 4) * self.rng.random()
            rand_x = self.rng.randrange(0, 400)
            self.movers.append(
                Mover(
                    pos=Vector(float(rand_x), 100.0),
                    vel=Vector(0.0, rand_y),
                    mass=rand_mass,
                )
            )
        self.initialized = True

    def apply_force(self, force: Vector) -> None:
        """Add ``force`` to each mover's acceleration, scaled by mass.

        The force is divided by each mover's mass in turn, so later movers
        receive the force already scaled by the masses before them.
        """
        if not self.initialized:
            return
        for mover in self.movers:
            force = force / mover.mass
            mover.accel = mover.accel + force

    def update(self) -> None:
        """Advance every mover by one step and keep it inside the field."""
        if not self.initialized:
            return
        for mover in self.movers:
            vel = mover.vel + mover.accel
            if vel.x > MAX_SPEED:
                vel = Vector(float(MAX_SPEED), vel.y)
            mover.vel = vel
            mover.pos = mover.pos + mover.vel
            mover.accel = mover.accel * 0
            self.edges(mover)

    def edges(self, mover: Mover) -> None:
        """Wrap a mover horizontally and bounce it vertically."""
        x, y = mover.pos.x, mover.pos.y
        vx, vy = mover.vel.x, mover.vel.y
        if x > self.width:
            x = 0.0
        if x < 0:
            x = 0.0
            vx = -vx
        if y > self.height:
            y = float(self.height)
            vy = -vy * self.Y_DAMPEN
        if y < 0:
            y = 0.0
            vy = -vy * self.Y_DAMPEN
        mover.pos = Vector(x, y)
        mover.vel = Vector(vx, vy)

    def step(self, force: Vector) -> None:
        """Apply ``force`` and advance one step, as one timer tick does."""
        self.apply_force(force)
        self.update()

    def normalized_y(self, index: int) -> float:
        """Vertical position scaled so the full height maps to 2."""
        return self.movers[index].pos.y / self.height * 2

    def normalized_x(self, index: int) -> float:
        """Horizontal position scaled to the range 1 to 51."""
        return self.movers[index].pos.x / self.width * 50 + 1


class Bird:
    """A single mover with fixed drag, wrapping and bouncing in its bounds."""

    DRAG = Vector(-0.021, 0.0)
    Y_DAMPEN = 0.065
    FORCE_SCALE = 0.85

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.pos = Vector(0.0, 0.0)
        self.vel = Vector(0.0, 0.0)
        self.accel = Vector(0.0, 0.0)
        self.width_px = 50
        self.height_px = 50
        self.mass = 1.0

    def set_params(self, x: float, y: float, width: int, height: int, mass: float) -> None:
        """Set position, drawn size and mass."""
        self.pos = Vector(float(x), float(y))
        self.width_px = int(width)
        self.height_px = int(height)
        self.mass = float(mass)

    def apply_force(self, force: Vector) -> None:
        self.accel = self.accel + force / self.FORCE_SCALE

    def update(self) -> None:
        """Advance one step; acceleration must be reapplied every step."""
        self.vel = (self.vel + self.accel) * self.DRAG
        self.pos = self.pos + self.vel
        self.accel = Vector(0.0, 0.0)
        self.edges()

    def edges(self) -> None:
        x, y = self.pos.x, self.pos.y
        vx, vy = self.vel.x, self.vel.y
        if x > self.width:
            x = 0.0
        if x < 0:
            x = 0.0
            vx = -vx
        if y > self.height:
            y = float(self.height)
            vy = -vy * self.Y_DAMPEN
        if y < 0:
            y = 0.0
            vy = -vy * self.Y_DAMPEN
        self.pos = Vector(x, y)
        self.vel = Vector(vx, vy)