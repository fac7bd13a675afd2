"""Particles moving in the unit box under elastic collisions."""

from __future__ import annotations

import math
from dataclasses import dataclass

INFINITY = math.inf

Vec2 = tuple[float, float]
Color = tuple[float, float, float]


@dataclass(eq=False)
class Particle:
    """A particle in the unit box with position, velocity, radius and mass.

    ``count`` records how many collisions (with walls or other particles)
    the particle has taken part in so far.
    """

    r: Vec2 = (0.0, 0.0)
    v: Vec2 = (0.0, 0.0)
    radius: float = 0.01
    mass: float = 0.01
    color: Color = (1.0, 1.0, 1.0)
    count: int = 0

    def move(self, dt: float) -> None:
        """Move the particle in a straight line for the time ``dt``."""
        x, y = self.r
        vx, vy = self.v
        self.r = (x + vx * dt, y + vy * dt)

    def time_to_hit(self, that: Particle) -> float:
        """Time until this particle collides with ``that``, or infinity."""
        if self is that:
            return INFINITY

        dx = that.r[0] - self.r[0]
        dy = that.r[1] - self.r[1]
        dvx = that.v[0] - self.v[0]
        dvy = that.v[1] - self.v[1]

        dvdr = dx * dvx + dy * dvy
        if dvdr > 0:
            return INFINITY

        dvdv = dvx * dvx + dvy * dvy
        if dvdv == 0.0:
            return INFINITY

        drdr = dx * dx + dy * dy
        sigma = self.radius + that.radius
        if drdr < sigma * sigma:
            return INFINITY

        d = dvdr * dvdr - dvdv * (drdr - sigma * sigma)
        if d < 0.0:
            return INFINITY

        time = -(dvdr + math.sqrt(d)) / dvdv
        if time < 0.0:
            return INFINITY
        return time

    def time_to_hit_vertical_wall(self) -> float:
        """Time until the particle hits a vertical wall, or infinity."""
        return self._time_to_wall(self.r[0], self.v[0])

    def time_to_hit_horizontal_wall(self) -> float:
        """Time until the particle hits a horizontal wall, or infinity."""
        return self._time_to_wall(self.r[1], self.v[1])

    def _time_to_wall(self, position: float, velocity: float) -> float:
        if velocity > 0:
            return (1.0 - position - self.radius) / velocity
        if velocity < 0:
            return (self.radius - position) / velocity
        return INFINITY

    def bounce_off(self, that: Particle) -> None:
        """Update both velocities for an elastic collision happening now."""
        dx = that.r[0] - self.r[0]
        dy = that.r[1] - self.r[1]
        dvx = that.v[0] - self.v[0]
        dvy = that.v[1] - self.v[1]
        dvdr = dvx * dx + dvy * dy
        dist = self.radius + that.radius

        magnitude = 2.0 * self.mass * that.mass * dvdr / ((self.mass + that.mass) * dist)
        fx = magnitude * dx / dist
        fy = magnitude * dy / dist

        self.v = (self.v[0] + fx / self.mass, self.v[1] + fy / self.mass)
        that.v = (that.v[0] - fx / that.mass, that.v[1] - fy / that.mass)

        self.count += 1
        that.count += 1

    def bounce_off_vertical_wall(self) -> None:
        """Reflect the x-velocity after hitting a vertical wall."""
        self.v = (-self.v[0], self.v[1])
        self.count += 1

    def bounce_off_horizontal_wall(self) -> None:
        """Reflect the y-velocity after hitting a horizontal wall."""
        self.v = (self.v[0], -self.v[1])
        self.count += 1

    def kinetic_energy(self) -> float:
        """Kinetic energy, 1/2 * m * |v|^2."""
        vx, vy = self.v
        return 0.5 * self.mass * (vx * vx + vy * vy)