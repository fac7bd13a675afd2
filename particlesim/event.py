"""Events of an event-driven particle collision simulation."""

from __future__ import annotations

from particlesim.particle import Particle


class Event:
    """An event at ``time`` involving up to two particles.

    - neither particle: a rendering event
    - only ``particle_a``: collision with a vertical wall
    - only ``particle_b``: collision with a horizontal wall
    - both: a collision between the two particles

    Events are ordered by time.
    """

    __slots__ = ("time", "particle_a", "particle_b", "count_a", "count_b")

    def __init__(
        self,
        time: float = 0.0,
        particle_a: Particle | None = None,
        particle_b: Particle | None = None,
    ) -> None:
        self.time = time
        self.particle_a = particle_a
        self.particle_b = particle_b
        self.count_a = particle_a.count if particle_a is not None else -1
        self.count_b = particle_b.count if particle_b is not None else -1

    def is_valid(self) -> bool:
        """True if no involved particle has collided since the event was made."""
        if self.particle_a is not None and self.particle_a.count != self.count_a:
            return False
        if self.particle_b is not None and self.particle_b.count != self.count_b:
            return False
        return True

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.time < other.time

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.time <= other.time

    def __repr__(self) -> str:
        return (
            f"Event(time={self.time!r}, particle_a={self.particle_a!r}, "
            f"particle_b={self.particle_b!r})"
        )