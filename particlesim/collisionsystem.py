"""Event-driven simulation of particles colliding elastically in the unit box."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from particlesim.event import Event
from particlesim.particle import Particle
from particlesim.priorityqueue import PriorityQueue

RenderCallback = Callable[[list[Particle]], None]
AbortCallback = Callable[[], bool]


def _no_render(particles: list[Particle]) -> None:
    return None


def _never_abort() -> bool:
    return False


class CollisionSystem:
    """A collection of particles moving in the unit box.

    The particles are mutated in place while the simulation runs.
    ``render_callback`` is called with the particle list at every rendering
    event; ``abort_callback`` is asked after each rendering event whether the
    simulation should stop early.
    """

    def __init__(
        self,
        particles: Iterable[Particle],
        render_callback: RenderCallback | None = None,
        abort_callback: AbortCallback | None = None,
    ) -> None:
        self.particles: list[Particle] = list(particles)
        self.render_callback: RenderCallback = render_callback or _no_render
        self.abort_callback: AbortCallback = abort_callback or _never_abort

    def simulate(self, simulation_time: float, render_frequency: float) -> None:
        """Run the simulation until ``simulation_time``.

        The particles are rendered ``render_frequency`` times per time unit.
        """
        queue: PriorityQueue[Event] = PriorityQueue()
        current_time = 0.0

        def add_event(time: float, a: Particle | None, b: Particle | None) -> None:
            if time < simulation_time:
                queue.insert(Event(time, a, b))

        def predict(particle: Particle, now: float) -> None:
            for other in self.particles:
                add_event(now + particle.time_to_hit(other), particle, other)
            add_event(now + particle.time_to_hit_vertical_wall(), particle, None)
            add_event(now + particle.time_to_hit_horizontal_wall(), None, particle)

        add_event(0.0, None, None)
        for particle in self.particles:
            predict(particle, current_time)

        while queue:
            event = queue.delete_min()
            if not event.is_valid():
                continue

            dt = event.time - current_time
            for particle in self.particles:
                particle.move(dt)
            current_time = event.time

            a, b = event.particle_a, event.particle_b
            if a is not None and b is not None:
                a.bounce_off(b)
                predict(a, current_time)
                predict(b, current_time)
            elif a is not None:
                a.bounce_off_vertical_wall()
                predict(a, current_time)
            elif b is not None:
                b.bounce_off_horizontal_wall()
                predict(b, current_time)
            else:
                self.render_callback(self.particles)
                add_event(current_time + 1.0 / render_frequency, None, None)
                if self.abort_callback():
                    break

    def kinetic_energy(self) -> float:
        """Total kinetic energy of all particles."""
        return sum(p.kinetic_energy() for p in self.particles)