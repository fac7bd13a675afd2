"""A simple window that draws particles as filled circles."""

from __future__ import annotations

import time as _time
from collections.abc import Sequence
from enum import Enum

import pygame

from particlesim.particle import Particle

MAX_PARTICLES = 1024 * 1024


class UseVSync(Enum):
    YES = "yes"
    NO = "no"


def _unit_to_byte(c: float) -> int:
    return round(min(max(c, 0.0), 1.0) * 255)


def particle_to_screen(
    particle: Particle, width: int, height: int
) -> tuple[tuple[float, float], float, tuple[int, int, int]]:
    """Map a particle in the unit box to screen centre, pixel radius and RGB colour.

    The unit box fills the window; its y axis points up.
    """
    x, y = particle.r
    center = (x * width, (1.0 - y) * height)
    radius = particle.radius * width
    color = tuple(_unit_to_byte(c) for c in particle.color)
    return center, radius, color  # type: ignore[return-value]


class Window:
    """A window for rendering particle systems."""

    def __init__(self, width: int, height: int, vsync: UseVSync = UseVSync.NO) -> None:
        pygame.display.init()
        size = (width, height)
        if vsync is UseVSync.YES:
            try:
                self._surface = pygame.display.set_mode(size, pygame.SCALED, vsync=1)
            except pygame.error:
                self._surface = pygame.display.set_mode(size)
        else:
            self._surface = pygame.display.set_mode(size)
        pygame.display.set_caption("Particle System")
        self._start = _time.perf_counter()
        self._close_requested = False

    def time(self) -> float:
        """Seconds since the window was created."""
        return _time.perf_counter() - self._start

    def should_close(self) -> bool:
        """True once the user has asked to close the window."""
        return self._close_requested

    def size(self) -> tuple[int, int]:
        """Current window size in pixels."""
        return self._surface.get_size()

    def begin_frame(self) -> None:
        """Handle pending input events; call at the start of every frame."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._close_requested = True

    def end_frame(self) -> None:
        """Show the frame that was drawn."""
        pygame.display.flip()

    def clear(self, color: Sequence[float]) -> None:
        """Fill the window with an RGBA colour, channels in [0, 1]."""
        r, g, b = (_unit_to_byte(c) for c in color[:3])
        self._surface.fill((r, g, b))

    def draw_particles(self, particles: Sequence[Particle]) -> None:
        """Draw every particle as a filled circle."""
        if len(particles) > MAX_PARTICLES:
            raise RuntimeError("Too many particles to draw in a single call")
        width, height = self._surface.get_size()
        for particle in particles:
            center, radius, color = particle_to_screen(particle, width, height)
            pygame.draw.circle(self._surface, color, center, radius)

    def close(self) -> None:
        """Close the window."""
        pygame.display.quit()

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()