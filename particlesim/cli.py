"""Command line entry point: load particles from a file and run the simulation."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from pathlib import Path

from particlesim.collisionsystem import CollisionSystem
from particlesim.particle import Particle
from particlesim.priorityqueue import PriorityQueue
from particlesim.window import UseVSync, Window

_FIELDS_PER_PARTICLE = 9
_WINDOW_SIZE = 850


def parse_particles(text: str) -> list[Particle]:
    """Parse particles from the whitespace-separated particle file format.

    The first number is the particle count; each particle follows as
    ``rx ry vx vy radius mass r g b`` with colour channels in 0..255.
    """
    tokens = text.split()
    if not tokens:
        return []
    try:
        count = int(tokens[0])
    except ValueError as exc:
        raise ValueError(f"invalid particle count: {tokens[0]!r}") from exc
    if count < 0:
        raise ValueError(f"negative particle count: {count}")

    needed = count * _FIELDS_PER_PARTICLE
    fields = tokens[1 : 1 + needed]
    if len(fields) < needed:
        raise ValueError(
            f"expected {needed} values for {count} particles, found {len(fields)}"
        )
    try:
        values = [float(field) for field in fields]
    except ValueError as exc:
        raise ValueError(f"invalid particle data: {exc}") from exc

    records = (
        values[start : start + _FIELDS_PER_PARTICLE]
        for start in range(0, needed, _FIELDS_PER_PARTICLE)
    )
    return [
        Particle(
            r=(rx, ry),
            v=(vx, vy),
            radius=radius,
            mass=mass,
            color=(red / 255.0, green / 255.0, blue / 255.0),
        )
        for rx, ry, vx, vy, radius, mass, red, green, blue in records
    ]


def read_particles(path: str | Path) -> list[Particle]:
    """Read particles from a file; an unreadable file yields no particles."""
    try:
        text = Path(path).read_text()
    except OSError:
        return []
    return parse_particles(text)


def check_priority_queue(
    min_item: int = 1000, max_item: int = 9999, seed: int | None = None
) -> list[tuple[int, int]]:
    """Insert the shuffled range [min_item, max_item) and delete it again.

    Returns the ``(expected, deleted)`` pairs where the deleted element was
    not the expected one; an empty list means the queue behaved correctly.
    """
    items = list(range(min_item, max_item))
    random.Random(seed).shuffle(items)

    queue: PriorityQueue[int] = PriorityQueue()
    for item in items:
        queue.insert(item)

    mismatches = []
    for expected in range(min_item, max_item):
        deleted = queue.delete_min()
        if deleted != expected:
            mismatches.append((expected, deleted))
    return mismatches


def run_simulation(
    path: str | Path, simulation_time: float = 10000.0, render_frequency: float = 10.0
) -> bool:
    """Simulate the particles in ``path`` in a window.

    Returns False without opening a window when there are no particles.
    """
    particles = read_particles(path)
    if not particles:
        print("No particles")
        return False

    with Window(_WINDOW_SIZE, _WINDOW_SIZE, UseVSync.NO) as window:

        def render(current: list[Particle]) -> None:
            window.begin_frame()
            window.clear((0.0, 0.0, 0.0, 1.0))
            window.draw_particles(current)
            window.end_frame()

        system = CollisionSystem(particles, render, window.should_close)
        print("Simulation starts ...")
        system.simulate(simulation_time, render_frequency)
        print("Simulation ends ...")
    return True


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="particlesim",
        description="Event-driven simulation of colliding particles.",
    )
    parser.add_argument("file", nargs="?", help="particles file")
    parser.add_argument(
        "--time", type=float, default=10000.0, help="simulation time (default 10000)"
    )
    parser.add_argument(
        "--frequency",
        type=float,
        default=10.0,
        help="renderings per time unit (default 10)",
    )
    parser.add_argument(
        "--test-queue",
        action="store_true",
        help="check the priority queue instead of simulating",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for --test-queue")
    args = parser.parse_args(argv)

    if args.frequency <= 0:
        parser.error("--frequency must be positive")

    if args.test_queue:
        print("Test: insert, deleteMin, isMinHeap")
        mismatches = check_priority_queue(seed=args.seed)
        for expected, _deleted in mismatches:
            print(f"Oops! Error after delete of {expected}")
        if mismatches:
            return 1
        print("Successful test...")
        return 0

    name = args.file
    if name is None:
        name = input("Particles file (complete path): ").strip()
    return 0 if run_simulation(name, args.time, args.frequency) else 1


if __name__ == "__main__":
    raise SystemExit(main())