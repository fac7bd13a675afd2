import random

import pytest

from particlesim.event import Event
from particlesim.particle import Particle
from particlesim.priorityqueue import PriorityQueue, SortedPriorityQueue


def test_default_event_is_render_event():
    e = Event()
    assert e.time == 0.0
    assert e.particle_a is None and e.particle_b is None
    assert (e.count_a, e.count_b) == (-1, -1)
    assert e.is_valid()


def test_event_records_collision_counts():
    a = Particle(count=3)
    b = Particle(count=5)
    e = Event(1.5, a, b)
    assert (e.count_a, e.count_b) == (3, 5)
    assert e.is_valid()


def test_event_invalid_after_particle_a_collides():
    a = Particle()
    e = Event(1.0, a, None)
    a.bounce_off_vertical_wall()
    assert not e.is_valid()


def test_event_invalid_after_particle_b_collides():
    b = Particle()
    e = Event(1.0, None, b)
    b.bounce_off_horizontal_wall()
    assert not e.is_valid()


def test_event_invalid_after_pair_collision():
    a = Particle(r=(0.4, 0.5), v=(0.1, 0.0), radius=0.1)
    b = Particle(r=(0.6, 0.5), v=(-0.1, 0.0), radius=0.1)
    c = Particle()
    e1 = Event(2.0, a, c)
    e2 = Event(2.0, c, b)
    a.bounce_off(b)
    assert not e1.is_valid()
    assert not e2.is_valid()


def test_unrelated_collision_keeps_event_valid():
    a = Particle()
    other = Particle()
    e = Event(1.0, a, None)
    other.bounce_off_vertical_wall()
    assert e.is_valid()


def test_ordering_by_time():
    early = Event(1.0)
    late = Event(2.0)
    assert early < late
    assert not late < early
    assert early <= late
    assert Event(1.0) <= early
    assert not Event(1.0) < early


def test_comparison_with_non_event_raises():
    with pytest.raises(TypeError):
        Event(1.0) < 1.0


def test_sorting_events():
    times = [3.5, 0.25, 2.0, 1.0]
    events = sorted(Event(t) for t in times)
    assert [e.time for e in events] == sorted(times)


@pytest.mark.parametrize("cls", [PriorityQueue, SortedPriorityQueue])
def test_events_in_priority_queue(cls):
    rng = random.Random(5)
    times = [rng.uniform(0.0, 100.0) for _ in range(100)]
    q = cls()
    for t in times:
        q.insert(Event(t))
    assert q.is_min_heap()
    assert [q.delete_min().time for _ in times] == sorted(times)