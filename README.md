# particlesim

An event-driven simulation of hard discs that move in the unit box and collide
elastically with each other and with the walls. The simulation does not step
time in fixed increments. It predicts every future collision and keeps the
predictions in a min-priority queue. It then jumps straight from one event to
the next. When a prediction comes up after an earlier collision has made it
obsolete, the simulation discards it.

The particles are drawn in a pygame window a fixed number of times per
simulated time unit. Closing the window ends the simulation.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running a simulation

```
particlesim path/to/particles.txt
```

If no file is given, the command asks for the path on standard input.

Options:

* `--time T`: how long to simulate, in time units (default 10000).
* `--frequency F`: how many frames to render per time unit (default 10). It must be positive.
* `--test-queue`: skip the simulation and check the priority queue (see below).
* `--seed N`: the seed for the shuffle that `--test-queue` uses.

The command opens an 850 × 850 window and runs the simulation.

If the file cannot be read or holds no particles, the command prints
`No particles`, does not open a window, and exits with status 1.

### Particle file format

The first value in the file is the number of particles. Each particle then
follows as nine whitespace-separated numbers:

```
rx ry vx vy radius mass r g b
```

* `rx ry`: position inside the unit box `[0, 1] x [0, 1]`
* `vx vy`: velocity
* `radius`, `mass`
* `r g b`: colour, each channel from 0 to 255

For example, two particles heading towards each other:

```
2
0.25 0.5  0.5 0.0  0.05 0.5  255 0 0
0.75 0.5 -0.5 0.0  0.05 0.5  0 0 255
```

`particlesim.cli.parse_particles` raises `ValueError` in these cases:

* the count is not an integer;
* the count is negative;
* there are fewer values than the count requires;
* a value is not a number.

## Using the library

```python
from particlesim.cli import read_particles
from particlesim.collisionsystem import CollisionSystem

particles = read_particles("particles.txt")

frames = []
system = CollisionSystem(
    particles,
    render_callback=lambda ps: frames.append(len(ps)),
    abort_callback=lambda: False,
)

before = system.kinetic_energy()
system.simulate(100.0, 10.0)     # 100 time units, 10 frames per time unit
after = system.kinetic_energy()  # elastic collisions conserve energy
```

Both callbacks are optional. Without them, nothing is rendered and the
simulation runs until the given time. The abort callback is consulted after
each rendering event.

`particlesim.particle.Particle` is a dataclass that holds a single disc. Its fields are:

* `r`: position
* `v`: velocity
* `radius`
* `mass`
* `color`
* `count`: the number of collisions so far

A particle can predict its own collisions with `time_to_hit`,
`time_to_hit_vertical_wall` and `time_to_hit_horizontal_wall`. Each of these
returns `math.inf` when no collision will happen. A particle resolves a
collision with `bounce_off`, `bounce_off_vertical_wall` or
`bounce_off_horizontal_wall`.

`particlesim.event.Event` is a scheduled collision or redraw. Events are
ordered by time. `is_valid()` reports whether the particles involved have
collided since the event was created.

`particlesim.window.Window` wraps a pygame display. It provides these methods:

* `begin_frame`
* `clear`
* `draw_particles`
* `end_frame`
* `should_close`
* `size`
* `time`
* `close`

A `Window` can be used as a context manager.

`particlesim.window.particle_to_screen` maps a particle to a screen centre, a
pixel radius and an RGB colour. The y axis points up.

### Priority queues

`particlesim.priorityqueue` provides two interchangeable min-priority queues:

* `PriorityQueue`: a binary min-heap;
* `SortedPriorityQueue`: a list kept in decreasing order, with the smallest element at the end.

```python
from particlesim.priorityqueue import PriorityQueue

queue = PriorityQueue([5, 3, 8])
queue.insert(1)
queue.find_min()    # 1
queue.delete_min()  # 1
len(queue)          # 3
```

On an empty queue, `find_min` and `delete_min` raise `IndexError`.

`particlesim.cli.check_priority_queue(min_item, max_item, seed)` inserts the
shuffled range `[min_item, max_item)` into a `PriorityQueue` and deletes the
elements again. It returns the `(expected, deleted)` pairs that came out of
order, so an empty list means success. `particlesim --test-queue` runs it and
exits with status 0 on success and 1 otherwise.