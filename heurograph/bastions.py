"""Route planning for collecting gold from bastions before it drains away.

A courier starts at the origin and visits bastions in some order. Gold at a
bastion keeps its full value until ``t_realise``, then decays linearly and is
gone at ``t_empty``. Routes are built greedily and then improved by
simulated annealing.
"""

from __future__ import annotations

import argparse
import math
import random
import sys
from dataclasses import dataclass
from time import monotonic
from typing import Sequence

DEFAULT_DURATION = 1.8
_COOLING = 0.995
_ACCEPT_RESOLUTION = 10000


@dataclass(frozen=True)
class Bastion:
    """A bastion at ``(x, y)`` holding ``value`` gold."""

    index: int
    x: float
    y: float
    value: float


@dataclass(frozen=True)
class Schedule:
    """Travel speed and the times at which gold starts and finishes decaying."""

    speed: float
    t_realise: float
    t_empty: float

    def travel_time(self, x1: float, y1: float, x2: float, y2: float) -> float:
        """Time needed to move between two points."""
        return math.hypot(x1 - x2, y1 - y2) / self.speed

    def value_at(self, value: float, time: float) -> float:
        """Gold left of ``value`` when arriving at ``time``."""
        if time >= self.t_empty:
            return 0.0
        if time > self.t_realise:
            remaining = 1.0 - (time - self.t_realise) / (self.t_empty - self.t_realise)
            return value * remaining
        return value


def compute_score(
    bastions: Sequence[Bastion], path: Sequence[int], schedule: Schedule
) -> float:
    """Total gold collected by visiting ``path`` (positions in ``bastions``)."""
    elapsed = 0.0
    cx = cy = 0.0
    collected = 0.0
    for position in path:
        bastion = bastions[position]
        elapsed += schedule.travel_time(cx, cy, bastion.x, bastion.y)
        cx, cy = bastion.x, bastion.y
        if elapsed >= schedule.t_empty:
            break
        gained = schedule.value_at(bastion.value, elapsed)
        if gained > 0:
            collected += gained
    return collected


def greedy_initial(bastions: Sequence[Bastion], schedule: Schedule) -> list[int]:
    """Build a route by repeatedly taking the best gold-per-travel-time bastion."""
    visited: set[int] = set()
    path: list[int] = []
    elapsed = 0.0
    cx = cy = 0.0

    while True:
        best: int | None = None
        best_score = -1.0
        best_dt = 0.0
        for position, bastion in enumerate(bastions):
            if position in visited:
                continue
            dt = schedule.travel_time(cx, cy, bastion.x, bastion.y)
            arrival = elapsed + dt
            if arrival >= schedule.t_empty:
                continue
            gained = schedule.value_at(bastion.value, arrival)
            if gained > 0:
                score = gained / dt if dt > 0 else math.inf
                if score > best_score:
                    best_score = score
                    best = position
                    best_dt = dt
        if best is None:
            return path
        visited.add(best)
        path.append(best)
        elapsed += best_dt
        cx, cy = bastions[best].x, bastions[best].y


def _perturb(route: list[int], rng: random.Random) -> list[int]:
    """Return a neighbouring route made by a swap, a reversal or a move."""
    neighbour = list(route)
    operation = rng.randrange(3)
    size = len(neighbour)
    if size < 2:
        return neighbour
    i = rng.randrange(size)
    j = rng.randrange(size)
    if operation == 0:
        neighbour[i], neighbour[j] = neighbour[j], neighbour[i]
    elif operation == 1:
        low, high = min(i, j), max(i, j)
        neighbour[low : high + 1] = reversed(neighbour[low : high + 1])
    elif i != j:
        neighbour.insert(j, neighbour.pop(i))
    return neighbour


def _accept(delta: float, temperature: float, rng: random.Random) -> bool:
    if delta > 0:
        return True
    threshold = rng.randrange(_ACCEPT_RESOLUTION) / _ACCEPT_RESOLUTION
    if temperature <= 0:
        return False
    return math.exp(delta / temperature) > threshold


def simulated_annealing(
    bastions: Sequence[Bastion],
    initial: Sequence[int],
    schedule: Schedule,
    duration: float = DEFAULT_DURATION,
    rng: random.Random | None = None,
) -> list[int]:
    """Improve ``initial`` for ``duration`` seconds and return the best route seen."""
    if rng is None:
        rng = random.Random()
    current = list(initial)
    best = list(current)
    current_score = compute_score(bastions, current, schedule)
    best_score = current_score
    temperature = 1.0

    deadline = monotonic() + duration
    while monotonic() < deadline:
        neighbour = _perturb(current, rng)
        score = compute_score(bastions, neighbour, schedule)
        if _accept(score - current_score, temperature, rng):
            current = neighbour
            current_score = score
            if score > best_score:
                best_score = score
                best = neighbour
        temperature *= _COOLING
    return best


def parse_input(text: str) -> tuple[list[Bastion], Schedule]:
    """Read the bastion count, ``x y value`` triples, then speed and both times."""
    tokens = text.split()
    if not tokens:
        raise ValueError("empty input")
    try:
        count = int(tokens[0])
        numbers = [float(token) for token in tokens[1:]]
    except ValueError as exc:
        raise ValueError(f"malformed input: {exc}") from exc
    if count < 0:
        raise ValueError("bastion count must not be negative")
    needed = 3 * count + 3
    if len(numbers) < needed:
        raise ValueError(f"expected {needed} numbers after the count, got {len(numbers)}")

    fields = iter(numbers[: 3 * count])
    bastions = [
        Bastion(index, x, y, value)
        for index, (x, y, value) in enumerate(zip(fields, fields, fields))
    ]
    speed, t_realise, t_empty = numbers[3 * count : needed]
    return bastions, Schedule(speed, t_realise, t_empty)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem from standard input and print the chosen route."""
    parser = argparse.ArgumentParser(
        prog="heurograph-bastions",
        description="Plan a route that collects as much bastion gold as possible.",
    )
    parser.add_argument("--duration", type=float, default=DEFAULT_DURATION,
                        help="seconds spent on simulated annealing")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    try:
        bastions, schedule = parse_input(sys.stdin.read())
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    rng = random.Random(args.seed)
    initial = greedy_initial(bastions, schedule)
    route = simulated_annealing(bastions, initial, schedule, args.duration, rng)
    print(len(route))
    print(" ".join(str(bastions[position].index) for position in route))
    return 0


if __name__ == "__main__":
    sys.exit(main())