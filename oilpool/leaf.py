"""Leaves spawning and growing along invisible vines."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from .noise import Perlin
from .simulation import Simulation

Point = tuple[float, float]

DEFAULT_MAX_LEAVES = 500
ROTATION_JITTER = 0.65
COLOR_VARIANTS = 4


@dataclass(frozen=True)
class Vine:
    """A straight, invisible line along which leaves grow."""

    start: Point
    end: Point

    def point_at(self, t: float) -> Point:
        """Point at fraction ``t`` of the way from start (0) to end (1)."""
        return (
            self.start[0] + (self.end[0] - self.start[0]) * t,
            self.start[1] + (self.end[1] - self.start[1]) * t,
        )

    def perpendicular(self) -> Point:
        """Unit vector at a right angle to the vine; (0, 1) for a zero-length vine."""
        dx = self.end[0] - self.start[0]
        dy = self.end[1] - self.start[1]
        length = math.hypot(dx, dy)
        if length > 0.0:
            return (-dy / length, dx / length)
        return (0.0, 1.0)

    def direction_angle(self) -> float:
        """Angle of the vine in radians."""
        return math.atan2(self.end[1] - self.start[1], self.end[0] - self.start[0])

    def length(self) -> float:
        return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])


@dataclass
class Leaf:
    """One leaf instance."""

    position: Point
    size: float
    aspect: float
    rotation: float
    growth: float
    color_variant: int


@dataclass
class LeafConfig:
    """Tuning for the leaf simulation."""

    spawn_rate: float = 2.0  # leaves per second
    growth_rate: float = 2.5  # growth units per second, 0 to 1
    base_size: float = 18.0  # rendering radius in pixels
    size_variation: float = 0.3  # fraction of base_size
    max_offset: float = 0.05  # perpendicular distance from the vine
    noise_seed: int = 42


@dataclass
class _State:
    vines: list[Vine] = field(default_factory=list)
    leaves: list[Leaf] = field(default_factory=list)
    spawn_accumulator: float = 0.0
    spawn_counter: int = 0


class LeafSimulation(Simulation):
    """Spawns leaves at a fixed rate along vines and grows them over time."""

    name = "leaf"

    def __init__(self, config: LeafConfig | None = None) -> None:
        self.config = config if config is not None else LeafConfig()
        self._noise = Perlin(self.config.noise_seed)
        self._rng = random.Random(self.config.noise_seed)
        self._state = _State()
        self.max_leaves = DEFAULT_MAX_LEAVES
        self._active = True

    @property
    def vines(self) -> tuple[Vine, ...]:
        return tuple(self._state.vines)

    @property
    def leaves(self) -> tuple[Leaf, ...]:
        return tuple(self._state.leaves)

    def add_vine(self, vine: Vine) -> None:
        self._state.vines.append(vine)

    def add_vine_line(self, start: Point, end: Point) -> None:
        self.add_vine(Vine(tuple(start), tuple(end)))

    def clear_vines(self) -> None:
        self._state.vines.clear()

    def set_active(self, active: bool) -> None:
        self._active = active

    def is_active(self) -> bool:
        return self._active

    def set_max_leaves(self, maximum: int) -> None:
        self.max_leaves = maximum

    def tick(self, delta_time: float) -> None:
        """Grow existing leaves, then spawn new ones at a fixed interval."""
        if not self._active or not self._state.vines:
            return

        for leaf in self._state.leaves:
            if leaf.growth < 1.0:
                leaf.growth = min(leaf.growth + self.config.growth_rate * delta_time, 1.0)

        self._state.spawn_accumulator += delta_time
        interval = 1.0 / self.config.spawn_rate
        while self._state.spawn_accumulator >= interval:
            self._state.spawn_accumulator -= interval
            if len(self._state.leaves) < self.max_leaves:
                leaf = self._generate_leaf()
                if leaf is not None:
                    self._state.leaves.append(leaf)
                    self._state.spawn_counter += 1

    def reset(self) -> None:
        """Remove all leaves; vines are kept."""
        self._state.leaves.clear()
        self._state.spawn_accumulator = 0.0
        self._state.spawn_counter = 0

    def _select_vine(self) -> int | None:
        vines = self._state.vines
        if not vines:
            return None
        total = sum(v.length() for v in vines)
        if total <= 0.0:
            return self._rng.randrange(len(vines))
        target = self._rng.random() * total
        accumulated = 0.0
        for index, vine in enumerate(vines):
            accumulated += vine.length()
            if accumulated >= target:
                return index
        return len(vines) - 1

    def _sample_vine_position(self, vine_index: int) -> float:
        time_factor = self._state.spawn_counter * 0.1
        return (self._noise.get(float(vine_index), time_factor) + 1.0) * 0.5

    def _sample_offset(self, vine_index: int, vine_pos: float) -> float:
        value = self._noise.get(vine_index * 10.0, vine_pos * 20.0)
        return value * self.config.max_offset

    def _generate_leaf(self) -> Leaf | None:
        index = self._select_vine()
        if index is None:
            return None
        vine = self._state.vines[index]

        vine_pos = self._sample_vine_position(index)
        base_x, base_y = vine.point_at(vine_pos)
        offset = self._sample_offset(index, vine_pos)
        perp_x, perp_y = vine.perpendicular()
        position = (base_x + perp_x * offset, base_y + perp_y * offset)

        variation = self.config.size_variation
        size = self.config.base_size * self._rng.uniform(1.0 - variation, 1.0 + variation)
        aspect = self._rng.uniform(0.5, 0.7)
        rotation = vine.direction_angle() + self._rng.uniform(-ROTATION_JITTER, ROTATION_JITTER)
        color_variant = self._rng.randrange(COLOR_VARIANTS)

        return Leaf(
            position=position,
            size=size,
            aspect=aspect,
            rotation=rotation,
            growth=0.0,
            color_variant=color_variant,
        )