"""The game world: global clock, pause state and the hosted simulations."""

from __future__ import annotations

import random
from typing import TypeVar

from .leaf import LeafSimulation
from .simulation import Simulation
from .tictactoe import TicTacToeSimulation

S = TypeVar("S", bound=Simulation)


class World:
    """Holds every simulation and advances them together.

    A new world hosts a tic-tac-toe game and a leaf simulation.
    """

    def __init__(
        self,
        *,
        seed: int | None = None,
        time_scale: float = 1.0,
        paused: bool = False,
    ) -> None:
        self._tick_count = 0
        self._sim_time = 0.0
        self._time_scale = max(time_scale, 0.0)
        self._timestep_accumulator = 0.0
        self._paused = paused
        self._rng_seed = seed if seed is not None else random.getrandbits(64)
        self._simulations: list[Simulation] = []

        self.add_simulation(TicTacToeSimulation())
        self.add_simulation(LeafSimulation())

    @property
    def tick_count(self) -> int:
        """Number of ticks taken while not paused."""
        return self._tick_count

    @property
    def sim_time(self) -> float:
        """Scaled simulation time elapsed, in seconds."""
        return self._sim_time

    @property
    def time_scale(self) -> float:
        """Speed multiplier: 1 is normal, 0 stops time."""
        return self._time_scale

    @time_scale.setter
    def time_scale(self, scale: float) -> None:
        self._time_scale = max(scale, 0.0)

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def rng_seed(self) -> int:
        return self._rng_seed

    @property
    def timestep_accumulator(self) -> float:
        """Scaled time not yet consumed by fixed timesteps."""
        return self._timestep_accumulator

    @property
    def simulations(self) -> tuple[Simulation, ...]:
        return tuple(self._simulations)

    def tick(self, delta_time: float) -> None:
        """Advance the world and every active simulation by ``delta_time`` seconds."""
        if self._paused:
            return
        scaled = delta_time * self._time_scale
        self._tick_count += 1
        self._sim_time += scaled
        self._timestep_accumulator += scaled
        for sim in self._simulations:
            if sim.is_active():
                sim.tick(scaled)

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def toggle_pause(self) -> None:
        self._paused = not self._paused

    def consume_timestep(self, timestep: float) -> None:
        """Take one fixed timestep out of the accumulator."""
        self._timestep_accumulator -= timestep

    def add_simulation(self, sim: Simulation) -> None:
        self._simulations.append(sim)

    def get_simulation(self, name: str) -> Simulation | None:
        """The first simulation called ``name``, if any."""
        return next((s for s in self._simulations if s.name == name), None)

    def get_simulation_typed(self, name: str, kind: type[S]) -> S | None:
        """The simulation called ``name`` if it is an instance of ``kind``."""
        sim = self.get_simulation(name)
        return sim if isinstance(sim, kind) else None

    def reset_all_simulations(self) -> None:
        for sim in self._simulations:
            sim.reset()

    def tictactoe(self) -> TicTacToeSimulation | None:
        return self.get_simulation_typed(TicTacToeSimulation.name, TicTacToeSimulation)

    def leaf(self) -> LeafSimulation | None:
        return self.get_simulation_typed(LeafSimulation.name, LeafSimulation)