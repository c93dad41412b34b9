"""Common interface shared by every simulation hosted in a world."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Simulation(ABC):
    """A pluggable game system that advances in time and can be reset.

    Subclasses set ``name`` to the identifier the world looks them up by.
    """

    name: str = ""

    @abstractmethod
    def tick(self, delta_time: float) -> None:
        """Advance the simulation by ``delta_time`` seconds."""

    @abstractmethod
    def reset(self) -> None:
        """Return the simulation to its initial state."""

    def is_active(self) -> bool:
        """Whether the world should tick this simulation."""
        return True