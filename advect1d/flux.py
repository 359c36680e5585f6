"""Flux functions for scalar conservation laws."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class FluxFunction(ABC):
    """A flux ``F(U)`` evaluated on whole arrays or on single nodes."""

    @abstractmethod
    def compute_flux(self, values: np.ndarray) -> np.ndarray:
        """Return the flux of every value in ``values`` as a new array."""

    @abstractmethod
    def node_flux(self, value: float) -> float:
        """Return the flux of a single nodal value."""


class LinearFlux(FluxFunction):
    """Linear advection flux ``F(U) = c * U``."""

    def __init__(self, speed: float = 1.0) -> None:
        self.speed = float(speed)

    def compute_flux(self, values: np.ndarray) -> np.ndarray:
        return self.speed * np.asarray(values, dtype=float)

    def node_flux(self, value: float) -> float:
        return self.speed * value

    def __repr__(self) -> str:
        return f"LinearFlux(speed={self.speed!r})"