"""Right-hand-side operators for semi-discrete conservation laws."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from .flux import FluxFunction


class RHSOperator(ABC):
    """Spatial operator producing ``dU/dt`` for a given state."""

    @abstractmethod
    def eval(self, u_in: np.ndarray | None = None) -> np.ndarray:
        """Evaluate the operator on ``u_in`` (or the operator's own state)."""

    @property
    @abstractmethod
    def rhs(self) -> np.ndarray:
        """The most recently evaluated right-hand side."""


class Central1D(RHSOperator):
    """Second-order central difference of the flux on a periodic 1-D mesh.

    The first and last mesh points coincide under periodicity, so the
    last right-hand-side value is always a copy of the first.
    """

    def __init__(self, u: np.ndarray, mesh: np.ndarray, flux: FluxFunction) -> None:
        mesh = np.asarray(mesh, dtype=float)
        if len(mesh) != len(u):
            raise ValueError(
                f"mesh has {len(mesh)} points but the solution has {len(u)}"
            )
        if len(u) < 3:
            raise ValueError("a periodic central operator needs at least 3 points")
        self.u = u
        self.mesh = mesh
        self.flux = flux
        self._rhs = np.zeros(len(u), dtype=float)

    def eval(self, u_in: np.ndarray | None = None) -> np.ndarray:
        """Evaluate the operator on ``u_in``, or on the stored solution if omitted."""
        values = np.asarray(self.u if u_in is None else u_in, dtype=float)
        if len(values) != len(self.u):
            raise ValueError(
                f"expected {len(self.u)} values, got {len(values)}"
            )
        f = self.flux.compute_flux(values)
        mesh = self.mesh

        dx0 = (mesh[-1] - mesh[-2]) + (mesh[1] - mesh[0])
        self._rhs[0] = -(f[1] - f[-2]) / dx0
        self._rhs[1:-1] = -(f[2:] - f[:-2]) / (mesh[2:] - mesh[:-2])
        self._rhs[-1] = self._rhs[0]
        return self._rhs

    @property
    def rhs(self) -> np.ndarray:
        return self._rhs