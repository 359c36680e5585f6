"""Classical four-stage Runge-Kutta time integrator.

A time step is driven by the caller so that boundary conditions can be
imposed on each stage:

    rk.init_rk()
    for _ in range(rk.num_steps):
        rk.step_ui(dt)
        ui = rk.current_u       # impose BCs, then compute F(ui)
        rk.set_fi(f)
    rk.finalize_rk(dt)
"""

from __future__ import annotations

import numpy as np

_COEFFS_A = (0.0, 0.5, 0.5, 1.0)
_COEFFS_B = (1.0, 2.0, 2.0, 1.0)


class RungeKutta4:
    """RK4 stepping that updates the solution array ``un`` in place."""

    def __init__(self, un: np.ndarray) -> None:
        if not isinstance(un, np.ndarray) or not np.issubdtype(un.dtype, np.floating):
            raise TypeError("the solution must be a floating-point numpy array")
        self.un = un
        size = un.shape
        self._ui = np.zeros(size, dtype=un.dtype)
        self._fi_cur = np.zeros(size, dtype=un.dtype)
        self._f_accum = np.zeros(size, dtype=un.dtype)
        self._current_step = 0

    @property
    def num_steps(self) -> int:
        """Number of stages per step."""
        return len(_COEFFS_A)

    def init_rk(self) -> None:
        """Start a new time step."""
        self._current_step = 0
        self._f_accum.fill(0.0)

    def step_ui(self, dt: float) -> None:
        """Compute the intermediate state for the current stage."""
        if self._current_step >= self.num_steps:
            raise RuntimeError("all stages of this step have already been taken")
        if self._current_step == 0:
            self._ui[...] = self.un
        else:
            a = _COEFFS_A[self._current_step]
            self._ui[...] = self.un + a * dt * self._fi_cur

    def set_fi(self, f: np.ndarray) -> None:
        """Record the right-hand side evaluated at the current stage."""
        if self._current_step >= self.num_steps:
            raise RuntimeError("all stages of this step have already been set")
        f = np.asarray(f)
        if f.shape != self.un.shape:
            raise ValueError(
                f"right-hand side has shape {f.shape}, expected {self.un.shape}"
            )
        self._fi_cur[...] = f
        self._f_accum += _COEFFS_B[self._current_step] * f
        self._current_step += 1

    def finalize_rk(self, dt: float) -> None:
        """Apply the weighted stage sum to ``un``."""
        self.un += (dt / sum(_COEFFS_B)) * self._f_accum

    @property
    def current_u(self) -> np.ndarray:
        """The intermediate state of the current stage."""
        return self._ui