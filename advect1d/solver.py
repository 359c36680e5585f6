"""Linear advection of a sine wave on a periodic domain."""

from __future__ import annotations

import argparse
import math
import sys
import time
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from .flux import LinearFlux
from .rhs import Central1D
from .rk4 import RungeKutta4

CFL = 2.4
T_FINAL = 1.0


@dataclass
class RunResult:
    """Outcome of one simulation run."""

    x: np.ndarray
    u_initial: np.ndarray
    u_final: np.ndarray
    elapsed: float
    error: float
    kdx: float


def write_to_file(x, u, path) -> None:
    """Write ``x , u`` pairs, one per line."""
    with open(path, "w", encoding="utf-8") as out:
        for xj, uj in zip(x, u):
            out.write(f"{xj:g} ,{uj:g}\n")


def l2_norm(u, u_init) -> float:
    """Return the L2 norm of the difference of two arrays."""
    u = np.asarray(u, dtype=float)
    u_init = np.asarray(u_init, dtype=float)
    if u.shape != u_init.shape:
        raise ValueError(f"shapes differ: {u.shape} and {u_init.shape}")
    return float(np.sqrt(np.sum((u - u_init) ** 2)))


def initial_condition(num_points: int, wave_number: float):
    """Return the mesh on ``[0, 1]`` and the sine wave ``sin(2*pi*k*x)`` on it."""
    if num_points < 2:
        raise ValueError("at least 2 points are needed")
    x = np.arange(num_points, dtype=float) / (num_points - 1)
    u = np.sin(wave_number * 2.0 * math.pi * x)
    return x, u


def run(num_points: int, wave_number: float, output_dir=".") -> RunResult:
    """Advect the initial wave up to t = 1 and write both states as CSV."""
    output_dir = Path(output_dir)
    x, u = initial_condition(num_points, wave_number)
    u_initial = u.copy()

    rk = RungeKutta4(u)
    rhs = Central1D(u, x, LinearFlux())
    dt = CFL * x[1]

    write_to_file(x, u, output_dir / "initialCondition.csv")

    t = 0.0
    started = time.perf_counter()
    while t < T_FINAL:
        if t + dt >= T_FINAL:
            dt = T_FINAL - t
        rk.init_rk()
        for _ in range(rk.num_steps):
            rk.step_ui(dt)
            ui = rk.current_u.copy()
            rhs.eval(ui)
            rk.set_fi(rhs.rhs)
        rk.finalize_rk(dt)
        t += dt
    elapsed = time.perf_counter() - started

    write_to_file(x, u, output_dir / "final.csv")

    return RunResult(
        x=x,
        u_initial=u_initial,
        u_final=u,
        elapsed=elapsed,
        error=l2_norm(u_initial, u) / wave_number,
        kdx=wave_number * x[1] * 2.0 * math.pi,
    )


def main(argv=None) -> int:
    """Command-line entry point: ``<num points> <wave number>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Wrong number of arguments. You should include:")
        print("    Num points")
        print("    Wave number")
        return 1

    parser = argparse.ArgumentParser(prog="advect1d")
    parser.add_argument("num_points", type=int)
    parser.add_argument("wave_number", type=float)
    try:
        options = parser.parse_args(args)
    except SystemExit:
        return 1

    try:
        result = run(options.num_points, options.wave_number)
    except OSError as exc:
        print(f"Couldn't open output file: {exc}")
        return 1
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1

    print(
        f"Comp. time: {result.elapsed:.4g} sec. Error: {result.error:.4g}"
        f" kdx: {result.kdx:.4g}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())