# advect1d

This package solves the periodic linear advection equation

    u_t + c u_x = 0,   x in [0, 1]

It uses a second-order central-difference spatial operator and classical
fourth-order Runge-Kutta time stepping. The initial condition is
`sin(2 * pi * k * x)` on a uniform grid of `N` points, `x_j = j / (N - 1)`.
The first and last points coincide under periodicity. The run integrates to
`t = 1` with time step `dt = 2.4 * dx`. The last step is shortened so that it
ends exactly at `t = 1`.

## Installation

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Command line

    advect1d NUM_POINTS WAVE_NUMBER

For example:

    advect1d 80 2

The command writes `initialCondition.csv` and `final.csv` to the current
directory. Each line holds `x ,u`. It then prints three values:

- the computation time in seconds;
- the L2 norm of the difference between the initial and final solutions, divided by the wave number;
- `k * dx * 2 * pi`.

The command exits with status 1 in these cases:

- the number of arguments is wrong (it prints a usage message);
- an argument cannot be parsed;
- an output file cannot be opened;
- the grid is too small (fewer than 3 points).

## Library use

```python
from advect1d.flux import LinearFlux
from advect1d.rhs import Central1D
from advect1d.rk4 import RungeKutta4
from advect1d.solver import initial_condition, l2_norm, run, write_to_file
```

### `advect1d.flux`

- `FluxFunction` is the abstract base. It declares `compute_flux(values)` for
  whole arrays and `node_flux(value)` for a single value.
- `LinearFlux(speed=1.0)` computes `f(u) = speed * u`.

### `advect1d.rhs`

- `RHSOperator` is the abstract base. It declares `eval(u_in=None)` and the
  `rhs` property.
- `Central1D(u, mesh, flux)` evaluates the periodic central-difference right-hand side `-dF/dx`.
  - `eval(u_in)` evaluates it on `u_in`. With no argument it uses the stored `u`.
  - `eval` returns the result. The same array is also available as the `rhs` property.
  - The last value always equals the first.
  - `ValueError` is raised if the mesh and solution lengths differ, or if there are fewer than 3 points.

### `advect1d.rk4`

`RungeKutta4(un)` advances the floating-point numpy array `un` in place. A
non-float array raises `TypeError`. One time step runs like this:

```python
rk.init_rk()
for _ in range(rk.num_steps):   # num_steps is a property (4)
    rk.step_ui(dt)
    ui = rk.current_u            # property; impose boundary conditions here
    rk.set_fi(operator.eval(ui.copy()))
rk.finalize_rk(dt)
```

Taking more stages than `num_steps` raises `RuntimeError`. A right-hand side
of the wrong shape raises `ValueError`.

### `advect1d.solver`

- `initial_condition(num_points, wave_number)` returns the grid `x` and the initial sine wave `u`. It needs at least 2 points.
- `l2_norm(u, u_init)` returns the L2 norm of `u - u_init`. It raises `ValueError` if the shapes differ.
- `write_to_file(x, u, path)` writes the `x ,u` lines to `path`.
- `run(num_points, wave_number, output_dir=".")` performs the whole simulation. It writes both CSV files into `output_dir` and returns a `RunResult`, which has these fields:
  - `x`
  - `u_initial`
  - `u_final`
  - `elapsed`
  - `error` (the L2 error divided by the wave number)
  - `kdx`
- `main(argv=None)` is the command-line entry point. It returns the exit status.

## Limits

- The only flux provided is the linear one.
- The only spatial operator provided is the periodic central difference.
- The command line takes no options for:
  - the advection speed;
  - the CFL number;
  - the final time;
  - the output directory.

  To vary these, use `run` or the classes directly.