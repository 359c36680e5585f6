"""One-dimensional linear advection with central differences and RK4 time stepping."""

__version__ = "0.1.0"
__all__ = ["flux", "rhs", "rk4", "solver"]