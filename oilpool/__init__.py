"""Tic-tac-toe and leaf-growth simulations, a world to host them, and health checks."""

__version__ = "0.1.0"