"""Finite-difference lid-driven cavity solver and helpers for parameter, PGM and VTK files."""

__version__ = "0.1.0"