"""Successive over-relaxation for the pressure Poisson equation."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from cfdlab.cavity.parallel import Neighbours, Subdomain, exchange_pressure

__all__ = ["set_pressure_boundaries", "relax", "residual_sum", "sor"]


def set_pressure_boundaries(P: np.ndarray, neighbours: Neighbours) -> None:
    """Copy inner pressure into the ghost layer on sides at the outer wall."""
    xdim = P.shape[0] - 2
    ydim = P.shape[1] - 2
    if neighbours.left is None:
        P[0, 1: ydim + 1] = P[1, 1: ydim + 1]
    if neighbours.right is None:
        P[xdim + 1, 1: ydim + 1] = P[xdim, 1: ydim + 1]
    if neighbours.top is None:
        P[1: xdim + 1, ydim + 1] = P[1: xdim + 1, ydim]
    if neighbours.bottom is None:
        P[1: xdim + 1, 0] = P[1: xdim + 1, 1]


def relax(omg: float, dx: float, dy: float, P: np.ndarray, RS: np.ndarray) -> None:
    """Do one in-place Gauss-Seidel sweep with relaxation ``omg`` over inner cells."""
    xdim = P.shape[0] - 2
    ydim = P.shape[1] - 2
    dx2 = dx * dx
    dy2 = dy * dy
    coeff = omg / (2.0 * (1.0 / dx2 + 1.0 / dy2))
    rows = P.tolist()
    rhs = RS.tolist()
    for i in range(1, xdim + 1):
        west, row, east, r = rows[i - 1], rows[i], rows[i + 1], rhs[i]
        for j in range(1, ydim + 1):
            row[j] = (1.0 - omg) * row[j] + coeff * (
                (east[j] + west[j]) / dx2 + (row[j + 1] + row[j - 1]) / dy2 - r[j]
            )
    P[...] = rows


def residual_sum(dx: float, dy: float, P: np.ndarray, RS: np.ndarray) -> float:
    """Return the sum of squared residuals over the inner cells."""
    c = P[1:-1, 1:-1]
    laplace = (
        (P[2:, 1:-1] - 2.0 * c + P[:-2, 1:-1]) / (dx * dx)
        + (P[1:-1, 2:] - 2.0 * c + P[1:-1, :-2]) / (dy * dy)
    )
    r = laplace - RS[1:-1, 1:-1]
    return float(np.sum(r * r))


def sor(omg: float, dx: float, dy: float, subdomains: Sequence[Subdomain],
        pressures: Sequence[np.ndarray], rhs: Sequence[np.ndarray],
        imax: int, jmax: int) -> float:
    """Do one SOR step on every subdomain and return the global residual.

    The residual is the root mean square over all ``imax * jmax`` cells,
    computed after the pressure ghost layers have been exchanged.
    """
    for sub, P, RS in zip(subdomains, pressures, rhs):
        set_pressure_boundaries(P, sub.neighbours)
        relax(omg, dx, dy, P, RS)
    exchange_pressure(subdomains, pressures)
    total = sum(residual_sum(dx, dy, P, RS) for P, RS in zip(pressures, rhs))
    return math.sqrt(total / (imax * jmax))