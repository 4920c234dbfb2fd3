"""Wall boundary values of the lid-driven cavity on one subdomain."""

from __future__ import annotations

from typing import Optional, Protocol

import numpy as np

__all__ = ["set_boundary_values"]


class _Sides(Protocol):
    left: Optional[int]
    right: Optional[int]
    bottom: Optional[int]
    top: Optional[int]


def set_boundary_values(U: np.ndarray, V: np.ndarray, neighbours: _Sides) -> None:
    """Apply no-slip walls and the moving lid on sides with no neighbour.

    ``neighbours`` gives the rank beside each side, or ``None`` where the
    subdomain touches the outer wall. ``U`` has shape ``(imax+3, jmax+2)``
    and ``V`` shape ``(imax+2, jmax+3)``; both are changed in place. The
    lid on top moves with unit velocity.
    """
    imax = V.shape[0] - 2
    jmax = U.shape[1] - 2

    if neighbours.bottom is None:
        U[: imax + 2, 0] = -U[: imax + 2, 1]
        V[: imax + 1, 0] = 0.0

    if neighbours.top is None:
        U[: imax + 2, jmax + 1] = 2.0 - U[: imax + 2, jmax]
        V[: imax + 1, jmax] = 0.0

    if neighbours.left is None:
        U[0, : jmax + 1] = 0.0
        V[0, : jmax + 2] = -V[1, : jmax + 2]

    if neighbours.right is None:
        U[imax + 2, : jmax + 1] = 0.0
        V[imax + 1, : jmax + 2] = -V[imax, : jmax + 2]