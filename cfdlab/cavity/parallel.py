"""Block decomposition of the cavity grid and ghost-layer exchange.

The grid of ``imax`` by ``jmax`` cells is split into ``iproc`` by ``jproc``
rectangular subdomains, numbered row by row from the bottom left. Each
subdomain keeps its own arrays with a ghost layer. The exchange functions
copy the values that neighbouring subdomains share.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

__all__ = [
    "Neighbours",
    "Subdomain",
    "decompose",
    "decompose_all",
    "exchange_pressure",
    "exchange_velocities",
]


@dataclass(frozen=True)
class Neighbours:
    """Rank of the subdomain beside each side, or ``None`` at the outer wall."""

    left: Optional[int] = None
    right: Optional[int] = None
    bottom: Optional[int] = None
    top: Optional[int] = None


@dataclass(frozen=True)
class Subdomain:
    """One block of the global grid: cells ``il..ir`` by ``jb..jt`` (1-based)."""

    rank: int
    omg_i: int
    omg_j: int
    il: int
    ir: int
    jb: int
    jt: int
    neighbours: Neighbours

    @property
    def xdim(self) -> int:
        """Number of cells in the x direction."""
        return self.ir - self.il + 1

    @property
    def ydim(self) -> int:
        """Number of cells in the y direction."""
        return self.jt - self.jb + 1


def decompose(iproc: int, jproc: int, imax: int, jmax: int, rank: int) -> Subdomain:
    """Return the subdomain owned by ``rank``.

    Every block gets ``imax // iproc`` by ``jmax // jproc`` cells; the last
    block in each direction also takes the remainder.
    """
    if iproc < 1 or jproc < 1:
        raise ValueError("iproc and jproc must be at least 1")
    if imax < iproc or jmax < jproc:
        raise ValueError("grid has fewer cells than subdomains in one direction")
    if not 0 <= rank < iproc * jproc:
        raise ValueError(f"rank {rank} outside 0..{iproc * jproc - 1}")

    omg_i = rank % iproc + 1
    omg_j = rank // iproc + 1

    il = (omg_i - 1) * (imax // iproc) + 1
    ir = omg_i * (imax // iproc) if omg_i != iproc else imax
    jb = (omg_j - 1) * (jmax // jproc) + 1
    jt = omg_j * (jmax // jproc) if omg_j != jproc else jmax

    neighbours = Neighbours(
        left=None if il == 1 else rank - 1,
        right=None if ir == imax else rank + 1,
        bottom=None if jb == 1 else rank - iproc,
        top=None if jt == jmax else rank + iproc,
    )
    return Subdomain(rank, omg_i, omg_j, il, ir, jb, jt, neighbours)


def decompose_all(iproc: int, jproc: int, imax: int, jmax: int) -> list[Subdomain]:
    """Return every subdomain, indexed by rank."""
    return [decompose(iproc, jproc, imax, jmax, rank) for rank in range(iproc * jproc)]


def _apply(updates: list) -> None:
    for target, index, values in updates:
        target[index] = values


def exchange_pressure(subdomains: Sequence[Subdomain],
                      pressures: Sequence[np.ndarray]) -> None:
    """Fill the ghost cells of each pressure array from its neighbours.

    ``pressures[r]`` belongs to ``subdomains[r]`` and has shape
    ``(xdim+2, ydim+2)``. Corner ghost cells are left as they are.
    """
    updates = []
    for sub, P in zip(subdomains, pressures):
        x, y = sub.xdim, sub.ydim
        nb = sub.neighbours
        if nb.right is not None:
            Q = pressures[nb.right]
            updates.append((P, (x + 1, slice(1, y + 1)), Q[1, 1: y + 1].copy()))
        if nb.left is not None:
            Q = pressures[nb.left]
            qx = subdomains[nb.left].xdim
            updates.append((P, (0, slice(1, y + 1)), Q[qx, 1: y + 1].copy()))
        if nb.top is not None:
            Q = pressures[nb.top]
            updates.append((P, (slice(1, x + 1), y + 1), Q[1: x + 1, 1].copy()))
        if nb.bottom is not None:
            Q = pressures[nb.bottom]
            qy = subdomains[nb.bottom].ydim
            updates.append((P, (slice(1, x + 1), 0), Q[1: x + 1, qy].copy()))
    _apply(updates)


def exchange_velocities(subdomains: Sequence[Subdomain], us: Sequence[np.ndarray],
                        vs: Sequence[np.ndarray]) -> None:
    """Fill the ghost layers of each velocity pair from its neighbours.

    ``us[r]`` has shape ``(xdim+3, ydim+2)`` and ``vs[r]`` shape
    ``(xdim+2, ydim+3)``. Left and right layers are exchanged first, then
    bottom and top, so the vertical exchange sees the horizontal result.
    """
    updates = []
    for sub, U, V in zip(subdomains, us, vs):
        x, y = sub.xdim, sub.ydim
        nb = sub.neighbours
        if nb.right is not None:
            UR, VR = us[nb.right], vs[nb.right]
            updates.append((U, (x + 1, slice(1, y + 1)), UR[2, 1: y + 1].copy()))
            updates.append((V, (x + 1, slice(1, y + 2)), VR[1, 1: y + 2].copy()))
        if nb.left is not None:
            UL, VL = us[nb.left], vs[nb.left]
            lx = subdomains[nb.left].xdim
            updates.append((U, (0, slice(1, y + 1)), UL[lx - 1, 1: y + 1].copy()))
            updates.append((V, (0, slice(1, y + 2)), VL[lx, 1: y + 2].copy()))
    _apply(updates)

    updates = []
    for sub, U, V in zip(subdomains, us, vs):
        x, y = sub.xdim, sub.ydim
        nb = sub.neighbours
        if nb.bottom is not None:
            UB, VB = us[nb.bottom], vs[nb.bottom]
            by = subdomains[nb.bottom].ydim
            updates.append((U, (slice(1, x + 2), 0), UB[1: x + 2, by].copy()))
            updates.append((V, (slice(1, x + 1), 0), VB[1: x + 1, by - 1].copy()))
        if nb.top is not None:
            UT, VT = us[nb.top], vs[nb.top]
            updates.append((U, (slice(1, x + 2), y + 1), UT[1: x + 2, 1].copy()))
            updates.append((V, (slice(1, x + 1), y + 1), VT[1: x + 1, 1].copy()))
    _apply(updates)