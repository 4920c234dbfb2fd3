"""Momentum, pressure right-hand side and velocity update for the cavity."""

from __future__ import annotations

import math

import numpy as np

__all__ = ["calculate_dt", "calculate_fg", "calculate_rs", "calculate_uv"]


def _limit(length: float, speed: float) -> float:
    speed = abs(speed)
    return length / speed if speed else math.inf


def calculate_dt(Re: float, tau: float, dt: float, dx: float, dy: float,
                 umax: float, vmax: float) -> float:
    """Return the stable time step for global velocity maxima ``umax``, ``vmax``.

    When ``tau`` lies outside ``(0, 1)`` the given ``dt`` is returned unchanged.
    """
    if not 0.0 < tau < 1.0:
        return dt
    diffusion = (Re * 0.5) / (1.0 / (dx * dx) + 1.0 / (dy * dy))
    return tau * min(diffusion, _limit(dx, umax), _limit(dy, vmax))


def calculate_fg(Re: float, GX: float, GY: float, alpha: float, dt: float,
                 dx: float, dy: float, U: np.ndarray, V: np.ndarray,
                 F: np.ndarray, G: np.ndarray) -> None:
    """Fill ``F`` and ``G`` in place from the momentum equations.

    ``U`` and ``F`` have shape ``(imax+3, jmax+2)``; ``V`` and ``G`` have
    shape ``(imax+2, jmax+3)``. Convection uses donor-cell weighting ``alpha``.
    """
    imax = V.shape[0] - 2
    jmax = U.shape[1] - 2

    G[: imax + 2, 0] = V[: imax + 2, 0]
    G[: imax + 2, 1] = V[: imax + 2, 1]
    G[: imax + 2, jmax + 1] = V[: imax + 2, jmax + 1]

    F[0, : jmax + 2] = U[0, : jmax + 2]
    F[1, : jmax + 2] = U[1, : jmax + 2]
    F[imax + 1, : jmax + 2] = U[imax + 1, : jmax + 2]

    i = slice(2, imax + 1)
    ie = slice(3, imax + 2)
    iw = slice(1, imax)
    j = slice(1, jmax + 1)
    jn = slice(2, jmax + 2)
    js = slice(0, jmax)

    u = U[i, j]
    ue, uw, un, us = U[ie, j], U[iw, j], U[i, jn], U[i, js]
    v_nw, v_n = V[iw, jn], V[i, jn]
    v_w, v_c = V[iw, j], V[i, j]

    F[i, j] = u + dt * (
        (1 / Re) * ((uw - 2 * u + ue) / (dx * dx) + (us - 2 * u + un) / (dy * dy))
        - (1 / dx) * 0.25 * (
            ((ue + u) * (ue + u) - (uw + u) * (uw + u))
            + alpha * (np.abs(ue + u) * (u - ue) - np.abs(uw + u) * (uw - u))
        )
        - (1 / dy) * 0.25 * (
            ((v_nw + v_n) * (u + un) - (v_w + v_c) * (us + u))
            + alpha * (np.abs(v_nw + v_n) * (u - un) - np.abs(v_w + v_c) * (us - u))
        )
        + GX
    )

    i = slice(1, imax + 1)
    ie = slice(2, imax + 2)
    iw = slice(0, imax)
    j = slice(2, jmax + 1)
    jn = slice(3, jmax + 2)
    js = slice(1, jmax)

    v = V[i, j]
    ve, vw, vn, vs = V[ie, j], V[iw, j], V[i, jn], V[i, js]
    u_es, u_e = U[ie, js], U[ie, j]
    u_s, u_c = U[i, js], U[i, j]

    G[i, j] = v + dt * (
        (1 / Re) * ((vw - 2 * v + ve) / (dx * dx) + (vs - 2 * v + vn) / (dy * dy))
        - (1 / dx) * 0.25 * (
            ((u_es + u_e) * (v + ve) - (u_s + u_c) * (vw + v))
            + alpha * (np.abs(u_es + u_e) * (v - ve) - np.abs(u_s + u_c) * (vw - v))
        )
        - (1 / dy) * 0.25 * (
            ((v + vn) * (v + vn) - (vs + v) * (vs + v))
            + alpha * (np.abs(v + vn) * (v - vn) - np.abs(vs + v) * (vs - v))
        )
        + GY
    )


def calculate_rs(dt: float, dx: float, dy: float, F: np.ndarray, G: np.ndarray,
                 RS: np.ndarray) -> None:
    """Fill the inner cells of ``RS`` (shape ``(imax+2, jmax+2)``) in place."""
    imax = RS.shape[0] - 2
    jmax = RS.shape[1] - 2
    i = slice(1, imax + 1)
    j = slice(1, jmax + 1)
    RS[i, j] = (1 / dt) * (
        (F[2: imax + 2, j] - F[i, j]) / dx + (G[i, 2: jmax + 2] - G[i, j]) / dy
    )


def calculate_uv(dt: float, dx: float, dy: float, U: np.ndarray, V: np.ndarray,
                 F: np.ndarray, G: np.ndarray, P: np.ndarray) -> None:
    """Correct ``U`` and ``V`` in place with the pressure gradient of ``P``."""
    imax = P.shape[0] - 2
    jmax = P.shape[1] - 2

    i = slice(1, imax + 2)
    j = slice(1, jmax + 1)
    U[i, j] = F[i, j] - (dt / dx) * (P[i, j] - P[0: imax + 1, j])

    i = slice(1, imax + 1)
    j = slice(1, jmax + 2)
    V[i, j] = G[i, j] - (dt / dy) * (P[i, j] - P[i, 0: jmax + 1])