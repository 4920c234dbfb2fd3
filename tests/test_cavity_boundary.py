from dataclasses import dataclass
from typing import Optional

import numpy as np

from cfdlab.cavity.boundary import set_boundary_values


@dataclass
class Sides:
    left: Optional[int] = None
    right: Optional[int] = None
    bottom: Optional[int] = None
    top: Optional[int] = None


def _fields(imax=4, jmax=3, seed=0):
    rng = np.random.default_rng(seed)
    U = rng.normal(size=(imax + 3, jmax + 2))
    V = rng.normal(size=(imax + 2, jmax + 3))
    return U, V


def test_all_walls():
    imax, jmax = 4, 3
    U, V = _fields(imax, jmax)
    set_boundary_values(U, V, Sides())
    assert np.allclose(U[1: imax + 2, 0], -U[1: imax + 2, 1])
    assert np.allclose(U[: imax + 2, jmax + 1] + U[: imax + 2, jmax], 2.0)
    assert np.all(U[0, : jmax + 1] == 0.0)
    assert np.all(U[imax + 2, : jmax + 1] == 0.0)
    assert np.all(V[1: imax + 1, 0] == 0.0)
    assert np.all(V[1: imax + 1, jmax] == 0.0)
    assert np.allclose(V[0, : jmax + 2], -V[1, : jmax + 2])
    assert np.allclose(V[imax + 1, : jmax + 2], -V[imax, : jmax + 2])


def test_interior_subdomain_unchanged():
    U, V = _fields()
    U0, V0 = U.copy(), V.copy()
    set_boundary_values(U, V, Sides(left=0, right=2, bottom=3, top=5))
    assert np.array_equal(U, U0)
    assert np.array_equal(V, V0)


def test_only_left_wall():
    imax, jmax = 4, 3
    U, V = _fields(imax, jmax, seed=1)
    U0, V0 = U.copy(), V.copy()
    set_boundary_values(U, V, Sides(left=None, right=1, bottom=2, top=3))
    assert np.all(U[0, : jmax + 1] == 0.0)
    assert np.allclose(V[0, : jmax + 2], -V[1, : jmax + 2])
    assert np.array_equal(U[1:], U0[1:])
    assert np.array_equal(V[1:], V0[1:])


def test_lid_gives_unit_mean_velocity():
    imax, jmax = 3, 3
    U = np.zeros((imax + 3, jmax + 2))
    V = np.zeros((imax + 2, jmax + 3))
    set_boundary_values(U, V, Sides(left=1, right=2, bottom=3))
    lid_mean = 0.5 * (U[: imax + 2, jmax] + U[: imax + 2, jmax + 1])
    assert np.allclose(lid_mean, 1.0)
    assert np.all(U[:, 0] == 0.0)