import numpy as np

from cfdlab.cavity.parallel import Neighbours, decompose_all
from cfdlab.cavity.sor import relax, residual_sum, set_pressure_boundaries, sor


def test_boundaries_copied_at_walls():
    rng = np.random.default_rng(1)
    P = rng.random((5, 6))
    set_pressure_boundaries(P, Neighbours())
    assert np.array_equal(P[0, 1:5], P[1, 1:5])
    assert np.array_equal(P[4, 1:5], P[3, 1:5])
    assert np.array_equal(P[1:4, 5], P[1:4, 4])
    assert np.array_equal(P[1:4, 0], P[1:4, 1])


def test_boundaries_untouched_beside_neighbours():
    rng = np.random.default_rng(2)
    P = rng.random((5, 5))
    before = P.copy()
    set_pressure_boundaries(P, Neighbours(left=1, right=2, bottom=3, top=4))
    assert np.array_equal(P, before)


def test_relax_keeps_constant_solution():
    P = np.full((6, 6), 3.0)
    RS = np.zeros((6, 6))
    relax(1.5, 0.5, 0.25, P, RS)
    assert np.allclose(P, 3.0)


def test_residual_zero_for_exact_solution():
    i = np.arange(7, dtype=float)[:, None]
    P = np.repeat(i * i, 5, axis=1)
    RS = np.full((7, 5), 2.0)
    assert residual_sum(1.0, 1.0, P, RS) == 0.0


def test_residual_positive_for_wrong_solution():
    P = np.zeros((5, 5))
    RS = np.ones((5, 5))
    assert residual_sum(1.0, 1.0, P, RS) == 9.0


def test_sor_converges_single_domain():
    subs = decompose_all(1, 1, 6, 6)
    rng = np.random.default_rng(3)
    P = rng.random((8, 8))
    RS = np.zeros((8, 8))
    first = sor(1.7, 1 / 6, 1 / 6, subs, [P], [RS], 6, 6)
    res = first
    for _ in range(300):
        res = sor(1.7, 1 / 6, 1 / 6, subs, [P], [RS], 6, 6)
    assert res < first
    assert res < 1e-6


def test_sor_converges_split_domain():
    subs = decompose_all(2, 2, 6, 6)
    rng = np.random.default_rng(4)
    ps = [rng.random((s.xdim + 2, s.ydim + 2)) for s in subs]
    rs = [np.zeros_like(p) for p in ps]
    first = sor(1.5, 1 / 6, 1 / 6, subs, ps, rs, 6, 6)
    res = first
    for _ in range(400):
        res = sor(1.5, 1 / 6, 1 / 6, subs, ps, rs, 6, 6)
    assert res < first
    assert res < 1e-5
    for sub, p in zip(subs, ps):
        if sub.neighbours.right is not None:
            right = ps[sub.neighbours.right]
            assert np.array_equal(p[sub.xdim + 1, 1: sub.ydim + 1], right[1, 1: sub.ydim + 1])


def test_sor_of_constant_field_is_zero():
    subs = decompose_all(1, 1, 4, 4)
    P = np.full((6, 6), 2.0)
    RS = np.zeros((6, 6))
    assert sor(1.0, 0.25, 0.25, subs, [P], [RS], 4, 4) == 0.0