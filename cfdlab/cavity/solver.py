"""Time stepping of the lid-driven cavity over a block-decomposed grid."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from cfdlab.cavity.boundary import set_boundary_values
from cfdlab.cavity.config import CavityParameters, init_uvp, read_parameters
from cfdlab.cavity.parallel import Subdomain, decompose_all, exchange_velocities
from cfdlab.cavity.sor import sor
from cfdlab.cavity.uvp import calculate_dt, calculate_fg, calculate_rs, calculate_uv
from cfdlab.paramfile import ParameterError
from cfdlab.vtk import write_subdomain_file

__all__ = ["run", "main"]

log = logging.getLogger(__name__)


@dataclass
class _Block:
    sub: Subdomain
    U: np.ndarray
    V: np.ndarray
    P: np.ndarray
    F: np.ndarray
    G: np.ndarray
    RS: np.ndarray


def _allocate(sub: Subdomain) -> _Block:
    x, y = sub.xdim, sub.ydim
    return _Block(
        sub=sub,
        U=np.zeros((x + 3, y + 2)),
        V=np.zeros((x + 2, y + 3)),
        P=np.zeros((x + 2, y + 2)),
        F=np.zeros((x + 3, y + 2)),
        G=np.zeros((x + 2, y + 3)),
        RS=np.zeros((x + 2, y + 2)),
    )


def run(parameters: CavityParameters, output_prefix: str = "Solution") -> dict:
    """Simulate the cavity until ``t_end`` and write VTK files along the way.

    Returns a dict with the final ``time``, the number of ``steps`` and the
    per-subdomain fields ``U``, ``V`` and ``P`` (lists indexed by rank).
    """
    p = parameters
    subdomains = decompose_all(p.iproc, p.jproc, p.imax, p.jmax)
    blocks = [_allocate(sub) for sub in subdomains]
    for b in blocks:
        init_uvp(p.UI, p.VI, p.PI, b.U, b.V, b.P)
    log.info("Starting the simulation...")

    dt = p.dt
    t = 0.0
    n = 0
    n1 = 0
    pressures = [b.P for b in blocks]
    rhs = [b.RS for b in blocks]

    while t < p.t_end:
        for b in blocks:
            set_boundary_values(b.U, b.V, b.sub.neighbours)
            calculate_fg(p.Re, p.GX, p.GY, p.alpha, dt, p.dx, p.dy, b.U, b.V, b.F, b.G)
            calculate_rs(dt, p.dx, p.dy, b.F, b.G, b.RS)

        it = 0
        res = 1.0
        while True:
            res = sor(p.omg, p.dx, p.dy, subdomains, pressures, rhs, p.imax, p.jmax)
            it += 1
            if not (it < p.itermax and res > p.eps):
                break

        for b in blocks:
            calculate_uv(dt, p.dx, p.dy, b.U, b.V, b.F, b.G, b.P)
            set_boundary_values(b.U, b.V, b.sub.neighbours)
        exchange_velocities(subdomains, [b.U for b in blocks], [b.V for b in blocks])

        umax = max(float(np.max(np.abs(b.U))) for b in blocks)
        vmax = max(float(np.max(np.abs(b.V))) for b in blocks)
        dt = calculate_dt(p.Re, p.tau, dt, p.dx, p.dy, umax, vmax)

        if t >= n1 * p.dt_value:
            for b in blocks:
                s = b.sub
                write_subdomain_file(output_prefix, b.U, b.V, b.P, s.il, s.ir, s.jb, s.jt,
                                     s.omg_i, s.omg_j, n1)
            log.info("%f SECONDS COMPLETED", n1 * p.dt_value)
            n1 += 1

        log.info("t = %f ,dt = %f, Res = %f,iterations=%d", t, dt, res, it - 1)
        t += dt
        n += 1

    log.info("End of simulation...")
    return {
        "time": t,
        "steps": n,
        "U": [b.U for b in blocks],
        "V": [b.V for b in blocks],
        "P": [b.P for b in blocks],
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a parameter file and run the cavity simulation."""
    parser = argparse.ArgumentParser(description="Lid-driven cavity flow solver.")
    parser.add_argument("parameter_file", nargs="?", default="cavity100.dat")
    parser.add_argument("--output", default="Solution", help="prefix of the VTK files")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        parameters = read_parameters(args.parameter_file)
        run(parameters, args.output)
    except (ParameterError, ValueError, OSError) as exc:
        print(f"Error : {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())