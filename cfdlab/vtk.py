"""Writers for legacy ASCII VTK structured-grid files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, TextIO, Union

import numpy as np

__all__ = [
    "write_vtk_header",
    "write_point_coordinates",
    "write_vtk_file",
    "write_subdomain_file",
]

PathLike = Union[str, "os.PathLike[str]"]


def write_vtk_header(fp: TextIO, imax: int, jmax: int) -> None:
    """Write the header of a structured grid of ``imax`` by ``jmax`` cells."""
    points = (imax + 1) * (jmax + 1)
    fp.write("# vtk DataFile Version 2.0\n")
    fp.write("generated by cfdlab \n")
    fp.write("ASCII\n")
    fp.write("\n")
    fp.write("DATASET STRUCTURED_GRID\n")
    fp.write(f"DIMENSIONS  {imax + 1} {jmax + 1} 1 \n")
    fp.write(f"POINTS {points} float\n")
    fp.write("\n")


def write_point_coordinates(fp: TextIO, imax: int, jmax: int, dx: float, dy: float,
                            x_origin: float = 0.0, y_origin: float = 0.0) -> None:
    """Write the grid node coordinates, ``x`` varying fastest."""
    lines = (
        f"{x_origin + i * dx:f} {y_origin + j * dy:f} 0\n"
        for j in range(jmax + 1)
        for i in range(imax + 1)
    )
    fp.write("".join(lines))


def _write_scalars(fp: TextIO, title: str, cells: np.ndarray) -> None:
    fp.write(title)
    fp.write("LOOKUP_TABLE default \n")
    fp.write("".join(f"{value:f}\n" for value in cells.T.ravel()))


def _write_fields(fp: TextIO, imax: int, jmax: int, u_nodes: np.ndarray,
                  v_nodes: np.ndarray, pressure: np.ndarray,
                  temperature: Optional[np.ndarray] = None) -> None:
    fp.write(f"POINT_DATA {(imax + 1) * (jmax + 1)} \n")
    fp.write("\n")
    fp.write("VECTORS velocity float\n")
    fp.write("".join(
        f"{u:f} {v:f} 0\n" for u, v in zip(u_nodes.T.ravel(), v_nodes.T.ravel())
    ))
    fp.write("\n")
    fp.write(f"CELL_DATA {imax * jmax} \n")
    _write_scalars(fp, "SCALARS pressure float 1 \n", pressure)
    if temperature is not None:
        fp.write("\n")
        _write_scalars(fp, "SCALARS temperature float 1\n", temperature)


def write_vtk_file(prefix: str, step: int, imax: int, jmax: int, dx: float, dy: float,
                   U, V, P, T=None, x_origin: float = 0.0,
                   y_origin: float = 0.0) -> Path:
    """Write velocity, pressure and optionally temperature to ``prefix.step.vtk``.

    Velocities are averaged onto the grid nodes; pressure and temperature are
    taken from the inner cells ``1..imax`` by ``1..jmax``. Returns the path.
    """
    U = np.asarray(U, dtype=float)
    V = np.asarray(V, dtype=float)
    P = np.asarray(P, dtype=float)
    path = Path(f"{prefix}.{step}.vtk")

    u_nodes = (U[: imax + 1, : jmax + 1] + U[: imax + 1, 1: jmax + 2]) * 0.5
    v_nodes = (V[: imax + 1, : jmax + 1] + V[1: imax + 2, : jmax + 1]) * 0.5
    pressure = P[1: imax + 1, 1: jmax + 1]
    temperature = None
    if T is not None:
        temperature = np.asarray(T, dtype=float)[1: imax + 1, 1: jmax + 1]

    with open(path, "w") as fp:
        write_vtk_header(fp, imax, jmax)
        write_point_coordinates(fp, imax, jmax, dx, dy, x_origin, y_origin)
        _write_fields(fp, imax, jmax, u_nodes, v_nodes, pressure, temperature)
    return path


def write_subdomain_file(prefix: str, U, V, P, il: int, ir: int, jb: int, jt: int,
                         omg_i: int, omg_j: int, n: int) -> Path:
    """Write one subdomain's fields to ``prefix.<omg_i><omg_j>.n.vtk``.

    The grid has unit spacing and starts at node ``(il, jb)``. Returns the path.
    """
    U = np.asarray(U, dtype=float)
    V = np.asarray(V, dtype=float)
    P = np.asarray(P, dtype=float)
    imax = ir - il + 1
    jmax = jt - jb + 1
    path = Path(f"{prefix}.{omg_i}{omg_j}.{n}.vtk")

    u_nodes = (U[1: imax + 2, : jmax + 1] + U[1: imax + 2, 1: jmax + 2]) * 0.5
    v_nodes = (V[: imax + 1, 1: jmax + 2] + V[1: imax + 2, 1: jmax + 2]) * 0.5
    pressure = P[1: imax + 1, 1: jmax + 1]

    with open(path, "w") as fp:
        write_vtk_header(fp, imax, jmax)
        write_point_coordinates(fp, imax, jmax, 1.0, 1.0, float(il), float(jb))
        _write_fields(fp, imax, jmax, u_nodes, v_nodes, pressure)
    return path