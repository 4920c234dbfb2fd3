"""Parameters and initial fields of the lid-driven cavity problem."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

import numpy as np

from cfdlab.paramfile import read_double, read_int

__all__ = ["CavityParameters", "read_parameters", "init_uvp"]

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class CavityParameters:
    """Simulation settings read from a cavity parameter file."""

    xlength: float
    ylength: float
    Re: float
    t_end: float
    dt: float
    imax: int
    jmax: int
    omg: float
    eps: float
    tau: float
    alpha: float
    itermax: int
    dt_value: float
    UI: float
    VI: float
    GX: float
    GY: float
    PI: float
    iproc: int
    jproc: int
    dx: float
    dy: float


def read_parameters(path: PathLike) -> CavityParameters:
    """Read every cavity setting from ``path`` and derive the cell sizes."""
    xlength = read_double(path, "xlength")
    ylength = read_double(path, "ylength")
    Re = read_double(path, "Re")
    t_end = read_double(path, "t_end")
    dt = read_double(path, "dt")
    imax = read_int(path, "imax")
    jmax = read_int(path, "jmax")
    omg = read_double(path, "omg")
    eps = read_double(path, "eps")
    tau = read_double(path, "tau")
    alpha = read_double(path, "alpha")
    itermax = read_int(path, "itermax")
    dt_value = read_double(path, "dt_value")
    UI = read_double(path, "UI")
    VI = read_double(path, "VI")
    GX = read_double(path, "GX")
    GY = read_double(path, "GY")
    PI = read_double(path, "PI")
    iproc = read_int(path, "iproc")
    jproc = read_int(path, "jproc")
    return CavityParameters(
        xlength=xlength,
        ylength=ylength,
        Re=Re,
        t_end=t_end,
        dt=dt,
        imax=imax,
        jmax=jmax,
        omg=omg,
        eps=eps,
        tau=tau,
        alpha=alpha,
        itermax=itermax,
        dt_value=dt_value,
        UI=UI,
        VI=VI,
        GX=GX,
        GY=GY,
        PI=PI,
        iproc=iproc,
        jproc=jproc,
        dx=xlength / imax,
        dy=ylength / jmax,
    )


def init_uvp(UI: float, VI: float, PI: float,
             U: np.ndarray, V: np.ndarray, P: np.ndarray) -> None:
    """Set every entry of ``U``, ``V`` and ``P`` to ``UI``, ``VI`` and ``PI``."""
    U[...] = UI
    V[...] = VI
    P[...] = PI