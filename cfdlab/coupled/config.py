"""Parameters of the coupled heat-transfer flow problems."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Union

from cfdlab.paramfile import read_double, read_int, read_string

__all__ = ["HeatParameters", "read_parameters"]

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class HeatParameters:
    """Simulation and coupling settings read from a parameter file."""

    xlength: float
    ylength: float
    x_origin: float
    y_origin: float
    imax: int
    jmax: int
    problem: str
    geometry: str
    precice_config: str
    participant_name: str
    mesh_name: str
    read_data_name: str
    write_data_name: str
    TI: float
    Pr: float
    beta: float
    dt: float
    t_end: float
    tau: float
    dt_value: float
    itermax: int
    eps: float
    omg: float
    alpha: float
    Re: float
    GX: float
    GY: float
    PI: float
    UI: float
    VI: float
    dx: float
    dy: float


def read_parameters(path: PathLike) -> HeatParameters:
    """Read every setting from ``path`` and derive the cell sizes.

    Raises :class:`cfdlab.paramfile.ParameterError` when a value is missing
    or malformed.
    """
    log.info("PROGRESS: Reading .dat file...")
    xlength = read_double(path, "xlength")
    ylength = read_double(path, "ylength")
    x_origin = read_double(path, "x_origin")
    y_origin = read_double(path, "y_origin")
    imax = read_int(path, "imax")
    jmax = read_int(path, "jmax")
    problem = read_string(path, "problem")
    geometry = read_string(path, "geometry")
    precice_config = read_string(path, "precice_config")
    participant_name = read_string(path, "participant_name")
    mesh_name = read_string(path, "mesh_name")
    read_data_name = read_string(path, "read_data_name")
    write_data_name = read_string(path, "write_data_name")
    TI = read_double(path, "TI")
    Pr = read_double(path, "Pr")
    beta = read_double(path, "beta")
    dt = read_double(path, "dt")
    t_end = read_double(path, "t_end")
    tau = read_double(path, "tau")
    dt_value = read_double(path, "dt_value")
    itermax = read_int(path, "itermax")
    eps = read_double(path, "eps")
    omg = read_double(path, "omg")
    alpha = read_double(path, "alpha")
    Re = read_double(path, "Re")
    GX = read_double(path, "GX")
    GY = read_double(path, "GY")
    PI = read_double(path, "PI")
    UI = read_double(path, "UI")
    VI = read_double(path, "VI")
    log.info("PROGRESS: .dat file read...")
    return HeatParameters(
        xlength=xlength,
        ylength=ylength,
        x_origin=x_origin,
        y_origin=y_origin,
        imax=imax,
        jmax=jmax,
        problem=problem,
        geometry=geometry,
        precice_config=precice_config,
        participant_name=participant_name,
        mesh_name=mesh_name,
        read_data_name=read_data_name,
        write_data_name=write_data_name,
        TI=TI,
        Pr=Pr,
        beta=beta,
        dt=dt,
        t_end=t_end,
        tau=tau,
        dt_value=dt_value,
        itermax=itermax,
        eps=eps,
        omg=omg,
        alpha=alpha,
        Re=Re,
        GX=GX,
        GY=GY,
        PI=PI,
        UI=UI,
        VI=VI,
        dx=xlength / imax,
        dy=ylength / jmax,
    )