# cfdlab

A small, readable finite-difference solver for the incompressible
Navier–Stokes equations in the lid-driven cavity, built on numpy, plus
helpers for parameter files, PGM geometry images, binary matrix dumps
and legacy ASCII VTK output.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Parameter files

Parameters are read from plain-text files with one `name value` pair
per line. Everything after `#` is a comment and blank lines are
ignored:

```
xlength   1.0     # domain size in x
ylength   1.0
imax      50      # cells in x
jmax      50
Re        100
t_end     5.0
dt        0.05
tau       0.5
dt_value  0.5     # interval between result files
omg       1.7
eps       0.001
itermax   100
alpha     0.5
UI        0.0
VI        0.0
PI        0.0
GX        0.0
GY        0.0
iproc     2       # subdomains in x
jproc     2       # subdomains in y
```

`cfdlab.paramfile` reads single values:

* `find_value(path, name)` – the raw value text (a leading `*` on the
  name is ignored);
* `read_string(path, name)` – the first word of the value;
* `read_int(path, name)` and `read_double(path, name)` – the number at
  the start of the value.

A file that cannot be opened, a malformed line before the match, or a
missing name raises `cfdlab.paramfile.ParameterError` (a `ValueError`).

## The cavity solver

Run it from the shell:

```
cfdlab-cavity cavity100.dat --output Solution
```

The parameter file defaults to `cavity100.dat` and the output prefix to
`Solution`. Progress is logged to standard output; on a bad parameter
file or grid the command prints the error and exits with status 1.

From Python:

```python
from cfdlab.cavity.config import read_parameters
from cfdlab.cavity.solver import run

params = read_parameters("cavity100.dat")   # a CavityParameters dataclass
result = run(params, "Solution")
print(result["time"], result["steps"])
```

`run` returns the final time, the number of steps and the per-subdomain
fields `U`, `V` and `P` (lists indexed by rank).

The grid of `imax × jmax` cells is split into `iproc × jproc`
rectangular subdomains by `cfdlab.cavity.parallel.decompose_all`,
numbered row by row from the bottom left. Each `Subdomain` records its
cell range (`il..ir`, `jb..jt`), its block position (`omg_i`, `omg_j`)
and its `Neighbours` (`None` at the outer wall). All subdomains are
stepped in one process; `exchange_pressure` and `exchange_velocities`
copy the shared ghost layers between them.

Each time step:

1. `cfdlab.cavity.boundary.set_boundary_values` applies no-slip walls
   and a lid moving with unit velocity;
2. `cfdlab.cavity.uvp.calculate_fg` and `calculate_rs` build the
   momentum terms (donor-cell weighting `alpha`) and the pressure
   right-hand side;
3. `cfdlab.cavity.sor.sor` iterates until the global root-mean-square
   residual falls below `eps` or `itermax` sweeps are done;
4. `calculate_uv` corrects the velocities, ghost layers are exchanged,
   and `calculate_dt` picks the next step from `tau`, `Re` and the
   largest velocities (leaving `dt` unchanged when `tau` is outside
   `(0, 1)`).

Every `dt_value` of simulated time each subdomain writes
`<prefix>.<omg_i><omg_j>.<n>.vtk`.

## Other helpers

* `cfdlab.vtk` – `write_vtk_header`, `write_point_coordinates`,
  `write_vtk_file` (velocity averaged to the nodes, cell pressure and
  optional temperature, written to `<prefix>.<step>.vtk`) and
  `write_subdomain_file`.
* `cfdlab.grids` – `write_matrix` / `read_matrix` store a matrix as
  native 32-bit floats with the first index varying fastest;
  `read_pgm(path, pad=False)` reads an ASCII PGM image into an integer
  array indexed `[x, y]` with `y` pointing up, optionally surrounded by
  a one-cell border of zeros.
* `cfdlab.coupled.config.read_parameters` reads the settings of a
  thermally coupled flow problem (domain size and origin, grid, problem
  and geometry names, coupling participant, mesh and data names, `TI`,
  `Pr`, `beta` and the usual flow settings) into a `HeatParameters`
  dataclass, with `dx` and `dy` derived.

## What the package does not do

`cfdlab.coupled` stops at reading parameters. There is no solver for
flow with heat transport: no cell flags built from a geometry image, no
boundary conditions for obstacles, inflow or outflow, no temperature
update, no pressure iteration on arbitrary geometries, and no exchange
of temperatures or heat fluxes with an external solver. The only
runnable simulation is the lid-driven cavity.