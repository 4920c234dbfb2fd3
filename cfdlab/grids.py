"""Binary matrix dumps and ASCII PGM geometry images."""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import Union

import numpy as np

__all__ = ["write_matrix", "read_matrix", "read_pgm"]

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def write_matrix(path: PathLike, matrix, overwrite: bool = True) -> None:
    """Write ``matrix`` as native 32-bit floats, first index varying fastest.

    With ``overwrite`` the file is replaced, otherwise the data is appended.
    """
    data = np.asarray(matrix, dtype=np.float32)
    if data.ndim != 2:
        raise ValueError("matrix must be two-dimensional")
    mode = "wb" if overwrite else "ab"
    with open(path, mode) as fh:
        fh.write(data.ravel(order="F").tobytes())


def read_matrix(path: PathLike, shape: tuple[int, int]) -> np.ndarray:
    """Read a matrix of ``shape`` written by :func:`write_matrix`."""
    rows, cols = shape
    count = rows * cols
    with open(path, "rb") as fh:
        raw = fh.read(count * 4)
    if len(raw) < count * 4:
        raise ValueError(f"{os.fspath(path)} holds fewer than {count} values")
    values = np.frombuffer(raw, dtype=np.float32, count=count)
    return values.reshape((cols, rows)).T.astype(np.float64)


def read_pgm(path: PathLike, pad: bool = False) -> np.ndarray:
    """Read an ASCII PGM image into an integer array indexed ``[x, y]``.

    The ``y`` axis points up: the first image row becomes the largest ``y``.
    With ``pad`` a border of zeros one cell wide surrounds the image.
    """
    data = Path(path).read_bytes()
    if len(data) < 3:
        raise ValueError("Error Wrong Magic field!")

    stream = io.StringIO(data[3:].decode("ascii"))
    line = stream.readline()
    while line.startswith("#"):
        line = stream.readline()

    size = line.split()
    if len(size) < 2:
        raise ValueError(f"missing image size in {os.fspath(path)}")
    xsize, ysize = int(size[0]), int(size[1])
    log.info("Image size: %d x %d", xsize, ysize)

    levels_line = stream.readline().split()
    if not levels_line:
        raise ValueError(f"missing gray levels in {os.fspath(path)}")

    tokens = stream.read().split()
    if len(tokens) < xsize * ysize:
        raise ValueError("read failed")
    pixels = np.array([int(t) for t in tokens[: xsize * ysize]], dtype=int)
    image = pixels.reshape((ysize, xsize))[::-1].T

    if not pad:
        return np.ascontiguousarray(image)
    padded = np.zeros((xsize + 2, ysize + 2), dtype=int)
    padded[1:-1, 1:-1] = image
    return padded