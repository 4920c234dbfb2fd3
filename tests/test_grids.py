import numpy as np
import pytest

from cfdlab.grids import read_matrix, read_pgm, write_matrix


def test_matrix_round_trip(tmp_path):
    path = tmp_path / "m.bin"
    matrix = np.arange(12, dtype=float).reshape(3, 4) * 0.5
    write_matrix(path, matrix, True)
    result = read_matrix(path, (3, 4))
    np.testing.assert_array_equal(result, matrix)


def test_first_index_varies_fastest(tmp_path):
    path = tmp_path / "m.bin"
    matrix = np.array([[1.0, 2.0], [3.0, 4.0]])
    write_matrix(path, matrix, True)
    stored = np.fromfile(path, dtype=np.float32)
    np.testing.assert_array_equal(stored, [1.0, 3.0, 2.0, 4.0])


def test_append_adds_second_block(tmp_path):
    path = tmp_path / "m.bin"
    first = np.ones((2, 3))
    second = np.full((2, 3), 2.0)
    write_matrix(path, first, True)
    write_matrix(path, second, False)
    assert path.stat().st_size == 2 * first.size * 4
    stored = np.fromfile(path, dtype=np.float32)
    np.testing.assert_array_equal(stored[first.size:], second.ravel())


def test_overwrite_replaces_content(tmp_path):
    path = tmp_path / "m.bin"
    write_matrix(path, np.ones((4, 4)), True)
    write_matrix(path, np.zeros((2, 2)), True)
    assert path.stat().st_size == 4 * 4


def test_read_matrix_short_file(tmp_path):
    path = tmp_path / "m.bin"
    write_matrix(path, np.ones((2, 2)), True)
    with pytest.raises(ValueError):
        read_matrix(path, (3, 3))


def _write_pgm(path, rows, comment=True):
    height = len(rows)
    width = len(rows[0])
    lines = ["P2"]
    if comment:
        lines.append("# made for a test")
    lines.append(f"{width} {height}")
    lines.append("6")
    lines.extend(" ".join(str(v) for v in row) for row in rows)
    path.write_text("\n".join(lines) + "\n")


def test_read_pgm_orientation(tmp_path):
    path = tmp_path / "g.pgm"
    rows = [[1, 2, 3], [4, 5, 6]]
    _write_pgm(path, rows)
    pic = read_pgm(path)
    assert pic.shape == (3, 2)
    # top image row is the highest y
    assert list(pic[:, 1]) == rows[0]
    assert list(pic[:, 0]) == rows[1]


def test_read_pgm_without_comment(tmp_path):
    path = tmp_path / "g.pgm"
    rows = [[0, 6], [6, 0]]
    _write_pgm(path, rows, comment=False)
    pic = read_pgm(path)
    assert pic[0, 1] == rows[0][0]
    assert pic[1, 0] == rows[1][1]


def test_read_pgm_padded(tmp_path):
    path = tmp_path / "g.pgm"
    rows = [[1, 2, 3], [4, 5, 6]]
    _write_pgm(path, rows)
    padded = read_pgm(path, pad=True)
    plain = read_pgm(path)
    assert padded.shape == (5, 4)
    np.testing.assert_array_equal(padded[1:-1, 1:-1], plain)
    assert not padded[0].any() and not padded[-1].any()
    assert not padded[:, 0].any() and not padded[:, -1].any()


def test_read_pgm_missing_pixels(tmp_path):
    path = tmp_path / "g.pgm"
    path.write_text("P2\n3 2\n6\n1 2 3\n4\n")
    with pytest.raises(ValueError, match="read failed"):
        read_pgm(path)


def test_read_pgm_short_magic(tmp_path):
    path = tmp_path / "g.pgm"
    path.write_bytes(b"P2")
    with pytest.raises(ValueError, match="Magic"):
        read_pgm(path)


def test_read_pgm_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_pgm(tmp_path / "absent.pgm")