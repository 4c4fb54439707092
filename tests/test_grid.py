import numpy as np
import pytest

from octave_noise.errors import InvalidDimension
from octave_noise.grid import create_grid, make_rng
from octave_noise.models import NoiseGrid


@pytest.mark.parametrize("w,h", [(1, 1), (3, 5), (17, 2), (64, 64)])
def test_create_grid_fills_every_cell(w, h):
    g = create_grid(w, h, rng=make_rng(7))
    assert (g.width, g.height) == (w, h)
    assert g.samples.shape == (h, w)
    assert g.samples.dtype == np.uint8
    assert g.flat().size == w * h
    assert g.samples.min() >= 0 and g.samples.max() <= 255


def test_create_grid_default_source():
    g = create_grid(8, 8)
    assert g.flat().size == 64


def test_create_grid_row_major(sequence_source):
    g = create_grid(2, 2, rng=sequence_source([10, 20, 30, 40]))
    assert g.flat().tolist() == [10, 20, 30, 40]
    assert g.samples[0, 1] == 20
    assert g.samples[1, 0] == 30


def test_seeded_grids_repeat():
    a = create_grid(16, 9, rng=make_rng(123))
    b = create_grid(16, 9, rng=make_rng(123))
    np.testing.assert_array_equal(a.samples, b.samples)


def test_random_grid_uses_full_range():
    g = create_grid(256, 256, rng=make_rng(0))
    assert g.samples.min() == 0
    assert g.samples.max() == 255


@pytest.mark.parametrize("w,h", [(0, 1), (1, 0), (-3, 4)])
def test_create_grid_rejects_bad_dims(w, h):
    with pytest.raises(InvalidDimension):
        create_grid(w, h)


def test_from_samples_and_constant():
    g = NoiseGrid.from_samples(3, 2, [1, 2, 3, 4, 5, 6])
    assert g.samples.tolist() == [[1, 2, 3], [4, 5, 6]]

    c = NoiseGrid.constant(4, 3, 9)
    assert c.samples.shape == (3, 4)
    assert set(c.flat().tolist()) == {9}


def test_from_samples_validates():
    with pytest.raises(ValueError):
        NoiseGrid.from_samples(2, 2, [1, 2, 3])
    with pytest.raises(ValueError):
        NoiseGrid.from_samples(1, 2, [0, 256])
    with pytest.raises(InvalidDimension):
        NoiseGrid.from_samples(0, 2, [])
    with pytest.raises(ValueError):
        NoiseGrid.constant(2, 2, -1)


def test_grid_shape_must_match():
    with pytest.raises(ValueError):
        NoiseGrid(3, 2, np.zeros((3, 2), dtype=np.uint8))
    with pytest.raises(ValueError):
        NoiseGrid(2, 2, np.zeros((2, 2), dtype=np.float32))
