import random

import pytest

from easypap.image import Image
from easypap.kernels.life import LIVING_COLOR, LifeKernel


def cells(kernel):
    dim = kernel.image.dim
    return {(i, j) for i in range(dim) for j in range(dim) if kernel.get_cell(i, j)}


def test_set_and_get_cell():
    k = LifeKernel(Image(8))
    assert k.get_cell(3, 4) == 0
    k.set_cell(3, 4)
    assert k.get_cell(3, 4) == 1


def test_get_cell_out_of_range():
    k = LifeKernel(Image(8))
    with pytest.raises(IndexError):
        k.get_cell(8, 0)


def test_empty_board_is_stable_at_first_iteration():
    k = LifeKernel(Image(8))
    assert k.compute_seq(10) == 1
    assert cells(k) == set()


def test_blinker_oscillates():
    k = LifeKernel(Image(8))
    vertical = {(2, 3), (3, 3), (4, 3)}
    for y, x in vertical:
        k.set_cell(y, x)
    assert k.compute_seq(1) == 0
    assert cells(k) == {(3, 2), (3, 3), (3, 4)}
    assert k.compute_seq(1) == 0
    assert cells(k) == vertical


def test_draw_stable_is_a_still_life():
    k = LifeKernel(Image(16, tile_size=4))
    k.draw_stable()
    before = cells(k)
    assert len(before) == 4 * 4 * 4
    assert k.compute_seq(10) == 1
    assert cells(k) == before


def test_tiled_matches_seq_on_random_board():
    a = LifeKernel(Image(16, tile_size=4))
    b = LifeKernel(Image(16, tile_size=4))
    a.draw_random(random.Random(42))
    b.draw_random(random.Random(42))
    assert cells(a) == cells(b)
    assert all(0 < y < 15 and 0 < x < 15 for y, x in cells(a))
    ra = a.compute_seq(5)
    rb = b.compute_tiled(5)
    assert ra == rb
    assert cells(a) == cells(b)


def test_tiled_detects_stability():
    k = LifeKernel(Image(16, tile_size=8))
    k.draw_stable()
    assert k.compute_tiled(5) == 1


def test_refresh_img_paints_living_cells():
    k = LifeKernel(Image(8))
    k.set_cell(2, 5)
    k.refresh_img()
    assert k.image[2, 5] == LIVING_COLOR
    assert k.image[5, 2] == 0
    assert sum(1 for i in range(8) for j in range(8) if k.image[i, j]) == 1


def test_isolated_cell_dies():
    k = LifeKernel(Image(8))
    k.set_cell(4, 4)
    assert k.compute_seq(1) == 0
    assert k.get_cell(4, 4) == 0
    assert k.compute_seq(3) == 1