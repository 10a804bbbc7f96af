import random

import pytest

from easypap.image import Image, KernelError, rgba
from easypap.kernels.sable import SableKernel


def total(kernel):
    return sum(sum(row) for row in kernel.table)


def interior_stable(kernel):
    dim = kernel.image.dim
    return all(
        kernel.table[i][j] < 4 for i in range(1, dim - 1) for j in range(1, dim - 1)
    )


def make(dim=16, tile_size=4):
    return SableKernel(Image(dim, tile_size=tile_size))


def test_single_topple_on_3x3():
    k = SableKernel(Image(3))
    k.table[1][1] = 4
    assert k.compute_seq(5) == 2
    assert k.table[1][1] == 0
    assert [k.table[0][1], k.table[2][1], k.table[1][0], k.table[1][2]] == [1, 1, 1, 1]


def test_returns_zero_when_not_stable_in_time():
    k = make()
    k.draw_4partout()
    assert k.compute_seq(1) == 0
    assert not interior_stable(k)


@pytest.mark.parametrize(
    "variant",
    ["compute_seq", "compute_seq_opt", "compute_omp", "compute_tiled",
     "compute_tileddb", "compute_tiledsharedy"],
)
def test_variants_reach_same_stable_configuration(variant):
    reference = make()
    reference.draw_4partout()
    assert reference.compute_seq(10_000) > 0

    k = make()
    k.draw_4partout()
    before = total(k)
    assert getattr(k, variant)(10_000) > 0
    assert interior_stable(k)
    assert total(k) == before
    assert k.table == reference.table


def test_random_piles_conserve_grains_and_stabilise():
    k = make(32, 8)
    k.draw_alea(random.Random(3))
    assert k.max_grains == 5000
    before = total(k)
    assert before > 0
    assert k.compute_tileddb(100_000) > 0
    assert total(k) == before
    assert interior_stable(k)


def test_draw_alea_only_touches_interior():
    k = make(32, 8)
    k.draw_alea(random.Random(7))
    dim = 32
    borders = [k.table[0], k.table[dim - 1], [r[0] for r in k.table], [r[dim - 1] for r in k.table]]
    assert all(v == 0 for line in borders for v in line)
    assert all(1000 <= v < 5000 for row in k.table for v in row if v)


def test_draw_dispatch():
    k = make()
    k.draw("DIM")
    assert k.max_grains == 16
    assert k.table[12][12] == 36

    k2 = make()
    k2.draw("unknown")
    assert k2.max_grains == 8
    assert k2.table[1][1] == 4 and k2.table[0][0] == 0

    k3 = make()
    k3.draw(None)
    assert k3.table[14][14] == 4


def test_draw_dim_too_small():
    with pytest.raises(KernelError):
        SableKernel(Image(3)).draw_dim()


def test_refresh_img_colours():
    k = SableKernel(Image(4))
    k.max_grains = 8
    k.table[1][1] = 1
    k.table[1][2] = 2
    k.table[2][1] = 3
    k.table[2][2] = 4
    k.refresh_img()
    img = k.image
    assert img[1, 1] == rgba(0, 255, 0, 255)
    assert img[1, 2] == rgba(0, 0, 255, 255)
    assert img[2, 1] == rgba(255, 0, 0, 255)
    assert img[2, 2] == rgba(255, 255, 255, 255)
    assert img[0, 0] == 0
    assert k.max_grains == 4


def test_refresh_img_empty_cell_is_opaque_black():
    k = SableKernel(Image(4))
    k.refresh_img()
    assert k.image[1, 1] == rgba(0, 0, 0, 255)
    assert k.max_grains == 0