import pytest

from easypap.image import Image
from easypap.kernels.max import MaxKernel


def _image(dim, value=lambda y, x: 0, tile_size=None):
    img = Image(dim, tile_size=tile_size)
    for p in range(dim * dim):
        img[divmod(p, dim)] = value(*divmod(p, dim))
    return img


def _values(img):
    return [img[divmod(p, img.dim)] for p in range(img.dim ** 2)]


def _distinct(dim, tile_size=None):
    return _image(dim, lambda y, x: ((y * dim + x + 1) << 8) | 255, tile_size)


def test_seq_spreads_maximum_everywhere():
    img = _distinct(4)
    top = max(_values(img))
    assert MaxKernel(img).compute_seq(10) > 0
    assert set(_values(img)) == {top}


def test_zero_pixels_block_propagation():
    img = Image(4)
    img[0, 0] = 5
    img[3, 3] = 9
    MaxKernel(img).compute_seq(10)
    assert (img[0, 0], img[3, 3]) == (5, 9)


def test_stable_image_stops_at_first_iteration():
    assert MaxKernel(_image(4, lambda y, x: 7)).compute_seq(5) == 1


def test_tiled_matches_sequential_result():
    a, b = _distinct(8), _distinct(8, tile_size=4)
    assert MaxKernel(a).compute_seq(20) > 0
    assert MaxKernel(b).compute_tiled(20) > 0
    assert _values(a) == _values(b)


def test_not_converged_returns_zero():
    assert MaxKernel(_distinct(8)).compute_seq(0) == 0


def test_recolor_clears_border_and_distinguishes_interior():
    img = _image(8, lambda y, x: 255)
    MaxKernel(img).recolor()
    border = {img[y, x] for y in range(8) for x in range(8) if y in (0, 7) or x in (0, 7)}
    inner = [img[y, x] for y in range(1, 7) for x in range(1, 7)]
    assert border == {0}
    assert len(set(inner)) == len(inner)
    assert {c & 255 for c in inner} == {255}


@pytest.mark.parametrize("param, dim, coloured", [("0", 8, False), ("1", 16, True)])
def test_draw(param, dim, coloured):
    img = Image(dim)
    MaxKernel(img).draw(param)
    assert any(_values(img)) is coloured
    assert [img[0, x] for x in range(dim)] == [0] * dim


def test_spiral_uses_yellow():
    img = Image(16)
    MaxKernel(img).spiral(1)
    assert set(_values(img)) == {0, 0xFFFF00FF}