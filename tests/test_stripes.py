import pytest

from easypap.image import (
    Image,
    KernelError,
    extract_alpha,
    extract_blue,
    extract_green,
    extract_red,
)
from easypap.kernels.stripes import StripesKernel, brighten, darken, scale_color

COLOR = 0x80604020


@pytest.mark.parametrize("c", [0, COLOR, 0xFFFFFFFF, 0x12345678])
def test_scale_by_hundred_is_identity(c):
    assert scale_color(c, 100) == c


@pytest.mark.parametrize("c", [COLOR, 0x12345678, 0xA0B0C0D0])
def test_alpha_preserved(c):
    assert extract_alpha(brighten(c)) == extract_alpha(c)
    assert extract_alpha(darken(c)) == extract_alpha(c)


@pytest.mark.parametrize("c", [COLOR, 0x12345678, 0xA0B0C0D0])
def test_darken_and_brighten_are_monotonic(c):
    for extract in (extract_red, extract_green, extract_blue):
        assert extract(darken(c)) <= extract(c) <= extract(brighten(c))


def test_saturation_and_black_fixed_points():
    assert brighten(0xFFFFFFFF) == 0xFFFFFFFF
    assert brighten(0) == 0
    assert darken(0) == 0


def test_draw_rejects_out_of_range():
    kernel = StripesKernel(Image(4))
    with pytest.raises(KernelError):
        kernel.draw("13")
    with pytest.raises(KernelError):
        kernel.draw("-1")


def test_draw_sets_mask():
    kernel = StripesKernel(Image(4))
    kernel.draw("2")
    assert kernel.mask == 4
    kernel.draw("0")
    assert kernel.mask == 1
    kernel.draw(None)
    assert kernel.mask == 1


def test_compute_seq_default_mask():
    img = Image(4)
    for y in range(4):
        for x in range(4):
            img[y, x] = COLOR
    assert StripesKernel(img).compute_seq(1) == 0
    for y in range(4):
        assert img[y, 0] == darken(COLOR)
        assert img[y, 1] == brighten(COLOR)
        assert img[y, 2] == darken(COLOR)
        assert img[y, 3] == brighten(COLOR)


def test_compute_seq_wide_stripes():
    img = Image(8)
    for y in range(8):
        for x in range(8):
            img[y, x] = COLOR
    kernel = StripesKernel(img)
    kernel.draw("2")
    kernel.compute_seq(1)
    row = [img[0, x] for x in range(8)]
    assert row[:4] == [darken(COLOR)] * 4
    assert row[4:] == [brighten(COLOR)] * 4