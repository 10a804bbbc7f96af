"""Stripes of brightened and darkened columns."""

from __future__ import annotations

from easypap.image import (
    Image,
    KernelError,
    extract_alpha,
    extract_blue,
    extract_green,
    extract_red,
    rgba,
)
from easypap.kernels.max import _atoi


def _scale_component(c: int, percentage: int) -> int:
    return min(c * percentage // 100, 255)


def scale_color(c: int, percentage: int) -> int:
    """Scale the red, green and blue channels by ``percentage``; keep alpha."""
    return rgba(
        _scale_component(extract_red(c), percentage),
        _scale_component(extract_green(c), percentage),
        _scale_component(extract_blue(c), percentage),
        extract_alpha(c),
    )


def brighten(c: int) -> int:
    for _ in range(15):
        c = scale_color(c, 101)
    return c


def darken(c: int) -> int:
    for _ in range(15):
        c = scale_color(c, 99)
    return c


class StripesKernel:
    """Brighten columns whose index has the mask bit set, darken the others."""

    def __init__(self, image: Image):
        self.image = image
        self.mask = 1

    def draw(self, param: str | None) -> None:
        """Set the stripe width to ``2 ** param``, with ``param`` in 0..12."""
        if param is None:
            return
        n = _atoi(param) & 0xFFFFFFFF
        if n > 12:
            raise KernelError("Shift value should be in range 0..12")
        self.mask = 1 << n

    def compute_seq(self, nb_iter: int) -> int:
        img = self.image
        dim = img.dim
        for _ in range(nb_iter):
            for i in range(dim):
                for j in range(dim):
                    if j & self.mask:
                        img[i, j] = brighten(img[i, j])
                    else:
                        img[i, j] = darken(img[i, j])
        return 0