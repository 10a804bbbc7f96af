"""Spinning two-colour pinwheel."""

from __future__ import annotations

import math

from easypap.image import Image, rgba

COLOR_A = (255, 255, 0, 255)
COLOR_B = (0, 0, 255, 255)


def atan_approx(x: float) -> float:
    """Fast approximation of atan on [-1, 1]."""
    a = abs(x)
    return x * math.pi / 4 + 0.273 * x * (1 - a)


def atan2_approx(y: float, x: float) -> float:
    """Approximation of atan2 built on :func:`atan_approx`; 0 at the origin."""
    ay = abs(y)
    ax = abs(x)
    if ax == 0 and ay == 0:
        return 0.0
    invert = ay > ax
    z = ax / ay if invert else ay / ax
    th = atan_approx(z)
    if invert:
        th = math.pi / 2 - th
    if x < 0:
        th = math.pi - th
    if y < 0:
        th = -th
    return th


class SpinKernel:
    """Draw a pinwheel whose base angle advances by one degree per iteration."""

    def __init__(self, image: Image):
        self.image = image
        self.base_angle = 0.0

    def compute_color(self, i: int, j: int) -> int:
        half = self.image.dim // 2
        angle = atan2_approx(half - i, j - half) + math.pi + self.base_angle
        eighth = math.pi / 8.0
        ratio = abs((math.fmod(angle, math.pi / 4.0) - eighth) / eighth)
        r, g, b, a = (
            int(ca * ratio + cb * (1.0 - ratio)) for ca, cb in zip(COLOR_A, COLOR_B)
        )
        return rgba(r, g, b, a)

    def rotate(self) -> None:
        self.base_angle = math.fmod(self.base_angle + math.pi / 180.0, math.pi)

    def _do_tile(self, x: int, y: int, width: int, height: int) -> None:
        img = self.image
        for i in range(y, y + height):
            for j in range(x, x + width):
                img[i, j] = self.compute_color(i, j)

    def compute_seq(self, nb_iter: int) -> int:
        dim = self.image.dim
        for _ in range(nb_iter):
            self._do_tile(0, 0, dim, dim)
            self.rotate()
        return 0

    def compute_line(self, nb_iter: int) -> int:
        dim = self.image.dim
        for _ in range(nb_iter):
            for i in range(dim):
                self._do_tile(0, i, dim, 1)
            self.rotate()
        return 0

    def compute_tiled(self, nb_iter: int) -> int:
        for _ in range(nb_iter):
            for x, y, w, h in self.image.tiles():
                self._do_tile(x, y, w, h)
            self.rotate()
        return 0