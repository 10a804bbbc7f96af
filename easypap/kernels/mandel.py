"""Mandelbrot set rendering with a slowly changing view."""

from __future__ import annotations

from easypap.image import Image, rgba
from easypap.kernels.simple import _PixelKernel

MAX_ITERATIONS = 4096
ZOOM_SPEED = -0.01

# (upper bound, band start, multiplier, divisor, offset, value goes to green)
_BANDS = (
    (64, 0, 2, 1, 0, False),
    (128, 64, 128, 126, 128, False),
    (256, 128, 62, 127, 193, False),
    (512, 256, 62, 255, 1, True),
    (1024, 512, 63, 511, 64, True),
    (2048, 1024, 63, 1023, 128, True),
    (MAX_ITERATIONS, 2048, 63, 2047, 192, True),
)


def iteration_to_color(iteration: int) -> int:
    """Map an escape iteration count to an RGBA colour."""
    for upper, start, mul, div, offset, green in _BANDS:
        if iteration < upper:
            value = ((iteration - start) * mul) // div + offset
            return rgba(255, value, 0, 255) if green else rgba(value, 0, 0, 255)
    return rgba(0, 0, 0, 255)


class MandelKernel(_PixelKernel):
    """Render the Mandelbrot set, zooming after each iteration."""

    def __init__(self, image: Image):
        super().__init__(image)
        self.left_x = -0.2395
        self.right_x = -0.2275
        self.top_y = 0.660
        self.bottom_y = 0.648
        self._update_steps()

    def _update_steps(self) -> None:
        dim = self.image.dim
        self.xstep = (self.right_x - self.left_x) / dim
        self.ystep = (self.top_y - self.bottom_y) / dim

    def zoom(self) -> None:
        """Shrink the viewed window by the zoom speed on every side."""
        xrange = self.right_x - self.left_x
        yrange = self.top_y - self.bottom_y
        self.left_x += ZOOM_SPEED * xrange
        self.right_x -= ZOOM_SPEED * xrange
        self.top_y -= ZOOM_SPEED * yrange
        self.bottom_y += ZOOM_SPEED * yrange
        self._update_steps()

    def _end_iteration(self) -> None:
        self.zoom()

    def _pixel(self, i: int, j: int) -> int:
        cr = self.left_x + self.xstep * j
        ci = self.top_y - self.ystep * i
        zr = zi = 0.0
        iteration = 0
        while iteration < MAX_ITERATIONS:
            x2 = zr * zr
            y2 = zi * zi
            if x2 + y2 > 4.0:
                break
            zi = 2.0 * zr * zi + ci
            zr = x2 - y2 + cr
            iteration += 1
        return iteration_to_color(iteration)

    def compute_seq(self, nb_iter: int) -> int:
        """Render the whole image ``nb_iter`` times; always returns 0."""
        return self._sweep_whole(nb_iter)

    def compute_tiled(self, nb_iter: int) -> int:
        """Render the image tile by tile ``nb_iter`` times; always returns 0."""
        return self._sweep_tiled(nb_iter)