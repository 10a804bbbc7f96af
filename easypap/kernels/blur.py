"""Box blur over the 3x3 neighbourhood of every pixel."""

from __future__ import annotations

from easypap.image import (
    Image,
    extract_alpha,
    extract_blue,
    extract_green,
    extract_red,
    rgba,
)
from easypap.kernels.simple import _PixelKernel

_CHANNELS = (extract_red, extract_green, extract_blue, extract_alpha)


class BlurKernel(_PixelKernel):
    """Average each pixel with its neighbours into the alternate buffer."""

    _writes_next = True

    def __init__(self, image: Image):
        super().__init__(image)

    def _pixel(self, i: int, j: int) -> int:
        img = self.image
        last = img.dim - 1
        rows = range(max(i - 1, 0), min(i + 1, last) + 1)
        cols = range(max(j - 1, 0), min(j + 1, last) + 1)
        pixels = [img[yy, xx] for yy in rows for xx in cols]
        n = len(pixels)
        return rgba(*(sum(channel(c) for c in pixels) // n for channel in _CHANNELS))

    def compute_seq(self, nb_iter: int) -> int:
        """Blur the whole image ``nb_iter`` times; always returns 0."""
        return self._sweep_whole(nb_iter)

    def compute_tiled(self, nb_iter: int) -> int:
        """Blur the image tile by tile ``nb_iter`` times; always returns 0."""
        return self._sweep_tiled(nb_iter)