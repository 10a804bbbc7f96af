"""Colour inversion that leaves alpha untouched."""

from __future__ import annotations

from easypap.image import Image
from easypap.kernels.simple import _PixelKernel

_INVERT_MASK = 0xFFFFFF00


class InvertKernel(_PixelKernel):
    """Invert the red, green and blue channels in place."""

    def __init__(self, image: Image):
        super().__init__(image)

    def _pixel(self, i: int, j: int) -> int:
        return _INVERT_MASK ^ self.image[i, j]

    def compute_seq(self, nb_iter: int) -> int:
        """Invert the whole image ``nb_iter`` times; always returns 0."""
        return self._sweep_whole(nb_iter)

    def compute_tiled(self, nb_iter: int) -> int:
        """Invert the image tile by tile ``nb_iter`` times; always returns 0."""
        return self._sweep_tiled(nb_iter)