"""Image transposition through the alternate buffer."""

from __future__ import annotations

from easypap.image import Image
from easypap.kernels.simple import _PixelKernel


class TransposeKernel(_PixelKernel):
    """Mirror the image along its main diagonal."""

    _writes_next = True

    def __init__(self, image: Image):
        super().__init__(image)

    def _pixel(self, i: int, j: int) -> int:
        return self.image[j, i]

    def compute_seq(self, nb_iter: int) -> int:
        """Transpose the whole image ``nb_iter`` times; always returns 0."""
        return self._sweep_whole(nb_iter)

    def compute_tiled(self, nb_iter: int) -> int:
        """Transpose the image tile by tile ``nb_iter`` times; always returns 0."""
        return self._sweep_tiled(nb_iter)