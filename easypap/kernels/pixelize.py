"""Pixelisation by averaging square blocks."""

from __future__ import annotations

from easypap.image import Image, KernelError
from easypap.kernels.max import _atoi
from easypap.kernels.simple import _PixelKernel


def log2_of_power_of_2(v: int) -> int:
    """Base-2 logarithm of a 32-bit power of two."""
    r = 0
    for mask, shift in ((0xFFFF0000, 16), (0xFF00, 8), (0xF0, 4), (0xC, 2), (0x2, 1)):
        if v & mask:
            v >>= shift
            r |= shift
    return r


class PixelizeKernel(_PixelKernel):
    """Replace every block of pixels by its mean colour."""

    def __init__(self, image: Image):
        super().__init__(image)
        self.pix_bloc = 16
        self.log_bloc = 4
        self.log_bloc_x2 = 8

    def draw(self, param: str | None) -> None:
        """Set the block size from ``param``, which must be a power of two."""
        if param is None:
            return
        n = _atoi(param) & 0xFFFFFFFF
        if n > 0:
            if n & (n - 1):
                raise KernelError("PIX_BLOC is not a power of two")
            self.pix_bloc = n
            self.log_bloc = log2_of_power_of_2(n)
            self.log_bloc_x2 = 2 * self.log_bloc

    def _do_tile(self, x: int, y: int, width: int, height: int) -> None:
        img = self.image
        cells = [(i, j) for i in range(y, y + height) for j in range(x, x + width)]
        sums = [0, 0, 0, 0]
        for i, j in cells:
            c = img[i, j]
            for k, shift in enumerate((24, 16, 8, 0)):
                sums[k] += (c >> shift) & 255
        mean = 0
        for total, shift in zip(sums, (24, 16, 8, 0)):
            mean |= (total >> self.log_bloc_x2) << shift
        for i, j in cells:
            img[i, j] = mean

    def compute_seq(self, nb_iter: int) -> int:
        bloc = self.pix_bloc
        dim = self.image.dim
        blocks = [(x, y, bloc, bloc) for y in range(0, dim, bloc) for x in range(0, dim, bloc)]
        return self._run(nb_iter, blocks)