"""Minimal kernels and the per-pixel sweep shared by the image kernels."""

from __future__ import annotations

from typing import Callable, Iterable

from easypap.image import Image

SAMPLE_COLOR = 0xFFFF00FF

Tile = tuple[int, int, int, int]


class _PixelKernel:
    """Kernel that sets every pixel of a tile from ``self._pixel(i, j)``.

    With ``_writes_next`` set, pixels go to the alternate buffer, which is
    swapped in at the end of each iteration.
    """

    _writes_next = False
    _pixel: Callable[[int, int], int]

    def __init__(self, image: Image):
        self.image = image

    def _store_current(self, i: int, j: int, value: int) -> None:
        self.image[i, j] = value

    def _do_tile(self, x: int, y: int, width: int, height: int) -> None:
        store = self.image.set_next if self._writes_next else self._store_current
        pixel = self._pixel
        for i in range(y, y + height):
            for j in range(x, x + width):
                store(i, j, pixel(i, j))

    def _end_iteration(self) -> None:
        if self._writes_next:
            self.image.swap()

    def _run(self, nb_iter: int, tiles: Iterable[Tile]) -> int:
        tiles = list(tiles)
        for _ in range(nb_iter):
            for tile in tiles:
                self._do_tile(*tile)
            self._end_iteration()
        return 0

    def _sweep_whole(self, nb_iter: int) -> int:
        dim = self.image.dim
        return self._run(nb_iter, [(0, 0, dim, dim)])

    def _sweep_tiled(self, nb_iter: int) -> int:
        return self._run(nb_iter, self.image.tiles())


class NoneKernel:
    """Kernel that leaves the image untouched and reports completion at once."""

    def __init__(self, image: Image):
        self.image = image

    def compute_seq(self, nb_iter: int) -> int:
        """Leave the image as it is; the run is complete after one iteration."""
        if nb_iter < 0:
            raise ValueError(f"nb_iter must not be negative (got {nb_iter})")
        return 1


class SampleKernel(_PixelKernel):
    """Fill the whole image with a single colour."""

    def __init__(self, image: Image):
        super().__init__(image)

    def _pixel(self, i: int, j: int) -> int:
        return SAMPLE_COLOR

    def compute_seq(self, nb_iter: int) -> int:
        """Paint every pixel with the sample colour; always returns 0."""
        return self._sweep_whole(nb_iter)


class Rotation90Kernel(_PixelKernel):
    """Rotate the image a quarter turn counter-clockwise at each iteration."""

    _writes_next = True

    def __init__(self, image: Image):
        super().__init__(image)

    def _pixel(self, i: int, j: int) -> int:
        return self.image[j, self.image.dim - 1 - i]

    def compute_seq(self, nb_iter: int) -> int:
        """Rotate the whole image ``nb_iter`` times; always returns 0."""
        return self._sweep_whole(nb_iter)