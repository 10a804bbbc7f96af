"""Vertical scrolling of the image by one row per iteration."""

from __future__ import annotations

from easypap.image import Image

CIRCLE_INNER_COLOR = 0xFF00FFFF
CIRCLE_OUTER_COLOR = 0xFF00FF00


def circle_mask(dim: int) -> list[list[int]]:
    """Build the circular mask: opaque disc, alpha ramp in the ring, clear outside."""
    mid = dim // 2
    r1 = (dim // 4) * (dim // 4)
    r2 = (dim // 2) * (dim // 2)
    mask = []
    for i in range(dim):
        row = []
        for j in range(dim):
            dist2 = (i - mid) * (i - mid) + (j - mid) * (j - mid)
            if dist2 < r1:
                row.append(CIRCLE_INNER_COLOR)
            elif dist2 < r2:
                ramp = ((r2 - dist2) * 255 // (r2 - r1)) & 0xFF
                row.append(ramp | CIRCLE_OUTER_COLOR)
            else:
                row.append(CIRCLE_OUTER_COLOR)
        mask.append(row)
    return mask


class ScrollupKernel:
    """Move every row up by one; the top row wraps to the bottom."""

    def __init__(self, image: Image):
        self.image = image

    def _do_tile(self, x: int, y: int, width: int, height: int) -> None:
        img = self.image
        last = img.dim - 1
        for i in range(y, y + height):
            src = i + 1 if i < last else 0
            for j in range(x, x + width):
                img.set_next(i, j, img[src, j])

    def compute_seq(self, nb_iter: int) -> int:
        for _ in range(nb_iter):
            self._do_tile(0, 0, self.image.dim, self.image.dim)
            self.image.swap()
        return 0

    def compute_tiled(self, nb_iter: int) -> int:
        for _ in range(nb_iter):
            for x, y, w, h in self.image.tiles():
                self._do_tile(x, y, w, h)
            self.image.swap()
        return 0