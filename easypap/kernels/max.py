"""Propagation of the maximum colour through connected non-empty pixels."""

from __future__ import annotations

from easypap.image import Image, KernelError

_SPIRAL_COLOR = 0xFFFF00FF


def _atoi(text: str) -> int:
    """Parse a leading integer the way C's atoi does (0 when none)."""
    s = text.lstrip()
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    digits = ""
    for ch in s:
        if not ch.isdigit():
            break
        digits += ch
    return sign * int(digits) if digits else 0


class MaxKernel:
    """Spread the largest colour down-right then up-left until stable."""

    def __init__(self, image: Image):
        self.image = image

    def tile_down_right(self, x: int, y: int, w: int, h: int) -> bool:
        img = self.image
        change = False
        for i in range(y, y + h):
            for j in range(x, x + w):
                cur = img[i, j]
                if not cur:
                    continue
                if i > 0 and j > 0:
                    m = max(img[i - 1, j], img[i, j - 1])
                elif j > 0:
                    m = img[i, j - 1]
                elif i > 0:
                    m = img[i - 1, j]
                else:
                    continue
                if m > cur:
                    change = True
                    img[i, j] = m
        return change

    def tile_up_left(self, x: int, y: int, w: int, h: int) -> bool:
        img = self.image
        last = img.dim - 1
        change = False
        for i in range(y + h - 1, y - 1, -1):
            for j in range(x + w - 1, x - 1, -1):
                cur = img[i, j]
                if not cur:
                    continue
                if i < last and j < last:
                    m = max(img[i + 1, j], img[i, j + 1])
                elif j < last:
                    m = img[i, j + 1]
                elif i < last:
                    m = img[i + 1, j]
                else:
                    continue
                if m > cur:
                    change = True
                    img[i, j] = m
        return change

    def compute_seq(self, nb_iter: int) -> int:
        dim = self.image.dim
        for it in range(1, nb_iter + 1):
            down = self.tile_down_right(0, 0, dim, dim)
            up = self.tile_up_left(0, 0, dim, dim)
            if not (down or up):
                return it
        return 0

    def compute_tiled(self, nb_iter: int) -> int:
        grain = self.image.grain
        ts = self.image.tile_size
        for it in range(1, nb_iter + 1):
            change = False
            for i in range(grain):
                for j in range(grain):
                    change |= self.tile_down_right(j * ts, i * ts, ts, ts)
            for i in reversed(range(grain)):
                for j in reversed(range(grain)):
                    change |= self.tile_up_left(j * ts, i * ts, ts, ts)
            if not change:
                return it
        return 0

    def draw(self, param: str | None) -> None:
        """Optionally draw ``param`` spiral twists, then give each pixel its own colour."""
        if param is not None:
            n = _atoi(param) & 0xFFFFFFFF
            if n > 0:
                self.spiral(n)
        self.recolor()

    def recolor(self) -> None:
        """Give every non-transparent interior pixel a distinct colour."""
        img = self.image
        dim = img.dim
        nbits = 2 * (dim - 1).bit_length()
        if nbits > 24:
            raise KernelError(f"DIM of {dim} is too large (suggested max: 4096)")

        gb = nbits // 3
        bb = gb
        rb = nbits - 2 * bb

        r_shift, g_shift, b_shift = 8 - rb, 8 - gb, 8 - bb
        r_lsb = (1 << r_shift) - 1
        g_lsb = (1 << g_shift) - 1
        b_lsb = (1 << b_shift) - 1
        r_mask = ((1 << rb) - 1) & 0xFF
        g_mask = ((1 << gb) - 1) & 0xFF
        b_mask = ((1 << bb) - 1) & 0xFF

        red = green = blue = 0
        for y in range(dim):
            for x in range(dim):
                alpha = img[y, x] & 255
                if alpha == 0 or x in (0, dim - 1) or y in (0, dim - 1):
                    img[y, x] = 0
                else:
                    c = 255
                    c |= (((blue << b_shift) | b_lsb) & 0xFF) << 8
                    c |= (((green << g_shift) | g_lsb) & 0xFF) << 16
                    c |= (((red << r_shift) | r_lsb) & 0xFF) << 24
                    img[y, x] = c

                red = (red + 1) & r_mask
                if red == 0:
                    green = (green + 1) & g_mask
                    if green == 0:
                        blue = (blue + 1) & b_mask

    def _one_spiral(self, x: int, y: int, step: int, turns: int) -> None:
        img = self.image
        i, j = x, y
        for t in range(1, turns + 1):
            while i < x + t * step:
                img[i, j] = _SPIRAL_COLOR
                i += 1
            while j < y + t * step + 1:
                img[i, j] = _SPIRAL_COLOR
                j += 1
            while i > x - t * step - 1:
                img[i, j] = _SPIRAL_COLOR
                i -= 1
            while j > y - t * step - 1:
                img[i, j] = _SPIRAL_COLOR
                j -= 1

    def _many_spirals(self, xstart: int, xend: int, ystart: int, yend: int,
                      step: int, turns: int) -> None:
        size = turns * step + 2
        for i in range(xstart + size, xend - size, 2 * size):
            for j in range(ystart + size, yend - size, 2 * size):
                self._one_spiral(i, j, step, turns)

    def spiral(self, twists: int) -> None:
        dim = self.image.dim
        self._many_spirals(1, dim - 2, 1, dim - 2, 2, twists)