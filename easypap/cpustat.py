"""Per-core activity accounting and the idleness histogram model."""

from __future__ import annotations

from dataclasses import dataclass

HISTOGRAM_WIDTH = 256
HISTOGRAM_HEIGHT = 100
BAR_WIDTH = 4
BAR_HEIGHT = HISTOGRAM_HEIGHT
PERFMETER_HEIGHT = 14
PERFMETER_WIDTH = HISTOGRAM_WIDTH
RIGHT_MARGIN = 16
LEFT_MARGIN = 80
INTERMARGIN = 4
TOP_MARGIN = 16
BOTTOM_MARGIN = 16


def window_size(nb_cores: int) -> tuple[int, int, int]:
    """Return ``(width, height, initial_height)`` of the activity window."""
    width = LEFT_MARGIN + PERFMETER_WIDTH + RIGHT_MARGIN
    initial_height = (
        TOP_MARGIN
        + BOTTOM_MARGIN
        + nb_cores * PERFMETER_HEIGHT
        + (nb_cores - 1) * INTERMARGIN
    )
    height = initial_height + INTERMARGIN + HISTOGRAM_HEIGHT
    return width, height, initial_height


@dataclass
class CpuStat:
    start_time: int = 0
    end_time: int = 0
    cumulated_work: int = 0
    cumulated_idle: int = 0
    nb_tiles: int = 0


class CpuStats:
    """Work and idle time accumulated by each core."""

    def __init__(self, nb_cores: int):
        if nb_cores <= 0:
            raise ValueError("nb_cores must be positive")
        self.cores = [CpuStat() for _ in range(nb_cores)]

    def __len__(self) -> int:
        return len(self.cores)

    def reset(self, now: int) -> None:
        for stat in self.cores:
            stat.cumulated_idle = stat.cumulated_work = stat.nb_tiles = 0
            stat.start_time = 0
            stat.end_time = now

    def start_work(self, now: int, who: int) -> None:
        stat = self.cores[who]
        stat.cumulated_idle += now - stat.end_time
        stat.nb_tiles += 1
        stat.start_time = now

    def finish_work(self, now: int, who: int) -> int:
        """Record the end of a tile and return how long it took."""
        stat = self.cores[who]
        duration = now - stat.start_time
        stat.cumulated_work += duration
        return duration

    def start_idle(self, now: int, who: int) -> None:
        self.cores[who].end_time = now

    def freeze(self, now: int) -> None:
        for stat in self.cores:
            stat.cumulated_idle += now - stat.end_time

    def activity_ratio(self, who: int) -> float:
        stat = self.cores[who]
        total = stat.cumulated_work + stat.cumulated_idle
        if total == 0:
            return 0.0
        return stat.cumulated_work / total

    def idle_total(self) -> float:
        """Fraction of time all cores spent idle."""
        idle = sum(s.cumulated_idle for s in self.cores)
        total = sum(s.cumulated_work + s.cumulated_idle for s in self.cores)
        if total == 0:
            return 0.0
        return idle / total


class IdlenessHistogram:
    """Scrolling bar chart of idleness, one bar per refresh."""

    def __init__(self):
        self._rows = [[0] * HISTOGRAM_WIDTH for _ in range(HISTOGRAM_HEIGHT)]

    def push(self, idleness: float) -> None:
        """Shift bars left and draw a new bar for ``idleness`` in [0, 1]."""
        for row in self._rows:
            del row[:BAR_WIDTH]
            row.extend([0] * BAR_WIDTH)

        height = int(idleness * BAR_HEIGHT)
        red = int(idleness * 255)
        green = int((1.0 - idleness) * 255)
        color = (green << 8) + red
        for row in self._rows[HISTOGRAM_HEIGHT - height:]:
            row[HISTOGRAM_WIDTH - BAR_WIDTH:HISTOGRAM_WIDTH - 1] = [color] * (BAR_WIDTH - 1)

    def pixel(self, y: int, x: int) -> int:
        return self._rows[y][x]