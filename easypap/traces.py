"""Execution trace model: events, tasks, iterations and time alignment."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

MAX_COLORS = 13
MAX_TRACES = 2

DEFAULT_EZV_TRACE_DIR = "traces/data"
DEFAULT_EZV_TRACE_BASE = "ezv_trace_current"
DEFAULT_EZV_TRACE_EXT = ".evt"
DEFAULT_EZV_TRACE_FILE = DEFAULT_EZV_TRACE_BASE + DEFAULT_EZV_TRACE_EXT
DEFAULT_EASYVIEW_FILE = DEFAULT_EZV_TRACE_DIR + "/" + DEFAULT_EZV_TRACE_FILE


class TraceEvent(IntEnum):
    BEGIN_ITER = 0x101
    BEGIN_TILE = 0x102
    END_TILE = 0x103
    NB_CORES = 0x104
    NB_ITER = 0x105
    DIM = 0x106
    END_ITER = 0x107
    LABEL = 0x108


@dataclass
class TraceTask:
    start_time: int
    end_time: int
    x: int
    y: int
    w: int
    h: int
    iteration: int


@dataclass
class TraceIteration:
    start_time: int
    end_time: int
    correction: int = 0
    gap: int = 0


@dataclass
class Trace:
    """Tasks recorded per CPU, and the iterations they belong to."""

    num: int = 0
    dimensions: int = 0
    nb_cores: int = 0
    nb_iterations: int = 0
    label: str | None = None
    per_cpu: list[list[TraceTask]] = field(default_factory=list)
    iterations: list[TraceIteration] = field(default_factory=list)

    def __post_init__(self) -> None:
        while len(self.per_cpu) < self.nb_cores:
            self.per_cpu.append([])

    def iteration_start_time(self, it: int, aligned: bool) -> int:
        iteration = self.iterations[it]
        if aligned:
            return iteration.start_time + iteration.correction
        return iteration.start_time

    def iteration_end_time(self, it: int, aligned: bool) -> int:
        iteration = self.iterations[it]
        if aligned:
            return iteration.end_time + iteration.correction + iteration.gap
        return iteration.end_time

    def task_start_time(self, task: TraceTask, aligned: bool) -> int:
        if aligned:
            return task.start_time + self.iterations[task.iteration].correction
        return task.start_time

    def task_end_time(self, task: TraceTask, aligned: bool) -> int:
        if aligned:
            return task.end_time + self.iterations[task.iteration].correction
        return task.end_time

    def tasks(self, cpu: int) -> Iterator[TraceTask]:
        """Iterate over the tasks run by ``cpu`` in recorded order."""
        return iter(list(self.per_cpu[cpu]))