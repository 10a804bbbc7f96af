import pytest

from easypap.cpustat import (
    BAR_WIDTH,
    HISTOGRAM_HEIGHT,
    HISTOGRAM_WIDTH,
    INTERMARGIN,
    PERFMETER_HEIGHT,
    CpuStats,
    IdlenessHistogram,
    window_size,
)


def test_window_grows_per_core():
    w1, h1, i1 = window_size(1)
    w2, h2, i2 = window_size(2)
    assert w1 == w2
    assert h2 - h1 == PERFMETER_HEIGHT + INTERMARGIN
    assert h1 - i1 == INTERMARGIN + HISTOGRAM_HEIGHT


def test_work_and_idle_accounting():
    stats = CpuStats(2)
    stats.reset(100)
    stats.start_work(150, 0)
    assert stats.finish_work(200, 0) == 200 - 150
    stats.start_idle(200, 0)
    assert stats.cores[0].cumulated_idle == 150 - 100
    assert stats.cores[0].nb_tiles == 1
    assert stats.activity_ratio(0) == pytest.approx(0.5)


def test_ratio_zero_without_time():
    stats = CpuStats(1)
    stats.reset(0)
    assert stats.activity_ratio(0) == 0.0


def test_freeze_and_idle_total():
    stats = CpuStats(2)
    stats.reset(0)
    stats.start_work(0, 0)
    stats.finish_work(10, 0)
    stats.start_idle(10, 0)
    stats.freeze(10)
    # core 1 idled the whole time, core 0 worked the whole time
    assert stats.idle_total() == pytest.approx(0.5)
    assert stats.activity_ratio(1) == 0.0
    assert stats.activity_ratio(0) == 1.0


def test_reset_clears_counters():
    stats = CpuStats(1)
    stats.reset(0)
    stats.start_work(5, 0)
    stats.finish_work(9, 0)
    stats.reset(20)
    core = stats.cores[0]
    assert (core.cumulated_work, core.cumulated_idle, core.nb_tiles, core.end_time) == (0, 0, 0, 20)


def test_invalid_core_count():
    with pytest.raises(ValueError):
        CpuStats(0)


def test_histogram_full_bar_and_shift():
    hist = IdlenessHistogram()
    hist.push(1.0)
    last = HISTOGRAM_WIDTH - BAR_WIDTH
    assert hist.pixel(0, last) == 255
    assert hist.pixel(HISTOGRAM_HEIGHT - 1, last) == 255
    assert hist.pixel(0, HISTOGRAM_WIDTH - 1) == 0
    hist.push(0.0)
    assert hist.pixel(0, last - BAR_WIDTH) == 255
    assert all(hist.pixel(y, last) == 0 for y in range(HISTOGRAM_HEIGHT))


def test_histogram_half_bar_height():
    hist = IdlenessHistogram()
    hist.push(0.5)
    col = HISTOGRAM_WIDTH - BAR_WIDTH
    filled = [y for y in range(HISTOGRAM_HEIGHT) if hist.pixel(y, col)]
    assert len(filled) == HISTOGRAM_HEIGHT // 2
    assert filled[-1] == HISTOGRAM_HEIGHT - 1