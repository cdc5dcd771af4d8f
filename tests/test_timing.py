import time

import pytest

from philosophers.timing import TimeUnit, gettime, precise_sleep


def test_units_agree():
    ms = gettime(TimeUnit.MILLISECOND)
    us = gettime(TimeUnit.MICROSECOND)
    s = gettime(TimeUnit.SECOND)
    assert 0 <= us // 1000 - ms <= 50
    assert 0 <= ms // 1000 - s <= 1


def test_second_matches_wall_clock():
    assert abs(gettime(TimeUnit.SECOND) - int(time.time())) <= 1


def test_time_is_non_decreasing():
    first = gettime(TimeUnit.MICROSECOND)
    second = gettime(TimeUnit.MICROSECOND)
    assert second >= first


def test_returns_int():
    assert isinstance(gettime(TimeUnit.MILLISECOND), int)
    assert gettime(TimeUnit.MILLISECOND) > 0


def test_bad_unit():
    with pytest.raises(ValueError, match="Wrong input to gettime"):
        gettime("hours")


def test_precise_sleep_waits_at_least_requested():
    start = gettime(TimeUnit.MICROSECOND)
    precise_sleep(20_000, lambda: False)
    elapsed = gettime(TimeUnit.MICROSECOND) - start
    assert elapsed >= 20_000
    assert elapsed < 1_000_000


def test_precise_sleep_short_spin():
    start = gettime(TimeUnit.MICROSECOND)
    precise_sleep(500, lambda: False)
    assert gettime(TimeUnit.MICROSECOND) - start >= 500


def test_precise_sleep_stops_early():
    calls = []

    def stop():
        calls.append(1)
        return True

    start = gettime(TimeUnit.MICROSECOND)
    precise_sleep(2_000_000, stop)
    assert gettime(TimeUnit.MICROSECOND) - start < 1_000_000
    assert len(calls) == 1


def test_zero_sleep_does_not_consult_stop():
    calls = []
    precise_sleep(0, lambda: calls.append(1) or False)
    assert calls == []