#!/usr/bin/env python3
"""
Тесты сравнения периодов действия
"""
import random
from datetime import date, timedelta

import pytest

from fias.comparator import ActualityComparator

comparator = ActualityComparator()


def cmp(a, b):
    return comparator.compare(a[0], a[1], b[0], b[1])


def random_interval(rnd: random.Random):
    start = date(2000, 1, 1) + timedelta(days=rnd.randint(0, 40))
    if rnd.random() < 0.25:
        return start, None
    return start, start + timedelta(days=rnd.randint(0, 40))


def test_same_interval_is_equal():
    interval = (date(2020, 1, 1), date(2021, 1, 1))
    assert cmp(interval, interval) == 0
    assert cmp((date(2020, 1, 1), None), (date(2020, 1, 1), None)) == 0


def test_later_end_wins():
    assert cmp((date(2020, 1, 1), date(2022, 1, 1)), (date(2021, 1, 1), date(2021, 6, 1))) == 1
    assert cmp((date(2021, 1, 1), date(2021, 6, 1)), (date(2020, 1, 1), date(2022, 1, 1))) == -1


def test_open_end_wins_over_bounded():
    assert cmp((date(2010, 1, 1), None), (date(2020, 1, 1), date(2079, 6, 6))) == 1
    assert cmp((date(2020, 1, 1), date(2079, 6, 6)), (date(2010, 1, 1), None)) == -1


def test_same_end_later_start_wins():
    end = date(2079, 6, 6)
    assert cmp((date(2021, 1, 1), end), (date(2020, 1, 1), end)) == 1
    assert cmp((date(2020, 1, 1), None), (date(2021, 1, 1), None)) == -1


def test_missing_start_is_earliest():
    end = date(2079, 6, 6)
    assert cmp((None, end), (date(1900, 1, 1), end)) == -1


@pytest.mark.parametrize("seed", range(5))
def test_antisymmetry_and_transitivity(seed):
    rnd = random.Random(seed)
    for _ in range(200):
        a, b, c = random_interval(rnd), random_interval(rnd), random_interval(rnd)

        assert cmp(a, b) == -cmp(b, a)
        if cmp(a, b) >= 0 and cmp(b, c) >= 0:
            assert cmp(a, c) >= 0
        if cmp(a, b) == 0 and cmp(b, c) == 0:
            assert cmp(a, c) == 0


@pytest.mark.parametrize("seed", range(3))
def test_open_ended_not_less_than_bounded(seed):
    rnd = random.Random(seed)
    for _ in range(100):
        start, end = random_interval(rnd)
        if end is None:
            continue
        open_start = date(2000, 1, 1) + timedelta(days=rnd.randint(0, 40))
        assert cmp((open_start, None), (start, end)) >= 0
