import time

from philos.timing import now_ms, wait_until


def test_now_ms_matches_wall_clock():
    reference = time.time() * 1000
    assert abs(now_ms() - reference) < 50


def test_now_ms_does_not_go_backwards():
    first = now_ms()
    second = now_ms()
    assert second >= first


def test_wait_until_reaches_target():
    target = now_ms() + 30
    wait_until(target)
    assert now_ms() >= target


def test_wait_until_past_returns_promptly():
    began = now_ms()
    wait_until(began - 1000)
    assert now_ms() - began < 50