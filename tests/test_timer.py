import time

from congo.timer import Timer


def test_elapsed_grows_with_sleep():
    timer = Timer()
    timer.start()
    time.sleep(0.03)
    assert timer.elapsed_ms() >= 20


def test_elapsed_is_non_decreasing():
    timer = Timer()
    first = timer.elapsed_ms()
    second = timer.elapsed_ms()
    assert 0 <= first <= second


def test_start_resets_measurement():
    timer = Timer()
    time.sleep(0.05)
    before = timer.elapsed_ms()
    timer.start()
    after = timer.elapsed_ms()
    assert after < before


def test_elapsed_is_whole_milliseconds():
    timer = Timer()
    value = timer.elapsed_ms()
    assert value == int(value)
    assert isinstance(value, int)