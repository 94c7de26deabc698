import pytest

from newsgrid.core.fetcher import FixedDelay, MinimumInterval, create_rate_limiter


def test_fixed_delay_sleeps_full_delay_every_time(mocker):
    sleep = mocker.Mock()
    limiter = FixedDelay(2.0, sleep=sleep)

    limiter.mark()
    assert limiter.wait() == 2.0
    limiter.mark()
    assert limiter.wait() == 2.0

    assert sleep.call_args_list == [mocker.call(2.0), mocker.call(2.0)]


def test_fixed_delay_of_zero_does_not_sleep(mocker):
    sleep = mocker.Mock()

    FixedDelay(0, sleep=sleep).wait()

    sleep.assert_not_called()


def test_minimum_interval_sleeps_only_the_remainder(mocker):
    sleep = mocker.Mock()
    clock = mocker.Mock(side_effect=[100.0, 100.5])
    limiter = MinimumInterval(2.0, sleep=sleep, clock=clock)

    limiter.mark()
    slept = limiter.wait()

    assert slept == pytest.approx(1.5)
    sleep.assert_called_once_with(pytest.approx(1.5))


def test_minimum_interval_skips_sleep_after_slow_request(mocker):
    sleep = mocker.Mock()
    clock = mocker.Mock(side_effect=[100.0, 105.0])
    limiter = MinimumInterval(2.0, sleep=sleep, clock=clock)

    limiter.mark()

    assert limiter.wait() == 0.0
    sleep.assert_not_called()


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        FixedDelay(-1)
    with pytest.raises(ValueError):
        MinimumInterval(-0.5)


def test_create_rate_limiter():
    assert isinstance(create_rate_limiter('fixed', 1.0), FixedDelay)
    assert isinstance(create_rate_limiter('interval', 1.0), MinimumInterval)
    assert create_rate_limiter('fixed', 3.0).seconds == 3.0

    with pytest.raises(ValueError):
        create_rate_limiter('adaptive')
