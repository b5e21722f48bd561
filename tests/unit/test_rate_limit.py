"""Unit tests for the global rate limiter."""

import pytest

from recruitai.core.rate_limit import GlobalRateLimiter


@pytest.mark.unit
def test_rejects_requests_inside_interval():
    limiter = GlobalRateLimiter(750)
    assert limiter.check(1000)
    assert not limiter.check(1500)
    # A rejected request does not move the window
    assert limiter.check(1750)


@pytest.mark.unit
def test_zero_interval_disables():
    limiter = GlobalRateLimiter(0)
    assert all(limiter.check(1000) for _ in range(5))


@pytest.mark.unit
def test_reset():
    limiter = GlobalRateLimiter(750)
    assert limiter.check(1000)
    limiter.reset()
    assert limiter.check(1001)
