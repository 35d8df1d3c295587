import time

import pytest

from gw2api import Client, InvalidArgumentError, RateLimiter
from gw2api.domain.content.models import Build


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


class TestRateLimiter:
    def test_admits_all_but_the_last_slot(self, clock):
        """With limit 3 two requests pass and the rest wait for the window."""
        limiter = RateLimiter(3, clock=clock)

        assert limiter.poll_ready() is None
        assert limiter.poll_ready() is None
        assert limiter.poll_ready() == pytest.approx(60.0)
        assert limiter.poll_ready() == pytest.approx(60.0)

    def test_reports_remaining_wait(self, clock):
        limiter = RateLimiter(2, clock=clock)
        assert limiter.poll_ready() is None
        assert limiter.poll_ready() == pytest.approx(60.0)

        clock.advance(45.0)
        assert limiter.poll_ready() == pytest.approx(15.0)

    def test_new_window_after_deadline(self, clock):
        limiter = RateLimiter(3, clock=clock)
        for _ in range(2):
            assert limiter.poll_ready() is None
        assert limiter.poll_ready() is not None

        clock.advance(60.0)
        assert limiter.poll_ready() is None
        assert limiter.poll_ready() is None
        assert limiter.poll_ready() is not None

    def test_idle_window_resets(self, clock):
        limiter = RateLimiter(3, clock=clock)
        assert limiter.poll_ready() is None

        clock.advance(120.0)
        assert limiter.poll_ready() is None
        assert limiter.poll_ready() is None
        assert limiter.poll_ready() is not None

    def test_change_applies_at_next_window(self, clock):
        limiter = RateLimiter(3, clock=clock)
        limiter.poll_ready()
        limiter.poll_ready()

        limiter.change(5)
        assert limiter.limit == 5
        assert limiter.poll_ready() is not None

        clock.advance(60.0)
        admitted = 0
        while limiter.poll_ready() is None:
            admitted += 1
        assert admitted == 4

    def test_limit_must_be_positive(self, clock):
        with pytest.raises(InvalidArgumentError):
            RateLimiter(0, clock=clock)

        limiter = RateLimiter(3, clock=clock)
        with pytest.raises(InvalidArgumentError):
            limiter.change(0)

    def test_status(self, clock):
        limiter = RateLimiter(3, clock=clock)
        limiter.poll_ready()

        status = limiter.status()
        assert status["limited"] is False
        assert status["remaining"] == 2
        assert status["resets_in"] == pytest.approx(60.0)

        limiter.poll_ready()
        limiter.poll_ready()
        assert limiter.status()["limited"] is True


class TestAsyncAdmission:
    @pytest.mark.asyncio
    async def test_ready_waits_for_window(self):
        limiter = RateLimiter(2, window=0.05)

        start = time.monotonic()
        await limiter.ready()
        await limiter.ready()
        elapsed = time.monotonic() - start

        assert elapsed >= 0.04

    @pytest.mark.asyncio
    async def test_client_waits_for_admission(self, mock_api):
        limiter = RateLimiter(2, window=0.05)
        client = Client(transport=mock_api.transport, rate_limiter=limiter)

        start = time.monotonic()
        await Build.get(client)
        await Build.get(client)
        elapsed = time.monotonic() - start

        assert mock_api.calls == 2
        assert elapsed >= 0.04
        await client.aclose()
