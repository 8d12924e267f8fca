"""
Unit tests for request controls

Tests the CORS origin policy, the fixed-window rate limiter and API error types.
"""
import pytest

from app.api.errors import ApiError, BadRequest, NotFound
from app.api.middleware import CorsPolicy
from app.services.rate_limiter import FixedWindowRateLimiter
from app.services.scheduler import sweep_rate_limit_windows


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


class TestCorsPolicy:
    """Test origin allow rules"""

    @pytest.fixture
    def policy(self):
        return CorsPolicy(
            exact_origins=frozenset({"http://localhost:3000", "https://app.example.com"}),
            wildcard_suffixes=frozenset({".netlify.app"}),
            allow_no_origin=True,
        )

    def test_missing_origin_allowed(self, policy):
        assert policy.allows(None) is True
        assert policy.allows("") is True

    def test_missing_origin_rejected_when_disabled(self):
        policy = CorsPolicy(allow_no_origin=False)
        assert policy.allows(None) is False

    def test_exact_match(self, policy):
        assert policy.allows("http://localhost:3000") is True
        assert policy.allows("https://app.example.com") is True

    def test_exact_match_is_scheme_and_port_sensitive(self, policy):
        assert policy.allows("http://localhost:3001") is False
        assert policy.allows("http://app.example.com") is False

    def test_wildcard_suffix(self, policy):
        assert policy.allows("https://preview--edtech.netlify.app") is True

    def test_suffix_must_match_hostname_end(self, policy):
        assert policy.allows("https://netlify.app.evil.com") is False
        assert policy.allows("https://evil.com") is False

    def test_allow_list_only_variant(self):
        policy = CorsPolicy(exact_origins=frozenset({"http://localhost:3000"}))
        assert policy.allows("https://edtech.netlify.app") is False
        assert policy.allows("http://localhost:3000") is True


class TestFixedWindowRateLimiter:
    """Test window counting and reset"""

    def test_allows_up_to_limit(self):
        limiter = FixedWindowRateLimiter(max_requests=3, window_seconds=60, clock=FakeClock())

        decisions = [limiter.hit("1.2.3.4") for _ in range(4)]

        assert [d.allowed for d in decisions] == [True, True, True, False]
        assert [d.remaining for d in decisions] == [2, 1, 0, 0]
        assert decisions[0].limit == 3

    def test_keys_are_independent(self):
        limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60, clock=FakeClock())
        assert limiter.hit("a").allowed is True
        assert limiter.hit("b").allowed is True
        assert limiter.hit("a").allowed is False

    def test_window_resets_after_expiry(self):
        clock = FakeClock()
        limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60, clock=clock)
        limiter.hit("a")
        assert limiter.hit("a").allowed is False

        clock.now += 60
        decision = limiter.hit("a")
        assert decision.allowed is True
        assert decision.reset_after == 60

    def test_reset_after_counts_down(self):
        clock = FakeClock()
        limiter = FixedWindowRateLimiter(max_requests=5, window_seconds=900, clock=clock)
        limiter.hit("a")
        clock.now += 100
        assert limiter.hit("a").reset_after == 800

    def test_sweep_drops_expired_windows(self):
        clock = FakeClock()
        limiter = FixedWindowRateLimiter(max_requests=5, window_seconds=60, clock=clock)
        limiter.hit("old")
        clock.now += 30
        limiter.hit("fresh")
        clock.now += 40

        assert limiter.sweep() == 1
        assert len(limiter) == 1

    def test_scheduler_job_sweeps(self):
        clock = FakeClock()
        limiter = FixedWindowRateLimiter(max_requests=5, window_seconds=10, clock=clock)
        limiter.hit("a")
        clock.now += 11

        sweep_rate_limit_windows(limiter)

        assert len(limiter) == 0


class TestApiErrors:
    """Test status codes carried by ApiError and its subclasses"""

    def test_class_defaults(self):
        assert ApiError("x").status_code == 500
        assert BadRequest("x").status_code == 400
        assert NotFound("x").status_code == 404

    def test_explicit_status_overrides_default(self):
        assert ApiError("teapot", 418).status_code == 418
        assert BadRequest("x", status_code=None).status_code == 400

    def test_content(self):
        assert NotFound("Course not found").to_content() == {"error": "Course not found"}
