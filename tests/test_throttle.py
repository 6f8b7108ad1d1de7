from datetime import timedelta

from soraka.throttle import (
    Debouncer,
    RateLimiter,
    browser_fingerprint,
    generate_browser_key,
    trim_query,
    trim_spaces,
)


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_rate_limiter_burst_then_refill():
    clock = FakeClock()
    limiter = RateLimiter(1, 2, clock=clock)
    assert limiter.allow() is True
    assert limiter.allow() is True
    assert limiter.allow() is False
    clock.now += 1.0
    assert limiter.allow() is True
    assert limiter.allow() is False


def test_rate_limiter_never_exceeds_burst():
    clock = FakeClock()
    limiter = RateLimiter(10, 3, clock=clock)
    clock.now += 1000
    results = [limiter.allow() for _ in range(5)]
    assert results.count(True) == 3


def test_rate_limiter_infinite_rate():
    limiter = RateLimiter(float("inf"), 0)
    assert all(limiter.allow() for _ in range(50))


def test_rate_limiter_zero_burst_denies():
    limiter = RateLimiter(5, 0, clock=FakeClock())
    assert limiter.allow() is False


def test_rate_limiter_zero_rate_allows_only_burst():
    clock = FakeClock()
    limiter = RateLimiter(0, 2, clock=clock)
    assert [limiter.allow() for _ in range(3)] == [True, True, False]
    clock.now += 1000
    assert limiter.allow() is False


def test_debouncer_blocks_within_duration():
    clock = FakeClock()
    debouncer = Debouncer(timedelta(seconds=2), clock=clock)
    assert debouncer.allow("k") is True
    clock.now += 1
    assert debouncer.allow("k") is False
    assert debouncer.allow("other") is True
    clock.now += 1
    assert debouncer.allow("k") is True


def test_browser_fingerprint_of_empty_headers():
    assert browser_fingerprint({}) == "e3b0c44298fc1c14"


def test_browser_fingerprint_case_insensitive_and_distinct():
    a = browser_fingerprint({"User-Agent": "ua", "Accept": "*/*"})
    b = browser_fingerprint({"user-agent": "ua", "accept": "*/*"})
    c = browser_fingerprint({"User-Agent": "other", "Accept": "*/*"})
    assert a == b
    assert a != c
    assert len(a) == 16
    int(a, 16)


def test_generate_browser_key():
    headers = {"User-Agent": "ua"}
    key = generate_browser_key(headers, "POST", "/login")
    assert key.split("|") == [browser_fingerprint(headers), "POST_/login"]


def test_trim_spaces_nested():
    data = {
        "a": "  x ",
        "n": 3,
        "m": {"b": "\ty\n"},
        "l": [" s ", {"c": " z "}, 1, [" deep "]],
    }
    assert trim_spaces(data) == {
        "a": "x",
        "n": 3,
        "m": {"b": "y"},
        "l": ["s", {"c": "z"}, 1, [" deep "]],
    }


def test_trim_spaces_leaves_input_untouched():
    data = {"a": " x "}
    trim_spaces(data)
    assert data == {"a": " x "}


def test_trim_query_joins_values():
    assert trim_query({"a": [" x ", "y "], "b": ["z"]}) == {"a": ["x,y"], "b": ["z"]}