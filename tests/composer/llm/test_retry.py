"""
Tests for composer.llm.retry and error classification.
"""

from unittest.mock import Mock

import pytest

from composer.llm.errors import (
    AuthenticationError,
    InvalidRequestError,
    NetworkError,
    ProviderError,
    ProviderNotAvailableError,
    RateLimitError,
    TimeoutError,
    classify_provider_error,
)
from composer.llm.retry import MAX_DELAY, backoff_delay, retry_with_backoff


def _failing(*effects):
    return Mock(side_effect=list(effects), __name__="generate")


class TestRetryWithBackoff:
    def test_success_first_try(self):
        sleep = Mock()
        func = Mock(return_value="ok", __name__="generate")

        assert retry_with_backoff(sleep=sleep)(func)() == "ok"
        sleep.assert_not_called()

    def test_retries_transient_errors(self):
        sleep = Mock()
        func = _failing(RateLimitError("slow down"), NetworkError("reset"), "ok")

        assert retry_with_backoff(max_attempts=3, base_delay=0.5, sleep=sleep)(func)() == "ok"
        assert [c.args[0] for c in sleep.call_args_list] == [0.5, 1.0]

    def test_gives_up_after_max_attempts(self):
        sleep = Mock()
        func = Mock(side_effect=TimeoutError("slow"), __name__="generate")

        with pytest.raises(TimeoutError):
            retry_with_backoff(max_attempts=2, sleep=sleep)(func)()
        assert func.call_count == 2
        assert sleep.call_count == 1

    def test_provider_retry_hint_wins(self):
        sleep = Mock()
        func = _failing(RateLimitError("quota", retry_after=7.5), "ok")

        retry_with_backoff(sleep=sleep)(func)()
        sleep.assert_called_once_with(7.5)

    def test_delay_is_capped(self):
        sleep = Mock()
        func = _failing(RateLimitError("quota", retry_after=600), TimeoutError("t"), "ok")

        retry_with_backoff(base_delay=20, max_delay=25, sleep=sleep)(func)()
        assert [c.args[0] for c in sleep.call_args_list] == [25, 25]

    @pytest.mark.parametrize("error", [
        AuthenticationError("bad key"),
        InvalidRequestError("bad model"),
        ProviderError("empty response"),
        KeyError("x"),
    ])
    def test_other_errors_not_retried(self, error):
        func = Mock(side_effect=error, __name__="generate")
        with pytest.raises(type(error)):
            retry_with_backoff(sleep=Mock())(func)()
        assert func.call_count == 1


class TestBackoffDelay:
    def test_doubles(self):
        assert [backoff_delay(a, 2.0) for a in range(3)] == [2.0, 4.0, 8.0]

    def test_cap(self):
        assert backoff_delay(10) == MAX_DELAY


class TestClassifyProviderError:
    @pytest.mark.parametrize("message,expected", [
        ("429 RESOURCE_EXHAUSTED", RateLimitError),
        ("Invalid API key provided", AuthenticationError),
        ("Request timed out", TimeoutError),
        ("Connection refused", NetworkError),
        ("503 The model is overloaded. Please try again later.", ProviderNotAvailableError),
        ("400 invalid argument", InvalidRequestError),
        ("something odd", ProviderError),
        ("model is not supported for generateContent", ProviderError),
    ])
    def test_classify(self, message, expected):
        error = classify_provider_error("Gemini", Exception(message))
        assert type(error) is expected
        assert message in str(error)

    def test_rate_limit_retry_hint(self):
        error = classify_provider_error("Gemini", Exception("429 Quota exceeded. Please retry in 12.5s."))
        assert error.retry_after == 12.5

    def test_rate_limit_without_hint(self):
        assert classify_provider_error("OpenAI", Exception("Rate limit reached")).retry_after is None
