import pytest

from bootcfg.utils.retry import RetryError, retry


def test_retry_wraps_last_exception(monkeypatch):
    monkeypatch.setattr("bootcfg.utils.retry.time.sleep", lambda s: None)
    seen = []

    @retry(retries=2, delay=0, on_retry=lambda attempt, exc: seen.append(attempt))
    def always_fails():
        raise ValueError("nope")

    with pytest.raises(RetryError) as exc_info:
        always_fails()
    assert isinstance(exc_info.value.__cause__, ValueError)
    assert seen == [1, 2]


def test_retry_rejects_zero_attempts():
    with pytest.raises(ValueError):
        retry(retries=0, delay=0)
