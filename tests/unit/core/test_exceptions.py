"""Tests for the exception hierarchy."""

from ga_universal.core.exceptions import (
    BatchDispatchError,
    ConfigurationError,
    GAUniversalException,
    TransportError,
    UnsupportedEventError,
)


def test_hierarchy():
    for exc_type in (UnsupportedEventError, ConfigurationError, TransportError):
        assert issubclass(exc_type, GAUniversalException)
    assert issubclass(BatchDispatchError, TransportError)


def test_unsupported_event_message():
    error = UnsupportedEventError("identify")
    assert error.event_type == "identify"
    assert "identify" in str(error)


def test_configuration_error_default_message():
    assert str(ConfigurationError()) == "No tracking id configured"


def test_batch_error_carries_first_failure():
    first = TransportError("bad gateway", 502)
    error = BatchDispatchError(first, failed=2, total=5)

    assert error.first_error is first
    assert error.status_code == 502
    assert str(error) == "2 of 5 payloads failed: bad gateway"


def test_batch_error_without_status():
    error = BatchDispatchError(RuntimeError("boom"), failed=1, total=2)
    assert error.status_code is None
