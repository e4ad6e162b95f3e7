"""Tests for decorators: @safe and @optional."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs
from sumkit import UNIT, Failure, InvalidArgumentError, Nothing, Some, Success, init, optional, safe, try_run


@pytest.fixture
def captured_events(reset_config):
    """Collect structlog event dicts emitted while the test runs."""
    with capture_logs() as events:
        yield events


class TestSafeDecorator:
    """Tests for @safe decorator."""

    def test_safe_returns_success(self):
        """@safe wraps a normal return in Success."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 2) == Success(5.0)

    def test_safe_returns_failure_on_exception(self):
        """@safe captures the exception in a Failure."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        result = divide(10, 0)
        assert isinstance(result, Failure)
        assert isinstance(result.error, ZeroDivisionError)

    def test_safe_with_exceptions_param(self):
        """@safe(exceptions=...) captures only the listed exceptions."""

        @safe(exceptions=(ValueError,))
        def risky(x: int) -> int:
            if x < 0:
                raise ValueError('negative')
            if x == 0:
                raise TypeError('zero')
            return x

        assert risky(5) == Success(5)
        assert isinstance(risky(-1).error, ValueError)

        with pytest.raises(TypeError):
            risky(0)

    def test_safe_none_return_is_failure(self):
        """A None return cannot be a Success."""

        @safe
        def nothing() -> None:
            return None

        assert isinstance(nothing().error, InvalidArgumentError)

    def test_procedures_belong_in_try_run(self):
        """Side-effect-only functions report Success(UNIT) through try_run."""
        calls: list[str] = []

        def record() -> None:
            calls.append('ran')

        assert try_run(record) == Success(UNIT)
        assert calls == ['ran']

    def test_safe_preserves_function_name(self):
        """@safe preserves function metadata."""

        @safe
        def my_function() -> int:
            """My docstring."""
            return 42

        assert my_function.__name__ == 'my_function'
        assert my_function.__doc__ == 'My docstring.'

    def test_safe_on_method(self):
        """@safe works on bound methods."""

        class Parser:
            @safe
            def parse(self, text: str) -> int:
                return int(text)

        assert Parser().parse('7') == Success(7)
        assert Parser().parse('seven').is_failure()

    def test_safe_logs_capture_at_debug(self, captured_events):
        """Each captured exception emits a safe.captured event."""

        @safe
        def explode() -> int:
            raise RuntimeError('kaboom')

        explode()

        entries = [e for e in captured_events if e.get('event') == 'safe.captured']
        assert len(entries) == 1
        assert entries[0]['function'].endswith('explode')
        assert 'kaboom' in entries[0]['error']
        assert entries[0]['log_level'] == 'debug'

    def test_safe_success_does_not_log(self, captured_events):
        """A normal return emits nothing."""

        @safe
        def fine() -> int:
            return 1

        fine()

        assert not [e for e in captured_events if e.get('event') == 'safe.captured']

    def test_safe_logging_can_be_disabled(self, captured_events, monkeypatch):
        """init(log_captures=False) silences safe.captured."""
        monkeypatch.delenv('SUMKIT_LOG_LEVEL', raising=False)
        init(log_captures=False)

        @safe
        def explode() -> int:
            raise RuntimeError('kaboom')

        assert explode().is_failure()
        assert not [e for e in captured_events if e.get('event') == 'safe.captured']


class TestOptionalDecorator:
    """Tests for @optional decorator."""

    def test_value_becomes_some(self):
        @optional
        def lookup(key: str) -> str | None:
            return {'a': 'x'}.get(key)

        assert lookup('a') == Some('x')

    def test_none_becomes_nothing(self):
        @optional
        def lookup(key: str) -> str | None:
            return {'a': 'x'}.get(key)

        assert lookup('b') == Nothing()

    def test_exceptions_propagate(self):
        @optional
        def broken() -> int | None:
            raise KeyError('missing')

        with pytest.raises(KeyError):
            broken()

    def test_preserves_function_name(self):
        @optional
        def find_user() -> str | None:
            """Find a user."""
            return None

        assert find_user.__name__ == 'find_user'
        assert find_user.__doc__ == 'Find a user.'
