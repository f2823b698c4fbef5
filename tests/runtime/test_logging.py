"""Tests for logging configuration, hooks and the library's debug events."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest

from remote_result import Err, Ok, RejectedError, capture_sync, safe, to_awaitable
from remote_result.runtime import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)
from remote_result.runtime import _logging as logging_module


@pytest.fixture(autouse=True)
def cleanup_hooks() -> None:
    """Clear log hooks before and after each test."""
    clear_log_hooks()
    yield
    clear_log_hooks()


@pytest.fixture(autouse=True)
def restore_library_logger(monkeypatch: pytest.MonkeyPatch) -> None:
    """Undo configure_logging on the remote_result logger after each test."""
    library_logger = logging.getLogger('remote_result')
    handlers = list(library_logger.handlers)
    level = library_logger.level
    propagate = library_logger.propagate
    monkeypatch.setattr(logging_module, '_handler', None)
    yield
    library_logger.handlers[:] = handlers
    library_logger.setLevel(level)
    library_logger.propagate = propagate


@pytest.fixture
def events() -> list[dict[str, Any]]:
    """Configure DEBUG logging and collect every event dict."""
    received: list[dict[str, Any]] = []
    configure_logging(level='DEBUG', json_output=True)
    add_log_hook(received.append)
    return received


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self, events: list[dict[str, Any]]) -> None:
        logger = get_logger('test')
        logger.info('Test message', extra_field='extra_value')

        test_entries = [e for e in events if e.get('event') == 'Test message']
        assert len(test_entries) == 1
        assert test_entries[0]['extra_field'] == 'extra_value'

    def test_remove_hook(self) -> None:
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(hook)

        logger = get_logger('test')
        logger.info('First')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(calls) == 1

    def test_failing_hook_does_not_break_logging(self, events: list[dict[str, Any]]) -> None:
        def broken(event_dict: dict[str, Any]) -> None:
            raise ValueError('hook failure')

        add_log_hook(broken)
        get_logger('test').info('still logged')

        assert any(e.get('event') == 'still logged' for e in events)

    def test_remove_unknown_hook_is_noop(self) -> None:
        remove_log_hook(lambda e: None)


class TestLibraryEvents:
    """remote-result emits debug events through the configured pipeline."""

    def test_capture_emits_event(self, events: list[dict[str, Any]]) -> None:
        def explode() -> None:
            raise ValueError('boom')

        result = capture_sync(explode)
        assert isinstance(result, Err)

        captured = [e for e in events if e.get('event') == 'exception_captured']
        assert len(captured) == 1
        assert captured[0]['exc_type'] == 'ValueError'
        assert captured[0]['function'].endswith('explode')
        assert captured[0]['level'] == 'debug'

    def test_safe_reports_wrapped_function(self, events: list[dict[str, Any]]) -> None:
        @safe
        def parse_port(text: str) -> int:
            return int(text)

        parse_port('http')

        captured = [e for e in events if e.get('event') == 'exception_captured']
        assert captured[-1]['function'].endswith('parse_port')

    def test_success_emits_nothing(self, events: list[dict[str, Any]]) -> None:
        assert capture_sync(lambda: 1) == Ok(1)
        assert not [e for e in events if e.get('event') == 'exception_captured']

    @pytest.mark.asyncio
    async def test_rejection_emits_event(self, events: list[dict[str, Any]]) -> None:
        with pytest.raises(KeyError):
            await to_awaitable(Err(KeyError('k')))

        rejected = [e for e in events if e.get('event') == 'awaitable_rejected']
        assert rejected[-1]['error_type'] == 'KeyError'

    def test_silent_when_debug_disabled(self) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level='WARNING')
        add_log_hook(received.append)

        capture_sync(lambda: 1 / 0)

        assert not [e for e in received if e.get('event') == 'exception_captured']
        assert not logging.getLogger('remote_result.convert').isEnabledFor(logging.DEBUG)


class TestConfigureLogging:
    """configure_logging only touches the remote_result logger."""

    def test_root_handlers_untouched(self) -> None:
        root = logging.getLogger()
        before = list(root.handlers)
        root_level = root.level

        configure_logging(level='DEBUG')

        assert root.handlers == before
        assert root.level == root_level

    def test_reconfigure_replaces_handler(self) -> None:
        library_logger = logging.getLogger('remote_result')
        before = len(library_logger.handlers)

        configure_logging(level='DEBUG')
        configure_logging(level='INFO', json_output=False)

        assert len(library_logger.handlers) == before + 1
        assert library_logger.level == logging.INFO
        assert library_logger.propagate is False

    def test_propagate_opt_in(self) -> None:
        configure_logging(level='DEBUG', propagate=True)
        assert logging.getLogger('remote_result').propagate is True

    def test_json_event_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level='DEBUG', json_output=True)

        capture_sync(lambda: 1 / 0)

        captured = capsys.readouterr()
        assert captured.out == ''
        entry = json.loads(captured.err.strip().splitlines()[-1])
        assert entry['event'] == 'exception_captured'
        assert entry['exc_type'] == 'ZeroDivisionError'
        assert entry['level'] == 'debug'
        assert entry['logger'] == 'remote_result.convert'


class TestStdlibOnly:
    """Without configure_logging, events go to the application's stdlib handlers."""

    def test_debug_events_reach_stdlib_not_stdout(
        self,
        caplog: pytest.LogCaptureFixture,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        caplog.set_level(logging.DEBUG, logger='remote_result')

        result = capture_sync(lambda: int('nope'))

        assert isinstance(result, Err)
        assert capsys.readouterr().out == ''
        records = [r for r in caplog.records if r.getMessage() == 'exception_captured']
        assert len(records) == 1
        assert records[0].name == 'remote_result.convert'
        assert records[0].levelno == logging.DEBUG
        assert records[0].exc_type == 'ValueError'

    @pytest.mark.asyncio
    async def test_rejection_reaches_stdlib(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger='remote_result')

        with pytest.raises(RejectedError):
            await to_awaitable(Err('denied'))

        records = [r for r in caplog.records if r.getMessage() == 'awaitable_rejected']
        assert records[-1].error_type == 'str'

    def test_silent_without_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger='remote_result')

        capture_sync(lambda: 1 / 0)

        assert not [r for r in caplog.records if r.name.startswith('remote_result')]
