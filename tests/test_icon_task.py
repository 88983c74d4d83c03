"""Tests for the background icon download."""

import threading
from pathlib import Path

import pytest

from webapp_manager.core.errors import IconDownloadFailed
from webapp_manager.core.icon_task import IconDownloadTask


def test_successful_download_is_delivered_once():
    task = IconDownloadTask("example.com", resolver=lambda url: Path("/cache/examplecom.png"))

    outcome = task.start().wait(timeout=5)

    assert outcome.succeeded
    assert outcome.path == Path("/cache/examplecom.png")
    assert not task.pending
    assert task.poll() is outcome


def test_poll_does_not_block_while_running():
    release = threading.Event()

    def slow_resolver(url):
        release.wait(5)
        return Path("/cache/icon.png")

    task = IconDownloadTask("example.com", resolver=slow_resolver).start()
    try:
        assert task.poll() is None
        assert task.pending
    finally:
        release.set()

    assert task.wait(timeout=5).path == Path("/cache/icon.png")


def test_typed_failure_is_delivered():
    error = IconDownloadFailed("https://example.com/missing.png", 404)

    def failing_resolver(url):
        raise error

    outcome = IconDownloadTask("example.com", resolver=failing_resolver).start().wait(5)

    assert not outcome.succeeded
    assert outcome.error is error


def test_unexpected_error_is_delivered():
    error = ValueError("unexpected")

    def crashing_resolver(url):
        raise error

    outcome = IconDownloadTask("example.com", resolver=crashing_resolver).start().wait(5)

    assert not outcome.succeeded
    assert outcome.error is error


@pytest.mark.filterwarnings("ignore::pytest.PytestUnhandledThreadExceptionWarning")
def test_worker_ending_without_result_is_a_failure():
    def exiting_resolver(url):
        raise SystemExit(1)

    outcome = IconDownloadTask("example.com", resolver=exiting_resolver).start().wait(5)

    assert outcome is not None
    assert not outcome.succeeded
    assert isinstance(outcome.error, RuntimeError)


def test_poll_before_start():
    assert IconDownloadTask("example.com").poll() is None


def test_cannot_start_twice():
    task = IconDownloadTask("example.com", resolver=lambda url: Path("/x.png")).start()

    with pytest.raises(RuntimeError):
        task.start()
    task.wait(5)
