"""Tests for the terminal interaction surface."""

from __future__ import annotations

import io

import pytest

from featuregate.supply.terminal import TerminalInputSurface


class RecordingListener:
    def __init__(self) -> None:
        self.events: list[tuple[str, str | None]] = []

    def on_submit(self, text: str) -> None:
        self.events.append(("submit", text))

    def on_terminate(self) -> None:
        self.events.append(("terminate", None))


class TestTerminalInputSurface:
    def test_submit_command_hands_over_buffer(self) -> None:
        listener = RecordingListener()
        stream = io.StringIO("Given a\nWhen b\ngo\nThen c\n  go  \nquit\n")

        TerminalInputSurface(stream, listener).run()

        assert listener.events == [
            ("submit", "Given a\nWhen b\n"),
            ("submit", "Then c\n"),
            ("terminate", None),
        ]

    def test_eof_terminates_and_discards_partial_buffer(self) -> None:
        listener = RecordingListener()

        TerminalInputSurface(io.StringIO("Given a\ngo\nGiven unsent"), listener).run()

        assert listener.events == [("submit", "Given a\n"), ("terminate", None)]

    def test_custom_commands(self) -> None:
        listener = RecordingListener()
        stream = io.StringIO("Given a\nrun\ngo\nexit\nGiven ignored\nrun\n")

        TerminalInputSurface(stream, listener, submit_command="run", quit_command="exit").run()

        assert listener.events == [("submit", "Given a\n"), ("terminate", None)]

    def test_empty_submission_allowed(self) -> None:
        listener = RecordingListener()

        TerminalInputSurface(io.StringIO("go\n"), listener).run()

        assert listener.events == [("submit", ""), ("terminate", None)]

    def test_terminates_even_when_listener_fails(self) -> None:
        class FailingListener(RecordingListener):
            def on_submit(self, text: str) -> None:
                raise RuntimeError("boom")

        listener = FailingListener()
        with pytest.raises(RuntimeError):
            TerminalInputSurface(io.StringIO("go\n"), listener).run()

        assert listener.events == [("terminate", None)]

    @pytest.mark.timeout(10)
    def test_start_runs_on_daemon_thread(self) -> None:
        listener = RecordingListener()
        surface = TerminalInputSurface(io.StringIO("Given a\ngo\n"), listener)

        thread = surface.start()
        thread.join(timeout=5)

        assert thread.daemon
        assert surface.start() is thread
        assert listener.events[-1] == ("terminate", None)
