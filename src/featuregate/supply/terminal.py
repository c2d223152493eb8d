"""Line-oriented interaction surface for terminals and pipes.

Lines typed by the user are buffered. A line holding only the submit
command hands the buffer to the listener; the quit command or end of input
terminates the session.
"""

from __future__ import annotations

import threading
from typing import TextIO

import structlog

from featuregate.supply.protocols import SubmissionListener

logger = structlog.get_logger()


class TerminalInputSurface:
    """Reads submissions from a text stream on a background thread."""

    def __init__(
        self,
        stream: TextIO,
        listener: SubmissionListener,
        *,
        submit_command: str = "go",
        quit_command: str = "quit",
    ) -> None:
        self._stream = stream
        self._listener = listener
        self._submit_command = submit_command
        self._quit_command = quit_command
        self._thread: threading.Thread | None = None

    def start(self) -> threading.Thread:
        """Start reading on a daemon thread and return it."""
        if self._thread is None:
            self._thread = threading.Thread(
                target=self.run,
                name="featuregate-input",
                daemon=True,
            )
            self._thread.start()
        return self._thread

    def run(self) -> None:
        """Read until quit or EOF. Always terminates the listener."""
        buffer: list[str] = []
        try:
            for line in self._stream:
                command = line.strip()
                if command == self._submit_command:
                    self._listener.on_submit("".join(buffer))
                    buffer = []
                elif command == self._quit_command:
                    break
                else:
                    buffer.append(line if line.endswith("\n") else line + "\n")
            if buffer:
                logger.info("unsubmitted_input_discarded", lines=len(buffer))
        finally:
            self._listener.on_terminate()
