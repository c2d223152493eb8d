"""Scratch publishing of normalized submissions."""

from __future__ import annotations

import tempfile
from pathlib import Path

import structlog

from featuregate.core.errors import PublishError
from featuregate.gherkin.scanner import FEATURE_SUFFIX

logger = structlog.get_logger()


class ScratchPublisher:
    """Writes each submission to ``<scratch_dir>/<stamp>.feature``.

    Files are created exclusively and never deleted here; the scratch
    directory only ever grows by one file per pull.
    """

    def __init__(self, scratch_dir: Path | None = None, encoding: str = "utf-8") -> None:
        self.scratch_dir = scratch_dir if scratch_dir is not None else Path(tempfile.gettempdir())
        self.encoding = encoding

    def publish(self, text: str, stamp: str) -> str:
        """Persist text and return its ``file:`` URI.

        Raises:
            PublishError: The file could not be created or written.
        """
        path = self.scratch_dir / f"{stamp}{FEATURE_SUFFIX}"
        try:
            self.scratch_dir.mkdir(parents=True, exist_ok=True)
            # newline="" keeps the text byte-for-byte as submitted
            with path.open("x", encoding=self.encoding, newline="") as f:
                f.write(text)
        except (OSError, UnicodeEncodeError) as e:
            raise PublishError.write_failed(str(path), str(e)) from e

        uri = path.resolve().as_uri()
        logger.debug("feature_published", uri=uri, chars=len(text))
        return uri
