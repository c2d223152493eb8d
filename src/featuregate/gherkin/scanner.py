"""Feature resource discovery.

Turns a location (``file:`` URI or plain filesystem path) into zero or more
parsed features. A file location yields at most one feature; a directory is
walked recursively for ``*.feature`` files in sorted order.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from urllib.parse import unquote, urlsplit

import structlog

from featuregate.core.errors import ResolutionError
from featuregate.gherkin.models import Feature
from featuregate.gherkin.parser import parse_feature

logger = structlog.get_logger()

FEATURE_SUFFIX = ".feature"

FeatureParser = Callable[[str, str], Feature | None]


def is_feature(location: str | Path) -> bool:
    """True when the location names a feature file by suffix."""
    path = location if isinstance(location, Path) else Path(urlsplit(str(location)).path)
    return path.suffix == FEATURE_SUFFIX


def to_path(location: str | Path) -> Path:
    """Resolve a ``file:`` URI or plain path to a filesystem path.

    Raises:
        ResolutionError: The location uses a scheme other than ``file``.
    """
    if isinstance(location, Path):
        return location
    parts = urlsplit(location)
    # Single letters are Windows drive letters, not schemes
    if len(parts.scheme) <= 1:
        return Path(location)
    if parts.scheme != "file" or parts.netloc not in ("", "localhost"):
        raise ResolutionError.unsupported_location(location)
    return Path(unquote(parts.path))


class FeatureScanner:
    """Resolves locations into parsed features.

    The parser is injectable so callers can substitute their own Gherkin
    implementation; it receives ``(source, uri)`` and returns a Feature or
    None for an empty document.
    """

    def __init__(self, parser: FeatureParser = parse_feature, encoding: str = "utf-8") -> None:
        self._parser = parser
        self._encoding = encoding

    def scan(self, location: str | Path) -> list[Feature]:
        """Find and parse every feature at the location.

        A location that does not exist resolves to no features.

        Raises:
            ResolutionError: The location is malformed, unreadable, or holds
                a document that does not parse.
        """
        path = to_path(location)
        if path.is_dir():
            candidates = sorted(p for p in path.rglob(f"*{FEATURE_SUFFIX}") if p.is_file())
        elif path.is_file() and is_feature(path):
            candidates = [path]
        else:
            candidates = []

        features: list[Feature] = []
        for candidate in candidates:
            feature = self._parse_file(candidate)
            if feature is not None:
                features.append(feature)
        logger.debug("features_scanned", location=str(location), count=len(features))
        return features

    def _parse_file(self, path: Path) -> Feature | None:
        uri = path.resolve().as_uri()
        try:
            source = path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ResolutionError.unreadable(uri, str(e)) from e
        return self._parser(source, uri)
