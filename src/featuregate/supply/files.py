"""Feature supply from a fixed list of locations."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import structlog

from featuregate.core.errors import FeatureNotFoundError
from featuregate.gherkin.models import Feature
from featuregate.gherkin.scanner import FeatureScanner, is_feature
from featuregate.supply.builder import FeatureBuilder

logger = structlog.get_logger()


def load_features(locations: Iterable[str | Path], scanner: FeatureScanner | None = None) -> list[Feature]:
    """Resolve every location and return the duplicate-free, sorted result.

    Raises:
        FeatureNotFoundError: A location names a ``.feature`` file that
            resolved to nothing.
        ResolutionError: A location is malformed or does not parse.
    """
    scanner = scanner or FeatureScanner()
    locations = list(locations)
    logger.debug("loading_features", locations=[str(loc) for loc in locations])

    builder = FeatureBuilder()
    for location in locations:
        found = scanner.scan(location)
        if not found and is_feature(location):
            raise FeatureNotFoundError.for_uri(str(location))
        for feature in found:
            builder.add_unique(feature)
    return builder.build()


class FileFeatureSupplier:
    """Supplies the features at a fixed set of locations, once."""

    def __init__(self, locations: Iterable[str | Path], scanner: FeatureScanner | None = None) -> None:
        self._locations = list(locations)
        self._scanner = scanner or FeatureScanner()
        self._done = False

    def pull(self) -> list[Feature]:
        self._done = True
        return load_features(self._locations, self._scanner)

    def is_continuous(self) -> bool:
        return False

    def should_stop(self) -> bool:
        return self._done
