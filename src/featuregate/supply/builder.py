"""Duplicate-free feature collection."""

from __future__ import annotations

import structlog

from featuregate.gherkin.models import Feature

logger = structlog.get_logger()

_DUPLICATE_HINT = (
    "This typically happens when features are looked up in the root of a "
    "project and the build tool has copied them into a 'target' or 'build' "
    "directory. Provide a more specific location."
)


def logical_filename(uri: str) -> str:
    """Last path segment of the URI's scheme-specific part.

    Without a scheme the whole URI is used; without a separator the whole
    scheme-specific part is the filename.
    """
    scheme, sep, rest = uri.partition(":")
    # Single letters are Windows drive letters, not schemes
    specific = rest if sep and len(scheme) > 1 else uri
    index = specific.rfind("/")
    return specific[index + 1 :] if index >= 0 else specific


class FeatureBuilder:
    """Accumulates features, dropping exact resubmissions.

    Two features are duplicates when they share both ``source`` and
    logical filename. The same source under a different filename is kept.
    """

    def __init__(self) -> None:
        self._source_to_features: dict[str, dict[str, Feature]] = {}
        self._features: list[Feature] = []

    def add_unique(self, feature: Feature) -> bool:
        """Record the feature unless it duplicates one already seen.

        Returns True when the feature was kept.
        """
        filename = logical_filename(feature.uri)
        by_filename = self._source_to_features.setdefault(feature.source, {})
        existing = by_filename.get(filename)
        if existing is not None:
            logger.warning(
                "duplicate_feature",
                uri=feature.uri,
                identical_to=existing.uri,
                hint=_DUPLICATE_HINT,
            )
            return False
        by_filename[filename] = feature
        self._features.append(feature)
        return True

    def build(self) -> list[Feature]:
        """All kept features, sorted by URI."""
        return sorted(self._features, key=lambda f: f.uri)

    def __len__(self) -> int:
        return len(self._features)
