"""Continuous feature supply from interactive submissions.

One producer (an interaction surface) hands text to one consumer (the
execution side) through a single slot:

- ``submit`` stages text; a second submit before the next pull replaces it
- ``pull`` blocks until text is staged or the session ends, then turns the
  text into features
- ``terminate`` ends the session and releases any blocked pull

Each released pull runs normalize -> publish -> resolve -> aggregate outside
the lock, with a fresh FeatureBuilder.
"""

from __future__ import annotations

import threading
from enum import Enum

import structlog

from featuregate.config.models import SupplyConfig
from featuregate.core.logging import clear_pull_id, set_pull_id
from featuregate.gherkin.models import Feature
from featuregate.gherkin.scanner import FeatureScanner
from featuregate.supply.builder import FeatureBuilder
from featuregate.supply.normalizer import (
    DEFAULT_FEATURE_KEYWORD,
    DEFAULT_SCENARIO_KEYWORD,
    PullStamp,
    normalize_text,
)
from featuregate.supply.publisher import ScratchPublisher

logger = structlog.get_logger()


class GateState(Enum):
    """Supply gate state."""

    IDLE = "idle"
    READY = "ready"
    STOPPED = "stopped"


class UserInputFeatureSupplier:
    """Supplies one batch of features per interactive submission.

    Implements both the producer side (``on_submit``/``on_terminate``) and
    the consumer side (``pull``/``is_continuous``/``should_stop``). Only one
    consumer thread may call ``pull``.
    """

    def __init__(
        self,
        scanner: FeatureScanner | None = None,
        publisher: ScratchPublisher | None = None,
        stamps: PullStamp | None = None,
        *,
        feature_keyword: str = DEFAULT_FEATURE_KEYWORD,
        scenario_keyword: str = DEFAULT_SCENARIO_KEYWORD,
        feature_name: str = "Feature",
        scenario_name: str = "Scenario",
    ) -> None:
        self._scanner = scanner or FeatureScanner()
        self._publisher = publisher or ScratchPublisher()
        self._stamps = stamps or PullStamp()
        self._feature_keyword = feature_keyword
        self._scenario_keyword = scenario_keyword
        self._feature_name = feature_name
        self._scenario_name = scenario_name

        self._cond = threading.Condition()
        self._state = GateState.IDLE
        self._staged: str | None = None

    @classmethod
    def from_config(cls, supply: SupplyConfig) -> UserInputFeatureSupplier:
        """Build from the ``supply`` configuration section."""
        return cls(
            scanner=FeatureScanner(encoding=supply.encoding),
            publisher=ScratchPublisher(supply.resolved_scratch_dir(), encoding=supply.encoding),
            feature_keyword=supply.feature_keyword,
            scenario_keyword=supply.scenario_keyword,
            feature_name=supply.synthetic_feature_name,
            scenario_name=supply.synthetic_scenario_name,
        )

    @property
    def state(self) -> GateState:
        with self._cond:
            return self._state

    # Producer side

    def submit(self, text: str) -> None:
        """Stage text for the next pull, replacing anything still pending."""
        with self._cond:
            if self._state is GateState.STOPPED:
                logger.info("submission_ignored", reason="supplier_terminated")
                return
            replaced = self._state is GateState.READY
            self._staged = text
            self._state = GateState.READY
            self._cond.notify_all()
        logger.debug("submission_staged", chars=len(text), replaced_pending=replaced)

    def terminate(self) -> None:
        """End the session. Idempotent; wakes a blocked pull."""
        with self._cond:
            if self._state is GateState.STOPPED:
                return
            self._state = GateState.STOPPED
            self._staged = None
            self._cond.notify_all()
        logger.info("supplier_terminated")

    on_submit = submit
    on_terminate = terminate

    # Consumer side

    def pull(self, timeout: float | None = None) -> list[Feature]:
        """Block for the next submission and return its features.

        Returns an empty list once the supplier is stopped, or when
        ``timeout`` seconds pass with nothing staged.

        Raises:
            PublishError: The submission could not be written to scratch.
            ResolutionError: The published submission could not be parsed.
        """
        with self._cond:
            self._cond.wait_for(lambda: self._state is not GateState.IDLE, timeout=timeout)
            if self._state is not GateState.READY:
                return []
            text = self._staged
            self._staged = None
            self._state = GateState.IDLE
        assert text is not None
        return self._supply(text)

    def is_continuous(self) -> bool:
        return True

    def should_stop(self) -> bool:
        with self._cond:
            return self._state is GateState.STOPPED

    def _supply(self, text: str) -> list[Feature]:
        stamp = self._stamps.next()
        set_pull_id(stamp)
        try:
            logger.info("pull_released", chars=len(text))
            normalized = normalize_text(
                text,
                stamp,
                feature_keyword=self._feature_keyword,
                scenario_keyword=self._scenario_keyword,
                feature_name=self._feature_name,
                scenario_name=self._scenario_name,
            )
            uri = self._publisher.publish(normalized, stamp)

            builder = FeatureBuilder()
            for feature in self._scanner.scan(uri):
                builder.add_unique(feature)
            features = builder.build()
            logger.info("pull_completed", uri=uri, features=len(features))
            return features
        finally:
            clear_pull_id()
