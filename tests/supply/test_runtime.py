"""Tests for the consumer loop."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from featuregate.core.errors import FeatureGateError, ResolutionError
from featuregate.gherkin.models import Feature
from featuregate.supply.files import FileFeatureSupplier
from featuregate.supply.gate import UserInputFeatureSupplier
from featuregate.supply.publisher import ScratchPublisher
from featuregate.supply.runtime import run_supplier


class ScriptedSupplier:
    """Continuous supplier replaying canned pull outcomes."""

    def __init__(self, outcomes: list[list[Feature] | Exception]) -> None:
        self._outcomes = list(outcomes)
        self.pulls = 0

    def pull(self) -> list[Feature]:
        self.pulls += 1
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def is_continuous(self) -> bool:
        return True

    def should_stop(self) -> bool:
        return not self._outcomes


def _feature(name: str) -> Feature:
    return Feature(uri=f"file:///{name}.feature", source=name, name=name, line=1)


class TestRunSupplier:
    def test_non_continuous_pulled_once(self, tmp_path: Path) -> None:
        (tmp_path / "a.feature").write_text("Feature: A\n")
        batches: list[list[Feature]] = []

        count = run_supplier(FileFeatureSupplier([tmp_path]), batches.append)

        assert count == 1
        assert [[f.name for f in b] for b in batches] == [["A"]]

    def test_continuous_until_stopped(self) -> None:
        supplier = ScriptedSupplier([[_feature("a")], [_feature("b")], []])
        batches: list[list[Feature]] = []

        count = run_supplier(supplier, batches.append)

        assert count == 2
        assert supplier.pulls == 3

    def test_empty_batch_before_stop_does_not_end_loop(self) -> None:
        supplier = ScriptedSupplier([[], [_feature("a")], []])
        batches: list[list[Feature]] = []

        assert run_supplier(supplier, batches.append) == 1
        assert supplier.pulls == 3

    def test_errors_propagate_without_handler(self) -> None:
        supplier = ScriptedSupplier([ResolutionError.unsupported_location("x:y"), []])

        with pytest.raises(ResolutionError):
            run_supplier(supplier, lambda batch: None)

    def test_errors_handled_and_loop_continues(self) -> None:
        error = ResolutionError.unsupported_location("x:y")
        supplier = ScriptedSupplier([error, [_feature("a")], []])
        errors: list[FeatureGateError] = []
        batches: list[list[Feature]] = []

        count = run_supplier(supplier, batches.append, on_error=errors.append)

        assert count == 1
        assert errors == [error]

    @pytest.mark.timeout(10)
    def test_drives_interactive_gate_across_threads(self, tmp_path: Path) -> None:
        """Producer thread submits twice then terminates; consumer sees two batches."""
        supplier = UserInputFeatureSupplier(publisher=ScratchPublisher(tmp_path))
        batches: list[list[Feature]] = []
        consumed = threading.Semaphore(0)

        def on_batch(features: list[Feature]) -> None:
            batches.append(features)
            consumed.release()

        def produce() -> None:
            supplier.submit("Given one")
            consumed.acquire()
            supplier.submit("Feature: Two\nScenario: S\nGiven two\n")
            consumed.acquire()
            supplier.terminate()

        producer = threading.Thread(target=produce, daemon=True)
        producer.start()
        count = run_supplier(supplier, on_batch)
        producer.join(timeout=5)

        assert count == 2
        assert batches[1][0].name == "Two"
        assert supplier.should_stop()
