"""Interfaces between interaction surfaces, suppliers, and consumers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from featuregate.gherkin.models import Feature


@runtime_checkable
class SubmissionListener(Protocol):
    """Events an interaction surface may raise."""

    def on_submit(self, text: str) -> None: ...

    def on_terminate(self) -> None: ...


@runtime_checkable
class FeatureSupplier(Protocol):
    """What the execution side pulls features from."""

    def pull(self) -> list[Feature]: ...

    def is_continuous(self) -> bool: ...

    def should_stop(self) -> bool: ...
