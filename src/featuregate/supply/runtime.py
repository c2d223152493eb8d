"""Consumer loop driving a feature supplier."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from featuregate.core.errors import FeatureGateError
from featuregate.gherkin.models import Feature
from featuregate.supply.protocols import FeatureSupplier

logger = structlog.get_logger()

BatchHandler = Callable[[list[Feature]], None]
ErrorHandler = Callable[[FeatureGateError], None]


def run_supplier(
    supplier: FeatureSupplier,
    on_batch: BatchHandler,
    on_error: ErrorHandler | None = None,
) -> int:
    """Pull batches until the supplier is exhausted.

    A non-continuous supplier is pulled exactly once. A continuous one is
    pulled until it reports ``should_stop``; empty batches are skipped.
    Failed pulls go to ``on_error`` when given and the loop carries on;
    without a handler they propagate.

    Returns the number of non-empty batches handled.
    """
    batches = 0
    while True:
        try:
            features = supplier.pull()
        except FeatureGateError as e:
            if on_error is None:
                raise
            logger.error("pull_failed", error=e.error_name, message=e.message)
            on_error(e)
        else:
            if features:
                batches += 1
                on_batch(features)

        if not supplier.is_continuous() or supplier.should_stop():
            break

    logger.info("supplier_exhausted", batches=batches)
    return batches
