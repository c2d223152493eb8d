"""Submission normalization.

Makes free-form text parseable as a minimal feature document by
prepending synthetic ``Feature:`` and ``Scenario:`` lines when the markers
are absent. Presence is a literal substring check, not a grammar check.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import datetime, timedelta

STAMP_FORMAT = "%Y_%m_%d_%H_%M_%S_%f"

DEFAULT_FEATURE_KEYWORD = "Feature:"
DEFAULT_SCENARIO_KEYWORD = "Scenario:"


class PullStamp:
    """Issues fixed-width, sortable, strictly increasing timestamps.

    Stamps look like ``2026_10_19_14_03_07_000123``. When the clock has not
    advanced past the previous stamp, the previous stamp plus one
    microsecond is issued instead, so two pulls never share a name.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._last: datetime | None = None
        self._lock = threading.Lock()

    def next(self) -> str:
        with self._lock:
            now = self._clock()
            if self._last is not None and now <= self._last:
                now = self._last + timedelta(microseconds=1)
            self._last = now
        return now.strftime(STAMP_FORMAT)


def normalize_text(
    text: str,
    stamp: str,
    *,
    feature_keyword: str = DEFAULT_FEATURE_KEYWORD,
    scenario_keyword: str = DEFAULT_SCENARIO_KEYWORD,
    feature_name: str = "Feature",
    scenario_name: str = "Scenario",
) -> str:
    """Return text guaranteed to contain both markers.

    Missing markers are added as ``<keyword> <name>_<stamp>`` lines. When
    both are missing they are prepended, declaration first, followed by the
    original text unchanged. When only the scenario marker is missing it
    goes directly after the line carrying the declaration marker. Text that
    already has both markers is returned as is.
    """
    scenario_line = f"{scenario_keyword} {scenario_name}_{stamp}\n"
    if feature_keyword not in text:
        prefix = f"{feature_keyword} {feature_name}_{stamp}\n"
        if scenario_keyword not in text:
            prefix += scenario_line
        return prefix + text
    if scenario_keyword in text:
        return text

    lines = text.splitlines(keepends=True)
    for index, line in enumerate(lines):
        if feature_keyword in line:
            if not line.endswith(("\n", "\r")):
                lines[index] = line + "\n"
            lines.insert(index + 1, scenario_line)
            break
    return "".join(lines)
