"""Statistics over lists of integer scores and sensor readings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby

MIN_SCORE = 0
MAX_SCORE = 100

SEGMENT_SEPARATOR = -1
RUN_LENGTH = 3

WINDOW_SIZE = 5
HIGH_READING = 70
HIGH_READING_COUNT = 2
READING_LIMIT = 150
AVERAGE_THRESHOLD = 90


def average(scores: Iterable[int]) -> float:
    """Return the mean of the scores within 0..100; 0.0 when there are none."""
    valid = [score for score in scores if MIN_SCORE <= score <= MAX_SCORE]
    if not valid:
        return 0.0
    return sum(valid) / len(valid)


def first_last(values: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target``, or (-1, -1) if absent."""
    positions = [index for index, value in enumerate(values) if value == target]
    if not positions:
        return -1, -1
    return positions[0], positions[-1]


def _has_consecutive_run(segment: Sequence[int]) -> bool:
    """Tell whether the segment holds three values that each rise by one."""
    if len(segment) < RUN_LENGTH:
        return False
    streak = 0
    for previous, current in zip(segment, segment[1:]):
        streak = streak + 1 if current == previous + 1 else 0
        if streak == RUN_LENGTH - 1:
            return True
    return False


def count_segments(values: Sequence[int]) -> int:
    """Count the -1 separated segments that contain a run of three consecutive values."""
    if len(values) < RUN_LENGTH:
        return 0
    return sum(
        1
        for is_separator, group in groupby(values, key=lambda v: v == SEGMENT_SEPARATOR)
        if not is_separator and _has_consecutive_run(list(group))
    )


def _truncated_mean(window: Sequence[int]) -> int:
    total = sum(window)
    quotient = abs(total) // len(window)
    return quotient if total >= 0 else -quotient


def _is_critical(window: Sequence[int]) -> bool:
    many_high = sum(1 for reading in window if reading >= HIGH_READING) > HIGH_READING_COUNT
    none_over_limit = all(reading <= READING_LIMIT for reading in window)
    high_average = _truncated_mean(window) >= AVERAGE_THRESHOLD
    return many_high or none_over_limit or high_average


def count_critical_windows(readings: Sequence[int]) -> int:
    """Count the windows of five consecutive readings that are critical."""
    if len(readings) < WINDOW_SIZE:
        return 0
    return sum(
        1
        for start in range(len(readings) - WINDOW_SIZE + 1)
        if _is_critical(readings[start:start + WINDOW_SIZE])
    )