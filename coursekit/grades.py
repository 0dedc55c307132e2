"""Grade scales and grade distributions."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, Mapping

GradeMapper = Callable[[int], str]

_PLUSMINUS_SCALE = (
    (97, 100, "A+"),
    (93, 96, "A"),
    (90, 92, "A-"),
    (87, 89, "B+"),
    (83, 86, "B"),
    (80, 82, "B-"),
    (77, 79, "C+"),
    (73, 76, "C"),
    (70, 72, "C-"),
    (67, 69, "D+"),
    (63, 66, "D"),
    (60, 62, "D-"),
)

_STANDARD_SCALE = (
    (90, 100, "A"),
    (80, 89, "B"),
    (70, 79, "C"),
    (60, 69, "D"),
)

_PASSFAIL_SCALE = ((60, 100, "P"),)

FAIL = "F"


def _lookup(scale: Iterable[tuple[int, int, str]], score: int) -> str:
    return next((grade for low, high, grade in scale if low <= score <= high), FAIL)


def plusminus_mapper(score: int) -> str:
    """Map a score to a letter grade with plus and minus steps."""
    return _lookup(_PLUSMINUS_SCALE, score)


def passfail_mapper(score: int) -> str:
    """Map a score to "P" or "F"."""
    return _lookup(_PASSFAIL_SCALE, score)


def standard_mapper(score: int) -> str:
    """Map a score to a plain letter grade A to F."""
    return _lookup(_STANDARD_SCALE, score)


def map_scores(scores: Iterable[int], mapper: GradeMapper) -> list[str]:
    """Apply ``mapper`` to every score."""
    return [mapper(score) for score in scores]


def compute_distribution(grades: Iterable[str]) -> dict[str, int]:
    """Count each grade; the most recently first-seen grade comes first."""
    counts = Counter(grades)
    return dict(reversed(list(counts.items())))


def format_distribution(distribution: Mapping[str, int]) -> str:
    """Render a distribution as text, one line per grade."""
    lines = ["Grade Distribution:"]
    lines.extend(f"Grade {grade}: {count}" for grade, count in distribution.items())
    return "\n".join(lines) + "\n"


def print_distribution(distribution: Mapping[str, int]) -> None:
    """Print a distribution to standard output."""
    print(format_distribution(distribution), end="")