"""Password strength rules and a short password history."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from collections.abc import Iterator

MIN_LENGTH = 8
HISTORY_SIZE = 3
MAX_STORED_LENGTH = 1023
SPECIAL_CHARACTERS = frozenset("@#$^&*")


class PwStatus(IntEnum):
    """Outcome of validating a new password."""

    OK = 0
    WEAK = 1
    SIMILAR = 2


def _is_ascii_between(char: str, low: str, high: str) -> bool:
    return low <= char <= high


def check_cases(password: str) -> bool:
    """Tell whether the text has an upper, a lower, a digit and a special character."""
    return (
        any(_is_ascii_between(c, "A", "Z") for c in password)
        and any(_is_ascii_between(c, "a", "z") for c in password)
        and any(_is_ascii_between(c, "0", "9") for c in password)
        and any(c in SPECIAL_CHARACTERS for c in password)
    )


def diff_pass(new_pw: str, curr_pw: str) -> bool:
    """Tell whether two passwords differ."""
    return new_pw != curr_pw


def validate_password_weak(new_pw: str, curr_pw: str) -> PwStatus:
    """Check length, character classes and difference from the current password."""
    if len(new_pw) >= MIN_LENGTH and check_cases(new_pw) and diff_pass(new_pw, curr_pw):
        return PwStatus.OK
    return PwStatus.WEAK


def _one_replacement_apart(first: str, second: str) -> bool:
    return sum(1 for a, b in zip(first, second) if a != b) <= 1


def _one_insertion_apart(longer: str, shorter: str) -> bool:
    mismatch = next(
        (index for index, (a, b) in enumerate(zip(longer, shorter)) if a != b),
        len(shorter),
    )
    return longer[mismatch + 1:] == shorter[mismatch:]


def _is_similar(first: str, second: str) -> bool:
    if len(first) == len(second):
        return _one_replacement_apart(first, second)
    if len(first) == len(second) + 1:
        return _one_insertion_apart(first, second)
    if len(first) + 1 == len(second):
        return _one_insertion_apart(second, first)
    return False


@dataclass
class PasswordHistory:
    """The three most recent passwords, newest first."""

    entries: list[str] = field(default_factory=lambda: [""] * HISTORY_SIZE)

    def __post_init__(self) -> None:
        if len(self.entries) != HISTORY_SIZE:
            raise ValueError(f"password history holds exactly {HISTORY_SIZE} entries")
        self.entries = [entry[:MAX_STORED_LENGTH] for entry in self.entries]

    def push(self, password: str) -> None:
        """Record a new password, dropping the oldest one."""
        self.entries = [password[:MAX_STORED_LENGTH], *self.entries[:HISTORY_SIZE - 1]]

    def __getitem__(self, index: int) -> str:
        return self.entries[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def validate_password(new_pw: str, history: PasswordHistory) -> PwStatus:
    """Validate against the history and record the password when it is accepted."""
    if validate_password_weak(new_pw, history[0]) is PwStatus.WEAK:
        return PwStatus.WEAK
    if any(_is_similar(new_pw, previous) for previous in history):
        return PwStatus.SIMILAR
    history.push(new_pw)
    return PwStatus.OK