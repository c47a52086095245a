from typing import Dict, Iterable, List


class RoutineError(Exception):
    """Base exception for exam-routine generation."""


class EmptyInputError(RoutineError, ValueError):
    """Raised when there are no registered courses to schedule."""

    def __init__(self, message: str = "no registered courses to schedule"):
        super().__init__(message)


class MissingDateError(RoutineError, ValueError):
    """Raised when an exam day has no calendar date attached."""

    def __init__(self, missing: Iterable[int]):
        self.missing: List[int] = sorted(missing)
        days = ", ".join(str(d + 1) for d in self.missing)
        super().__init__(f"please provide dates for all exam days (missing: day {days})")


class DuplicateDateError(RoutineError, ValueError):
    """Raised when two exam days are given the same calendar date."""

    def __init__(self, clashes: Dict[str, List[int]]):
        self.clashes = clashes
        detail = "; ".join(f"{d}: day {', '.join(str(i + 1) for i in days)}" for d, days in clashes.items())
        super().__init__(f"each exam day needs its own date ({detail})")
