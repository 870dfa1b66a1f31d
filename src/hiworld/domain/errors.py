"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class GreetingError(Exception):
    """Base class for greeting classification failures.

    Raised by the pure greeting builder when its inputs fall outside the
    recognised set. Callers decide whether a failure is recoverable; the
    greeting use case treats every subclass defined here as recoverable.
    """


class InvalidGenderError(GreetingError, ValueError):
    """Gender token outside the recognised ``man``/``woman`` set.

    Carries the offending raw token so the caller can surface it in the
    fallback greeting and in the warning log record. Inherits from
    ValueError so generic ``except ValueError`` handlers still apply.

    Attributes:
        gender: The raw, unmodified token that failed classification.

    Example:
        >>> from hiworld.domain.errors import InvalidGenderError
        >>> err = InvalidGenderError("other")
        >>> err.gender
        'other'
        >>> str(err)
        "invalid gender: 'other'"
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, gender: str) -> None:
        super().__init__(f"invalid gender: {gender!r}")
        self.gender = gender


__all__ = [
    "GreetingError",
    "InvalidGenderError",
]
