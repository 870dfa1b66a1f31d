"""Greeting use case: build the line, recovering from invalid gender input."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.behaviors import build_fallback_greeting, build_greeting, compose_message
from ..domain.errors import InvalidGenderError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GreetingOutcome:
    """Resolved greeting line plus the rejected gender token, if any.

    Attributes:
        message: Complete line to emit, suffix included.
        invalid_gender: Raw gender token that failed classification, or None
            when the greeting was built without falling back.
    """

    message: str
    invalid_gender: str | None = None

    @property
    def recovered(self) -> bool:
        return self.invalid_gender is not None


def resolve_greeting(name: str, gender: str | None = None) -> GreetingOutcome:
    """Build the greeting line, falling back when the gender is invalid.

    An invalid gender never aborts the greeting: the failure is logged at
    WARNING level with the raw token and the unqualified greeting is
    annotated with it instead.

    Args:
        name: Name of the person to greet.
        gender: Optional raw gender token.

    Returns:
        GreetingOutcome carrying the final line.

    Example:
        >>> resolve_greeting("Alice", "woman").message
        'Hi, Ms. Alice, new world!!'
        >>> outcome = resolve_greeting("Charlie", "other")
        >>> outcome.message
        'Hi, Charlie (invalid gender: other), new world!!'
        >>> outcome.invalid_gender
        'other'
    """
    try:
        greeting = build_greeting(name, gender)
    except InvalidGenderError as exc:
        logger.warning("Invalid gender %r, using default greeting", exc.gender, extra={"gender": exc.gender})
        return GreetingOutcome(
            message=compose_message(build_fallback_greeting(name, exc.gender)),
            invalid_gender=exc.gender,
        )
    return GreetingOutcome(message=compose_message(greeting))


__all__ = [
    "GreetingOutcome",
    "resolve_greeting",
]
