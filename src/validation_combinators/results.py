"""Validation result value type.

A Result is either valid (no payload) or invalid (carries a formatted reason).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from validation_combinators.formatting import format_reason

__all__ = ["Result"]


@dataclass(frozen=True)
class Result:
    """Outcome of testing one validation against one value.

    Use the factories rather than the constructor:

    Example:
        Result.valid()
        Result.invalid("{0} is required", "Zip code")
    """

    is_valid: bool
    reason: str | None = None

    def __post_init__(self) -> None:
        if self.is_valid and self.reason is not None:
            raise ValueError("A valid result cannot carry a reason")
        if not self.is_valid and not self.reason:
            raise ValueError("An invalid result requires a non-empty reason")

    @classmethod
    def valid(cls) -> Result:
        """Return the shared valid instance."""
        return _VALID

    @classmethod
    def invalid(cls, reason_template: str, *args: Any) -> Result:
        """Create an invalid result.

        Args:
            reason_template: Reason text with ``{0}``, ``{1}``, ... placeholders.
            *args: Positional values substituted into the placeholders.

        Returns:
            An invalid Result whose reason is the formatted template.

        Raises:
            TypeError: If reason_template is None or not a string.
            ValueError: If the formatted reason is empty.
        """
        if reason_template is None:
            raise TypeError("reason_template is required for an invalid result")
        if not isinstance(reason_template, str):
            raise TypeError(
                f"reason_template must be a str, got {type(reason_template).__name__}"
            )
        return cls(is_valid=False, reason=format_reason(reason_template, args))

    def __bool__(self) -> bool:
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return "Result.valid()"
        return f"Result.invalid({self.reason!r})"


_VALID = Result(is_valid=True)
