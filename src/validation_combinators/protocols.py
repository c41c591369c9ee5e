"""Validation protocols for type checking.

Structural protocol accepted wherever a validation is expected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from validation_combinators.results import Result

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ValidationProtocol(Protocol[T]):
    """Protocol for validation implementations.

    Use this for type hints when accepting any validation.
    Generic over T, the type of value being validated.
    """

    def test(self, item: T) -> Result:
        """Validate an item."""
        ...

    @property
    def name(self) -> str:
        """Name of this validation."""
        ...
