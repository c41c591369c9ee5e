"""Composable validations.

Provides the Validation abstraction with short-circuit AND/OR combinators,
plus the predicate-backed implementation most callers construct.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from validation_combinators.results import Result

__all__ = ["Validation", "PredicateValidation", "AndValidation", "OrValidation"]

T = TypeVar("T")


class Validation(ABC, Generic[T]):
    """Abstract base class for validations over values of type T.

    Every subclass gains ``and_``/``or_`` (and the ``&``/``|`` operators),
    which build new composite validations without touching their operands.

    Example:
        zip_ok = required("Zip code", "zip") & numeric("Zip code", "zip")
        result = zip_ok.test(address)
        if not result:
            print(result.reason)
    """

    _name: str | None = None

    @property
    def name(self) -> str:
        """Name of this validation for reports and identification."""
        return self._name or self.__class__.__name__

    @abstractmethod
    def test(self, item: T) -> Result:
        """Validate an item.

        Args:
            item: Value to validate.

        Returns:
            Result.valid() or an invalid Result carrying the reason.
        """
        ...

    def __call__(self, item: T) -> Result:
        return self.test(item)

    def and_(self, other: Validation[T], *, name: str | None = None) -> Validation[T]:
        """Combine with another validation; both must pass.

        The left side runs first. If it fails its result is returned and
        ``other`` is never evaluated.
        """
        return AndValidation(self, other, name=name)

    def or_(self, other: Validation[T], *, name: str | None = None) -> Validation[T]:
        """Combine with another validation; either may pass.

        The left side runs first. If it passes ``other`` is never evaluated.
        If both fail, the result of ``other`` is returned.
        """
        return OrValidation(self, other, name=name)

    def __and__(self, other: object) -> Validation[T]:
        if not isinstance(other, Validation):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other: object) -> Validation[T]:
        if not isinstance(other, Validation):
            return NotImplemented
        return self.or_(other)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class PredicateValidation(Validation[T]):
    """Validation backed by a predicate and a reason template.

    Extractors derive the template arguments from the validated value. They
    only run when the predicate fails.

    Example:
        zip_numeric = PredicateValidation(
            lambda a: a.zip.isdigit(),
            "{0} should be numeric. [suppliedValue={1}]",
            lambda _: "Zip code",
            lambda a: a.zip,
        )
    """

    def __init__(
        self,
        predicate: Callable[[T], bool],
        reason_template: str | None = None,
        *extractors: Callable[[T], Any],
        name: str | None = None,
    ) -> None:
        """Initialize the validation.

        Args:
            predicate: Returns True when the value is valid.
            reason_template: Failure reason with ``{n}`` placeholders. May only
                be omitted for validations that never fail.
            *extractors: Functions producing placeholder arguments, in order.
            name: Optional name for reports. Defaults to the class name.

        Raises:
            TypeError: If the predicate or an extractor is not callable.
        """
        if not callable(predicate):
            raise TypeError("predicate must be callable")
        for extractor in extractors:
            if not callable(extractor):
                raise TypeError(f"extractor {extractor!r} is not callable")
        self._predicate = predicate
        self._reason_template = reason_template
        self._extractors: tuple[Callable[[T], Any], ...] = extractors
        self._name = name

    @property
    def reason_template(self) -> str | None:
        return self._reason_template

    @property
    def extractors(self) -> tuple[Callable[[T], Any], ...]:
        return self._extractors

    def test(self, item: T) -> Result:
        if self._predicate(item):
            return Result.valid()
        args = [extractor(item) for extractor in self._extractors]
        return Result.invalid(self._reason_template, *args)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return (
            f"PredicateValidation(name={self.name!r}, "
            f"reason_template={self._reason_template!r}, "
            f"extractors={len(self._extractors)})"
        )


class _BinaryValidation(Validation[T]):
    _operator = ""

    def __init__(
        self, left: Validation[T], right: Validation[T], *, name: str | None = None
    ) -> None:
        for operand in (left, right):
            if not isinstance(operand, Validation):
                raise TypeError(
                    f"Can only combine Validation instances, got {type(operand).__name__}"
                )
        self._left = left
        self._right = right
        self._name = name

    @property
    def name(self) -> str:
        return self._name or f"({self._left.name} {self._operator} {self._right.name})"

    @property
    def left(self) -> Validation[T]:
        return self._left

    @property
    def right(self) -> Validation[T]:
        return self._right


class AndValidation(_BinaryValidation[T]):
    """Passes when both sides pass; reports the leftmost failure."""

    _operator = "and"

    def test(self, item: T) -> Result:
        result = self._left.test(item)
        if not result.is_valid:
            return result
        return self._right.test(item)


class OrValidation(_BinaryValidation[T]):
    """Passes when either side passes; reports the right side's failure."""

    _operator = "or"

    def test(self, item: T) -> Result:
        result = self._left.test(item)
        if result.is_valid:
            return result
        return self._right.test(item)
