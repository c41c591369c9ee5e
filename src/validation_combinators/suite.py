"""Validation suites.

Runs an ordered set of named validations against one object and collects
the failures into a ValidationReport.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from validation_combinators.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
)
from validation_combinators.fields import Getter, required
from validation_combinators.report import ValidationReport
from validation_combinators.results import Result
from validation_combinators.validation import Validation

__all__ = ["ValidationSuite", "ValidationSuiteBuilder"]

T = TypeVar("T")


class ValidationSuite(ObservableMixin, Generic[T]):
    """Runs several validations and aggregates their failures.

    Unlike ``and_``, which stops at the first failure, a suite runs every
    validation (unless ``fail_fast`` is set) so that one call yields a full
    error report.

    Supports the Observer pattern - add observers to receive
    VALIDATION_STARTED, CHECK_PASSED, CHECK_FAILED and VALIDATION_COMPLETED
    events.

    Example:
        suite = ValidationSuite([
            required("Zip code", "zip") & numeric("Zip code", "zip"),
            required("City", "city"),
        ])
        report = suite.run(address)
        for reason in report.reasons:
            print(reason)
    """

    def __init__(
        self,
        validations: list[Validation[T]] | None = None,
        *,
        name: str = "suite",
        fail_fast: bool = False,
    ) -> None:
        """Initialize the suite.

        Args:
            validations: Validations to run, in order. Defaults to empty list.
            name: Name for this suite. Defaults to "suite".
            fail_fast: If True, stop after the first failing validation.
        """
        self._validations: list[Validation[T]] = []
        self._name = name
        self._fail_fast = fail_fast
        for validation in validations or []:
            self.add_validation(validation)

    @property
    def name(self) -> str:
        return self._name

    @property
    def fail_fast(self) -> bool:
        return self._fail_fast

    def run(self, item: T) -> ValidationReport:
        """Test every validation against ``item``.

        Args:
            item: Object to validate.

        Returns:
            ValidationReport with one entry per failed validation.
        """
        start_time = time.perf_counter()

        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.VALIDATION_STARTED,
                source=self,
                data={
                    "item": item,
                    "suite_name": self._name,
                    "validation_count": len(self._validations),
                },
            )
        )

        report = ValidationReport()

        for validation in self._validations:
            result = validation.test(item)
            report.add(validation.name, result)
            self.notify(
                ValidationEvent(
                    event_type=(
                        ValidationEventType.CHECK_PASSED
                        if result.is_valid
                        else ValidationEventType.CHECK_FAILED
                    ),
                    source=self,
                    data={
                        "item": item,
                        "suite_name": self._name,
                        "validation_name": validation.name,
                        "reason": result.reason,
                    },
                )
            )

            if self._fail_fast and not result.is_valid:
                break

        duration_ms = (time.perf_counter() - start_time) * 1000

        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.VALIDATION_COMPLETED,
                source=self,
                data={
                    "item": item,
                    "suite_name": self._name,
                    "is_valid": report.is_valid,
                    "error_count": report.error_count,
                    "duration_ms": duration_ms,
                },
            )
        )

        return report

    def add_validation(self, validation: Validation[T]) -> None:
        """Append a validation. Names need not be unique.

        Raises:
            TypeError: If ``validation`` is not a Validation.
        """
        if not isinstance(validation, Validation):
            raise TypeError(f"Expected a Validation, got {type(validation).__name__}")
        self._validations.append(validation)

    @property
    def validations(self) -> list[Validation[T]]:
        """Get copy of validations list."""
        return self._validations.copy()

    @property
    def validation_names(self) -> list[str]:
        """Names as they will appear in report entries, in run order."""
        return [v.name for v in self._validations]

    def __len__(self) -> int:
        return len(self._validations)

    def __repr__(self) -> str:
        return (
            f"ValidationSuite(name={self._name!r}, validations={len(self._validations)}, "
            f"fail_fast={self._fail_fast})"
        )


FieldCheck = Callable[[str, Getter], Validation[Any]]


class ValidationSuiteBuilder(Generic[T]):
    """Builds a suite with one composed validation per field.

    ``require`` joins ``required(label, getter)`` and each further check with
    ``&``, so the checks after it never see a missing value and the report
    holds at most one reason per field. Checks are field factories taking
    ``(label, getter)``; bind extra arguments with ``functools.partial``.

    Example:
        suite = (
            ValidationSuiteBuilder[Address]("address")
            .require("Zip code", "zip", numeric, partial(exact_length, length=5))
            .require("City", "city")
            .build()
        )
    """

    def __init__(self, name: str = "suite") -> None:
        self._validations: list[Validation[T]] = []
        self._name = name
        self._fail_fast = False

    def require(
        self, label: str, getter: Getter, *checks: FieldCheck
    ) -> ValidationSuiteBuilder[T]:
        """Add a validation for a mandatory field, named after ``label``.

        Returns:
            Self for method chaining.
        """
        validation: Validation[Any] = required(label, getter)
        for check in checks:
            validation = validation & check(label, getter)
        self._validations.append(_Named(validation, label))
        return self

    def add(self, validation: Validation[T]) -> ValidationSuiteBuilder[T]:
        """Add an object-level validation as is. Returns self for chaining."""
        self._validations.append(validation)
        return self

    def fail_fast(self, enabled: bool = True) -> ValidationSuiteBuilder[T]:
        """Stop at the first failing field. Returns self for chaining."""
        self._fail_fast = enabled
        return self

    def build(self) -> ValidationSuite[T]:
        return ValidationSuite(
            validations=self._validations.copy(),
            name=self._name,
            fail_fast=self._fail_fast,
        )


class _Named(Validation[T]):
    """Delegates to another validation under a different name."""

    def __init__(self, inner: Validation[T], name: str) -> None:
        self._inner = inner
        self._name = name

    def test(self, item: T) -> Result:
        return self._inner.test(item)
