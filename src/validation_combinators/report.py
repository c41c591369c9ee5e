"""Validation reports.

Pydantic models aggregating the failures of many validations run against
the same object.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from validation_combinators.results import Result

__all__ = ["ReportEntry", "ValidationReport"]


class ReportEntry(BaseModel):
    """A single failed validation.

    Attributes:
        name: Name of the validation that failed.
        reason: Formatted failure reason.
    """

    name: str
    reason: str


class ValidationReport(BaseModel):
    """Failures collected from several validations.

    Example:
        report = ValidationReport()
        report.add("zip", zip_validation.test(address))
        report.add("city", city_validation.test(address))
        if not report.is_valid:
            print("\\n".join(report.reasons))
    """

    entries: list[ReportEntry] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when no failures were recorded."""
        return not self.entries

    @property
    def error_count(self) -> int:
        return len(self.entries)

    @property
    def reasons(self) -> list[str]:
        """Failure reasons in the order they were recorded."""
        return [entry.reason for entry in self.entries]

    def add(self, name: str, result: Result) -> ValidationReport:
        """Record a result. Valid results are not stored.

        Returns:
            Self, for method chaining.
        """
        if not result.is_valid:
            self.entries.append(ReportEntry(name=name, reason=result.reason or ""))
        return self

    def merge(self, other: ValidationReport) -> ValidationReport:
        """Merge another report into this one.

        This method mutates the current instance in-place.

        Returns:
            Self, for method chaining.
        """
        self.entries.extend(other.entries)
        return self

    def by_name(self, name: str) -> list[ReportEntry]:
        """Entries recorded for the given validation name."""
        return [entry for entry in self.entries if entry.name == name]
