"""Composable validations with parameterized failure reasons."""

from validation_combinators.events import (
    LoggingObserver,
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)
from validation_combinators.fields import (
    exact_length,
    length_between,
    matches,
    numeric,
    required,
)
from validation_combinators.formatting import format_reason, placeholder_count
from validation_combinators.protocols import ValidationProtocol
from validation_combinators.report import ReportEntry, ValidationReport
from validation_combinators.results import Result
from validation_combinators.rich_observers import (
    RichFailureObserver,
    build_report_table,
    render_report,
)
from validation_combinators.suite import ValidationSuite, ValidationSuiteBuilder
from validation_combinators.validation import (
    AndValidation,
    OrValidation,
    PredicateValidation,
    Validation,
)

__all__ = [
    # Core
    "Result",
    "Validation",
    "PredicateValidation",
    "AndValidation",
    "OrValidation",
    "ValidationProtocol",
    # Reason templates
    "format_reason",
    "placeholder_count",
    # Field validations
    "required",
    "numeric",
    "length_between",
    "exact_length",
    "matches",
    # Reports and suites
    "ReportEntry",
    "ValidationReport",
    "ValidationSuite",
    "ValidationSuiteBuilder",
    # Observer pattern
    "LoggingObserver",
    "ObservableMixin",
    "ValidationEvent",
    "ValidationEventType",
    "ValidationObserver",
    # Rich output
    "RichFailureObserver",
    "build_report_table",
    "render_report",
]

__version__ = "0.1.0"
