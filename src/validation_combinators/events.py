"""Observer pattern implementation for validation events.

Provides event types, observer protocol, and mixin for adding observer
support to suites, plus an observer that forwards events to ``logging``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "ValidationEventType",
    "ValidationEvent",
    "ValidationObserver",
    "ObservableMixin",
    "LoggingObserver",
]


class ValidationEventType(Enum):
    """Types of validation events that can be observed."""

    VALIDATION_STARTED = auto()
    """Emitted when a suite starts validating an item."""

    CHECK_PASSED = auto()
    """Emitted when a single validation in a suite passes."""

    CHECK_FAILED = auto()
    """Emitted when a single validation in a suite fails."""

    VALIDATION_COMPLETED = auto()
    """Emitted when a suite finishes validating an item."""


@dataclass
class ValidationEvent:
    """A validation event that can be observed.

    Attributes:
        event_type: The type of event that occurred.
        source: The object that emitted the event.
        data: Event-specific data dictionary.

    Example:
        event = ValidationEvent(
            event_type=ValidationEventType.CHECK_FAILED,
            source=suite,
            data={"validation_name": "zip", "reason": "Zip code is required"},
        )
    """

    event_type: ValidationEventType
    source: object
    data: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class ValidationObserver(Protocol):
    """Protocol for validation event observers.

    Example:
        class CountingObserver:
            def __init__(self) -> None:
                self.failures = 0

            def on_event(self, event: ValidationEvent) -> None:
                if event.event_type == ValidationEventType.CHECK_FAILED:
                    self.failures += 1
    """

    def on_event(self, event: ValidationEvent) -> None:
        """Handle a validation event.

        Args:
            event: The validation event to handle.
        """
        ...


class ObservableMixin:
    """Mixin class to add observer support to any class.

    Provides methods to add, remove, and notify observers of validation
    events.
    """

    _observers: list[ValidationObserver]

    def _ensure_observers(self) -> None:
        """Ensure the observers list is initialized."""
        if not hasattr(self, "_observers") or self._observers is None:
            self._observers = []

    def add_observer(self, observer: ValidationObserver) -> None:
        """Add an observer to receive validation events.

        Args:
            observer: An object implementing the ValidationObserver protocol.
        """
        self._ensure_observers()
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: ValidationObserver) -> None:
        """Remove an observer from receiving validation events."""
        self._ensure_observers()
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, event: ValidationEvent) -> None:
        """Notify all observers of a validation event."""
        self._ensure_observers()
        for observer in self._observers:
            observer.on_event(event)

    @property
    def observers(self) -> list[ValidationObserver]:
        """Get a copy of the current observers list."""
        self._ensure_observers()
        return self._observers.copy()

    def clear_observers(self) -> None:
        """Remove all observers."""
        self._ensure_observers()
        self._observers.clear()


class LoggingObserver(ValidationObserver):
    """Forward validation events to a standard library logger.

    Failed checks are logged at WARNING, everything else at DEBUG.

    Example:
        suite.add_observer(LoggingObserver())
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("validation_combinators")

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def on_event(self, event: ValidationEvent) -> None:
        data = event.data
        if event.event_type == ValidationEventType.CHECK_FAILED:
            self._logger.warning(
                "%s: %s failed: %s",
                data.get("suite_name"),
                data.get("validation_name"),
                data.get("reason"),
            )
        elif event.event_type == ValidationEventType.CHECK_PASSED:
            self._logger.debug(
                "%s: %s passed", data.get("suite_name"), data.get("validation_name")
            )
        elif event.event_type == ValidationEventType.VALIDATION_STARTED:
            self._logger.debug(
                "%s: validating with %d validations",
                data.get("suite_name"),
                data.get("validation_count", 0),
            )
        elif event.event_type == ValidationEventType.VALIDATION_COMPLETED:
            self._logger.debug(
                "%s: completed, valid=%s, errors=%d, %.3fms",
                data.get("suite_name"),
                data.get("is_valid"),
                data.get("error_count", 0),
                data.get("duration_ms", 0.0),
            )
