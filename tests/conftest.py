"""Shared fixtures, domain classes and Hypothesis strategies for tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest
from hypothesis import strategies as st

from validation_combinators import PredicateValidation, Result, Validation

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

# Reason text without braces, so it never contains placeholders
reasons = st.text(
    min_size=1,
    max_size=100,
    alphabet=st.characters(blacklist_characters="{}", blacklist_categories=("Cs",)),
)

optional_zips = st.one_of(st.none(), st.text(max_size=10))

booleans = st.booleans()


# -----------------------------------------------------------------------------
# Test Domain Classes
# -----------------------------------------------------------------------------


@dataclass
class Address:
    """Simple domain object for validation tests."""

    zip: str | None = None
    city: str | None = None


# -----------------------------------------------------------------------------
# Test Validation Classes
# -----------------------------------------------------------------------------


class ExplodingValidation(Validation[Any]):
    """Validation that raises if it is ever evaluated."""

    def __init__(self, name: str = "exploding") -> None:
        self._name = name

    def test(self, item: Any) -> Result:
        raise AssertionError(f"{self.name} should not have been evaluated")


class CountingValidation(Validation[Any]):
    """Validation with a fixed outcome that counts its evaluations."""

    def __init__(self, outcome: bool, reason: str = "counted failure", name: str = "counting") -> None:
        self._outcome = outcome
        self._reason = reason
        self._name = name
        self.calls = 0

    def test(self, item: Any) -> Result:
        self.calls += 1
        return Result.valid() if self._outcome else Result.invalid(self._reason)


def constant(outcome: bool, reason: str = "failed", name: str | None = None) -> PredicateValidation[Any]:
    """Predicate validation that always returns ``outcome``."""
    return PredicateValidation(lambda _: outcome, reason, name=name)


def zip_required() -> PredicateValidation[Address]:
    return PredicateValidation(
        lambda d: d.zip is not None and d.zip != "",
        "Zip code is required",
        name="zip required",
    )


def zip_length() -> PredicateValidation[Address]:
    return PredicateValidation(
        lambda d: len(d.zip) == 5,
        "{0} should be numeric. [suppliedValue={1}]",
        lambda _: "Zip code",
        lambda d: d.zip,
        name="zip length",
    )


# -----------------------------------------------------------------------------
# Pytest Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def address() -> Address:
    """Create a fully populated Address."""
    return Address(zip="12345", city="Springfield")


@pytest.fixture
def empty_address() -> Address:
    """Create an Address with no fields set."""
    return Address()
