"""Common field validations.

Factory functions returning configured PredicateValidation instances. The
``getter`` argument is either an attribute name or a callable taking the
validated object.

These checks assume a present value. Combine them with ``required`` so they
never see None:

Example:
    zip_code = required("Zip code", "zip") & numeric("Zip code", "zip")
"""

from __future__ import annotations

import re
from collections.abc import Callable
from operator import attrgetter
from typing import Any

from validation_combinators.validation import PredicateValidation

__all__ = ["required", "numeric", "length_between", "exact_length", "matches"]

Getter = str | Callable[[Any], Any]


def _resolve(getter: Getter) -> Callable[[Any], Any]:
    if isinstance(getter, str):
        return attrgetter(getter)
    if callable(getter):
        return getter
    raise TypeError(f"getter must be an attribute name or callable, got {getter!r}")


def required(label: str, getter: Getter) -> PredicateValidation[Any]:
    """Value must be present: not None and not an empty string."""
    get = _resolve(getter)
    return PredicateValidation(
        lambda item: get(item) not in (None, ""),
        "{0} is required",
        lambda _: label,
        name=f"{label} required",
    )


def numeric(label: str, getter: Getter) -> PredicateValidation[Any]:
    """Value must be a string of decimal digits."""
    get = _resolve(getter)
    return PredicateValidation(
        lambda item: str(get(item)).isdecimal(),
        "{0} should be numeric. [suppliedValue={1}]",
        lambda _: label,
        get,
        name=f"{label} numeric",
    )


def length_between(
    label: str, getter: Getter, min_length: int, max_length: int
) -> PredicateValidation[Any]:
    """Value length must fall within [min_length, max_length].

    Raises:
        ValueError: If the bounds are negative or inverted.
    """
    if min_length < 0 or max_length < min_length:
        raise ValueError(
            f"Invalid length bounds: min_length={min_length}, max_length={max_length}"
        )
    get = _resolve(getter)
    return PredicateValidation(
        lambda item: min_length <= len(get(item)) <= max_length,
        "{0} should be between {1} and {2} characters long. [suppliedValue={3}]",
        lambda _: label,
        lambda _: min_length,
        lambda _: max_length,
        get,
        name=f"{label} length",
    )


def exact_length(label: str, getter: Getter, length: int) -> PredicateValidation[Any]:
    """Value length must equal ``length``."""
    if length < 0:
        raise ValueError(f"Invalid length: {length}")
    get = _resolve(getter)
    return PredicateValidation(
        lambda item: len(get(item)) == length,
        "{0} should be exactly {1} characters long. [suppliedValue={2}]",
        lambda _: label,
        lambda _: length,
        get,
        name=f"{label} exact length",
    )


def matches(label: str, getter: Getter, pattern: str | re.Pattern[str]) -> PredicateValidation[Any]:
    """Value must fully match a regular expression."""
    compiled = re.compile(pattern)
    get = _resolve(getter)
    return PredicateValidation(
        lambda item: compiled.fullmatch(str(get(item))) is not None,
        "{0} has an invalid format. [suppliedValue={1}]",
        lambda _: label,
        get,
        name=f"{label} format",
    )
