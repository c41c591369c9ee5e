"""Reason template formatting.

Templates use positional placeholders ``{0}``, ``{1}``, ... Placeholders
without a matching argument are left as literal text and surplus arguments
are ignored. Indices with leading zeros (``{01}``) are not placeholders,
and any other braces are untouched.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

__all__ = ["format_reason", "placeholder_count"]

_PLACEHOLDER = re.compile(r"\{(0|[1-9]\d*)\}")


def format_reason(template: str, args: Sequence[Any]) -> str:
    """Substitute positional placeholders in a reason template.

    Args:
        template: Template text, e.g. ``"{0} should be numeric"``.
        args: Values for the placeholders, by index.

    Returns:
        The formatted reason string.

    Example:
        format_reason("{0} is required", ["Zip code"])  # "Zip code is required"
        format_reason("{0} and {1}", ["a"])  # "a and {1}"
    """

    def _substitute(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index < len(args):
            return str(args[index])
        return match.group(0)

    return _PLACEHOLDER.sub(_substitute, template)


def placeholder_count(template: str) -> int:
    """Number of arguments a template consumes (highest index + 1)."""
    indices = [int(m) for m in _PLACEHOLDER.findall(template)]
    return max(indices) + 1 if indices else 0
