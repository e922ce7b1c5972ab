"""Digit and keyword signals shared by the element and chakra classifiers."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Sequence, TypeVar, Union

from reading_engine.models import NumberToken

T = TypeVar("T")


def render_value(value: Union[int, float]) -> str:
    """Positional decimal rendering of a token value.

    10.0 -> "10", 98.6 -> "98.6", 0.000001 -> "0.000001" (never exponent form).
    """
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    return str(value)


def count_digits(tokens: Sequence[NumberToken], digits: str) -> int:
    """Total occurrences of each character in ``digits`` across all token values."""
    total = 0
    for token in tokens:
        rendered = render_value(token.value)
        total += sum(rendered.count(digit) for digit in digits)
    return total


def has_keywords(text: str | None, keywords: Iterable[str]) -> bool:
    lowered = (text or "").lower()
    return any(keyword in lowered for keyword in keywords)


def add_unique(tags: list[T], tag: T) -> None:
    # Keeps first-insertion order; index 0 is the primary tag.
    if tag not in tags:
        tags.append(tag)
