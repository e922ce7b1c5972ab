"""Numeric token extraction from free-form text."""

from __future__ import annotations

import logging
import math
import re
from typing import Union

from reading_engine.models import NumberToken

logger = logging.getLogger("reading_engine")

# ASCII digits only; separators such as ':' '%' or bullets are never consumed.
NUMBER_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)?")

# Longest integer part a token may carry (CPython's default int/str digit limit).
MAX_TOKEN_DIGITS = 4300


def parse_number(raw: str) -> Union[int, float]:
    """Parse a matched token; integral decimals such as "10.0" collapse to int."""
    integer_part = raw.split(".", 1)[0]
    if len(integer_part) > MAX_TOKEN_DIGITS:
        raise OverflowError(f"numeric token longer than {MAX_TOKEN_DIGITS} digits")
    if "." not in raw:
        return int(raw)
    value = float(raw)
    if not math.isfinite(value):
        raise OverflowError(f"numeric token out of range: {raw[:16]}...")
    if value.is_integer():
        return int(value)
    return value


def extract_numbers(text: str | None) -> list[NumberToken]:
    """Return the numeric tokens of ``text`` in left-to-right order.

    "10:24 • 67% • 144 likes" yields 10, 24, 67 and 144 with indexes 0-3.
    Empty or missing text yields an empty list. Tokens whose integer part is
    longer than ``MAX_TOKEN_DIGITS`` digits, or decimals too large for a float,
    are dropped; a text holding only such tokens therefore has no numbers.
    """
    tokens: list[NumberToken] = []
    if not text:
        return tokens

    for match in NUMBER_PATTERN.finditer(text):
        raw = match.group(0)
        try:
            value = parse_number(raw)
        except (ValueError, OverflowError):
            logger.debug("Skipping unparsable numeric token at offset %d", match.start())
            continue
        tokens.append(NumberToken(value=value, raw=raw, index=len(tokens)))

    return tokens
