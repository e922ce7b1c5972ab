"""Full-sum numerology with master number preservation.

All values are floored to their absolute integer part, their decimal digits are
concatenated in input order, and the digit total is reduced by repeated digit
summation. 11, 22 and 33 stop the reduction as soon as they appear.

    full_sum([10, 24, 67, 144])
    digits "102467144" -> full sum 29 -> master 11

    full_sum([9, 2])
    digits "92" -> full sum 11 -> master 11
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Union

from reading_engine.models import FullSumResult

MASTER_NUMBERS = (11, 22, 33)


def is_master_number(n: int) -> bool:
    return n in MASTER_NUMBERS


def digit_sum(n: int) -> int:
    return sum(int(digit) for digit in str(n))


def reduce_number(n: int) -> tuple[int, Optional[int]]:
    """Reduce ``n`` to a single digit or a master number.

    Returns ``(reduced, master)``; ``master`` is None unless reduction halted on
    11, 22 or 33. Every pass shrinks any value >= 10, so the loop terminates.
    """
    current = abs(int(n))
    while True:
        if is_master_number(current):
            return current, current
        if current < 10:
            return current, None
        current = digit_sum(current)


def full_sum(values: Iterable[Union[int, float]]) -> FullSumResult:
    digits = "".join(str(math.floor(abs(value))) for value in values)
    if not digits:
        return FullSumResult(full_sum=0, reduced=0)

    total = sum(int(digit) for digit in digits)
    reduced, master = reduce_number(total)
    return FullSumResult(full_sum=total, reduced=reduced, master=master)
