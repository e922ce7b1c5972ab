"""Deterministic elemental mapping.

Rules run in a fixed order and may each add one element; the first rule to add
an element decides its position:

1. Fire: master number, reduced 1/9, or drive keywords.
2. Air: three or more 1s/3s, a time pattern (colon in a raw token), or mental keywords.
3. Earth: reduced 4/8, two or more 4s/8s, or material keywords.
4. Water: reduced 2/6, two or more 2s/6s/9s, or emotional keywords.

If nothing matched, the reduced value picks a single default element.
"""

from __future__ import annotations

from typing import Optional, Sequence

from reading_engine.models import ElementTag, FullSumResult, NumberToken
from reading_engine.signals import add_unique, count_digits, has_keywords

ELEMENT_KEYWORDS: dict[ElementTag, tuple[str, ...]] = {
    ElementTag.FIRE: ("action", "drive", "passion", "energy", "power", "intensity", "momentum"),
    ElementTag.AIR: ("time", "thought", "communication", "clarity", "perspective", "mental"),
    ElementTag.EARTH: ("money", "material", "physical", "practical", "stable", "grounded", "body"),
    ElementTag.WATER: ("emotion", "flow", "feeling", "intuition", "fluid", "deep", "heart"),
}

DEFAULT_ELEMENT_BY_REDUCED: dict[int, ElementTag] = {
    1: ElementTag.FIRE,
    2: ElementTag.WATER,
    3: ElementTag.AIR,
    4: ElementTag.EARTH,
    5: ElementTag.AIR,
    6: ElementTag.WATER,
    7: ElementTag.AIR,
    8: ElementTag.EARTH,
    9: ElementTag.WATER,
}


def map_elements(
    tokens: Sequence[NumberToken],
    sums: FullSumResult,
    context: Optional[str] = "",
) -> list[ElementTag]:
    elements: list[ElementTag] = []
    context_text = context or ""

    if sums.master or sums.reduced in (1, 9) or has_keywords(context_text, ELEMENT_KEYWORDS[ElementTag.FIRE]):
        add_unique(elements, ElementTag.FIRE)

    ones_and_threes = count_digits(tokens, "13")
    has_time_pattern = any(":" in token.raw for token in tokens)
    if ones_and_threes >= 3 or has_time_pattern or has_keywords(context_text, ELEMENT_KEYWORDS[ElementTag.AIR]):
        add_unique(elements, ElementTag.AIR)

    fours_and_eights = count_digits(tokens, "48")
    if sums.reduced in (4, 8) or fours_and_eights >= 2 or has_keywords(context_text, ELEMENT_KEYWORDS[ElementTag.EARTH]):
        add_unique(elements, ElementTag.EARTH)

    water_digits = count_digits(tokens, "269")
    if sums.reduced in (2, 6) or water_digits >= 2 or has_keywords(context_text, ELEMENT_KEYWORDS[ElementTag.WATER]):
        add_unique(elements, ElementTag.WATER)

    if not elements:
        # No default exists for reduced 0, so the result may stay empty.
        default_element = DEFAULT_ELEMENT_BY_REDUCED.get(sums.reduced)
        if default_element is not None:
            elements.append(default_element)

    return elements
