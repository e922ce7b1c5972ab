"""Deterministic chakra mapping."""

from __future__ import annotations

from typing import Optional, Sequence

from reading_engine.models import ChakraTag, FullSumResult, NumberToken
from reading_engine.signals import add_unique, count_digits, has_keywords

PRIMARY_CHAKRA_BY_REDUCED: dict[int, ChakraTag] = {
    1: ChakraTag.ROOT,
    2: ChakraTag.SACRAL,
    3: ChakraTag.SOLAR_PLEXUS,
    4: ChakraTag.ROOT,
    5: ChakraTag.THROAT,
    6: ChakraTag.HEART,
    7: ChakraTag.THIRD_EYE,
    8: ChakraTag.ROOT,
    9: ChakraTag.HEART,
}

# Iteration order is the order keyword matches are appended.
CHAKRA_KEYWORDS: dict[ChakraTag, tuple[str, ...]] = {
    ChakraTag.ROOT: ("survival", "safety", "security", "grounded", "foundation", "basic"),
    ChakraTag.SACRAL: ("creative", "pleasure", "sexuality", "emotion", "desire", "passion"),
    ChakraTag.SOLAR_PLEXUS: ("will", "power", "confidence", "control", "action", "direction"),
    ChakraTag.HEART: ("love", "compassion", "connection", "healing", "relationships", "balance"),
    ChakraTag.THROAT: ("expression", "communication", "voice", "truth", "speak", "authentic"),
    ChakraTag.THIRD_EYE: ("intuition", "vision", "insight", "perception", "wisdom", "awareness"),
    ChakraTag.CROWN: ("spiritual", "consciousness", "enlightenment", "divine", "unity", "transcendent"),
}

CROWN_ONES_THRESHOLD = 4
SOLAR_PLEXUS_THREES_THRESHOLD = 3
HEART_SIXES_THRESHOLD = 2


def map_chakras(
    tokens: Sequence[NumberToken],
    sums: FullSumResult,
    context: Optional[str] = "",
) -> list[ChakraTag]:
    """Map a reading to chakra tags.

    Primary chakra by reduced value first, then Crown for master numbers or
    repeated 1s, Solar Plexus for repeated 3s, Heart for repeated 6s, and
    finally one tag per chakra whose keywords appear in ``context``.
    Master values (11/22/33) and 0 have no primary chakra.
    """
    chakras: list[ChakraTag] = []
    context_text = context or ""

    primary = PRIMARY_CHAKRA_BY_REDUCED.get(sums.reduced)
    if primary is not None:
        add_unique(chakras, primary)

    if sums.master:
        add_unique(chakras, ChakraTag.CROWN)

    if count_digits(tokens, "1") >= CROWN_ONES_THRESHOLD:
        add_unique(chakras, ChakraTag.CROWN)

    if count_digits(tokens, "3") >= SOLAR_PLEXUS_THREES_THRESHOLD:
        add_unique(chakras, ChakraTag.SOLAR_PLEXUS)

    if count_digits(tokens, "6") >= HEART_SIXES_THRESHOLD:
        add_unique(chakras, ChakraTag.HEART)

    for chakra, keywords in CHAKRA_KEYWORDS.items():
        if has_keywords(context_text, keywords):
            add_unique(chakras, chakra)

    return chakras
