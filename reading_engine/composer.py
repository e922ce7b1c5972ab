"""Volume 2 composer: deterministic narrative fields from a ``ReadingData``.

Every function here is a pure table lookup with a fallback, so composition
never fails for a reading the engine can produce.
"""

from __future__ import annotations

import logging

from reading_engine.models import ChakraTag, ComposedMeta, ComposedReading, ElementTag, ReadingData
from reading_engine.templates import (
    CHAKRA_RESONANCE_MULTIPLE,
    CHAKRA_RESONANCE_NEUTRAL,
    CHAKRA_RESONANCE_PARAGRAPHS,
    CORE_EQUATION_FALLBACK,
    CORE_EQUATIONS,
    ESSENCE_FALLBACK,
    ESSENCE_TEMPLATES,
    INTENTION_TEMPLATES,
    MARKER_TITLE_FALLBACK,
    MARKER_TITLES,
    MASTER_ESSENCES,
    REFLECTION_KEY_FALLBACK,
    REFLECTION_KEYS,
)

COMPOSER_VERSION = "2.0.0"

logger = logging.getLogger("reading_composer")

DEFAULT_PRIMARY_ELEMENT = ElementTag.AIR
DEFAULT_PRIMARY_CHAKRA = ChakraTag.HEART


def primary_element(data: ReadingData) -> ElementTag:
    return data.elements[0] if data.elements else DEFAULT_PRIMARY_ELEMENT


def primary_chakra(data: ReadingData) -> ChakraTag:
    return data.chakras[0] if data.chakras else DEFAULT_PRIMARY_CHAKRA


def generate_marker_title(data: ReadingData) -> str:
    reduced = data.sums.reduced
    return MARKER_TITLES.get(reduced) or MARKER_TITLE_FALLBACK.format(reduced=reduced)


def generate_core_equation_tone(data: ReadingData) -> str:
    return CORE_EQUATIONS.get(data.sums.reduced, CORE_EQUATION_FALLBACK)


def generate_essence(data: ReadingData) -> str:
    """Element/value essence, then the master-number essence, then the generic line."""
    reduced = data.sums.reduced
    essence = ESSENCE_TEMPLATES.get(primary_element(data), {}).get(reduced)
    if essence:
        return essence

    if data.sums.master in MASTER_ESSENCES:
        return MASTER_ESSENCES[data.sums.master]

    return ESSENCE_FALLBACK.format(reduced=reduced)


def generate_intention(data: ReadingData) -> str:
    return INTENTION_TEMPLATES[primary_chakra(data)]


def generate_reflection_key(data: ReadingData) -> str:
    return REFLECTION_KEYS.get(data.sums.reduced, REFLECTION_KEY_FALLBACK)


def join_chakra_names(chakras: tuple[ChakraTag, ...]) -> str:
    """Join chakra names as 'Root, Heart and Crown'."""
    names = [chakra.value for chakra in chakras]
    if len(names) <= 1:
        return "".join(names)
    return f"{', '.join(names[:-1])} and {names[-1]}"


def generate_chakra_resonance(data: ReadingData) -> str:
    chakras = data.chakras
    if not chakras:
        return CHAKRA_RESONANCE_NEUTRAL
    if len(chakras) == 1:
        return CHAKRA_RESONANCE_PARAGRAPHS[chakras[0]]
    return CHAKRA_RESONANCE_MULTIPLE.format(chakras=join_chakra_names(chakras))


def compose_reading(data: ReadingData) -> ComposedReading:
    logger.debug(
        "composing reduced=%d primary_element=%s primary_chakra=%s",
        data.sums.reduced,
        primary_element(data).value,
        primary_chakra(data).value,
    )
    return ComposedReading(
        marker_title=generate_marker_title(data),
        core_equation_tone=generate_core_equation_tone(data),
        elemental_alignment=data.elements,
        chakra_focus=data.chakras,
        chakra_resonance=generate_chakra_resonance(data),
        essence=generate_essence(data),
        intention=generate_intention(data),
        reflection_key=generate_reflection_key(data),
        meta=ComposedMeta(engine=data, version=COMPOSER_VERSION),
    )
