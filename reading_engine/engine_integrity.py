from reading_engine.composer import COMPOSER_VERSION
from reading_engine.engine import ENGINE_SIGNATURE, ENGINE_VERSION
from reading_engine.models import ChakraTag, ElementTag
from reading_engine.templates import (
    CHAKRA_RESONANCE_PARAGRAPHS,
    CORE_EQUATIONS,
    ESSENCE_TEMPLATES,
    INTENTION_TEMPLATES,
    MARKER_TITLES,
    MASTER_ESSENCES,
    NARRATIVE_KEYS,
    REFLECTION_KEYS,
)

EXPECTED_VERSION = "1.0.0"
EXPECTED_SIGNATURE = "NUMEROLOGY_CORE_V1"
EXPECTED_COMPOSER_VERSION = "2.0.0"


def _template_coverage_errors() -> list[str]:
    errors: list[str] = []

    for name, table in (
        ("MARKER_TITLES", MARKER_TITLES),
        ("CORE_EQUATIONS", CORE_EQUATIONS),
        ("REFLECTION_KEYS", REFLECTION_KEYS),
    ):
        missing = [key for key in NARRATIVE_KEYS if key not in table]
        if missing:
            errors.append(f"{name} missing keys: {missing}")

    for name, table in (
        ("INTENTION_TEMPLATES", INTENTION_TEMPLATES),
        ("CHAKRA_RESONANCE_PARAGRAPHS", CHAKRA_RESONANCE_PARAGRAPHS),
    ):
        missing = [chakra.value for chakra in ChakraTag if chakra not in table]
        if missing:
            errors.append(f"{name} missing chakras: {missing}")

    for element, entries in ESSENCE_TEMPLATES.items():
        if not isinstance(element, ElementTag):
            errors.append(f"ESSENCE_TEMPLATES has non-element key: {element!r}")
        unknown = [key for key in entries if key not in NARRATIVE_KEYS]
        if unknown:
            errors.append(f"ESSENCE_TEMPLATES[{element}] has unknown values: {unknown}")

    if sorted(MASTER_ESSENCES) != [11, 22, 33]:
        errors.append("MASTER_ESSENCES must cover exactly 11, 22 and 33.")

    return errors


# NOTE:
# Versions and signature are hard-locked.
# Any promotion requires manual update of EXPECTED_* constants.
def validate_engine_integrity() -> bool:
    errors: list[str] = []

    if ENGINE_VERSION != EXPECTED_VERSION:
        errors.append(f"Version mismatch: {ENGINE_VERSION} != {EXPECTED_VERSION}")

    if ENGINE_SIGNATURE != EXPECTED_SIGNATURE:
        errors.append("Engine structural signature mismatch.")

    if COMPOSER_VERSION != EXPECTED_COMPOSER_VERSION:
        errors.append(f"Composer version mismatch: {COMPOSER_VERSION} != {EXPECTED_COMPOSER_VERSION}")

    errors.extend(_template_coverage_errors())

    if errors:
        raise RuntimeError("ENGINE INTEGRITY FAILURE:\n" + "\n".join(errors))

    return True
