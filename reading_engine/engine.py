"""Volume 1 reading pipeline: input -> extract -> full sum -> map -> trace.

This module is pure: no I/O, no clock, no configuration. Identical input always
yields an identical ``ReadingData``.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from reading_engine.chakras import map_chakras
from reading_engine.elements import map_elements
from reading_engine.errors import InputValidationError, NoDataFoundError
from reading_engine.extract import extract_numbers
from reading_engine.fullsum import full_sum
from reading_engine.models import ReadingData, ReadingInput, ReadingPhase

ENGINE_VERSION = "1.0.0"
ENGINE_SIGNATURE = "NUMEROLOGY_CORE_V1"
ENGINE_VOLUME = 1

logger = logging.getLogger("reading_engine")


def _coerce_input(reading_input: Union[ReadingInput, Mapping[str, Any]]) -> ReadingInput:
    if isinstance(reading_input, ReadingInput):
        return reading_input
    return ReadingInput.model_validate(reading_input)


def build_reading(reading_input: Union[ReadingInput, Mapping[str, Any]]) -> ReadingData:
    """Build the structured reading for ``reading_input``.

    Raises:
        InputValidationError: the text field for the source type is missing or empty.
        NoDataFoundError: the text contains no numbers.
    """
    reading_input = _coerce_input(reading_input)
    trace: dict[str, Any] = {}

    source_text = reading_input.source_text
    if not source_text:
        raise InputValidationError()

    trace["sourceText"] = source_text
    trace["sourceType"] = reading_input.source_type

    tokens = extract_numbers(source_text)
    trace["extractedTokens"] = [token.to_dict() for token in tokens]

    if not tokens:
        raise NoDataFoundError()

    values = [token.value for token in tokens]
    sums = full_sum(values)
    trace["fullSumCalculation"] = {"values": values, **sums.to_dict()}

    metadata = reading_input.metadata
    context = (metadata.context if metadata else None) or ""

    elements = map_elements(tokens, sums, context)
    trace["elementMapping"] = {"context": context, "elements": [element.value for element in elements]}

    chakras = map_chakras(tokens, sums, context)
    trace["chakraMapping"] = {"context": context, "chakras": [chakra.value for chakra in chakras]}

    # cycle/marker belong to later volumes and stay unset here.
    phase = ReadingPhase(volume=ENGINE_VOLUME)
    trace["phaseAssignment"] = phase.to_dict()
    trace["engineVersion"] = ENGINE_VERSION

    if metadata is not None:
        caller_metadata = {"locale": metadata.locale}
        if metadata.timestamp:
            caller_metadata["timestamp"] = metadata.timestamp
        trace["metadata"] = caller_metadata

    logger.debug(
        "reading built tokens=%d full_sum=%d reduced=%d elements=%s chakras=%s",
        len(tokens),
        sums.full_sum,
        sums.reduced,
        [element.value for element in elements],
        [chakra.value for chakra in chakras],
    )

    return ReadingData(
        tokens=tuple(tokens),
        sums=sums,
        elements=tuple(elements),
        chakras=tuple(chakras),
        phase=phase,
        trace=trace,
    )
