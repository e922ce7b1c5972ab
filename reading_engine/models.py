"""Reading data contracts shared by the engine, the composer and the API.

Field names are snake_case in Python and camelCase on the wire; every model is
frozen so a reading can be handed to persistence or transport as an opaque
value.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

MasterNumber = Literal[11, 22, 33]

REDUCED_VALUES = frozenset({0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 11, 22, 33})

# Date and time to the second, optional fraction, and a required "Z" or offset.
ISO_TIMESTAMP_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:\d{2})"
)
_AWARE_DATETIME = TypeAdapter(AwareDatetime)


class ElementTag(str, Enum):
    FIRE = "🜂 Fire"
    AIR = "🜁 Air"
    EARTH = "🜃 Earth"
    WATER = "🜄 Water"

    @property
    def label(self) -> str:
        return self.value.split(" ", 1)[1]

    @classmethod
    def _missing_(cls, value: object) -> Optional["ElementTag"]:
        # Accept the bare name ("Air", "air") from callers that strip the glyph.
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.label.lower() == wanted:
                    return member
        return None


class ChakraTag(str, Enum):
    ROOT = "Root"
    SACRAL = "Sacral"
    SOLAR_PLEXUS = "Solar Plexus"
    HEART = "Heart"
    THROAT = "Throat"
    THIRD_EYE = "Third Eye"
    CROWN = "Crown"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict using the external (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class NumberToken(_FrozenModel):
    value: Union[int, float]
    raw: str
    index: int = Field(..., ge=0)


class FullSumResult(_FrozenModel):
    full_sum: int = Field(..., ge=0, alias="fullSum")
    reduced: int
    master: Optional[MasterNumber] = None

    @model_validator(mode="after")
    def validate_master_consistency(self) -> "FullSumResult":
        if self.reduced not in REDUCED_VALUES:
            raise ValueError(f"reduced must be 0-9, 11, 22 or 33 (got {self.reduced}).")
        is_master = self.reduced in (11, 22, 33)
        if is_master and self.master != self.reduced:
            raise ValueError("master must equal reduced when reduced is a master number.")
        if not is_master and self.master is not None:
            raise ValueError("master is only allowed when reduced is a master number.")
        return self


class ReadingPhase(_FrozenModel):
    volume: int = 1
    cycle: Optional[int] = None
    marker: Optional[int] = None


class ReadingData(_FrozenModel):
    tokens: tuple[NumberToken, ...]
    sums: FullSumResult
    elements: tuple[ElementTag, ...]
    chakras: tuple[ChakraTag, ...]
    phase: ReadingPhase = Field(default_factory=ReadingPhase)
    trace: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_ordering(self) -> "ReadingData":
        for position, token in enumerate(self.tokens):
            if token.index != position:
                raise ValueError(f"token indexes must be contiguous from 0 (position {position} has {token.index}).")
        if len(set(self.elements)) != len(self.elements):
            raise ValueError("elements must not contain duplicates.")
        if len(set(self.chakras)) != len(self.chakras):
            raise ValueError("chakras must not contain duplicates.")
        return self


class ReadingMetadata(_FrozenModel):
    context: Optional[str] = None
    locale: str = "en-AU"
    timestamp: Optional[str] = None

    @field_validator("timestamp")
    @classmethod
    def validate_timestamp(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        if not ISO_TIMESTAMP_PATTERN.fullmatch(value):
            raise ValueError("timestamp must be an ISO-8601 date-time with a timezone (e.g. 2025-11-21T10:24:00Z).")
        try:
            _AWARE_DATETIME.validate_python(value)
        except ValidationError as exc:
            raise ValueError(f"timestamp is not a valid date-time: {value}") from exc
        return value


class ReadingInput(_FrozenModel):
    source_type: Literal["text", "image"] = Field(..., alias="sourceType")
    raw_text: Optional[str] = Field(None, alias="rawText")
    ocr_text: Optional[str] = Field(None, alias="ocrText")
    metadata: Optional[ReadingMetadata] = None

    @property
    def source_text(self) -> Optional[str]:
        return self.ocr_text if self.source_type == "image" else self.raw_text


class ComposedMeta(_FrozenModel):
    engine: ReadingData
    version: str


class ComposedReading(_FrozenModel):
    marker_title: str = Field(..., alias="markerTitle")
    core_equation_tone: str = Field(..., alias="coreEquationTone")
    elemental_alignment: tuple[ElementTag, ...] = Field(..., alias="elementalAlignment")
    chakra_focus: tuple[ChakraTag, ...] = Field(..., alias="chakraFocus")
    chakra_resonance: str = Field(..., alias="chakraResonance")
    essence: str
    intention: str
    reflection_key: str = Field(..., alias="reflectionKey")
    meta: ComposedMeta
