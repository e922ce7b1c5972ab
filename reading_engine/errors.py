"""Failure kinds raised by the reading pipeline."""

from __future__ import annotations


class ReadingEngineError(Exception):
    code = "READING_ENGINE_ERROR"
    default_message = "reading generation failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InputValidationError(ReadingEngineError):
    """The text field required by the input's source type is missing or empty."""

    code = "INPUT_VALIDATION_ERROR"
    default_message = "no text provided for reading generation"


class NoDataFoundError(ReadingEngineError):
    """The source text was readable but contained no numeric tokens."""

    code = "NO_DATA_FOUND"
    default_message = "no numbers found in input text"
