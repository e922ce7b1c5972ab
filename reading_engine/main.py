#!/usr/bin/env python3
"""Numerology reading backend (FastAPI).

- /v1/parse: input -> structured reading (Volume 1 engine)
- /v1/compose: structured reading -> narrative (Volume 2 composer)
- /v1/read: both in one call
"""

import hashlib
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional
from uuid import uuid4

# Support both `uvicorn reading_engine.main:app` (repo root) and
# `uvicorn main:app` (package directory) execution contexts.
if __package__ is None or __package__ == "":
    sys.path.append(str(Path(__file__).resolve().parent.parent))

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from reading_engine import config
from reading_engine.composer import COMPOSER_VERSION, compose_reading
from reading_engine.engine import ENGINE_SIGNATURE, ENGINE_VERSION, build_reading
from reading_engine.engine_integrity import validate_engine_integrity
from reading_engine.errors import ReadingEngineError
from reading_engine.models import ReadingData, ReadingInput

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s - %(message)s",
)

logger = logging.getLogger("reading_api")
reading_audit_logger = logging.getLogger("reading_audit")

ENGINE_INTEGRITY_OK = validate_engine_integrity()

# Body validation failures are reported with the route's own error code.
VALIDATION_ERROR_CODES = {
    "/v1/parse": "PARSE_ERROR",
    "/v1/compose": "COMPOSE_ERROR",
    "/v1/read": "READ_ERROR",
}


def _utc_iso_now() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def _canonical_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, sort_keys=True, separators=(",", ":"))


def _sha256_hex(value: Any) -> str:
    return hashlib.sha256(_canonical_json(value).encode("utf-8")).hexdigest()


def _resolve_request_id(request: Optional[Request]) -> str:
    if request is not None:
        for header in ("x-request-id", "x-correlation-id"):
            value = (request.headers.get(header) or "").strip()
            if value:
                return value
    return str(uuid4())


def _emit_reading_audit_event(*, request_id: str, engine_payload: dict[str, Any], endpoint: str) -> dict[str, Any]:
    sums = engine_payload.get("sums", {})
    event = {
        "request_id": request_id,
        "reading_hash": _sha256_hex(engine_payload),
        "reduced": sums.get("reduced"),
        "engine_version": ENGINE_VERSION,
        "composer_version": COMPOSER_VERSION,
        "timestamp_utc": _utc_iso_now(),
        "endpoint": endpoint,
    }
    reading_audit_logger.info(_canonical_json(event))
    return event


def _error_response(message: str, code: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": {"error": message, "code": code}},
    )


def _apply_default_locale(reading_input: ReadingInput) -> ReadingInput:
    metadata = reading_input.metadata
    if metadata is None or "locale" in metadata.model_fields_set:
        return reading_input
    localized = metadata.model_copy(update={"locale": config.DEFAULT_LOCALE})
    return reading_input.model_copy(update={"metadata": localized})


app = FastAPI(title="Numerology Reading Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials="*" not in config.ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    code = VALIDATION_ERROR_CODES.get(request.url.path, "VALIDATION_ERROR")
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()) if part != 'body')}: {error.get('msg', 'invalid')}"
        for error in errors
    ) or "invalid request body"
    logger.warning("Rejected %s body: %s", request.url.path, message)
    return _error_response(message, code)


@app.exception_handler(ReadingEngineError)
async def handle_reading_engine_error(request: Request, exc: ReadingEngineError) -> JSONResponse:
    logger.warning("Reading failed on %s: %s (%s)", request.url.path, exc.message, exc.code)
    return _error_response(exc.message, exc.code)


# ------------------------------------------------------------------------------
# Request schemas
# ------------------------------------------------------------------------------
class ComposeRequest(BaseModel):
    data: ReadingData = Field(..., description="Structured reading produced by /v1/parse")


# ------------------------------------------------------------------------------
# API endpoints: Health Check
# ------------------------------------------------------------------------------
@app.get("/health")
def health():
    return {
        "status": "ok",
        "engine_version": ENGINE_VERSION,
        "engine_signature": ENGINE_SIGNATURE,
        "composer_version": COMPOSER_VERSION,
        "engine_integrity": ENGINE_INTEGRITY_OK,
    }


# ------------------------------------------------------------------------------
# API endpoints: Readings
# ------------------------------------------------------------------------------
@app.post("/v1/parse")
def parse_reading(reading_input: ReadingInput):
    engine = build_reading(_apply_default_locale(reading_input))
    return {"success": True, "data": engine.to_dict()}


@app.post("/v1/compose")
def compose(request_body: ComposeRequest):
    composed = compose_reading(request_body.data)
    return {"success": True, "data": composed.to_dict()}


@app.post("/v1/read")
def read(reading_input: ReadingInput, request: Request):
    engine = build_reading(_apply_default_locale(reading_input))
    composed = compose_reading(engine)
    engine_payload = engine.to_dict()
    _emit_reading_audit_event(
        request_id=_resolve_request_id(request),
        engine_payload=engine_payload,
        endpoint="/v1/read",
    )
    return {
        "success": True,
        "data": {
            "engine": engine_payload,
            "composed": composed.to_dict(),
        },
    }

