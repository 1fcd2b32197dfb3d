"""FastAPI wrapper for the class-to-CSS converter."""

from __future__ import annotations

import importlib.metadata
import json
import logging
import os
import time
import uuid
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, ValidationError

from core.cheatsheet.arbitrary import ARBITRARY_PROPERTIES
from core.cheatsheet.loader import default_cheatsheet
from core.cheatsheet.models import BREAKPOINT_KEYS, PSEUDO_KEYS
from core.convert.engine import convert, docs_search_url
from core.convert.tokenizer import split_tokens
from core.serialize.css_object import css_to_object_literal
from core.utils.errors import UnknownBreakpointError

app = FastAPI(title="tailwind-to-css API", version="0.1.0")
logger = logging.getLogger("twcss.api")

REQUEST_ID_HEADER = "X-Twcss-Request-Id"
_DEFAULT_MAX_INPUT_CHARS = 10_000


class ConvertRequest(BaseModel):
    """Body of a conversion request."""

    model_config = ConfigDict(extra="forbid")

    classes: str


class ApiRequestError(Exception):
    def __init__(
        self,
        *,
        status_code: int,
        error_code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.detail = detail or {}


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    """Ensure every response has a request id header."""

    request_id = uuid.uuid4().hex
    request.state.request_id = request_id
    try:
        response = await call_next(request)
    except Exception:  # noqa: BLE001
        _log_event(
            logging.ERROR,
            "error",
            request_id,
            error_code="INTERNAL_ERROR",
            status_code=500,
            failure_stage="middleware",
        )
        response = _error_response(
            status_code=500,
            error_code="INTERNAL_ERROR",
            message="internal server error",
            request_id=request_id,
            detail={"path": request.url.path},
        )
    response.headers.setdefault(REQUEST_ID_HEADER, request_id)
    return response


@app.get("/healthz")
async def healthz() -> dict[str, str]:
    """Liveness endpoint."""

    return {"status": "ok"}


@app.get("/v1/meta")
async def meta_v1(request: Request) -> JSONResponse:
    """Metadata endpoint describing supported modifiers and aliases."""

    request_id = _request_id_from_request(request)
    if not _meta_enabled():
        return _error_response(
            status_code=404,
            error_code="NOT_FOUND",
            message="meta endpoint is disabled",
            request_id=request_id,
            detail={"path": request.url.path},
        )

    payload = {
        "breakpoints": list(BREAKPOINT_KEYS),
        "pseudo_classes": list(PSEUDO_KEYS),
        "arbitrary_properties": dict(ARBITRARY_PROPERTIES),
        "row_count": len(default_cheatsheet()),
        "max_input_chars": _max_input_chars(),
        "version": _package_version(),
    }
    return JSONResponse(
        status_code=200,
        headers={REQUEST_ID_HEADER: request_id},
        content=payload,
    )


@app.post("/v1/convert")
async def convert_v1(request: Request) -> JSONResponse:
    """Convert a class string into CSS, not-found tokens and a JSS object."""

    request_started = time.perf_counter()
    request_id = _request_id_from_request(request)
    failure_stage = "parse_body"

    try:
        body = await request.body()
        convert_request = _load_convert_request(body)

        failure_stage = "validate_inputs"
        max_input_chars = _max_input_chars()
        if len(convert_request.classes) > max_input_chars:
            raise ApiRequestError(
                status_code=413,
                error_code="INPUT_TOO_LARGE",
                message="classes input is too large",
                detail={"max_input_chars": max_input_chars},
            )

        _log_event(
            logging.INFO,
            "start",
            request_id,
            input_chars=len(convert_request.classes),
            token_count=len(split_tokens(convert_request.classes)),
        )

        failure_stage = "convert"
        result = convert(convert_request.classes)

        failure_stage = "serialize"
        jss = css_to_object_literal(result.result_css)
    except ApiRequestError as exc:
        _log_event(
            logging.ERROR,
            "error",
            request_id,
            error_code=exc.error_code,
            status_code=exc.status_code,
            failure_stage=failure_stage,
        )
        return _error_response(
            status_code=exc.status_code,
            error_code=exc.error_code,
            message=exc.message,
            request_id=request_id,
            detail=exc.detail,
        )
    except UnknownBreakpointError as exc:
        _log_event(
            logging.ERROR,
            "error",
            request_id,
            error_code="INTERNAL_ERROR",
            status_code=500,
            failure_stage=failure_stage,
            breakpoint=exc.breakpoint,
        )
        return _error_response(
            status_code=500,
            error_code="INTERNAL_ERROR",
            message="lookup table is missing a breakpoint template",
            request_id=request_id,
            detail={"breakpoint": exc.breakpoint},
        )

    payload = result.to_payload()
    payload["notFoundLinks"] = {token: docs_search_url(token) for token in result.not_found}
    payload["jss"] = jss

    _log_event(
        logging.INFO,
        "done",
        request_id,
        not_found_count=len(result.not_found),
        jss_available=jss is not None,
        total_ms=int((time.perf_counter() - request_started) * 1000),
    )
    return JSONResponse(
        status_code=200,
        headers={REQUEST_ID_HEADER: request_id},
        content=payload,
    )


def _load_convert_request(body: bytes) -> ConvertRequest:
    try:
        raw = json.loads(body.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise ApiRequestError(
            status_code=400,
            error_code="INVALID_JSON",
            message="request body must be UTF-8 JSON",
        ) from exc
    except json.JSONDecodeError as exc:
        raise ApiRequestError(
            status_code=400,
            error_code="INVALID_JSON",
            message="request body must be valid JSON",
            detail={"error": str(exc)},
        ) from exc

    if not isinstance(raw, dict):
        raise ApiRequestError(
            status_code=400,
            error_code="INVALID_JSON",
            message="request body must be a JSON object",
        )

    try:
        return ConvertRequest.model_validate(raw)
    except ValidationError as exc:
        raise ApiRequestError(
            status_code=422,
            error_code="INVALID_REQUEST",
            message="request body does not match schema",
            detail={"errors": [error["msg"] for error in exc.errors()]},
        ) from exc


def _request_id_from_request(request: Request) -> str:
    request_id = getattr(request.state, "request_id", None)
    if isinstance(request_id, str) and request_id:
        return request_id
    generated = uuid.uuid4().hex
    request.state.request_id = generated
    return generated


def _meta_enabled() -> bool:
    raw = os.getenv("TWCSS_ENABLE_META", "1").strip().lower()
    return raw not in {"0", "false", "off", "no"}


def _max_input_chars() -> int:
    raw = os.getenv("TWCSS_MAX_INPUT_CHARS")
    if raw is None:
        return _DEFAULT_MAX_INPUT_CHARS
    try:
        parsed = int(raw)
    except ValueError:
        return _DEFAULT_MAX_INPUT_CHARS
    return parsed if parsed > 0 else _DEFAULT_MAX_INPUT_CHARS


def _package_version() -> str:
    try:
        return importlib.metadata.version("tailwind-to-css")
    except importlib.metadata.PackageNotFoundError:
        return app.version


def _error_response(
    *,
    status_code: int,
    error_code: str,
    message: str,
    request_id: str,
    detail: dict[str, Any] | None = None,
) -> JSONResponse:
    payload_detail = dict(detail or {})
    payload_detail["request_id"] = request_id

    return JSONResponse(
        status_code=status_code,
        headers={REQUEST_ID_HEADER: request_id},
        content={
            "error_code": error_code,
            "message": message,
            "detail": payload_detail,
        },
    )


def _dump_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, separators=(",", ":"))


def _log_event(level: int, event: str, request_id: str, **fields: Any) -> None:
    payload = {
        "event": event,
        "request_id": request_id,
        **fields,
    }
    logger.log(level, _dump_json(payload))
