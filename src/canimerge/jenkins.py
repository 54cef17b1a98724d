from __future__ import annotations

import logging
from typing import Optional, Type, TypeVar

import requests
import typer
from pydantic import BaseModel, ValidationError

from .errors import DecodeError, RetrievalError
from .models import TestReport, View

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = logging.getLogger(__name__)


def fetch_json(url: str, debug: bool = False) -> bytes:
    try:
        resp = requests.get(url)
    except requests.RequestException as exc:
        raise RetrievalError(f"Error retrieving data from {url}. {exc}") from exc
    body = resp.content
    logger.debug("GET %s -> %s (%d bytes)", url, resp.status_code, len(body))
    if debug:
        typer.echo(f"URL: {url} BODY: {_text(body)}")
    return body


def decode_view(body: bytes, url: Optional[str] = None) -> View:
    return _decode(View, body, url)


def decode_test_report(body: bytes, url: Optional[str] = None) -> TestReport:
    return _decode(TestReport, body, url)


def _decode(model: Type[ModelT], body: bytes, url: Optional[str]) -> ModelT:
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        source = f" from {url}" if url else ""
        raise DecodeError(f"Error unmarshalling json{source}. {_first_error(exc)}") from exc


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    err = errors[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {err['msg']}" if loc else err["msg"]


def _text(body: bytes) -> str:
    return body.decode("utf-8", errors="replace")
