"""JSON encoding of request bodies and decoding of service responses."""
from __future__ import annotations
import json
from typing import Any, Optional, Type, TypeVar
import requests
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import ValhallaBuildError, ValhallaDecodeError, ValhallaServiceError
from .models import ErrorResponse

ModelT = TypeVar("ModelT", bound=BaseModel)


def encode_body(body: Any) -> Optional[bytes]:
    """Encode a request body to JSON bytes.

    Pydantic models drop every field left at ``None`` so that unset options are
    absent from the payload, while explicit zero/false values are kept. NaN and
    infinite floats are rejected rather than sent as ``null``.

    Args:
        body: Pydantic model, JSON-serializable value, or None.

    Returns:
        UTF-8 JSON bytes, or None when there is no body to send.

    Raises:
        ValhallaBuildError: If the value cannot be encoded.
    """
    if body is None:
        return None
    try:
        if isinstance(body, BaseModel):
            body = body.model_dump(by_alias=True, exclude_none=True)
        return json.dumps(body, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError, PydanticSerializationError) as exc:
        raise ValhallaBuildError(f"error while encoding body to json: {exc}") from exc


def service_error_from_response(response: requests.Response) -> ValhallaServiceError:
    """Map a non-200 response to a structured error.

    Falls back to the raw HTTP status and body text when the body is not a
    Valhalla error payload.
    """
    try:
        payload = ErrorResponse.model_validate_json(response.content)
    except ValidationError:
        return ValhallaServiceError(
            status_code=response.status_code,
            error=response.text,
        )
    return ValhallaServiceError(
        error_code=payload.error_code,
        error=payload.error,
        status_code=payload.status_code or response.status_code,
        status=payload.status,
    )


def decode_response(response: requests.Response, model: Type[ModelT]) -> ModelT:
    """Decode a 200 response body into ``model``.

    Raises:
        ValhallaDecodeError: If the body is not JSON or does not match ``model``.
    """
    try:
        return model.model_validate_json(response.content)
    except ValidationError as exc:
        raise ValhallaDecodeError(
            f"error while decoding {model.__name__} json response data: {exc}"
        ) from exc


__all__ = ["encode_body", "service_error_from_response", "decode_response"]
