"""Response envelopes and body decoding for API Gateway style events."""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any

from core.constants import CORS_HEADERS
from core.errors import InvalidRequestError


def json_response(status_code: int, body: Any) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {**CORS_HEADERS, "Content-Type": "application/json"},
        "body": body,
    }


def preflight_response() -> dict[str, Any]:
    return {"statusCode": 200, "headers": dict(CORS_HEADERS), "body": ""}


def decode_body(event: dict[str, Any]) -> Any:
    payload = event.get("body")
    if payload is None:
        return {}
    if not isinstance(payload, (str, bytes)):
        return payload
    if event.get("isBase64Encoded"):
        try:
            payload = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidRequestError("Request body is not valid base64") from exc
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidRequestError("Request body is not valid UTF-8") from exc
    if not payload.strip():
        return {}
    try:
        return json.loads(payload)
    except json.JSONDecodeError as exc:
        raise InvalidRequestError("Request body is not valid JSON") from exc


__all__ = ["json_response", "preflight_response", "decode_body"]
