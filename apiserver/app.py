"""Entrypoint compatible with AWS Lambda + API Gateway and Netlify-style events."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict

from apiserver.responses import json_response, preflight_response
from apiserver.routes import credential
from core.log import configure_logging

RouteHandler = Callable[[dict[str, Any]], dict[str, Any]]

configure_logging()

ROUTES: Dict[str, RouteHandler] = {
    "POST /credential": credential,
    "POST /api/credential": credential,
    "POST /.netlify/functions/credential": credential,
}
KNOWN_PATHS = {key.split(" ", 1)[1] for key in ROUTES}


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    http_context = (event.get("requestContext") or {}).get("http") or {}
    method = str(event.get("httpMethod") or http_context.get("method") or "GET").upper()
    path = event.get("resource") or event.get("path") or event.get("rawPath") or "/"

    if method == "OPTIONS":
        return preflight_response()

    handler = ROUTES.get(f"{method} {path}")
    if not handler:
        if path in KNOWN_PATHS:
            response = json_response(405, {"error": f"Method {method} not allowed"})
        else:
            response = json_response(404, {"message": "Route not found"})
    else:
        response = handler(event)

    if "body" in response and not isinstance(response["body"], str):
        response["body"] = json.dumps(response["body"])
    return response
