"""API route returning a temporary LKE storage credential."""

from __future__ import annotations

import logging
from typing import Any

from apiserver.responses import decode_body, json_response
from core.errors import CredentialProxyError
from core.params import PROFILE_VISIBILITY
from core.service import request_credential
from core.settings import load_settings

logger = logging.getLogger(__name__)


def handle(event: dict[str, Any], profile: str = PROFILE_VISIBILITY) -> dict[str, Any]:
    try:
        settings = load_settings()
        body = decode_body(event)
        result = request_credential(body, profile, settings=settings)
    except CredentialProxyError as exc:
        if exc.status_code < 500:
            logger.warning("Rejected credential request: %s", exc)
        else:
            logger.exception("Credential error: %s", exc)
        return json_response(exc.status_code, exc.as_body())
    except Exception as exc:
        logger.exception("Unexpected credential failure")
        return json_response(500, {"error": str(exc)})

    return json_response(200, result.model_dump(by_alias=True))
