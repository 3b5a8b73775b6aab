"""One-call credential request shared by both handlers and the CLI."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from pydantic import ValidationError

from core.errors import InvalidRequestError
from core.lke import CredentialBroker, build_broker
from core.models import CredentialRequest, StorageCredential
from core.params import build_params
from core.settings import LkeSettings, load_settings

BrokerFactory = Callable[[LkeSettings], CredentialBroker]


def parse_request(body: Any) -> CredentialRequest:
    if not isinstance(body, dict):
        raise InvalidRequestError("Request body must be a JSON object")
    try:
        return CredentialRequest.model_validate(body)
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err.get("loc"))
        raise InvalidRequestError(f"Invalid request fields: {fields}") from exc


def request_credential(
    body: Any,
    profile: str,
    environ: Mapping[str, str] | None = None,
    broker_factory: BrokerFactory | None = None,
    settings: LkeSettings | None = None,
) -> StorageCredential:
    """Load configuration, validate the body and fetch a storage credential."""
    if settings is None:
        settings = load_settings(environ)
    request = parse_request(body)
    params = build_params(request, settings.bot_biz_id, profile)
    factory = broker_factory or build_broker
    return factory(settings).describe_storage_credential(params)


__all__ = ["parse_request", "request_credential"]
