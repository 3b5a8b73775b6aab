"""Exception hierarchy for the credential proxy."""

from __future__ import annotations


class CredentialProxyError(Exception):
    """Base class for failures a handler turns into an error response."""

    status_code = 500

    def as_body(self) -> dict[str, str]:
        return {"error": str(self)}


class ConfigurationError(CredentialProxyError):
    def __init__(self, missing: list[str], message: str | None = None) -> None:
        super().__init__(message or f"Missing environment configuration: {', '.join(missing)}")
        self.missing = missing


class InvalidRequestError(CredentialProxyError):
    status_code = 400


class CredentialError(CredentialProxyError):
    """The LKE API rejected the call or could not be reached."""

    def __init__(self, message: str, code: str | None = None, request_id: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.request_id = request_id

    def as_body(self) -> dict[str, str]:
        body = super().as_body()
        if self.code:
            body["code"] = self.code
        if self.request_id:
            body["requestId"] = self.request_id
        return body


__all__ = ["CredentialProxyError", "ConfigurationError", "InvalidRequestError", "CredentialError"]
