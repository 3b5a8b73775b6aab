"""Resolve secret environment values, optionally through SSM Parameter Store."""

from __future__ import annotations

from typing import Any, Mapping

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from core.constants import SSM_PARAM_SUFFIX
from core.errors import ConfigurationError


class SecretResolver:
    """Look up `NAME` in the environment, falling back to the SSM parameter named by `NAME_SSM_PARAM`."""

    def __init__(self, environ: Mapping[str, str], client: Any | None = None) -> None:
        self._environ = environ
        self._client = client

    def get(self, name: str) -> str | None:
        value = self._environ.get(name)
        if value:
            return value
        param_name = self._environ.get(f"{name}{SSM_PARAM_SUFFIX}")
        if not param_name:
            return None
        try:
            resp = self._ssm().get_parameter(Name=param_name, WithDecryption=True)
        except (ClientError, BotoCoreError) as exc:
            raise ConfigurationError([name], f"Could not read {name} from SSM parameter {param_name}: {exc}") from exc
        return resp["Parameter"]["Value"] or None

    def _ssm(self) -> Any:
        if self._client is None:
            self._client = boto3.client("ssm")
        return self._client


__all__ = ["SecretResolver"]
