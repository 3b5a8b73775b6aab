"""Runtime configuration read from the process environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from core.constants import (
    ENV_BOT_APP_ID,
    ENV_BOT_BIZ_ID,
    ENV_ENDPOINT,
    ENV_REGION,
    ENV_SECRET_ID,
    ENV_SECRET_KEY,
    LKE_ENDPOINT,
    LKE_REGION,
)
from core.errors import ConfigurationError
from core.secrets import SecretResolver


@dataclass(slots=True)
class LkeSettings:
    secret_id: str
    secret_key: str
    bot_biz_id: str
    region: str = LKE_REGION
    endpoint: str = LKE_ENDPOINT

    def __repr__(self) -> str:
        return f"LkeSettings(bot_biz_id={self.bot_biz_id!r}, region={self.region!r}, endpoint={self.endpoint!r})"

    def with_overrides(self, region: str | None = None, endpoint: str | None = None) -> "LkeSettings":
        return LkeSettings(
            secret_id=self.secret_id,
            secret_key=self.secret_key,
            bot_biz_id=self.bot_biz_id,
            region=region or self.region,
            endpoint=endpoint or self.endpoint,
        )


def load_settings(environ: Mapping[str, str] | None = None, resolver: SecretResolver | None = None) -> LkeSettings:
    """Read credentials and the bot id; raise ConfigurationError naming every missing variable."""
    if environ is None:
        environ = os.environ
    if resolver is None:
        resolver = SecretResolver(environ)

    secret_id = resolver.get(ENV_SECRET_ID)
    secret_key = resolver.get(ENV_SECRET_KEY)
    bot_biz_id = environ.get(ENV_BOT_BIZ_ID) or environ.get(ENV_BOT_APP_ID)

    missing = []
    if not secret_id:
        missing.append(ENV_SECRET_ID)
    if not secret_key:
        missing.append(ENV_SECRET_KEY)
    if not bot_biz_id:
        missing.append(ENV_BOT_BIZ_ID)
    if missing:
        raise ConfigurationError(missing)

    return LkeSettings(
        secret_id=secret_id,  # type: ignore[arg-type]
        secret_key=secret_key,  # type: ignore[arg-type]
        bot_biz_id=bot_biz_id,  # type: ignore[arg-type]
        region=environ.get(ENV_REGION) or LKE_REGION,
        endpoint=environ.get(ENV_ENDPOINT) or LKE_ENDPOINT,
    )


__all__ = ["LkeSettings", "load_settings"]
