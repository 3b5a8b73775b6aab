"""Parameter profiles applied by the two handlers."""

from __future__ import annotations

import math
from typing import Any, Callable, Dict

from core.constants import TYPE_KEY_OFFLINE, TYPE_KEY_REALTIME
from core.models import CredentialRequest, StorageCredentialParams

PROFILE_REALTIME = "realtime"
PROFILE_VISIBILITY = "visibility"


def _realtime(request: CredentialRequest, bot_biz_id: str) -> StorageCredentialParams:
    # Images in the chat dialogue must be public, so only a literal true counts.
    return StorageCredentialParams(
        bot_biz_id=bot_biz_id,
        file_type=request.file_type or "jpg",
        is_public=request.is_public is True,
        type_key=TYPE_KEY_REALTIME,
    )


def _is_truthy(value: Any) -> bool:
    """JSON value truthiness as browsers see it: empty objects and arrays count as true."""
    if isinstance(value, (dict, list)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def _visibility(request: CredentialRequest, bot_biz_id: str) -> StorageCredentialParams:
    is_public = _is_truthy(request.is_public)
    return StorageCredentialParams(
        bot_biz_id=bot_biz_id,
        file_type=request.file_type or "png",
        is_public=is_public,
        type_key=TYPE_KEY_REALTIME if is_public else TYPE_KEY_OFFLINE,
    )


PROFILES: Dict[str, Callable[[CredentialRequest, str], StorageCredentialParams]] = {
    PROFILE_REALTIME: _realtime,
    PROFILE_VISIBILITY: _visibility,
}


def build_params(request: CredentialRequest, bot_biz_id: str, profile: str) -> StorageCredentialParams:
    builder = PROFILES.get(profile)
    if builder is None:
        raise ValueError(f"Unknown parameter profile: {profile}")
    return builder(request, bot_biz_id)


__all__ = ["PROFILE_REALTIME", "PROFILE_VISIBILITY", "PROFILES", "build_params"]
