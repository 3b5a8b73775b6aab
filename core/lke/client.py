"""Thin wrapper around the Tencent Cloud LKE SDK client."""

from __future__ import annotations

import json
import logging
from typing import Any

from tencentcloud.common import credential
from tencentcloud.common.exception.tencent_cloud_sdk_exception import TencentCloudSDKException
from tencentcloud.common.profile.client_profile import ClientProfile
from tencentcloud.common.profile.http_profile import HttpProfile
from tencentcloud.lke.v20231130 import lke_client, models as lke_models

from core.errors import CredentialError
from core.models import StorageCredential, StorageCredentialParams
from core.settings import LkeSettings

logger = logging.getLogger(__name__)


class CredentialBroker:
    """Request temporary upload credentials from LKE."""

    def __init__(self, settings: LkeSettings, client: Any | None = None) -> None:
        self.settings = settings
        self._client = client or self._build_client(settings)

    @staticmethod
    def _build_client(settings: LkeSettings) -> lke_client.LkeClient:
        cred = credential.Credential(settings.secret_id, settings.secret_key)
        http_profile = HttpProfile()
        http_profile.endpoint = settings.endpoint
        client_profile = ClientProfile()
        client_profile.httpProfile = http_profile
        return lke_client.LkeClient(cred, settings.region, client_profile)

    def describe_storage_credential(self, params: StorageCredentialParams) -> StorageCredential:
        request = lke_models.DescribeStorageCredentialRequest()
        request.from_json_string(json.dumps(params.model_dump(by_alias=True)))

        logger.info("Requesting LKE storage credential TypeKey=%s FileType=%s", params.type_key, params.file_type)
        try:
            response = self._client.DescribeStorageCredential(request)
        except TencentCloudSDKException as exc:
            raise CredentialError(exc.get_message() or str(exc), code=exc.get_code(), request_id=exc.get_request_id()) from exc
        except OSError as exc:
            raise CredentialError(f"LKE endpoint unreachable: {exc}") from exc

        return StorageCredential.model_validate(json.loads(response.to_json_string()))


def build_broker(settings: LkeSettings) -> CredentialBroker:
    return CredentialBroker(settings)


__all__ = ["CredentialBroker", "build_broker"]
