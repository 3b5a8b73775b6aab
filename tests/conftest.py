"""Shared fixtures: environment and a fake LKE SDK client."""

from __future__ import annotations

import json
from typing import Any

import pytest
from botocore.exceptions import ClientError

import core.service
from core.lke import CredentialBroker

ENV_NAMES = [
    "TENCENT_SECRET_ID",
    "TENCENT_SECRET_KEY",
    "TENCENT_BOT_BIZ_ID",
    "TENCENT_BOT_APP_ID",
    "TENCENT_REGION",
    "TENCENT_LKE_ENDPOINT",
    "TENCENT_SECRET_ID_SSM_PARAM",
    "TENCENT_SECRET_KEY_SSM_PARAM",
]

SAMPLE_RESPONSE = {
    "Credentials": {"Token": "session-token", "TmpSecretId": "AKIDtmp", "TmpSecretKey": "tmp-key"},
    "ExpiredTime": 1760001800,
    "StartTime": 1760000000,
    "Bucket": "lke-realtime-1250000000",
    "Region": "ap-guangzhou",
    "FilePath": "https://lke-realtime-1250000000.cos.ap-guangzhou.myqcloud.com",
    "Type": "cos",
    "CorpUin": "100012345678",
    "ImagePath": "/public/100012345678/image/abc.png",
    "UploadPath": "/corp/100012345678/realtime/abc.png",
    "RequestId": "6f1c3a52-0d5e-4a8c-9f2b-1d3e5a7b9c0d",
}


class FakeResponse:
    def __init__(self, payload: dict[str, Any]) -> None:
        self._payload = payload

    def to_json_string(self) -> str:
        return json.dumps(self._payload)


class FakeLkeClient:
    def __init__(self, payload: dict[str, Any] | None = None, error: Exception | None = None) -> None:
        self.payload = payload if payload is not None else SAMPLE_RESPONSE
        self.error = error
        self.requests: list[dict[str, Any]] = []

    def DescribeStorageCredential(self, request: Any) -> FakeResponse:
        self.requests.append(json.loads(request.to_json_string()))
        if self.error:
            raise self.error
        return FakeResponse(self.payload)



class FailingSsm:
    def get_parameter(self, **kwargs):
        raise ClientError(
            {"Error": {"Code": "ParameterNotFound", "Message": f"Parameter {kwargs['Name']} not found."}},
            "GetParameter",
        )


@pytest.fixture
def lke_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TENCENT_SECRET_ID", "AKIDexample")
    monkeypatch.setenv("TENCENT_SECRET_KEY", "example-secret-key")
    monkeypatch.setenv("TENCENT_BOT_BIZ_ID", "1739000000000000000")


@pytest.fixture
def empty_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_client(monkeypatch):
    client = FakeLkeClient()
    monkeypatch.setattr(core.service, "build_broker", lambda settings: CredentialBroker(settings, client=client))
    return client
