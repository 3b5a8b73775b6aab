"""Data models shared by the handlers and the CLI."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field


class CredentialRequest(BaseModel):
    """Inbound request body sent by the browser before an upload."""

    file_type: Optional[str] = Field(default=None, alias="fileType", description="Extension of the file to upload")
    # Kept raw; each parameter profile coerces it differently.
    is_public: Any = Field(default=None, alias="isPublic")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }


class StorageCredentialParams(BaseModel):
    """Parameters of the LKE DescribeStorageCredential call."""

    bot_biz_id: str = Field(..., alias="BotBizId", description="LKE application the upload belongs to")
    file_type: str = Field(..., alias="FileType")
    is_public: bool = Field(..., alias="IsPublic")
    type_key: str = Field(..., alias="TypeKey", description="realtime for dialogue uploads, offline for documents")

    model_config = {
        "populate_by_name": True,
    }


class TemporaryCredentials(BaseModel):
    token: Optional[str] = Field(default=None, alias="Token")
    tmp_secret_id: Optional[str] = Field(default=None, alias="TmpSecretId")
    tmp_secret_key: Optional[str] = Field(default=None, alias="TmpSecretKey")

    model_config = {
        "populate_by_name": True,
        "extra": "allow",
    }


class StorageCredential(BaseModel):
    """Response of DescribeStorageCredential.

    Unknown fields are preserved so the handlers can relay the body unchanged.
    """

    credentials: Optional[TemporaryCredentials] = Field(default=None, alias="Credentials")
    expired_time: Optional[int] = Field(default=None, alias="ExpiredTime")
    start_time: Optional[int] = Field(default=None, alias="StartTime")
    bucket: Optional[str] = Field(default=None, alias="Bucket")
    region: Optional[str] = Field(default=None, alias="Region")
    file_path: Optional[str] = Field(default=None, alias="FilePath")
    type: Optional[str] = Field(default=None, alias="Type")
    corp_uin: Optional[str] = Field(default=None, alias="CorpUin")
    image_path: Optional[str] = Field(default=None, alias="ImagePath")
    upload_path: Optional[str] = Field(default=None, alias="UploadPath")
    request_id: Optional[str] = Field(default=None, alias="RequestId")

    model_config = {
        "populate_by_name": True,
        "extra": "allow",
    }

    def summary(self) -> dict[str, Any]:
        """Flat, secret-free view used by the CLI's table and markdown output."""
        expires = None
        if self.expired_time:
            expires = datetime.fromtimestamp(self.expired_time, tz=timezone.utc).isoformat()
        return {
            "bucket": self.bucket,
            "region": self.region,
            "type": self.type,
            "filePath": self.file_path,
            "uploadPath": self.upload_path,
            "expiresAt": expires,
            "requestId": self.request_id,
        }


__all__ = ["CredentialRequest", "StorageCredentialParams", "TemporaryCredentials", "StorageCredential"]
