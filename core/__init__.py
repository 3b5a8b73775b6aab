"""Core models and services for the LKE storage credential proxy."""

from .models import CredentialRequest, StorageCredential, StorageCredentialParams, TemporaryCredentials

__all__ = ["CredentialRequest", "StorageCredential", "StorageCredentialParams", "TemporaryCredentials"]
