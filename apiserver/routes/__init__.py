"""API routes."""

from .storage_credential import handle as credential

__all__ = ["credential"]
