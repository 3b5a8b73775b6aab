from .client import CredentialBroker, build_broker

__all__ = ["CredentialBroker", "build_broker"]
