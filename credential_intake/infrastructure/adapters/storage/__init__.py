"""Credential store adapters."""

from .json_file import CredentialStoreConfig, JsonFileCredentialStore

__all__ = ["CredentialStoreConfig", "JsonFileCredentialStore"]
