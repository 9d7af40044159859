"""Tests for CredentialProvider value object."""

from __future__ import annotations

from credential_intake.domain.value_objects import AuthMethod, CredentialProvider


class TestCredentialProvider:
    """Tests for CredentialProvider value object."""

    def test_wire_values(self) -> None:
        assert CredentialProvider.allowed_values() == ("BuilderId", "Github", "Google")
        assert str(CredentialProvider.GITHUB) == "Github"

    def test_default_is_builder_id(self) -> None:
        assert CredentialProvider.default() == CredentialProvider.BUILDER_ID

    def test_parse_unknown_returns_none(self) -> None:
        assert CredentialProvider.parse("Twitter") is None
        assert CredentialProvider.parse(1) is None
        assert CredentialProvider.parse("Google") == CredentialProvider.GOOGLE

    def test_required_fields(self) -> None:
        """Only BuilderId requires client credentials."""
        assert CredentialProvider.BUILDER_ID.required_fields == ("clientId", "clientSecret")
        assert CredentialProvider.GITHUB.required_fields == ()
        assert CredentialProvider.GOOGLE.required_fields == ()

    def test_auth_method(self) -> None:
        assert CredentialProvider.BUILDER_ID.auth_method == AuthMethod.IDC
        assert CredentialProvider.GITHUB.auth_method == AuthMethod.SOCIAL
        assert CredentialProvider.GOOGLE.auth_method == AuthMethod.SOCIAL
