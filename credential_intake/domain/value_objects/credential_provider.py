"""Credential provider value object."""

from __future__ import annotations

from enum import StrEnum

from .auth_method import AuthMethod


class CredentialProvider(StrEnum):
    """Identity provider a refresh token was issued by."""

    BUILDER_ID = "BuilderId"
    GITHUB = "Github"
    GOOGLE = "Google"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> CredentialProvider:
        """Provider assumed when an item does not name one."""
        return cls.BUILDER_ID

    @classmethod
    def allowed_values(cls) -> tuple[str, ...]:
        """Accepted wire values, in declaration order."""
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, value: object) -> CredentialProvider | None:
        """Exact, case-sensitive lookup. Returns None for unknown values."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def required_fields(self) -> tuple[str, ...]:
        """Extra wire fields this provider needs besides refreshToken."""
        match self:
            case CredentialProvider.BUILDER_ID:
                return ("clientId", "clientSecret")
            case CredentialProvider.GITHUB | CredentialProvider.GOOGLE:
                return ()

    @property
    def auth_method(self) -> AuthMethod:
        """Token refresh flow used for credentials of this provider."""
        match self:
            case CredentialProvider.BUILDER_ID:
                return AuthMethod.IDC
            case CredentialProvider.GITHUB | CredentialProvider.GOOGLE:
                return AuthMethod.SOCIAL
