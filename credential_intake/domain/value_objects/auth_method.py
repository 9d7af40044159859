"""Authentication method value object."""

from enum import StrEnum, auto


class AuthMethod(StrEnum):
    """Refresh flow the credential store uses for a credential."""

    SOCIAL = auto()
    IDC = auto()

    def __str__(self) -> str:
        return self.value
