"""Per-item outcome value object."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True, slots=True)
class ItemOutcome:
    """Outcome for one line of a submitted batch."""

    line: int
    success: bool
    credential_id: int | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate that exactly one of credential_id and error is set."""
        if self.line < 1:
            msg = f"Line numbers are 1-based, got {self.line}"
            raise ValueError(msg)
        if self.success and (self.credential_id is None or self.error is not None):
            msg = f"Successful outcome for line {self.line} must carry a credential id and no error"
            raise ValueError(msg)
        if not self.success and (self.error is None or self.credential_id is not None):
            msg = f"Failed outcome for line {self.line} must carry an error and no credential id"
            raise ValueError(msg)

    @classmethod
    def succeeded(cls, line: int, credential_id: int) -> Self:
        """Outcome for an item the store accepted."""
        return cls(line=line, success=True, credential_id=credential_id)

    @classmethod
    def failed(cls, line: int, error: str) -> Self:
        """Outcome for an item rejected by validation or by the store."""
        return cls(line=line, success=False, error=error)
