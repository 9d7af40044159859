"""Batch result aggregate root."""

from dataclasses import dataclass

from ..value_objects import ItemOutcome


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Aggregate root summarizing the per-line outcomes of one batch."""

    total: int
    success_count: int
    failed_count: int
    results: tuple[ItemOutcome, ...]

    def __post_init__(self) -> None:
        """Validate that counts cover every line exactly once."""
        if not (self.success_count + self.failed_count == self.total == len(self.results)):
            msg = (
                f"Inconsistent batch result: success({self.success_count}) + "
                f"failed({self.failed_count}) must equal total({self.total}) "
                f"and results({len(self.results)})"
            )
            raise ValueError(msg)

    @property
    def failures(self) -> list[ItemOutcome]:
        """Outcomes of lines that were not stored."""
        return [outcome for outcome in self.results if not outcome.success]

    @property
    def failed_lines(self) -> list[int]:
        """Line numbers to correct and resubmit."""
        return [outcome.line for outcome in self.failures]

    @property
    def credential_ids(self) -> list[int]:
        """Ids assigned to the stored credentials, in line order."""
        return [o.credential_id for o in self.results if o.credential_id is not None]

    @property
    def all_succeeded(self) -> bool:
        """Check if every line was stored."""
        return self.failed_count == 0

    def get_summary(self) -> str:
        """Generate a human-readable summary of the batch."""
        if self.all_succeeded:
            return f"Added {self.success_count} credentials"
        return (
            f"Batch completed: {self.success_count} succeeded, "
            f"{self.failed_count} failed (lines {', '.join(map(str, self.failed_lines))})"
        )
