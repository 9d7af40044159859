"""Domain service reducing per-line outcomes to a batch result."""

from collections.abc import Iterable

from ..entities import BatchResult
from ..value_objects import ItemOutcome


class ResultAggregator:
    """Domain service for summarizing item outcomes."""

    def aggregate(self, outcomes: Iterable[ItemOutcome]) -> BatchResult:
        """
        Build a BatchResult from outcomes in input order.

        Args:
            outcomes: One outcome per submitted line.

        Returns:
            BatchResult with totals; the order of outcomes is preserved.
        """
        results = tuple(outcomes)
        success_count = sum(1 for outcome in results if outcome.success)

        return BatchResult(
            total=len(results),
            success_count=success_count,
            failed_count=len(results) - success_count,
            results=results,
        )
