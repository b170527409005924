"""Dispatch result types."""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class DispatchResult:
    """Statuses of every request sent for one event, in payload order."""

    status_codes: List[int] = field(default_factory=list)

    @property
    def status_code(self) -> int:
        """Status of the first (or only) request."""
        return self.status_codes[0]

    @property
    def sent(self) -> int:
        return len(self.status_codes)
