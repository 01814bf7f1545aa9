from dataclasses import dataclass, field
from datetime import datetime

from models.allocation import AllocationResult


@dataclass
class HistoryEntry:
    result: AllocationResult
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def success(self) -> bool:
        return self.result.success
