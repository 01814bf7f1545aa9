from dataclasses import dataclass, field
from typing import List, Optional

from models.classroom import Classroom


@dataclass
class AllocationPlanEntry:
    room_id: str
    floor_no: int
    capacity: int
    seats_allocated: int    # Seats newly assigned by this request
    previous_used: int      # used_seats before this request
    new_used: int           # previous_used + seats_allocated


@dataclass
class AllocationResult:
    success: bool
    error: Optional[str] = None
    total_requested: int = 0
    total_allocated: int = 0
    allocations: List[AllocationPlanEntry] = field(default_factory=list)
    classrooms: List[Classroom] = field(default_factory=list)

    @property
    def classrooms_used(self) -> int:
        return len(self.allocations)
