"""Session-owned planner state: the room collection and the allocation history."""

from dataclasses import dataclass, field, replace
from typing import Iterable, List

from models.classroom import Classroom
from models.allocation import AllocationResult
from models.history import HistoryEntry
from engine.seat_allocator import allocate_exam_seats, total_available_seats
from data.loader import build_classroom
from data.validator import ValidationResult, validate_classroom, validate_unique_room_id
from utils.logger import get_logger


logger = get_logger(__name__)


@dataclass
class PlannerState:
    """Single writer for one planner session.

    Allocation requests are applied one at a time; `history` is newest first.
    """
    classrooms: List[Classroom] = field(default_factory=list)
    history: List[HistoryEntry] = field(default_factory=list)

    @property
    def room_ids(self) -> List[str]:
        return [room.room_id for room in self.classrooms]

    @property
    def total_available(self) -> int:
        return total_available_seats(self.classrooms)

    def admit(self, classroom: Classroom) -> ValidationResult:
        """Validate an already-built Classroom and append it if acceptable."""
        result = validate_classroom(classroom)
        if not result.is_valid:
            return result

        result = validate_unique_room_id(classroom.room_id, self.room_ids)
        if not result.is_valid:
            return result

        self.classrooms = [*self.classrooms, classroom]
        logger.info(
            "Classroom added | room_id=%s | capacity=%s | floor_no=%s",
            classroom.room_id,
            classroom.capacity,
            classroom.floor_no,
        )
        return result

    def add_classroom(self, room_id, capacity, floor_no, near_washroom: bool = False) -> ValidationResult:
        """Coerce form input, validate, check uniqueness, then admit with no seats used."""
        return self.admit(build_classroom(room_id, capacity, floor_no, near_washroom))

    def import_classrooms(self, classrooms: Iterable[Classroom]) -> List[str]:
        """Admit each valid, unique room; return messages for the ones rejected."""
        rejected = []
        for classroom in classrooms:
            result = self.admit(classroom)
            if not result.is_valid:
                label = classroom.room_id or "(blank)"
                rejected.append(f"{label}: {result.error}")
        return rejected

    def delete_classroom(self, room_id: str) -> bool:
        before = len(self.classrooms)
        self.classrooms = [room for room in self.classrooms if room.room_id != room_id]
        removed = len(self.classrooms) < before
        if removed:
            logger.info("Classroom deleted | room_id=%s", room_id)
        return removed

    def allocate(self, students: int) -> AllocationResult:
        """Run one allocation request and record it in the history."""
        result = allocate_exam_seats(self.classrooms, students)
        if result.success:
            self.classrooms = result.classrooms
        self.history.insert(0, HistoryEntry(result=result))
        return result

    def clear_history(self):
        self.history = []

    def reset_usage(self):
        """Free every seat and drop the history."""
        self.classrooms = [replace(room, used_seats=0) for room in self.classrooms]
        self.history = []
        logger.info("All classroom usage reset | rooms=%s", len(self.classrooms))
