"""Greedy exam seat allocation.

Allocation rules:
1. Fill partially used classrooms before opening empty ones.
2. Within each group prefer lower floors.
3. On the same floor, prefer the room with more free seats (partial) or the
   larger room (empty).
4. Never exceed room capacity.
"""

import copy
from typing import List, Optional

from models.classroom import Classroom
from models.allocation import AllocationPlanEntry, AllocationResult
from config.defaults import (
    ERR_NO_CLASSROOMS,
    ERR_INVALID_STUDENT_COUNT,
    ERR_NOT_ENOUGH_SEATS,
)
from utils.logger import get_logger


logger = get_logger(__name__)


def total_available_seats(classrooms: Optional[List[Classroom]]) -> int:
    """Sum of free seats across all classrooms."""
    return sum(room.capacity - room.used_seats for room in classrooms or [])


def _failure(error: str, classrooms: List[Classroom]) -> AllocationResult:
    return AllocationResult(
        success=False,
        error=error,
        allocations=[],
        classrooms=classrooms,
    )


def order_rooms_for_allocation(classrooms: List[Classroom]) -> List[Classroom]:
    """Return the rooms in the order the allocator visits them.

    Partially used rooms (floor asc, free seats desc) come before empty rooms
    (floor asc, capacity desc) regardless of floor. Full rooms are dropped.
    sorted() is stable, so input order breaks remaining ties.
    """
    partially_used = sorted(
        (room for room in classrooms if room.is_partially_used),
        key=lambda r: (r.floor_no, -(r.capacity - r.used_seats)),
    )
    empty_rooms = sorted(
        (room for room in classrooms if room.is_empty),
        key=lambda r: (r.floor_no, -r.capacity),
    )
    return partially_used + empty_rooms


def allocate_exam_seats(
    classrooms: Optional[List[Classroom]],
    students_to_allocate: int,
) -> AllocationResult:
    """Seat `students_to_allocate` students across `classrooms`.

    The input list and its Classroom records are never modified; on success
    the result carries a fresh copy of every room with updated usage, in the
    original order. Expected failures are reported on the result, not raised.
    """
    if not classrooms:
        logger.warning("Allocation rejected | reason=no_classrooms")
        return _failure(ERR_NO_CLASSROOMS, classrooms or [])

    if students_to_allocate <= 0:
        logger.warning("Allocation rejected | reason=invalid_count | requested=%s", students_to_allocate)
        return _failure(ERR_INVALID_STUDENT_COUNT, classrooms)

    available = total_available_seats(classrooms)
    if available < students_to_allocate:
        logger.warning(
            "Allocation rejected | reason=insufficient_seats | requested=%s | available=%s",
            students_to_allocate,
            available,
        )
        return _failure(
            ERR_NOT_ENOUGH_SEATS.format(requested=students_to_allocate, available=available),
            classrooms,
        )

    # Deep copy; the caller's rooms are never mutated
    updated_classrooms = copy.deepcopy(classrooms)
    visit_order = order_rooms_for_allocation(updated_classrooms)
    logger.debug("Visit order | rooms=%s", [room.room_id for room in visit_order])

    allocations = []
    remaining = students_to_allocate

    for room in visit_order:
        if remaining <= 0:
            break

        available_in_room = room.capacity - room.used_seats
        if available_in_room <= 0:
            continue

        seats = min(available_in_room, remaining)
        previous_used = room.used_seats
        room.used_seats += seats

        allocations.append(AllocationPlanEntry(
            room_id=room.room_id,
            floor_no=room.floor_no,
            capacity=room.capacity,
            seats_allocated=seats,
            previous_used=previous_used,
            new_used=room.used_seats,
        ))
        remaining -= seats

    logger.info(
        "Allocation completed | requested=%s | allocated=%s | classrooms_used=%s",
        students_to_allocate,
        students_to_allocate - remaining,
        len(allocations),
    )
    return AllocationResult(
        success=True,
        total_requested=students_to_allocate,
        total_allocated=students_to_allocate - remaining,
        allocations=allocations,
        classrooms=updated_classrooms,
    )
