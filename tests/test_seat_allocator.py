"""Tests for the greedy seat allocator."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import copy

from models.classroom import Classroom
from engine.seat_allocator import (
    allocate_exam_seats,
    order_rooms_for_allocation,
    total_available_seats,
)


def make_room(room_id="A101", capacity=60, floor_no=1, used=0, near_washroom=False):
    return Classroom(room_id, capacity, floor_no, near_washroom, used)


class TestPreconditions:
    def test_no_classrooms(self):
        result = allocate_exam_seats([], 10)
        assert not result.success
        assert result.error == "No classrooms available"
        assert result.allocations == []
        assert result.classrooms == []

    def test_none_classrooms_echoes_empty_list(self):
        result = allocate_exam_seats(None, 10)
        assert not result.success
        assert result.error == "No classrooms available"
        assert result.classrooms == []

    def test_zero_students(self):
        rooms = [make_room()]
        result = allocate_exam_seats(rooms, 0)
        assert not result.success
        assert result.error == "Please enter a valid number of students"
        assert result.classrooms is rooms

    def test_negative_students(self):
        result = allocate_exam_seats([make_room()], -5)
        assert not result.success
        assert result.error == "Please enter a valid number of students"

    def test_insufficient_seats(self):
        rooms = [make_room("A101", 30), make_room("A102", 20)]
        result = allocate_exam_seats(rooms, 60)
        assert not result.success
        assert "Requested: 60, Available: 50" in result.error
        assert result.error == "Not enough seats available. Requested: 60, Available: 50"
        assert result.allocations == []

    def test_insufficient_counts_only_free_seats(self):
        rooms = [make_room("A101", 30, used=25), make_room("A102", 20, used=20)]
        result = allocate_exam_seats(rooms, 6)
        assert not result.success
        assert "Available: 5" in result.error


class TestScenarios:
    def test_exact_fit(self):
        rooms = [make_room("A101", 60, 1), make_room("A102", 40, 1)]
        result = allocate_exam_seats(rooms, 100)

        assert result.success
        assert result.total_requested == 100
        assert result.total_allocated == 100
        assert [(a.room_id, a.seats_allocated, a.previous_used, a.new_used) for a in result.allocations] == [
            ("A101", 60, 0, 60),
            ("A102", 40, 0, 40),
        ]
        assert total_available_seats(result.classrooms) == 0

    def test_larger_empty_room_first_on_same_floor(self):
        rooms = [make_room("A102", 40, 1), make_room("A101", 60, 1)]
        result = allocate_exam_seats(rooms, 100)
        assert [a.room_id for a in result.allocations] == ["A101", "A102"]
        # Output keeps input order
        assert [r.room_id for r in result.classrooms] == ["A102", "A101"]

    def test_floor_preference(self):
        rooms = [make_room("B201", 50, 2), make_room("A101", 50, 1)]
        result = allocate_exam_seats(rooms, 30)
        assert len(result.allocations) == 1
        assert result.allocations[0].room_id == "A101"

    def test_partial_fill_beats_lower_floor(self):
        rooms = [make_room("G01", 50, 1), make_room("C301", 30, 3, used=25)]
        result = allocate_exam_seats(rooms, 5)
        assert len(result.allocations) == 1
        assert result.allocations[0].room_id == "C301"
        assert result.allocations[0].previous_used == 25
        assert result.allocations[0].new_used == 30
        assert result.classrooms[0].used_seats == 0

    def test_minimum_classroom_usage(self):
        rooms = [
            make_room("E1", 30, 1),
            make_room("P1", 50, 1, used=40),
            make_room("E2", 30, 1),
        ]
        result = allocate_exam_seats(rooms, 10)
        assert [a.room_id for a in result.allocations] == ["P1"]
        used = {r.room_id: r.used_seats for r in result.classrooms}
        assert used == {"E1": 0, "P1": 50, "E2": 0}

    def test_partial_rooms_sorted_by_free_seats_on_same_floor(self):
        rooms = [
            make_room("P1", 50, 2, used=45),  # 5 free
            make_room("P2", 50, 2, used=20),  # 30 free
            make_room("P3", 50, 1, used=49),  # 1 free, lower floor
        ]
        result = allocate_exam_seats(rooms, 36)
        assert [a.room_id for a in result.allocations] == ["P3", "P2", "P1"]
        assert [a.seats_allocated for a in result.allocations] == [1, 30, 5]

    def test_spills_from_partial_into_empty(self):
        rooms = [make_room("E1", 40, 0), make_room("P1", 20, 2, used=10)]
        result = allocate_exam_seats(rooms, 25)
        assert [(a.room_id, a.seats_allocated) for a in result.allocations] == [("P1", 10), ("E1", 15)]

    def test_full_rooms_are_skipped(self):
        rooms = [make_room("F1", 30, 0, used=30), make_room("E1", 30, 1)]
        result = allocate_exam_seats(rooms, 10)
        assert [a.room_id for a in result.allocations] == ["E1"]
        assert result.classrooms[0].used_seats == 30

    def test_last_room_partially_filled(self):
        rooms = [make_room("A101", 60, 1), make_room("A102", 40, 1)]
        result = allocate_exam_seats(rooms, 70)
        assert result.allocations[-1].room_id == "A102"
        assert result.allocations[-1].seats_allocated == 10

    def test_plan_entry_copies_room_attributes(self):
        result = allocate_exam_seats([make_room("B201", 80, 2)], 12)
        entry = result.allocations[0]
        assert entry.floor_no == 2
        assert entry.capacity == 80
        assert result.classrooms_used == 1


class TestProperties:
    def _rooms(self):
        return [
            make_room("A", 30, 2, used=10),
            make_room("B", 25, 0),
            make_room("C", 40, 1, used=40),
            make_room("D", 60, 1, used=5),
            make_room("E", 45, 0),
        ]

    def test_input_not_mutated_on_success(self):
        rooms = self._rooms()
        snapshot = copy.deepcopy(rooms)
        result = allocate_exam_seats(rooms, 100)
        assert result.success
        assert rooms == snapshot
        for before, after in zip(rooms, result.classrooms):
            assert before is not after

    def test_failure_echoes_input_unchanged(self):
        rooms = self._rooms()
        snapshot = copy.deepcopy(rooms)
        result = allocate_exam_seats(rooms, 10_000)
        assert not result.success
        assert result.classrooms == snapshot

    def test_capacity_invariant(self):
        for requested in (1, 17, 50, 100, 140):
            result = allocate_exam_seats(self._rooms(), requested)
            assert result.success
            for room in result.classrooms:
                assert 0 <= room.used_seats <= room.capacity

    def test_conservation(self):
        rooms = self._rooms()
        used_before = sum(r.used_seats for r in rooms)
        result = allocate_exam_seats(rooms, 77)

        delta = sum(a.new_used for a in result.allocations) - sum(a.previous_used for a in result.allocations)
        assert delta == 77
        assert sum(r.used_seats for r in result.classrooms) == used_before + 77
        assert all(a.seats_allocated > 0 for a in result.allocations)

    def test_deterministic(self):
        first = allocate_exam_seats(self._rooms(), 60)
        second = allocate_exam_seats(self._rooms(), 60)
        assert first.allocations == second.allocations


class TestOrderRoomsForAllocation:
    def test_partial_before_empty_and_full_excluded(self):
        rooms = [
            make_room("E0", 30, 0),
            make_room("F1", 30, 1, used=30),
            make_room("P3", 30, 3, used=1),
        ]
        assert [r.room_id for r in order_rooms_for_allocation(rooms)] == ["P3", "E0"]

    def test_stable_on_equal_keys(self):
        rooms = [make_room("X", 40, 1), make_room("Y", 40, 1), make_room("Z", 40, 1)]
        assert [r.room_id for r in order_rooms_for_allocation(rooms)] == ["X", "Y", "Z"]


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
