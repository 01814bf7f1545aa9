"""Tests for form coercion and roster parsing."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import io

import pandas as pd
import pytest

from models.classroom import Classroom
from data.loader import build_classroom, parse_classrooms, load_file
from data.sample_data import generate_classrooms_df
from data.validator import validate_roster


class TestBuildClassroom:
    def test_coerces_fields(self):
        room = build_classroom(" b201 ", "80", 2.0, "yes")
        assert room == Classroom("B201", 80, 2, True, 0)

    def test_unparseable_numbers_become_none(self):
        room = build_classroom("A101", "", "two")
        assert room.capacity is None
        assert room.floor_no is None

    def test_infinite_numbers_become_none(self):
        for value in ("inf", "1e999", float("inf"), float("-inf")):
            room = build_classroom("A101", value, value)
            assert room.capacity is None
            assert room.floor_no is None

    def test_nan_values(self):
        room = build_classroom(float("nan"), float("nan"), 1, float("nan"))
        assert room.room_id == ""
        assert room.capacity is None
        assert room.near_washroom is False


class TestParseClassrooms:
    def test_sample_roster(self):
        df = generate_classrooms_df()
        assert validate_roster(df).is_valid
        rooms = parse_classrooms(df)
        assert len(rooms) == len(df)
        assert rooms[0].room_id == "G01"
        assert rooms[0].near_washroom is True
        assert all(r.used_seats == 0 for r in rooms)

    def test_infinite_capacity_cell(self):
        df = pd.read_csv(io.StringIO("Room ID,Capacity,Floor No\nA101,inf,1\n"))
        rooms = parse_classrooms(df)
        assert rooms[0].capacity is None

    def test_without_washroom_column(self):
        df = pd.DataFrame([{"Room ID": "a1", "Capacity": 10, "Floor No": 0}])
        rooms = parse_classrooms(df)
        assert rooms == [Classroom("A1", 10, 0, False, 0)]


class _Upload(io.BytesIO):
    def __init__(self, data: bytes, name: str):
        super().__init__(data)
        self.name = name


class TestLoadFile:
    def test_csv(self):
        upload = _Upload(b"Room ID,Capacity,Floor No\nA101,60,1\n", "rooms.CSV")
        df = load_file(upload)
        assert list(df.columns) == ["Room ID", "Capacity", "Floor No"]
        assert df.iloc[0]["Capacity"] == 60

    def test_unsupported_format(self):
        with pytest.raises(ValueError):
            load_file(_Upload(b"{}", "rooms.json"))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
