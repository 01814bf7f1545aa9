"""Turn form fields and CSV/XLSX rosters into Classroom objects."""

import pandas as pd
from typing import List, Optional
from models.classroom import Classroom
from config.defaults import TRUTHY_VALUES


def _to_int(value) -> Optional[int]:
    """Parse an integer field, returning None when it is blank or not numeric."""
    if value is None:
        return None
    if isinstance(value, bool):
        return int(value)
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None


def _to_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    try:
        if pd.isna(value):
            return False
    except (TypeError, ValueError):
        pass
    return str(value).strip().lower() in TRUTHY_VALUES


def normalize_room_id(room_id) -> str:
    if room_id is None:
        return ""
    try:
        if pd.isna(room_id):
            return ""
    except (TypeError, ValueError):
        pass
    return str(room_id).strip().upper()


def build_classroom(room_id, capacity, floor_no, near_washroom=False) -> Classroom:
    """Build an unvalidated Classroom from raw user-entered values.

    The room id is trimmed and uppercased; numbers that fail to parse become
    None so the validator can report them.
    """
    return Classroom(
        room_id=normalize_room_id(room_id),
        capacity=_to_int(capacity),
        floor_no=_to_int(floor_no),
        near_washroom=_to_bool(near_washroom),
        used_seats=0,
    )


def parse_classrooms(df: pd.DataFrame) -> List[Classroom]:
    """Convert a roster DataFrame into (unvalidated) Classroom objects."""
    classrooms = []
    has_washroom = "Near Washroom" in df.columns
    for _, row in df.iterrows():
        classrooms.append(build_classroom(
            room_id=row["Room ID"],
            capacity=row["Capacity"],
            floor_no=row["Floor No"],
            near_washroom=row["Near Washroom"] if has_washroom else False,
        ))
    return classrooms


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")
