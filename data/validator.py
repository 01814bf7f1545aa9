"""Validation for single classrooms and uploaded rosters."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional
import pandas as pd

from models.classroom import Classroom
from config.defaults import (
    ERR_ROOM_ID_REQUIRED,
    ERR_CAPACITY_INVALID,
    ERR_FLOOR_INVALID,
    ERR_DUPLICATE_ROOM_ID,
    ROSTER_REQUIRED_COLUMNS,
    ROSTER_OPTIONAL_COLUMNS,
)


@dataclass
class ValidationResult:
    is_valid: bool = True
    error: Optional[str] = None


@dataclass
class RosterValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def validate_classroom(classroom: Classroom) -> ValidationResult:
    """Check a candidate classroom's fields, stopping at the first failure."""
    room_id = classroom.room_id
    if not room_id or not str(room_id).strip():
        return ValidationResult(False, ERR_ROOM_ID_REQUIRED)

    if not classroom.capacity or classroom.capacity <= 0:
        return ValidationResult(False, ERR_CAPACITY_INVALID)

    if classroom.floor_no is None or classroom.floor_no < 0:
        return ValidationResult(False, ERR_FLOOR_INVALID)

    return ValidationResult(True)


def validate_unique_room_id(room_id: str, existing_ids: Iterable[str]) -> ValidationResult:
    """Case-insensitive uniqueness check against the rooms already admitted."""
    normalized = room_id.strip().upper()
    if normalized in {rid.strip().upper() for rid in existing_ids}:
        return ValidationResult(False, ERR_DUPLICATE_ROOM_ID)
    return ValidationResult(True)


def validate_roster(df: pd.DataFrame) -> RosterValidationResult:
    result = RosterValidationResult()
    missing = [col for col in ROSTER_REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"Classroom roster: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append("Classroom roster: File contains no data rows.")
    if not result.is_valid:
        return result

    # Blank ids are left for the per-room check to report
    ids = df["Room ID"].dropna().astype(str).str.strip().str.upper()
    ids = ids[ids != ""]
    dupes = ids[ids.duplicated(keep=False)]
    if not dupes.empty:
        result.is_valid = False
        result.errors.append(f"Classroom roster: Duplicate room IDs: {sorted(dupes.unique().tolist())}")

    for col in ROSTER_OPTIONAL_COLUMNS:
        if col not in df.columns:
            result.warnings.append(f"Classroom roster: No '{col}' column. Defaulting to 'No' for every room.")

    return result
