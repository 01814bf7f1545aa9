"""Derived seat-usage figures for the classroom list, sidebar and charts."""

from typing import List

from models.classroom import Classroom
from config.defaults import USAGE_HIGH_THRESHOLD, USAGE_MEDIUM_THRESHOLD


def usage_level(usage_pct: float) -> str:
    """Bucket a usage fraction into 'low', 'medium' or 'high'."""
    if usage_pct >= USAGE_HIGH_THRESHOLD:
        return "high"
    if usage_pct >= USAGE_MEDIUM_THRESHOLD:
        return "medium"
    return "low"


def get_room_utilization(classrooms: List[Classroom]) -> List[dict]:
    """Compute utilization stats per classroom, in collection order."""
    results = []
    for room in classrooms:
        results.append({
            "room_id": room.room_id,
            "floor_no": room.floor_no,
            "capacity": room.capacity,
            "near_washroom": room.near_washroom,
            "used_seats": room.used_seats,
            "available_seats": room.available_seats,
            "utilization_pct": room.usage_pct,
            "usage_level": usage_level(room.usage_pct),
        })
    return results


def get_floor_utilization(classrooms: List[Classroom]) -> List[dict]:
    """Aggregate capacity and usage per floor, lowest floor first."""
    floors = {}
    for room in classrooms:
        f = floors.setdefault(room.floor_no, {"room_count": 0, "total_seats": 0, "used_seats": 0})
        f["room_count"] += 1
        f["total_seats"] += room.capacity
        f["used_seats"] += room.used_seats

    results = []
    for floor_no in sorted(floors):
        f = floors[floor_no]
        results.append({
            "floor_no": floor_no,
            "room_count": f["room_count"],
            "total_seats": f["total_seats"],
            "used_seats": f["used_seats"],
            "available_seats": f["total_seats"] - f["used_seats"],
            "utilization_pct": f["used_seats"] / f["total_seats"] if f["total_seats"] > 0 else 0,
        })
    return results


def get_capacity_summary(classrooms: List[Classroom]) -> dict:
    """Totals shown under the classroom list and in the sidebar."""
    total = sum(room.capacity for room in classrooms)
    used = sum(room.used_seats for room in classrooms)
    return {
        "room_count": len(classrooms),
        "total_capacity": total,
        "used_seats": used,
        "available_seats": total - used,
        "utilization_pct": used / total if total > 0 else 0,
    }
