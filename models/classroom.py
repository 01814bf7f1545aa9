from dataclasses import dataclass


@dataclass
class Classroom:
    room_id: str
    capacity: int
    floor_no: int
    near_washroom: bool = False
    used_seats: int = 0

    @property
    def available_seats(self) -> int:
        return self.capacity - self.used_seats

    @property
    def usage_pct(self) -> float:
        """Fraction of capacity in use, e.g. 0.75 for 75%."""
        if not self.capacity or self.capacity <= 0:
            return 0.0
        return self.used_seats / self.capacity

    @property
    def is_empty(self) -> bool:
        return self.used_seats == 0

    @property
    def is_partially_used(self) -> bool:
        return 0 < self.used_seats < self.capacity
