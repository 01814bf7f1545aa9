from models.classroom import Classroom
from models.allocation import AllocationPlanEntry, AllocationResult
from models.history import HistoryEntry
