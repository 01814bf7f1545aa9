"""Default configuration constants for the College Exam Seat Planner."""

import os

APP_TITLE = "College Exam Seat Planner"
APP_SUBTITLE = "Smart seat allocation system"

# Logging
LOG_LEVEL = os.environ.get("SEAT_PLANNER_LOG_LEVEL", "INFO")

# Validation messages
ERR_ROOM_ID_REQUIRED = "Room ID is required"
ERR_CAPACITY_INVALID = "Capacity must be a positive number"
ERR_FLOOR_INVALID = "Floor number must be 0 or greater"
ERR_DUPLICATE_ROOM_ID = "A classroom with this Room ID already exists"

# Allocation messages
ERR_NO_CLASSROOMS = "No classrooms available"
ERR_INVALID_STUDENT_COUNT = "Please enter a valid number of students"
ERR_NOT_ENOUGH_SEATS = "Not enough seats available. Requested: {requested}, Available: {available}"

# Usage bar thresholds (fraction of capacity)
USAGE_HIGH_THRESHOLD = 0.80
USAGE_MEDIUM_THRESHOLD = 0.50

USAGE_COLORS = {
    "low": "#4CAF50",
    "medium": "#F5C542",
    "high": "#E8734A",
}

# Roster upload columns
ROSTER_REQUIRED_COLUMNS = ["Room ID", "Capacity", "Floor No"]
ROSTER_OPTIONAL_COLUMNS = ["Near Washroom"]

# Values accepted as "yes" in the Near Washroom column
TRUTHY_VALUES = {"yes", "y", "true", "1", "x"}
