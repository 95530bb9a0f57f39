from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

MINUTES_PER_DAY = 24 * 60

class Day(Enum):
    MON = "MON"
    TUE = "TUE"
    WED = "WED"
    THU = "THU"
    FRI = "FRI"

    @classmethod
    def parse(cls, text: str) -> "Day":
        key = str(text).strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"unknown day {text!r}; expected one of MON, TUE, WED, THU, FRI") from None

@dataclass(frozen=True)
class TimeSlot:
    day: Day
    start: int  # minutes from midnight, e.g. 540 = 9:00
    end: int

    def __post_init__(self):
        if not isinstance(self.day, Day):
            object.__setattr__(self, 'day', Day.parse(self.day))
        for value in (self.start, self.end):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"time slot minutes must be integers, got {value!r}")
        if not (0 <= self.start < self.end <= MINUTES_PER_DAY):
            raise ValueError(f"invalid time slot {self.start}-{self.end} on {self.day.value}")

    def overlaps(self, other: "TimeSlot") -> bool:
        if self.day != other.day:
            return False
        # half-open intervals: touching slots do not overlap
        return self.start < other.end and other.start < self.end

    def __str__(self) -> str:
        return (f"{self.day.value} {self.start // 60}:{self.start % 60:02d}"
                f"-{self.end // 60}:{self.end % 60:02d}")

def _positive_int(value, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{what} must be a positive integer, got {value!r}")
    return value

@dataclass(frozen=True)
class Course:
    id: int
    name: str
    enrollment: int  # number of students taking it
    schedule: Tuple[TimeSlot, ...]

    def __post_init__(self):
        _positive_int(self.enrollment, f"enrollment of course {self.name}")
        object.__setattr__(self, 'schedule', tuple(self.schedule))
        if not self.schedule:
            raise ValueError(f"course {self.name} has an empty schedule")

    def conflicts_with(self, other: "Course") -> bool:
        return any(a.overlaps(b) for a in self.schedule for b in other.schedule)

    def __str__(self) -> str:
        return f"Course[id={self.id}, name={self.name}, enrollment={self.enrollment}]"

@dataclass(frozen=True)
class Room:
    """Immutable room descriptor; bookings live in a per-solve RoomOccupancy."""
    id: int
    name: str
    capacity: int

    def __post_init__(self):
        _positive_int(self.capacity, f"capacity of room {self.name}")

    def __str__(self) -> str:
        return f"Room[id={self.id}, name={self.name}, capacity={self.capacity}]"

@dataclass
class AssignmentResult:
    # course_id -> room; a missing key means the course was not assigned
    assignments: Dict[int, Room] = field(default_factory=dict)
    feasible: bool = True
    total_rooms_used: int = 0
    failed_course_id: Optional[int] = None

    def assign(self, course: Course, room: Room) -> None:
        self.assignments[course.id] = room

    def room_for(self, course_id: int) -> Optional[Room]:
        return self.assignments.get(course_id)

    def mark_infeasible(self, course: Course) -> None:
        self.feasible = False
        self.failed_course_id = course.id
        self.total_rooms_used = 0

    def compute_total_rooms(self) -> int:
        self.total_rooms_used = len({room.id for room in self.assignments.values()})
        return self.total_rooms_used
