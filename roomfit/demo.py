from typing import List

from .models import AssignmentResult, Course, Day, Room, TimeSlot
from .scheduling.room_assignment import GreedyAssignmentSolver


def _twice_weekly(d1: Day, d2: Day, start: int, end: int):
    return (TimeSlot(d1, start, end), TimeSlot(d2, start, end))


def demo_courses() -> List[Course]:
    return [
        Course(1, "CS101", 45, _twice_weekly(Day.MON, Day.WED, 540, 650)),
        Course(2, "CS201", 80, _twice_weekly(Day.TUE, Day.THU, 600, 710)),
        Course(3, "CS301", 30, _twice_weekly(Day.MON, Day.WED, 540, 650)),    # clashes with CS101
        Course(4, "MATH101", 120, _twice_weekly(Day.TUE, Day.THU, 600, 710)),  # clashes with CS201
    ]


def demo_rooms() -> List[Room]:
    return [
        Room(1, "RoomA", 50),
        Room(2, "RoomB", 100),
        Room(3, "RoomC", 150),
    ]


def run_demo() -> AssignmentResult:
    return GreedyAssignmentSolver().solve(demo_courses(), demo_rooms())
