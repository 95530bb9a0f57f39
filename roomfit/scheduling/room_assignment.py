import logging
from bisect import bisect_left
from typing import Iterable, List, Optional

from ..models import AssignmentResult, Course, Room
from .occupancy import RoomOccupancy

logger = logging.getLogger(__name__)


class GreedyAssignmentSolver:
    """Largest-course-first, best-fit room assignment.

    Courses are placed in descending enrollment order (stable for ties).
    Each course takes the smallest eligible room that is free for its whole
    schedule; rooms of equal capacity keep their input order. The first
    course that cannot be placed makes the result infeasible and ends the
    pass. Nothing is ever moved once placed.
    """

    def solve(self, courses: Iterable[Course], rooms: Iterable[Room]) -> AssignmentResult:
        courses, rooms = list(courses), list(rooms)
        result = AssignmentResult()
        seen = set()
        for course in courses:
            if course.id in seen:
                raise ValueError(f"duplicate course id {course.id}")
            seen.add(course.id)

        occupancy = RoomOccupancy(rooms)
        occupancy.reset()

        by_capacity = sorted(rooms, key=lambda r: r.capacity)
        capacities = [r.capacity for r in by_capacity]

        for course in sorted(courses, key=lambda c: c.enrollment, reverse=True):
            room = self._first_available(course, by_capacity, capacities, occupancy)
            if room is None:
                logger.info("no room available for %s (enrollment %d); assignment infeasible",
                            course.name, course.enrollment)
                result.mark_infeasible(course)
                return result
            logger.debug("%s -> %s", course.name, room.name)
            result.assign(course, room)
            occupancy.occupy(room, course.schedule)

        result.compute_total_rooms()
        logger.debug("placed %d courses in %d rooms", len(result.assignments), result.total_rooms_used)
        return result

    @staticmethod
    def _first_available(course: Course, by_capacity: List[Room], capacities: List[int],
                         occupancy: RoomOccupancy) -> Optional[Room]:
        # rooms from here on are exactly the eligible ones, smallest first
        lo = bisect_left(capacities, course.enrollment)
        for room in by_capacity[lo:]:
            if occupancy.is_available(room, course.schedule):
                return room
        return None


def assign_rooms_greedy(courses: Iterable[Course], rooms: Iterable[Room]) -> AssignmentResult:
    return GreedyAssignmentSolver().solve(courses, rooms)
