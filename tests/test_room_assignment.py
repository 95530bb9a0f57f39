import random
import sys
from pathlib import Path

import pytest

# Ensure project root is on PYTHONPATH
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roomfit.demo import demo_courses, demo_rooms, run_demo
from roomfit.experiments.generator import generate_courses, generate_rooms
from roomfit.models import Course, Day, Room, TimeSlot
from roomfit.scheduling.room_assignment import GreedyAssignmentSolver, assign_rooms_greedy
from roomfit.scheduling.validation import result_ok


def mon(start, end):
    return TimeSlot(Day.MON, start, end)


def test_single_course_single_room_is_feasible():
    course = Course(1, "CS101", 45, [mon(540, 650), TimeSlot(Day.WED, 540, 650)])
    room = Room(1, "RoomA", 50)
    result = GreedyAssignmentSolver().solve([course], [room])
    assert result.feasible
    assert result.total_rooms_used == 1
    assert result.room_for(1) == room


def test_identical_schedules_with_one_room_are_infeasible():
    courses = [Course(1, "A", 30, [mon(540, 650)]), Course(2, "B", 30, [mon(540, 650)])]
    result = GreedyAssignmentSolver().solve(courses, [Room(1, "Big", 100)])
    assert not result.feasible
    # stable order: A goes first, B is the one left without a room
    assert result.failed_course_id == 2


def test_demo_example_uses_three_rooms():
    result = run_demo()
    assert result.feasible
    assert result.total_rooms_used == 3
    names = {cid: room.name for cid, room in result.assignments.items()}
    assert names == {4: "RoomC", 2: "RoomB", 1: "RoomA", 3: "RoomB"}


def test_no_courses_is_trivially_feasible():
    result = GreedyAssignmentSolver().solve([], demo_rooms())
    assert result.feasible
    assert result.total_rooms_used == 0
    assert result.assignments == {}


def test_course_larger_than_every_room_fails_fast():
    courses = demo_courses() + [Course(9, "HUGE", 400, [TimeSlot(Day.FRI, 480, 530)])]
    result = GreedyAssignmentSolver().solve(courses, demo_rooms())
    assert not result.feasible
    assert result.failed_course_id == 9
    # largest course is tried first, so nothing was placed before the abort
    assert result.assignments == {}


def test_solve_is_idempotent():
    solver = GreedyAssignmentSolver()
    courses, rooms = demo_courses(), demo_rooms()
    first = solver.solve(courses, rooms)
    second = solver.solve(courses, rooms)
    assert first == second


def test_adding_a_large_room_restores_feasibility():
    courses = [Course(1, "A", 30, [mon(540, 650)]), Course(2, "B", 30, [mon(540, 650)])]
    rooms = [Room(1, "Big", 100)]
    assert not assign_rooms_greedy(courses, rooms).feasible
    assert assign_rooms_greedy(courses, rooms + [Room(2, "Bigger", 200)]).feasible


def test_adding_a_large_room_keeps_feasible_result_feasible():
    rooms = demo_rooms() + [Room(4, "Hall", 300)]
    assert assign_rooms_greedy(demo_courses(), rooms).feasible


def test_best_fit_prefers_smallest_eligible_room():
    course = Course(1, "A", 40, [mon(540, 600)])
    rooms = [Room(1, "Large", 200), Room(2, "Tiny", 20), Room(3, "Snug", 45), Room(4, "Mid", 80)]
    assert assign_rooms_greedy([course], rooms).room_for(1).name == "Snug"


def test_equal_capacity_rooms_keep_input_order():
    course = Course(1, "A", 40, [mon(540, 600)])
    first = assign_rooms_greedy([course], [Room(7, "R7", 50), Room(3, "R3", 50)])
    second = assign_rooms_greedy([course], [Room(3, "R3", 50), Room(7, "R7", 50)])
    assert first.room_for(1).id == 7
    assert second.room_for(1).id == 3


def test_equal_enrollments_keep_input_order():
    courses = [Course(5, "First", 30, [mon(540, 600)]), Course(2, "Second", 30, [mon(540, 600)])]
    rooms = [Room(1, "Small", 35), Room(2, "Large", 90)]
    result = assign_rooms_greedy(courses, rooms)
    assert result.room_for(5).name == "Small"
    assert result.room_for(2).name == "Large"


def test_duplicate_course_ids_are_rejected():
    courses = [Course(1, "A", 10, [mon(540, 600)]), Course(1, "B", 10, [mon(600, 660)])]
    with pytest.raises(ValueError):
        assign_rooms_greedy(courses, demo_rooms())


def test_duplicate_room_ids_are_rejected():
    with pytest.raises(ValueError):
        assign_rooms_greedy(demo_courses(), [Room(1, "A", 50), Room(1, "B", 150)])


@pytest.mark.parametrize("seed", [1, 7, 42, 2024])
def test_feasible_results_respect_capacity_and_conflicts(seed):
    rng = random.Random(seed)
    courses = generate_courses(60, rng)
    rooms = generate_rooms(30, rng)
    result = assign_rooms_greedy(courses, rooms)
    assert result.feasible
    assert result_ok(courses, result)
    for c in courses:
        assert result.room_for(c.id).capacity >= c.enrollment
    for i, a in enumerate(courses):
        for b in courses[i + 1:]:
            if result.room_for(a.id).id == result.room_for(b.id).id:
                assert not a.conflicts_with(b)


def test_solve_accepts_one_shot_iterables():
    courses = (c for c in [Course(1, "A", 10, [mon(540, 600)])])
    rooms = (r for r in [Room(1, "R", 5)])
    result = GreedyAssignmentSolver().solve(courses, rooms)
    assert not result.feasible
    assert result.failed_course_id == 1

    result = GreedyAssignmentSolver().solve(iter(demo_courses()), iter(demo_rooms()))
    assert result.feasible
    assert result.total_rooms_used == 3
