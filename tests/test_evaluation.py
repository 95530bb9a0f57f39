import sys
from pathlib import Path

# Ensure project root is on PYTHONPATH
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roomfit.demo import demo_courses, demo_rooms, run_demo
from roomfit.graph_build import build_conflict_graph
from roomfit.models import AssignmentResult, Course, Day, Room, TimeSlot
from roomfit.scheduling.evaluation import assignment_table, room_lower_bound, summary
from roomfit.scheduling.validation import capacity_ok, complete_ok, conflicts_ok, result_ok


def same_slot_courses(k):
    return [Course(i, f"C{i}", 10, [TimeSlot(Day.MON, 540, 600)]) for i in range(k)]


def test_conflict_graph_of_demo():
    G = build_conflict_graph(demo_courses())
    assert set(G.nodes()) == {1, 2, 3, 4}
    assert {frozenset(e) for e in G.edges()} == {frozenset((1, 3)), frozenset((2, 4))}
    assert G.nodes[4]["enrollment"] == 120


def test_lower_bound_is_clique_size():
    assert room_lower_bound(build_conflict_graph([])) == 0
    assert room_lower_bound(build_conflict_graph(demo_courses())) == 2
    assert room_lower_bound(build_conflict_graph(same_slot_courses(4))) == 4


def test_summary_warns_when_rooms_below_bound():
    courses = same_slot_courses(3)
    rooms = [Room(1, "A", 50), Room(2, "B", 50)]
    result = AssignmentResult()
    result.mark_infeasible(courses[2])
    text = summary(courses, rooms, result)
    assert "Clique lower bound: 3" in text
    assert "Warning" in text
    assert "infeasible" in text


def test_summary_of_demo():
    text = summary(demo_courses(), demo_rooms(), run_demo())
    assert "Used: 3" in text
    assert "Result: feasible" in text
    assert "Warning" not in text


def test_validation_flags_bad_assignments():
    courses = same_slot_courses(2)
    small, big = Room(1, "Small", 5), Room(2, "Big", 50)
    result = AssignmentResult()
    result.assign(courses[0], big)
    assert not complete_ok(courses, result)
    result.assign(courses[1], big)
    assert not conflicts_ok(build_conflict_graph(courses), result)
    result.assign(courses[1], small)
    assert not capacity_ok(courses, result)
    assert not result_ok(courses, result)
    assert result_ok(demo_courses(), run_demo())


def test_assignment_table_keeps_input_order():
    df = assignment_table(demo_courses(), run_demo())
    assert list(df["course"]) == ["CS101", "CS201", "CS301", "MATH101"]
    assert list(df["room"]) == ["RoomA", "RoomB", "RoomB", "RoomC"]
    assert df.loc[0, "schedule"] == "MON 540-650;WED 540-650"
