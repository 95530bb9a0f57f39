from typing import Iterable
import networkx as nx

from ..models import AssignmentResult, Course
from ..graph_build import build_conflict_graph


def capacity_ok(courses: Iterable[Course], result: AssignmentResult) -> bool:
    for course in courses:
        room = result.room_for(course.id)
        if room is not None and room.capacity < course.enrollment:
            return False
    return True

def conflicts_ok(G: nx.Graph, result: AssignmentResult) -> bool:
    for u, v in G.edges():
        ru, rv = result.room_for(u), result.room_for(v)
        if ru is not None and rv is not None and ru.id == rv.id:
            return False
    return True

def complete_ok(courses: Iterable[Course], result: AssignmentResult) -> bool:
    return all(c.id in result.assignments for c in courses)

def result_ok(courses: Iterable[Course], result: AssignmentResult) -> bool:
    courses = list(courses)
    if not result.feasible:
        return False
    G = build_conflict_graph(courses)
    return complete_ok(courses, result) and capacity_ok(courses, result) and conflicts_ok(G, result)
