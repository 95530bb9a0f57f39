from typing import Sequence
import networkx as nx
import pandas as pd

from ..models import AssignmentResult, Course, Room
from ..graph_build import build_conflict_graph
from ..io_utils import format_schedule
from .validation import capacity_ok, complete_ok, conflicts_ok


def room_lower_bound(G: nx.Graph) -> int:
    """Lower bound on distinct rooms via a greedy maximal clique.

    Courses in a clique pairwise conflict, so each needs its own room.
    Picks the highest-degree node, then greedily grows a clique by repeatedly
    adding a node adjacent to all current members. The clique found is a
    heuristic bound, not necessarily the maximum one.
    """
    if G.number_of_nodes() == 0:
        return 0
    seed = max(G.nodes(), key=lambda u: G.degree(u))
    clique = {seed}
    candidates = set(G.neighbors(seed))
    while candidates:
        u = max(candidates, key=lambda v: G.degree(v))
        new_cands = {v for v in candidates if all(G.has_edge(v, w) for w in clique)}
        if u in new_cands:
            clique.add(u)
            candidates = new_cands.intersection(G.neighbors(u))
        else:
            candidates.remove(u)
    return len(clique)

def summary(courses: Sequence[Course], rooms: Sequence[Room], result: AssignmentResult) -> str:
    G = build_conflict_graph(courses)
    n = G.number_of_nodes()
    m = G.number_of_edges()
    lb = room_lower_bound(G)
    ok_cap = capacity_ok(courses, result)
    ok_conf = conflicts_ok(G, result)
    ok_all = complete_ok(courses, result)
    warning = ""
    if len(rooms) < lb:
        warning = (
            f"Warning: rooms={len(rooms)} < clique LB={lb}; no feasible assignment exists.\n"
        )
    status = "feasible" if result.feasible else f"infeasible (stuck at course {result.failed_course_id})"
    return (
        f"Courses: {n}  Conflicts: {m}\n"
        f"Rooms available: {len(rooms)}  Used: {result.total_rooms_used}\n"
        f"Clique lower bound: {lb}\n"
        f"Result: {status}\n"
        f"Valid (capacity): {ok_cap}  Valid (conflicts): {ok_conf}  Complete: {ok_all}\n"
        f"{warning}"
    )

def assignment_table(courses: Sequence[Course], result: AssignmentResult) -> pd.DataFrame:
    rows = []
    for c in courses:
        room = result.room_for(c.id)
        rows.append({
            "course_id": c.id,
            "course": c.name,
            "enrollment": c.enrollment,
            "schedule": format_schedule(c.schedule),
            "room_id": room.id if room else None,
            "room": room.name if room else "",
            "capacity": room.capacity if room else None,
        })
    return pd.DataFrame(rows, columns=["course_id", "course", "enrollment", "schedule",
                                       "room_id", "room", "capacity"])
