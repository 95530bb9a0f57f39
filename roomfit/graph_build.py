from typing import Iterable
import networkx as nx

from .models import Course


def build_conflict_graph(courses: Iterable[Course]) -> nx.Graph:
    """One node per course id, one edge per pair of courses whose schedules overlap."""
    courses = list(courses)
    G = nx.Graph()
    for c in courses:
        G.add_node(c.id, enrollment=c.enrollment, name=c.name)
    for i in range(len(courses)):
        for j in range(i + 1, len(courses)):
            u, v = courses[i], courses[j]
            if u.conflicts_with(v):
                G.add_edge(u.id, v.id)
    return G
