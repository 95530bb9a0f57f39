import logging
import random
import time
from typing import List, Sequence

import numpy as np
import pandas as pd

from ..scheduling.room_assignment import GreedyAssignmentSolver
from .generator import generate_courses, generate_rooms

logger = logging.getLogger(__name__)

DEFAULT_COUNTS = (10, 50, 100, 200, 500, 1000)
DEFAULT_ITERATIONS = 10
ROOMS_PER_COURSE = 0.4
MIN_ROOMS = 10


def rooms_for(n_courses: int) -> int:
    return max(MIN_ROOMS, int(n_courses * ROOMS_PER_COURSE))


def _timed_solve(solver: GreedyAssignmentSolver, n_courses: int, rng: random.Random):
    courses = generate_courses(n_courses, rng)
    rooms = generate_rooms(rooms_for(n_courses), rng)
    t0 = time.perf_counter()
    result = solver.solve(courses, rooms)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0
    return result, elapsed_ms


def run_experiment(course_counts: Sequence[int] = DEFAULT_COUNTS, seed: int = 42) -> pd.DataFrame:
    """One solve per course count: timing, rooms used and feasibility."""
    rng = random.Random(seed)
    solver = GreedyAssignmentSolver()
    rows = []
    for n in course_counts:
        result, ms = _timed_solve(solver, n, rng)
        logger.info("courses=%d rooms=%d time=%.2fms feasible=%s", n, rooms_for(n), ms, result.feasible)
        rows.append({
            "courses": n,
            "rooms": rooms_for(n),
            "time_ms": ms,
            "rooms_used": result.total_rooms_used,
            "success": result.feasible,
        })
    return pd.DataFrame(rows, columns=["courses", "rooms", "time_ms", "rooms_used", "success"])


def run_detailed_experiment(iterations: int = DEFAULT_ITERATIONS,
                            course_counts: Sequence[int] = DEFAULT_COUNTS,
                            seed: int = 42) -> pd.DataFrame:
    """Repeat each course count `iterations` times on fresh inputs and aggregate.

    avg_rooms only averages feasible runs (0 if none were); std_time_ms is the
    population standard deviation.
    """
    if iterations <= 0:
        raise ValueError("iterations must be positive")
    rng = random.Random(seed)
    solver = GreedyAssignmentSolver()
    rows = []
    for n in course_counts:
        times: List[float] = []
        rooms_used: List[int] = []
        successes = 0
        for _ in range(iterations):
            result, ms = _timed_solve(solver, n, rng)
            times.append(ms)
            if result.feasible:
                successes += 1
                rooms_used.append(result.total_rooms_used)
        rows.append({
            "courses": n,
            "avg_time_ms": float(np.mean(times)),
            "std_time_ms": float(np.std(times)),
            "avg_rooms": float(np.mean(rooms_used)) if rooms_used else 0.0,
            "success_rate": successes * 100.0 / iterations,
        })
        logger.info("courses=%d success_rate=%.1f%%", n, rows[-1]["success_rate"])
    return pd.DataFrame(rows, columns=["courses", "avg_time_ms", "std_time_ms", "avg_rooms", "success_rate"])


def format_table(df: pd.DataFrame) -> str:
    return df.to_string(index=False, float_format=lambda x: f"{x:.2f}")
