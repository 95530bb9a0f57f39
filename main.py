import argparse
import logging
from typing import List

from roomfit.demo import demo_courses, demo_rooms
from roomfit.io_utils import load_courses, load_rooms, save_assignment_csv
from roomfit.scheduling.room_assignment import GreedyAssignmentSolver
from roomfit.scheduling.evaluation import summary, assignment_table
from roomfit.experiments.runner import (
    DEFAULT_COUNTS, DEFAULT_ITERATIONS, run_experiment, run_detailed_experiment, format_table
)


def parse_counts(text: str) -> List[int]:
    try:
        counts = [int(x) for x in text.split(',') if x.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"--counts expects comma-separated integers, got {text!r}")
    if not counts or any(c < 0 for c in counts):
        raise argparse.ArgumentTypeError("--counts needs at least one non-negative integer")
    return counts


def print_assignment(courses, rooms, result):
    print(summary(courses, rooms, result))
    if result.feasible:
        print(assignment_table(courses, result).to_string(index=False))
    else:
        print("No feasible assignment found!")


def main():
    p = argparse.ArgumentParser(description="RoomFit – greedy course-to-room assignment")
    # Modes
    p.add_argument('--demo', action='store_true', help='Solve the built-in four-course example (default)')
    p.add_argument('--courses', type=str, help='courses.csv with id,name,enrollment,schedule')
    p.add_argument('--rooms', type=str, help='rooms.csv with id,name,capacity')
    p.add_argument('--experiment', action='store_true', help='Run synthetic scaling experiments')

    # Experiment params
    p.add_argument('--counts', type=parse_counts, default=list(DEFAULT_COUNTS),
                   help='Comma-separated course counts')
    p.add_argument('--iterations', type=int, default=DEFAULT_ITERATIONS)
    p.add_argument('--seed', type=int, default=42)

    # Output
    p.add_argument('--out_assignment', type=str, default='assignment.csv')
    p.add_argument('--out_results', type=str, default=None, help='CSV for the detailed experiment table')
    p.add_argument('--log_level', type=str.upper, default='WARNING',
                   choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    args = p.parse_args()

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if bool(args.courses) != bool(args.rooms):
        raise SystemExit("Provide both --courses and --rooms")

    if args.courses:
        try:
            courses = load_courses(args.courses)
            rooms = load_rooms(args.rooms)
        except (OSError, ValueError) as e:
            raise SystemExit(f"Could not load input: {e}")
        try:
            result = GreedyAssignmentSolver().solve(courses, rooms)
        except ValueError as e:
            raise SystemExit(str(e))
        print_assignment(courses, rooms, result)
        if result.feasible:
            save_assignment_csv(args.out_assignment, courses, result)
            print(f"Saved: {args.out_assignment}")
    elif not args.experiment or args.demo:
        print("=== ROOM ASSIGNMENT DEMO ===\n")
        courses, rooms = demo_courses(), demo_rooms()
        print_assignment(courses, rooms, GreedyAssignmentSolver().solve(courses, rooms))

    if args.experiment:
        if args.iterations <= 0:
            raise SystemExit("--iterations must be positive")
        print("\n=== EXPERIMENTAL VALIDATION ===\n")
        print(format_table(run_experiment(args.counts, seed=args.seed)))
        print(f"\nDetailed performance analysis ({args.iterations} iterations per count):")
        detailed = run_detailed_experiment(args.iterations, args.counts, seed=args.seed)
        print(format_table(detailed))
        if args.out_results:
            detailed.to_csv(args.out_results, index=False)
            print(f"Saved: {args.out_results}")


if __name__ == '__main__':
    main()
