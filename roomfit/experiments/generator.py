"""Synthetic course and room generation for the scaling experiments."""

import random
from typing import List, Tuple

from ..models import Course, Day, Room, TimeSlot

# 50-minute teaching blocks, 8:00 through 17:00
SLOT_BLOCKS: Tuple[Tuple[int, int], ...] = tuple((h * 60, h * 60 + 50) for h in range(8, 18))
MWF_DAYS = (Day.MON, Day.WED, Day.FRI)
TR_DAYS = (Day.TUE, Day.THU)

ENROLLMENT_RANGE = (15, 150)

# (share of rooms, min capacity, max capacity); large rooms take the remainder
SMALL_ROOMS = (0.3, 20, 40)
MEDIUM_ROOMS = (0.4, 50, 80)
LARGE_CAPACITY = (100, 200)


def generate_courses(n: int, rng: random.Random) -> List[Course]:
    courses: List[Course] = []
    for i in range(n):
        enrollment = rng.randint(*ENROLLMENT_RANGE)
        days = MWF_DAYS if rng.random() < 0.5 else TR_DAYS
        start, end = rng.choice(SLOT_BLOCKS)
        schedule = tuple(TimeSlot(d, start, end) for d in days)
        courses.append(Course(id=i, name=f"CS{i}", enrollment=enrollment, schedule=schedule))
    return courses


def generate_rooms(n: int, rng: random.Random) -> List[Room]:
    n_small = int(n * SMALL_ROOMS[0])
    n_medium = int(n * MEDIUM_ROOMS[0])
    n_large = n - n_small - n_medium
    bands = (
        [SMALL_ROOMS[1:]] * n_small
        + [MEDIUM_ROOMS[1:]] * n_medium
        + [LARGE_CAPACITY] * n_large
    )
    rooms: List[Room] = []
    for rid, (lo, hi) in enumerate(bands):
        rooms.append(Room(id=rid, name=f"Room{rid + 1}", capacity=rng.randint(lo, hi)))
    return rooms
