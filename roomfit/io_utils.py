import csv
import io
import os
from typing import Iterable, List, Sequence, Tuple, Union, IO

from .models import AssignmentResult, Course, Day, Room, TimeSlot

TextOrPath = Union[str, os.PathLike, IO]


def _open_text(src: TextOrPath):
    """Return a text-mode file handle and a flag indicating whether to close it.

    Accepts a filesystem path, a text IO object, or a BytesIO buffer
    (e.g. a streamlit upload). Ensures CSV readers get strings, not bytes.
    """
    if isinstance(src, (str, os.PathLike)):
        f = open(src, 'r', newline='')
        return f, True
    if isinstance(src, io.BytesIO):
        src.seek(0)
        f = io.TextIOWrapper(src, encoding='utf-8', newline='')
        return f, True
    if hasattr(src, 'read'):
        if hasattr(src, 'seekable') and src.seekable():
            src.seek(0)
        return src, False
    raise TypeError("Unsupported input type; expected path or file-like object")


def parse_schedule(text: str) -> Tuple[TimeSlot, ...]:
    """Parse 'MON 540-650;WED 540-650' into time slots."""
    slots: List[TimeSlot] = []
    for part in str(text).split(';'):
        part = part.strip()
        if not part:
            continue
        try:
            day, span = part.split()
            start, end = span.split('-')
            slots.append(TimeSlot(Day.parse(day), int(start), int(end)))
        except ValueError as e:
            raise ValueError(f"bad time slot {part!r}: {e}") from e
    return tuple(slots)


def format_schedule(slots: Iterable[TimeSlot]) -> str:
    return ';'.join(f"{s.day.value} {s.start}-{s.end}" for s in slots)


def load_courses(src: TextOrPath) -> List[Course]:
    """CSV with columns id,name,enrollment,schedule."""
    courses: List[Course] = []
    f, should_close = _open_text(src)
    try:
        r = csv.DictReader(f)
        for lineno, row in enumerate(r, start=2):
            try:
                cid = int(row['id'])
                courses.append(Course(
                    id=cid,
                    name=(row.get('name') or f"Course{cid}").strip(),
                    enrollment=int(row['enrollment']),
                    schedule=parse_schedule(row['schedule'] or ''),
                ))
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"courses row {lineno}: {e}") from e
    finally:
        if should_close:
            f.close()
    return courses


def load_rooms(src: TextOrPath) -> List[Room]:
    """CSV with columns id,capacity and an optional name."""
    rooms: List[Room] = []
    f, should_close = _open_text(src)
    try:
        r = csv.DictReader(f)
        for lineno, row in enumerate(r, start=2):
            try:
                rid = int(row['id'])
                rooms.append(Room(
                    id=rid,
                    name=(row.get('name') or f"Room{rid}").strip(),
                    capacity=int(row['capacity']),
                ))
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"rooms row {lineno}: {e}") from e
    finally:
        if should_close:
            f.close()
    return rooms


def write_assignment(f: IO, courses: Sequence[Course], result: AssignmentResult):
    w = csv.writer(f)
    w.writerow(['course_id', 'course', 'room_id', 'room'])
    for c in courses:
        room = result.room_for(c.id)
        if room is not None:
            w.writerow([c.id, c.name, room.id, room.name])


def save_assignment_csv(path: str, courses: Sequence[Course], result: AssignmentResult):
    with open(path, 'w', newline='') as f:
        write_assignment(f, courses, result)
