from typing import Dict, Iterable, List, Tuple

from ..models import Room, TimeSlot


class RoomOccupancy:
    """Per-solve booking index: room id -> slots already taken in that room.

    Built fresh for every solve so room descriptors never carry state
    between calls.
    """

    def __init__(self, rooms: Iterable[Room]):
        self._occupied: Dict[int, List[TimeSlot]] = {}
        for room in rooms:
            if room.id in self._occupied:
                raise ValueError(f"duplicate room id {room.id}")
            self._occupied[room.id] = []

    def reset(self) -> None:
        for slots in self._occupied.values():
            slots.clear()

    def _slots(self, room: Room) -> List[TimeSlot]:
        try:
            return self._occupied[room.id]
        except KeyError:
            raise KeyError(f"room {room.id} is not tracked by this occupancy index") from None

    def is_available(self, room: Room, requested: Iterable[TimeSlot]) -> bool:
        occupied = self._slots(room)
        for req in requested:
            for taken in occupied:
                if req.overlaps(taken):
                    return False
        return True

    def occupy(self, room: Room, slots: Iterable[TimeSlot]) -> None:
        # no dedup or merging; overlap checks don't care about duplicates
        self._slots(room).extend(slots)

    def occupied(self, room: Room) -> Tuple[TimeSlot, ...]:
        return tuple(self._slots(room))

    def __len__(self) -> int:
        return len(self._occupied)
