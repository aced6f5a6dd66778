import logging
from typing import Iterator, List, Optional

from .errors import EmptyQueue, InvalidCapacity, NullRecord, QueueFull
from .patient_record import PatientRecord

logger = logging.getLogger(__name__)


class PriorityCareAdmissions:
    """Array-based min-heap of PatientRecords with a fixed capacity.

    The root (index 0) always holds the smallest record, i.e. the patient to
    be seen next. Slots ``[0, size)`` are occupied, the rest are ``None``.
    """

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacity()
        self.queue: List[Optional[PatientRecord]] = [None] * capacity
        self._size = 0

    def _parent(self, i: int):
        return (i - 1) // 2

    def _left(self, i: int):
        return 2 * i + 1

    def _right(self, i: int):
        return 2 * i + 2

    def _swap(self, i: int, j: int):
        self.queue[i], self.queue[j] = self.queue[j], self.queue[i]

    def _percolate_up(self, i: int):
        while i > 0:
            parent = self._parent(i)
            if self.queue[i] < self.queue[parent]:
                self._swap(i, parent)
                i = parent
            else:
                break

    def _percolate_down(self, i: int):
        size = self._size
        while True:
            left = self._left(i)
            right = self._right(i)

            if left >= size:
                break
            if right < size and not self.queue[left] < self.queue[right]:
                smaller = right
            else:
                smaller = left

            if self.queue[i] > self.queue[smaller]:
                self._swap(i, smaller)
                i = smaller
            else:
                break

    def insert(self, record: PatientRecord):
        if record is None:
            raise NullRecord()
        if self._size == len(self.queue):
            logger.warning("Admission %s rejected, queue full (%d)", record.case_number, self._size)
            raise QueueFull()

        self.queue[self._size] = record
        self._size += 1
        self._percolate_up(self._size - 1)
        logger.debug("Admitted %s, size=%d", record.case_number, self._size)

    def extract_min(self) -> PatientRecord:
        if self.is_empty():
            raise EmptyQueue()

        best = self.queue[0]
        last = self._size - 1
        self.queue[0] = self.queue[last]
        self.queue[last] = None
        self._size -= 1
        self._percolate_down(0)

        logger.debug("Removed %s, size=%d", best.case_number, self._size)
        return best

    def peek(self) -> PatientRecord:
        if self.is_empty():
            raise EmptyQueue()
        return self.queue[0]

    def size(self):
        return self._size

    def capacity(self):
        return len(self.queue)

    def is_empty(self):
        return self._size == 0

    def clear(self):
        self.queue = [None] * len(self.queue)
        self._size = 0

    def deep_copy(self) -> "PriorityCareAdmissions":
        """Copy the slot array and size; the records themselves are shared."""
        copy = PriorityCareAdmissions(self.capacity())
        copy.queue = list(self.queue)
        copy._size = self._size
        return copy

    def array_heap_copy(self) -> List[Optional[PatientRecord]]:
        return list(self.queue)

    def ordered_listing(self) -> "OrderedListing":
        """List every queued record from highest to lowest priority.

        The snapshot is taken when this method is called, so later changes to
        the live queue do not show up in a listing already handed out.
        """
        return OrderedListing(self.deep_copy())

    def __iter__(self) -> Iterator[PatientRecord]:
        return iter(self.ordered_listing())

    def __str__(self):
        return "".join(f"{record}\n" for record in self.ordered_listing())


class OrderedListing:
    """Lazy, replayable view of a queue snapshot in priority order.

    Each iteration drains its own copy of the snapshot, so the listing can be
    walked any number of times.
    """

    def __init__(self, snapshot: PriorityCareAdmissions):
        self._snapshot = snapshot

    def __iter__(self) -> Iterator[PatientRecord]:
        remaining = self._snapshot.deep_copy()
        while not remaining.is_empty():
            yield remaining.extract_min()

    def __len__(self):
        return self._snapshot.size()
