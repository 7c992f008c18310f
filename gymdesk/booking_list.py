"""An ordered list of bookings with search and cancellation helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from .bookings import Booking
from .dates import Date

EMPTY_MESSAGE = "Non ci sono prenotazioni.\n"


class BookingList:
    """Bookings kept in insertion order; searches return new lists."""

    def __init__(self, bookings: Iterable[Booking] = ()) -> None:
        self._bookings: list[Booking] = list(bookings)

    def insert(self, pos: int, booking: Booking) -> None:
        """Insert ``booking`` at position ``pos`` (0 is the front)."""
        if not 0 <= pos <= len(self._bookings):
            raise IndexError(f"position {pos} out of range")
        self._bookings.insert(pos, booking)

    def remove(self, pos: int) -> Booking:
        """Remove and return the booking at position ``pos``."""
        if not 0 <= pos < len(self._bookings):
            raise IndexError(f"position {pos} out of range")
        return self._bookings.pop(pos)

    def reversed_copy(self) -> BookingList:
        """A new list holding the same bookings in reverse order."""
        return BookingList(reversed(self._bookings))

    def _matching(self, predicate: Callable[[Booking], bool]) -> BookingList:
        # Each match is pushed to the front, so results come out reversed.
        return BookingList(reversed([b for b in self._bookings if predicate(b)]))

    def find_by_member(self, member_id: str) -> BookingList:
        return self._matching(lambda b: b.member_id == member_id)

    def find_by_course(self, course_id: str) -> BookingList:
        return self._matching(lambda b: b.course_id == course_id)

    def find_by_id(self, booking_id: str) -> BookingList:
        return self._matching(lambda b: b.booking_id == booking_id)

    def find_by_date(self, date: Date) -> BookingList:
        """Bookings made on ``date``, in list order."""
        return BookingList(b for b in self._bookings if date.compare(b.date) == 0)

    def cancel(self, booking_id: str, member_id: str) -> Booking:
        """Remove and return the booking with both IDs; KeyError if there is none."""
        for index, booking in enumerate(self._bookings):
            if booking.booking_id == booking_id and booking.member_id == member_id:
                return self._bookings.pop(index)
        raise KeyError(booking_id)

    def _cancel_where(self, predicate: Callable[[Booking], bool]) -> int:
        kept = [b for b in self._bookings if not predicate(b)]
        removed = len(self._bookings) - len(kept)
        self._bookings[:] = kept
        return removed

    def cancel_for_member(self, member_id: str) -> int:
        """Remove every booking of a member; return how many were removed."""
        return self._cancel_where(lambda b: b.member_id == member_id)

    def cancel_for_course(self, course_id: str) -> int:
        """Remove every booking on a course; return how many were removed."""
        return self._cancel_where(lambda b: b.course_id == course_id)

    def first(self) -> Booking | None:
        """The first booking, or None when the list is empty."""
        return self._bookings[0] if self._bookings else None

    def describe(self) -> str:
        """Full descriptions of every booking."""
        if not self._bookings:
            return EMPTY_MESSAGE
        return "".join(b.describe() for b in self._bookings) + "\n"

    def save(self, path: str | Path) -> None:
        """Write every booking, one record per line, to ``path``."""
        with open(path, "w", encoding="utf-8") as handle:
            for booking in self._bookings:
                handle.write(booking.to_record() + "\n")

    def __iter__(self) -> Iterator[Booking]:
        return iter(self._bookings)

    def __len__(self) -> int:
        return len(self._bookings)