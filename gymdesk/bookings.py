"""Bookings of members on courses."""

from __future__ import annotations

from dataclasses import dataclass

from .dates import Date

SEPARATOR = "=============================="


@dataclass
class Booking:
    """A member's place on a course, made on a given date."""

    booking_id: str
    course_id: str
    member_id: str
    date: Date

    def describe(self) -> str:
        """Full, multi-line description of the booking."""
        return "\n".join(
            [
                SEPARATOR,
                f"ID Prenotazione: {self.booking_id}",
                f"ID Corso: {self.course_id}",
                f"ID Cliente: {self.member_id}",
                f"Data Prenotazione: {self.date}",
            ]
        ) + "\n"

    def to_record(self) -> str:
        """The line that stores this booking in the bookings file."""
        d = self.date
        return f"{self.booking_id} {self.course_id} {self.member_id} {d.day} {d.month} {d.year}"