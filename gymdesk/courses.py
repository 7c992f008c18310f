"""Courses and their lesson times."""

from __future__ import annotations

from dataclasses import dataclass

from .dates import Date

MAX_PARTICIPANTS = 20
SEPARATOR = "=============================="


@dataclass(frozen=True)
class LessonTime:
    """A time of day, hours and minutes."""

    hour: int
    minute: int

    def compare(self, other: LessonTime) -> int:
        """Return -1, 0 or 1 as this time is before, equal to or after ``other``."""
        mine, theirs = (self.hour, self.minute), (other.hour, other.minute)
        return (mine > theirs) - (mine < theirs)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass
class Course:
    """A lesson on a given date and time, with a count of booked participants."""

    course_id: str
    name: str
    date: Date
    time: LessonTime
    participants: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.time.hour < 24 or not 0 <= self.time.minute < 60:
            raise ValueError(f"invalid lesson time {self.time.hour}:{self.time.minute}")
        if self.participants < 0:
            raise ValueError("the number of participants cannot be negative")

    def is_available(self) -> bool:
        """True while the course has free places."""
        return self.participants < MAX_PARTICIPANTS

    def add_participant(self) -> None:
        self.participants += 1

    def remove_participant(self) -> None:
        self.participants -= 1

    def describe(self) -> str:
        """Full description; empty when the course is full."""
        if not self.is_available():
            return ""
        return "\n".join(
            [
                SEPARATOR,
                f"ID: {self.course_id}",
                f"Nome: {self.name}",
                f"Data Lezione: {self.date}",
                f"Orario: {self.time}",
                f"Numero Partecipanti: {self.participants}",
            ]
        ) + "\n"

    def summary_row(self) -> str:
        """One table row: ID, name, date and time; empty when the course is full."""
        if not self.is_available():
            return ""
        d = self.date
        return (
            f"{self.course_id:<8} {self.name:<12} "
            f"{d.day:02d}/{d.month:02d}/{d.year:04d}   {self.time}"
        )

    def to_record(self) -> str:
        """The line that stores this course in the courses file."""
        d = self.date
        return f"{self.course_id} {self.name} {d.day} {d.month} {d.year} {self.time} {self.participants}"