"""Loading and saving gym data, and generation of new IDs."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .booking_list import BookingList
from .bookings import Booking
from .course_list import CourseList
from .courses import Course, LessonTime
from .dates import Date
from .member_table import MemberTable
from .members import Member

MEMBERS_FILE = "iscritti.txt"
COURSES_FILE = "corsi.txt"
BOOKINGS_FILE = "prenotazioni.txt"
TABLE_SIZE = 30

_ID_WIDTH = 6
_ID_NUMBER = re.compile(r"\s*([+-]?\d+)")
_TIME = re.compile(r"(-?\d+):(-?\d+)")


def _format_id(prefix: str, number: int) -> str:
    return f"{prefix}{number:03d}"[:_ID_WIDTH]


def _id_number(identifier: str) -> int:
    match = _ID_NUMBER.match(identifier[3:])
    return int(match.group(1)) if match else 0


@dataclass
class IdGenerator:
    """Sequential IDs for members, bookings and courses."""

    member: int = 0
    booking: int = 0
    course: int = 0

    def next_member_id(self) -> str:
        self.member += 1
        return _format_id("CLT", self.member)

    def next_booking_id(self) -> str:
        self.booking += 1
        return _format_id("PRT", self.booking)

    def next_course_id(self) -> str:
        self.course += 1
        return _format_id("CRS", self.course)


def _records(path: str | Path, fields: int) -> Iterator[list[str]]:
    tokens = Path(path).read_text(encoding="utf-8").split()
    if len(tokens) % fields:
        raise ValueError(f"{path}: incomplete record")
    for start in range(0, len(tokens), fields):
        yield tokens[start:start + fields]


def _int(text: str, path: str | Path) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"{path}: expected a number, found {text!r}") from None


def load_members(path: str | Path, table: MemberTable) -> int:
    """Add the members stored in ``path`` to ``table``; return the highest ID number."""
    highest = 0
    for member_id, first, last, day, month, year, months in _records(path, 7):
        joined = Date(_int(day, path), _int(month, path), _int(year, path))
        table.insert(Member(member_id, first, last, joined, _int(months, path)))
        highest = max(highest, _id_number(member_id))
    return highest


def load_courses(path: str | Path, courses: CourseList) -> int:
    """Push the courses stored in ``path`` to the front of ``courses``; return the highest ID number."""
    highest = 0
    for course_id, name, day, month, year, clock, participants in _records(path, 7):
        match = _TIME.fullmatch(clock)
        if match is None:
            raise ValueError(f"{path}: invalid time {clock!r}")
        date = Date(_int(day, path), _int(month, path), _int(year, path))
        time = LessonTime(int(match.group(1)), int(match.group(2)))
        courses.insert(0, Course(course_id, name, date, time, _int(participants, path)))
        highest = max(highest, _id_number(course_id))
    return highest


def load_bookings(path: str | Path, bookings: BookingList) -> int:
    """Push the bookings stored in ``path`` to the front of ``bookings``; return the highest ID number."""
    highest = 0
    for booking_id, course_id, member_id, day, month, year in _records(path, 6):
        date = Date(_int(day, path), _int(month, path), _int(year, path))
        bookings.insert(0, Booking(booking_id, course_id, member_id, date))
        highest = max(highest, _id_number(booking_id))
    return highest


@dataclass
class Gym:
    """All the gym's data, stored as three files in one directory."""

    directory: Path
    members: MemberTable = field(default_factory=lambda: MemberTable(TABLE_SIZE))
    courses: CourseList = field(default_factory=CourseList)
    bookings: BookingList = field(default_factory=BookingList)
    ids: IdGenerator = field(default_factory=IdGenerator)

    @classmethod
    def load(cls, directory: str | Path) -> Gym:
        """Read members, courses and bookings from ``directory``."""
        gym = cls(Path(directory))
        gym.ids = IdGenerator(
            member=load_members(gym.directory / MEMBERS_FILE, gym.members),
            course=load_courses(gym.directory / COURSES_FILE, gym.courses),
            booking=load_bookings(gym.directory / BOOKINGS_FILE, gym.bookings),
        )
        return gym

    def save(self) -> None:
        """Write members, courses and bookings back to the directory."""
        self.members.save(self.directory / MEMBERS_FILE)
        self.courses.save(self.directory / COURSES_FILE)
        self.bookings.save(self.directory / BOOKINGS_FILE)