"""An ordered list of courses with search helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from .courses import Course, LessonTime
from .dates import Date

EMPTY_MESSAGE = "La lista è vuota o non inizializzata.\n"


class CourseList:
    """Courses kept in insertion order; searches return new lists."""

    def __init__(self, courses: Iterable[Course] = ()) -> None:
        self._courses: list[Course] = list(courses)

    def insert(self, pos: int, course: Course) -> None:
        """Insert ``course`` at position ``pos`` (0 is the front)."""
        if not 0 <= pos <= len(self._courses):
            raise IndexError(f"position {pos} out of range")
        self._courses.insert(pos, course)

    def remove(self, pos: int) -> Course:
        """Remove and return the course at position ``pos``."""
        if not 0 <= pos < len(self._courses):
            raise IndexError(f"position {pos} out of range")
        return self._courses.pop(pos)

    def reversed_copy(self) -> CourseList:
        """A new list holding the same courses in reverse order."""
        return CourseList(reversed(self._courses))

    def _matching(self, predicate: Callable[[Course], bool]) -> CourseList:
        # Each match is pushed to the front, so results come out reversed.
        return CourseList(reversed([c for c in self._courses if predicate(c)]))

    def find_by_id(self, course_id: str) -> CourseList:
        return self._matching(lambda c: c.course_id == course_id)

    def find_by_name(self, name: str) -> CourseList:
        return self._matching(lambda c: c.name == name)

    def find_by_date(self, date: Date) -> CourseList:
        return self._matching(lambda c: date.compare(c.date) == 0)

    def find_by_time(self, hour: int, minute: int) -> CourseList:
        target = LessonTime(hour, minute)
        return self._matching(lambda c: target.compare(c.time) == 0)

    def first(self) -> Course | None:
        """The first course, or None when the list is empty."""
        return self._courses[0] if self._courses else None

    def delete_course(self, course_id: str) -> Course:
        """Remove and return the first course with ``course_id``; KeyError if absent."""
        for index, course in enumerate(self._courses):
            if course.course_id == course_id:
                return self._courses.pop(index)
        raise KeyError(course_id)

    def describe(self) -> str:
        """Full descriptions of every course with free places."""
        if not self._courses:
            return EMPTY_MESSAGE
        return "".join(c.describe() for c in self._courses) + "\n"

    def summary(self) -> str:
        """A table of ID, name, date and time for every course with free places."""
        if not self._courses:
            return EMPTY_MESSAGE
        lines = [f"{'ID':<8} {'Nome':<12} {'Data':<12} Orario"]
        lines.extend(row for row in (c.summary_row() for c in self._courses) if row)
        return "\n".join(lines) + "\n\n"

    def save(self, path: str | Path) -> None:
        """Write every course, one record per line, to ``path``."""
        with open(path, "w", encoding="utf-8") as handle:
            for course in self._courses:
                handle.write(course.to_record() + "\n")

    def __iter__(self) -> Iterator[Course]:
        return iter(self._courses)

    def __len__(self) -> int:
        return len(self._courses)