"""A school class whose members are walked by an iterator: teacher first, then students."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator


class Member(ABC):
    """A member of a class."""

    @abstractmethod
    def desc(self) -> str:
        """Describe the member."""


class Teacher(Member):
    """The head teacher and the subject taught."""

    def __init__(self, name: str, subject: str) -> None:
        self.name = name
        self.subject = subject

    def desc(self) -> str:
        return f"{self.name}班主任老师负责教{self.subject}"


class Student(Member):
    """A student and their total exam score."""

    def __init__(self, name: str, sum_score: int) -> None:
        self.name = name
        self.sum_score = sum_score

    def desc(self) -> str:
        return f"{self.name}同学考试总分为{self.sum_score}"


class MemberIterator:
    """Iterates over a class: the teacher, then every student in order."""

    def __init__(self, school_class: SchoolClass) -> None:
        self.school_class = school_class
        self._index = -1

    def has_more(self) -> bool:
        """Return True while members remain."""
        return self._index < len(self.school_class.students)

    def __next__(self) -> Member:
        if not self.has_more():
            raise StopIteration
        if self._index == -1:
            self._index += 1
            return self.school_class.teacher
        student = self.school_class.students[self._index]
        self._index += 1
        return student

    def __iter__(self) -> MemberIterator:
        return self


class SchoolClass:
    """A class with a head teacher and its students."""

    def __init__(self, name: str, teacher_name: str, teacher_subject: str) -> None:
        self.name = name
        self.teacher = Teacher(teacher_name, teacher_subject)
        self.students: list[Student] = []

    def add_student(self, *students: Student) -> None:
        """Add students to the class."""
        self.students.extend(students)

    def create_iterator(self) -> MemberIterator:
        """Return a fresh iterator over the members."""
        return MemberIterator(self)

    def __iter__(self) -> Iterator[Member]:
        return self.create_iterator()