from typing import Iterable, Iterator

from ._models import Student


class InMemoryIndex:
    """
    Process-local cache of students keyed by id.

    Callers keep it in step with the store by pairing insert/remove with
    put/delete; it is never re-read from disk after `rebuild`.
    """

    def __init__(self, students: Iterable[Student] = ()):
        self._students: dict[str, Student] = {}
        self.rebuild(students)

    def __repr__(self) -> str:
        return f"InMemoryIndex({len(self)})"

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, key: str) -> bool:
        return key in self._students

    def __iter__(self) -> Iterator[Student]:
        for key in sorted(self._students):
            yield self._students[key]

    def rebuild(self, students: Iterable[Student]) -> None:
        self._students = {}
        for student in students:
            self.insert(student)

    def insert(self, student: Student) -> None:
        self._students[student.id] = student

    def find(self, key: str) -> Student | None:
        return self._students.get(key)

    def remove(self, key: str) -> Student | None:
        return self._students.pop(key, None)
