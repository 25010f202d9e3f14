from pathlib import Path
from structlog import get_logger

from ._models import LoadReport, Student
from .codec import Codec
from .index import InMemoryIndex
from .store import RecordStore

log = get_logger()


class Registry:
    """
    The store & index pair the shell operates on.

    Built once at startup with `initialize` and passed to every operation.
    """

    def __init__(
        self,
        store: RecordStore,
        index: InMemoryIndex | None = None,
        load_report: LoadReport | None = None,
    ):
        self.store = store
        self.index = index if index is not None else InMemoryIndex()
        self.load_report = load_report or LoadReport()

    def __repr__(self) -> str:
        return f"Registry({self.store.root}, {len(self.index)} students)"

    @classmethod
    def initialize(cls, root: str | Path, codec: Codec | None = None) -> "Registry":
        """
        Create the store directory if needed and populate the index from it.

        Raises StoreInitError if the directory can't be created and LoadError
        if it can't be scanned. Individual bad files end up in `load_report`.
        """
        store = RecordStore(root, codec)
        report = store.load_all()
        log.info("initialize", store=store, students=len(report.students))
        return cls(store, InMemoryIndex(report.students), report)

    def create_or_replace(self, student: Student) -> None:
        self.store.put(student)
        self.index.insert(student)

    def lookup(self, key: str) -> Student | None:
        return self.index.find(key)

    def remove(self, key: str) -> bool:
        """
        Remove a student from the store and index.

        Returns False without touching the store if the index has no such key.
        """
        if key not in self.index:
            return False
        self.store.delete(key)
        self.index.remove(key)
        return True

    def students(self) -> list[Student]:
        return list(self.index)
