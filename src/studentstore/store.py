import os
import tempfile
from pathlib import Path
from typing import Callable, Iterable
from structlog import get_logger

from ._models import LoadFailure, LoadReport, Student
from .codec import Codec, JsonCodec
from .exceptions import (
    DecodeError,
    EncodeError,
    InvalidKeyError,
    LoadError,
    NotFoundError,
    SaveError,
    StoreInitError,
)

log = get_logger()

Listener = Callable[[Student], None]


class RecordStore:
    """
    A directory of student files, one file per key named `<key>.<extension>`.
    """

    def __init__(
        self,
        root: str | Path,
        codec: Codec | None = None,
        *,
        create: bool = True,
    ):
        self.root = Path(root)
        self.codec = codec or JsonCodec()
        self._listeners: list[Listener] = []
        # create directory if it doesn't exist
        if create:
            try:
                self.root.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StoreInitError(f"could not create {self.root}: {e}") from e

    def __repr__(self) -> str:
        return f"RecordStore({self.root}, {self.codec.extension})"

    def __len__(self) -> int:
        return sum(1 for _ in self._files())

    def __contains__(self, key: str) -> bool:
        try:
            return self.path(key).is_file()
        except InvalidKeyError:
            return False

    def path(self, key: str) -> Path:
        if not key or key in (".", "..") or "/" in key or "\\" in key or "\0" in key:
            raise InvalidKeyError(f"{key!r} is not a valid student id")
        return self.root / f"{key}.{self.codec.extension}"

    def subscribe(self, listener: Listener) -> None:
        """
        Register a callable to be invoked with each student after a successful put.
        """
        self._listeners.append(listener)

    def keys(self) -> list[str]:
        return [path.stem for path in self._files()]

    def put(self, student: Student) -> None:
        path = self.path(student.id)
        try:
            data = self.codec.encode(student)
        except EncodeError as e:
            raise SaveError(f"failed to save {student.id}: {e}") from e

        # write alongside the target & rename so readers never see a partial file
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.root, prefix=f".{student.id}.", suffix=".tmp"
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise SaveError(f"failed to save {student.id}: {e}") from e

        log.info("put", id=student.id, path=str(path), size=len(data))
        for listener in self._listeners:
            try:
                listener(student)
            except Exception:
                # the record is already written; listener failures are only logged
                log.exception("listener failed", id=student.id, listener=listener)

    def get(self, key: str) -> Student:
        path = self.path(key)
        try:
            data = path.read_bytes()
        except FileNotFoundError:
            raise NotFoundError(f"{key} not found in {self.root}")
        except OSError as e:
            raise LoadError(f"failed to load {key}: {e}") from e
        try:
            student = self.codec.decode(data)
        except DecodeError as e:
            raise LoadError(f"failed to load {key}: {e}") from e
        log.debug("get", id=key, path=str(path))
        return student

    def delete(self, key: str, *, missing_ok: bool = True) -> bool:
        """
        Remove the file for `key`, returning True if a file was removed.

        Deleting a missing key is a no-op unless missing_ok is False,
        in which case NotFoundError is raised.
        """
        path = self.path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            if not missing_ok:
                raise NotFoundError(f"{key} not found in {self.root}")
            log.debug("delete missing", id=key)
            return False
        except OSError as e:
            raise SaveError(f"failed to delete {key}: {e}") from e
        log.info("delete", id=key, path=str(path))
        return True

    def load_all(self) -> LoadReport:
        """
        Load every student file in the directory.

        A file that fails to load is logged and recorded in the report's
        failures; it does not stop the scan.
        """
        report = LoadReport()
        try:
            paths = sorted(self._files())
        except OSError as e:
            raise LoadError(f"could not scan {self.root}: {e}") from e

        for path in paths:
            try:
                student = self._load_path(path)
            except LoadError as e:
                log.warning("load failed", path=str(path), error=str(e))
                report.failures.append(LoadFailure(path=str(path), error=str(e)))
                continue
            report.students.append(student)

        log.info(
            "load_all",
            root=str(self.root),
            loaded=len(report.students),
            failed=len(report.failures),
        )
        return report

    def _files(self) -> Iterable[Path]:
        for path in self.root.glob(f"*.{self.codec.extension}"):
            if path.is_file():
                yield path

    def _load_path(self, path: Path) -> Student:
        try:
            student = self.codec.decode(path.read_bytes())
        except (OSError, DecodeError) as e:
            raise LoadError(str(e)) from e
        try:
            self.path(student.id)
        except InvalidKeyError as e:
            raise LoadError(str(e)) from e
        if student.id != path.stem:
            raise LoadError(f"id {student.id!r} does not match file name {path.name}")
        return student
