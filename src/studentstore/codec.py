import abc
from pydantic import ValidationError

from ._models import Student
from .exceptions import DecodeError, EncodeError


class Codec(abc.ABC):
    extension: str

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.extension})"

    @abc.abstractmethod
    def encode(self, student: Student) -> bytes:
        """
        Serialize a student to bytes.
        """

    @abc.abstractmethod
    def decode(self, data: bytes) -> Student:
        """
        Deserialize bytes produced by `encode` back into a student.
        """


def _error_fields(exc: ValidationError) -> list[str]:
    fields = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        if loc and loc not in fields:
            fields.append(loc)
    return fields


class JsonCodec(Codec):
    """
    Indented JSON, one student per document.

    Enums are written by name and courses carry a `kind` discriminant.
    """

    extension = "json"

    def __init__(self, indent: int = 2):
        self.indent = indent

    def encode(self, student: Student) -> bytes:
        try:
            return student.model_dump_json(indent=self.indent).encode("utf-8")
        except (ValueError, TypeError) as e:
            raise EncodeError(f"could not encode {student.id}: {e}") from e

    def decode(self, data: bytes) -> Student:
        try:
            return Student.model_validate_json(data)
        except ValidationError as e:
            fields = _error_fields(e)
            if fields:
                message = f"invalid student data in field(s): {', '.join(fields)}"
            else:
                message = f"malformed student data: {e.errors()[0]['msg']}"
            raise DecodeError(message, fields) from e
