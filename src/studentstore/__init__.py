from ._models import (
    Course,
    Degree,
    Department,
    LoadFailure,
    LoadReport,
    OfflineCourse,
    OnlineCourse,
    Semester,
    Student,
)
from .codec import Codec, JsonCodec
from .index import InMemoryIndex
from .registry import Registry
from .store import RecordStore

__all__ = [
    "Codec",
    "Course",
    "Degree",
    "Department",
    "InMemoryIndex",
    "JsonCodec",
    "LoadFailure",
    "LoadReport",
    "OfflineCourse",
    "OnlineCourse",
    "RecordStore",
    "Registry",
    "Semester",
    "Student",
]
