"""
Pydantic models for student records.
"""
from enum import Enum
from typing import Annotated, Literal, Union
from pydantic import BaseModel, ConfigDict, Field


class Department(Enum):
    ComputerScience = "ComputerScience"
    BBA = "BBA"
    English = "English"


class Degree(Enum):
    BSC = "BSC"
    BBA = "BBA"
    BA = "BA"
    MSC = "MSC"
    MBA = "MBA"
    MA = "MA"


class Semester(BaseModel):
    semester_code: str
    year: str

    def __str__(self) -> str:
        return f"{self.semester_code} {self.year}"


class _CourseBase(BaseModel):
    course_id: str
    course_name: str
    instructor_name: str
    credits: int


class OnlineCourse(_CourseBase):
    kind: Literal["online"] = "online"
    platform: str

    def info(self) -> str:
        return f"{self.course_name} (Online)"


class OfflineCourse(_CourseBase):
    kind: Literal["offline"] = "offline"
    location: str

    def info(self) -> str:
        return f"{self.course_name} (Offline)"


Course = Annotated[Union[OnlineCourse, OfflineCourse], Field(discriminator="kind")]


class Student(BaseModel):
    """
    A single student record, keyed by `id`.

    `id` is expected to look like XXX-XXX-XXX but only non-emptiness is
    enforced here; uniqueness is the store's job.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(min_length=1)
    first_name: str
    middle_name: str = ""
    last_name: str
    joining_batch: Semester
    department: Department
    degree: Degree
    semesters_attended: list[Semester] = []
    courses: list[Course] = []

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.middle_name} {self.last_name}"


class LoadFailure(BaseModel):
    path: str
    error: str


class LoadReport(BaseModel):
    students: list[Student] = []
    failures: list[LoadFailure] = []
