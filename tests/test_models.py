import pytest
from pydantic import ValidationError
from studentstore import OfflineCourse, OnlineCourse, Semester, Student
from testdata import make_student, minimal_student


def test_full_name():
    assert make_student().full_name == "Ada Byron Lovelace"


def test_full_name_no_middle():
    assert minimal_student().full_name == "Grace  Hopper"


def test_course_info():
    online, offline = make_student().courses
    assert online.info() == "Analytical Engines (Online)"
    assert offline.info() == "Bernoulli Numbers (Offline)"


def test_course_discriminant_selects_variant():
    student = make_student(
        courses=[
            {
                "kind": "offline",
                "course_id": "X1",
                "course_name": "X",
                "instructor_name": "Y",
                "credits": 1,
                "location": "Hall",
            }
        ]
    )
    assert isinstance(student.courses[0], OfflineCourse)
    assert not isinstance(student.courses[0], OnlineCourse)


def test_semester_str():
    assert str(Semester(semester_code="SP", year="2024")) == "SP 2024"


def test_empty_id_rejected():
    with pytest.raises(ValidationError):
        make_student(id="")


def test_defaults():
    student = minimal_student()
    assert student.middle_name == ""
    assert student.semesters_attended == []
    assert student.courses == []


def test_equality_is_by_value():
    assert make_student() == make_student()
    assert make_student() != make_student(first_name="Augusta")


def test_full_name_not_serialized():
    assert "full_name" not in make_student().model_dump()


def test_extra_fields_ignored():
    data = minimal_student().model_dump()
    data["nickname"] = "Amazing Grace"
    assert Student(**data) == minimal_student()
