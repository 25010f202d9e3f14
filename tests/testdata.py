from studentstore import (
    Degree,
    Department,
    OfflineCourse,
    OnlineCourse,
    Semester,
    Student,
)


def make_student(id: str = "001-002-003", **overrides) -> Student:
    fields = dict(
        id=id,
        first_name="Ada",
        middle_name="Byron",
        last_name="Lovelace",
        joining_batch=Semester(semester_code="SP", year="2024"),
        department=Department.ComputerScience,
        degree=Degree.BSC,
        semesters_attended=[
            Semester(semester_code="SP", year="2024"),
            Semester(semester_code="FA", year="2024"),
        ],
        courses=[
            OnlineCourse(
                course_id="CS101",
                course_name="Analytical Engines",
                instructor_name="Babbage",
                credits=3,
                platform="Zoom",
            ),
            OfflineCourse(
                course_id="MA201",
                course_name="Bernoulli Numbers",
                instructor_name="De Morgan",
                credits=4,
                location="Room 12",
            ),
        ],
    )
    fields.update(overrides)
    return Student(**fields)


def minimal_student(id: str = "100-200-300") -> Student:
    return Student(
        id=id,
        first_name="Grace",
        last_name="Hopper",
        joining_batch=Semester(semester_code="FA", year="2023"),
        department=Department.English,
        degree=Degree.MA,
    )
