import pydantic
import typer
from enum import Enum
from typing import Optional, Type, TypeVar
from rich.console import Console
from rich.table import Table

from ._models import (
    Degree,
    Department,
    OfflineCourse,
    OnlineCourse,
    Semester,
    Student,
)
from .config import load_config
from .exceptions import (
    InvalidKeyError,
    LoadError,
    NotFoundError,
    SaveError,
    StoreInitError,
)
from .registry import Registry

app = typer.Typer()

E = TypeVar("E", bound=Enum)

MENU = """1. Add New Student
2. View Student Details
3. Delete Student
4. Exit"""


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    store: Optional[str] = typer.Option(
        None, help="Student directory; defaults to env[studentstore_store_path]."
    ),
    log_level: Optional[str] = typer.Option(None),
) -> None:
    try:
        config = load_config(store_path=store, log_level=log_level)
    except pydantic.ValidationError as e:
        bad = ", ".join(str(err["loc"][0]) for err in e.errors())
        typer.secho(f"Invalid configuration: {bad}", fg=typer.colors.RED)
        raise typer.Exit(1)
    try:
        registry = Registry.initialize(config.store_path)
    except (StoreInitError, LoadError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED)
        raise typer.Exit(1)
    for failure in registry.load_report.failures:
        typer.secho(
            f"Failed to load student data from {failure.path}: {failure.error}",
            fg=typer.colors.YELLOW,
        )
    ctx.obj = registry
    if ctx.invoked_subcommand is None:
        run_menu(registry)


# section: menu ###############################################################


def run_menu(registry: Registry) -> None:
    actions = {
        "1": add_student,
        "2": view_student,
        "3": delete_student,
    }
    while True:
        typer.echo(MENU)
        choice = typer.prompt("Enter your choice", default="", show_default=False)
        if choice.strip() == "4":
            return
        action = actions.get(choice.strip())
        if action is None:
            typer.echo("Invalid choice.")
            continue
        try:
            action(registry)
        except (SaveError, LoadError, NotFoundError, InvalidKeyError) as e:
            typer.secho(f"Error: {e}", fg=typer.colors.RED)


def parse_choice(text: str, enum_cls: Type[E]) -> E:
    """
    Accept either a member's position (as shown in prompts) or its name.
    """
    members = list(enum_cls)
    text = text.strip()
    if text.isdigit() and int(text) < len(members):
        return members[int(text)]
    for member in members:
        if member.name.lower() == text.lower():
            return member
    raise ValueError(f"{text!r} is not a valid {enum_cls.__name__}")


def _prompt_choice(label: str, enum_cls: Type[E]) -> E:
    options = ", ".join(f"{n} for {m.name}" for n, m in enumerate(enum_cls))
    while True:
        text = typer.prompt(f"Enter {label} ({options})")
        try:
            return parse_choice(text, enum_cls)
        except ValueError as e:
            typer.secho(f"Invalid {label}: {e}", fg=typer.colors.RED)


def _prompt_semester(label: str) -> Semester:
    return Semester(
        semester_code=typer.prompt(f"Enter {label} (Semester Code)"),
        year=typer.prompt(f"Enter {label} (Year)"),
    )


def _prompt_course() -> OnlineCourse | OfflineCourse:
    kind = ""
    while kind not in ("online", "offline"):
        kind = typer.prompt("Course type (online/offline)").strip().lower()
    fields = dict(
        course_id=typer.prompt("Enter Course ID"),
        course_name=typer.prompt("Enter Course Name"),
        instructor_name=typer.prompt("Enter Instructor Name"),
        credits=typer.prompt("Enter Credits", type=int),
    )
    if kind == "online":
        return OnlineCourse(platform=typer.prompt("Enter Platform"), **fields)
    return OfflineCourse(location=typer.prompt("Enter Location"), **fields)


def add_student(registry: Registry) -> None:
    first_name = typer.prompt("Enter First Name")
    middle_name = typer.prompt("Enter Middle Name", default="", show_default=False)
    last_name = typer.prompt("Enter Last Name")
    student_id = ""
    while not student_id:
        student_id = typer.prompt("Enter Student ID (in format XXX-XXX-XXX)").strip()
    joining_batch = _prompt_semester("Joining Batch")
    department = _prompt_choice("Department", Department)
    degree = _prompt_choice("Degree", Degree)

    semesters = []
    while typer.confirm("Add an attended semester?", default=False):
        semesters.append(_prompt_semester("Semester Attended"))
    courses = []
    while typer.confirm("Add a course?", default=False):
        courses.append(_prompt_course())

    student = Student(
        id=student_id,
        first_name=first_name,
        middle_name=middle_name,
        last_name=last_name,
        joining_batch=joining_batch,
        department=department,
        degree=degree,
        semesters_attended=semesters,
        courses=courses,
    )
    replacing = registry.lookup(student.id) is not None
    registry.create_or_replace(student)
    if replacing:
        typer.echo("Student replaced successfully.")
    else:
        typer.echo("Student added successfully.")


def view_student(registry: Registry) -> None:
    if not len(registry.index):
        typer.echo("No student data available.")
        return
    student = registry.lookup(
        typer.prompt("Enter Student ID to view details").strip()
    )
    if student is None:
        typer.echo("Student not found.")
    else:
        display_details(student)


def delete_student(registry: Registry) -> None:
    if not len(registry.index):
        typer.echo("No student data available.")
        return
    if registry.remove(typer.prompt("Enter Student ID to delete").strip()):
        typer.echo("Student deleted successfully.")
    else:
        typer.echo("Student not found.")


def display_details(student: Student) -> None:
    typer.echo(f"Name: {student.full_name}")
    typer.echo(f"Student ID: {student.id}")
    typer.echo(f"Joining Batch: {student.joining_batch}")
    typer.echo(f"Department: {student.department.value}")
    typer.echo(f"Degree: {student.degree.value}")
    if student.semesters_attended:
        attended = ", ".join(str(s) for s in student.semesters_attended)
        typer.echo(f"Semesters Attended: {attended}")
    for course in student.courses:
        typer.echo(f"Course: {course.course_id} {course.info()}")


# section: commands ###########################################################


@app.command("list")
def list_students(ctx: typer.Context) -> None:
    registry: Registry = ctx.obj
    table = Table(title=str(registry.store.root))
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Department")
    table.add_column("Degree")
    table.add_column("Courses", justify="right")
    for student in registry.students():
        table.add_row(
            student.id,
            student.full_name,
            student.department.value,
            student.degree.value,
            str(len(student.courses)),
        )
    Console().print(table)


@app.command()
def show(ctx: typer.Context, student_id: str) -> None:
    student = ctx.obj.lookup(student_id)
    if student is None:
        typer.secho("Student not found.", fg=typer.colors.RED)
        raise typer.Exit(1)
    display_details(student)


@app.command()
def delete(ctx: typer.Context, student_id: str) -> None:
    try:
        removed = ctx.obj.remove(student_id)
    except (SaveError, InvalidKeyError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED)
        raise typer.Exit(1)
    if not removed:
        typer.secho("Student not found.", fg=typer.colors.RED)
        raise typer.Exit(1)
    typer.echo("Student deleted successfully.")


if __name__ == "__main__":
    app()
