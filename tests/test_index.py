from studentstore import InMemoryIndex
from testdata import make_student, minimal_student


def test_index_repr():
    assert repr(InMemoryIndex([make_student()])) == "InMemoryIndex(1)"


def test_insert_find():
    index = InMemoryIndex()
    student = make_student()
    index.insert(student)
    assert index.find("001-002-003") == student
    assert "001-002-003" in index
    assert len(index) == 1


def test_find_exact_only():
    index = InMemoryIndex([make_student()])
    assert index.find("001-002") is None
    assert index.find("001-002-003 ") is None


def test_insert_overwrites():
    index = InMemoryIndex([make_student()])
    index.insert(make_student(first_name="Augusta"))
    assert len(index) == 1
    assert index.find("001-002-003").first_name == "Augusta"


def test_remove():
    index = InMemoryIndex([make_student(), minimal_student()])
    assert index.remove("001-002-003") == make_student()
    assert index.remove("001-002-003") is None
    assert len(index) == 1


def test_iteration_in_key_order():
    index = InMemoryIndex([minimal_student(), make_student()])
    assert [s.id for s in index] == ["001-002-003", "100-200-300"]


def test_rebuild_replaces_contents():
    index = InMemoryIndex([make_student()])
    index.rebuild([minimal_student()])
    assert [s.id for s in index] == ["100-200-300"]
