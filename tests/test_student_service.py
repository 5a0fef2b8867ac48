"""
Tests for the in-memory student store
"""
import threading

from student_directory_api.app.schemas.student import StudentWrite


def _write(name="Ada", faculty="CS", gender="F", **kwargs):
    return StudentWrite(name=name, faculty=faculty, gender=gender, **kwargs)


class TestCreate:

    def test_ids_start_at_one_and_increment(self, service):
        ids = [service.create_student(_write(name=f"s{i}")).id for i in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_ids_not_reused_after_delete(self, service):
        service.create_student(_write())
        second = service.create_student(_write())
        assert service.delete_student(second.id) is True
        third = service.create_student(_write())
        assert third.id == 3

    def test_body_id_is_ignored(self, service):
        student = service.create_student(_write(id=42))
        assert student.id == 1
        assert service.get_student(42) is None


class TestList:

    def test_empty_store(self, service):
        assert service.list_students() == []
        assert len(service) == 0

    def test_preserves_creation_order(self, service):
        for name in ["Ada", "Grace", "Linus"]:
            service.create_student(_write(name=name))
        assert [s.name for s in service.list_students()] == ["Ada", "Grace", "Linus"]

    def test_returns_copies(self, service):
        service.create_student(_write())
        listed = service.list_students()
        listed[0].name = "Mallory"
        assert service.get_student(1).name == "Ada"


class TestGet:

    def test_found(self, service):
        created = service.create_student(_write())
        assert service.get_student(created.id) == created

    def test_missing(self, service):
        assert service.get_student(999) is None


class TestUpdate:

    def test_replaces_fields_keeps_id(self, service):
        service.create_student(_write())
        updated = service.update_student(1, _write(name="Grace", faculty="Math", id=7))
        assert updated.id == 1
        assert updated.name == "Grace"
        assert updated.faculty == "Math"
        assert updated.gender == "F"
        assert service.get_student(1) == updated
        assert service.get_student(7) is None

    def test_missing_leaves_store_unchanged(self, service):
        service.create_student(_write())
        before = service.list_students()
        assert service.update_student(2, _write(name="Grace")) is None
        assert service.list_students() == before


class TestDelete:

    def test_removes_one_and_keeps_order(self, service):
        for name in ["a", "b", "c", "d"]:
            service.create_student(_write(name=name))
        assert service.delete_student(2) is True
        assert [s.name for s in service.list_students()] == ["a", "c", "d"]
        assert len(service) == 3

    def test_missing_returns_false(self, service):
        service.create_student(_write())
        assert service.delete_student(5) is False
        assert len(service) == 1


def test_concurrent_creates_get_unique_ids(service):
    """Creates from many threads never share an id"""
    threads_count = 8
    per_thread = 50
    results = []
    results_lock = threading.Lock()
    barrier = threading.Barrier(threads_count)

    def worker():
        barrier.wait()
        ids = [service.create_student(_write()).id for _ in range(per_thread)]
        with results_lock:
            results.extend(ids)

    threads = [threading.Thread(target=worker) for _ in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    total = threads_count * per_thread
    assert sorted(results) == list(range(1, total + 1))
    assert [s.id for s in service.list_students()] == list(range(1, total + 1))
