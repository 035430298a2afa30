import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from taskboard.errors import ConflictError, NotFoundError, StorageError, ValidationError
from taskboard.models import Status, Task
from taskboard.stores import BoardStore, StatusStore, TaskStore


def test_create_trims_name_and_lists_oldest_first(db_session: Session):
    store = StatusStore(db_session)
    todo = store.create("  TODO ")
    done = store.create("DONE")

    assert todo.name == "TODO"
    assert [status.id for status in store.list()] == [todo.id, done.id]


@pytest.mark.parametrize("name", ["", "   ", None, 42])
def test_create_rejects_blank_or_non_string_name(db_session: Session, name):
    with pytest.raises(ValidationError) as exc:
        StatusStore(db_session).create(name)
    assert exc.value.message == "Status name is required"


def test_create_rejects_duplicate_trimmed_name(db_session: Session):
    store = StatusStore(db_session)
    store.create("TODO")

    with pytest.raises(ConflictError) as exc:
        store.create(" TODO ")
    assert exc.value.message == "Status name already exists"
    assert len(store.list()) == 1


def test_names_are_case_sensitive(db_session: Session):
    store = StatusStore(db_session)
    store.create("todo")
    store.create("TODO")
    assert sorted(status.name for status in store.list()) == ["TODO", "todo"]


def test_update_renames_status(db_session: Session):
    store = StatusStore(db_session)
    status = store.create("Doing")

    updated = store.update(str(status.id), " In progress ")
    assert updated.id == status.id
    assert updated.name == "In progress"


def test_update_to_own_name_is_allowed(db_session: Session):
    store = StatusStore(db_session)
    status = store.create("TODO")
    assert store.update(status.id, "TODO").name == "TODO"


def test_update_rejects_name_held_by_another_status(db_session: Session):
    store = StatusStore(db_session)
    store.create("TODO")
    done = store.create("DONE")

    with pytest.raises(ConflictError) as exc:
        store.update(done.id, "TODO")
    assert exc.value.message == "Another status with this name already exists"
    db_session.expire_all()
    assert db_session.query(Status).filter(Status.id == done.id).one().name == "DONE"


def test_update_and_delete_validate_id(db_session: Session):
    store = StatusStore(db_session)
    for bad_id in ("abc", "0", -1, None):
        with pytest.raises(ValidationError):
            store.update(bad_id, "TODO")
        with pytest.raises(ValidationError):
            store.delete(bad_id)


def test_update_and_delete_missing_status(db_session: Session):
    store = StatusStore(db_session)
    with pytest.raises(NotFoundError):
        store.update(999, "TODO")
    with pytest.raises(NotFoundError) as exc:
        store.delete(999)
    assert exc.value.message == "Status not found"


def test_delete_unlinks_tasks_and_keeps_them(db_session: Session):
    board = BoardStore(db_session).create("Sprint 1")
    statuses = StatusStore(db_session)
    todo = statuses.create("TODO")
    other = statuses.create("DONE")
    tasks = TaskStore(db_session)
    linked = [
        tasks.create(title=f"Task {n}", board_id=board.id, description="keep me", status_id=todo.id)
        for n in range(3)
    ]
    untouched = tasks.create(title="Other", board_id=board.id, status_id=other.id)

    result = statuses.delete(todo.id)

    assert result == {"message": "Status deleted and tasks unlinked"}
    assert [status.name for status in statuses.list()] == ["DONE"]
    for original in linked:
        task = tasks.get(original.id)
        assert task.status_id is None
        assert task.title == original.title
        assert task.description == "keep me"
        assert task.board_id == board.id
    assert tasks.get(untouched.id).status_id == other.id


def test_delete_rolls_back_unlink_when_removal_fails(db_session: Session, monkeypatch):
    board = BoardStore(db_session).create("Sprint 1")
    statuses = StatusStore(db_session)
    todo = statuses.create("TODO")
    task = TaskStore(db_session).create(title="Write spec", board_id=board.id, status_id=todo.id)

    def failing_delete(instance):
        raise OperationalError("DELETE FROM statuses", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db_session, "delete", failing_delete)
    with pytest.raises(StorageError) as exc:
        statuses.delete(todo.id)
    assert "disk I/O error" in exc.value.message

    monkeypatch.undo()
    db_session.expire_all()
    assert db_session.query(Task).filter(Task.id == task.id).one().status_id == todo.id
    assert db_session.query(Status).count() == 1


def test_unique_constraint_catches_duplicate_status_the_precheck_misses(db_session: Session):
    # The pending row is not flushed, so only the unique index can reject the second insert
    db_session.add(Status(name="TODO"))

    with pytest.raises(ConflictError) as exc:
        StatusStore(db_session).create("TODO")
    assert exc.value.message == "Status name already exists"
    assert db_session.query(Status).count() == 0
