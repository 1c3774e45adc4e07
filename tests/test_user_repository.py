"""
Tests for UserRepository against a real SQLite file.
"""

import sqlite3
import threading

import pytest

from aws_demo_api.app.core.db import Database
from aws_demo_api.app.core.exceptions import UserNotFoundError
from aws_demo_api.app.schemas.user import User
from aws_demo_api.app.services.user_repository import UserRepository


def test_empty_store(repository):
    assert repository.count() == 0
    assert repository.find_all() == []
    assert repository.find_by_id(1) is None


def test_save_without_id_inserts(repository):
    saved = repository.save(User(name="Ada", email="ada@example.com"))

    assert saved.id is not None and saved.id > 0
    assert saved.name == "Ada"
    assert repository.count() == 1


def test_round_trip_by_id(repository):
    users = [
        repository.save(User(name=f"User {i}", email=f"user{i}@example.com"))
        for i in range(5)
    ]

    for user in users:
        assert repository.find_by_id(user.id) == user


def test_save_with_id_updates_and_preserves_id(repository):
    saved = repository.save(User(name="Ada", email="ada@example.com"))

    updated = repository.save(User(id=saved.id, name="Ada L.", email="ada.l@example.com"))

    assert updated.id == saved.id
    assert repository.find_by_id(saved.id) == updated
    assert repository.count() == 1


def test_save_with_unknown_id_raises(repository):
    with pytest.raises(UserNotFoundError) as exc_info:
        repository.save(User(id=99, name="Ghost", email="ghost@example.com"))

    assert exc_info.value.user_id == 99
    assert repository.count() == 0


def test_delete_then_absent(repository):
    saved = repository.save(User(name="Ada", email="ada@example.com"))

    assert repository.delete_by_id(saved.id) is True
    assert repository.find_by_id(saved.id) is None
    assert repository.exists_by_id(saved.id) is False
    assert repository.delete_by_id(saved.id) is False


def test_find_all_returns_each_record_once(repository):
    ids = [repository.save(User(name=f"U{i}", email=f"u{i}@example.com")).id for i in range(4)]
    repository.delete_by_id(ids[1])

    found = repository.find_all()

    assert [user.id for user in found] == [ids[0], ids[2], ids[3]]
    assert repository.count() == 3


def test_null_columns_are_rejected(repository, database):
    with pytest.raises(sqlite3.IntegrityError):
        with database.get_cursor() as cursor:
            cursor.execute("INSERT INTO users (name, email) VALUES (?, ?)", (None, "x@example.com"))

    assert repository.count() == 0


def test_concurrent_inserts_get_unique_ids(repository):
    results = []
    lock = threading.Lock()

    def worker(n):
        user = repository.save(User(name=f"T{n}", email=f"t{n}@example.com"))
        with lock:
            results.append(user.id)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(10)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(set(results)) == 10
    assert repository.count() == 10


def test_in_memory_store_is_shared_between_operations():
    db = Database(":memory:")
    try:
        db.init_db()
        repository = UserRepository(db)
        saved = repository.save(User(name="Mem", email="mem@example.com"))

        assert repository.find_by_id(saved.id) == saved
    finally:
        db.close()
