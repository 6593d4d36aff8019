from __future__ import annotations

import itertools

import pytest

from attendance_tracker.core.exceptions import StorageError
from attendance_tracker.storage.memory_store import InMemoryKeyValueStore
from attendance_tracker.students.repository import KeyValueRosterRepository
from attendance_tracker.students.service import RosterService
from attendance_tracker.teachers.repository import KeyValueCredentialRepository
from attendance_tracker.teachers.service import AuthService


class FlakyStore(InMemoryKeyValueStore):
    """Memory store whose reads or multi-key writes can be switched to fail."""

    def __init__(self):
        super().__init__()
        self.fail_writes = False
        self.fail_reads = False

    def get(self, key):
        if self.fail_reads:
            raise StorageError("Could not load data from local storage.")
        return super().get(key)

    def set_many(self, values):
        if self.fail_writes:
            raise StorageError("Could not save data to local storage.")
        super().set_many(values)


@pytest.fixture
def store():
    return FlakyStore()


@pytest.fixture
def auth(store):
    return AuthService(KeyValueCredentialRepository(store), KeyValueRosterRepository(store))


@pytest.fixture
def roster(store):
    clock = itertools.count(1000).__next__
    return RosterService(KeyValueRosterRepository(store), clock=clock)


@pytest.fixture
def teacher(auth):
    return auth.login(name="Alice", subject="Math", semester="3", password="secret1")
