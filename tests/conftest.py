"""
Pytest configuration for the benchmark harness tests.

The database clients are replaced by in-process fakes; the ORM backend runs
against SQLite in memory.
"""

from contextlib import contextmanager

import matplotlib

matplotlib.use("Agg")

import pytest

from generator import generate_user


class FakeBackend:
    """Stand-in backend that records every call made by the runner."""

    label = "Fake"
    record_factory = staticmethod(generate_user)
    tolerate_insert_errors = False

    def __init__(self, fail_on_connect=False, fail_on_insert=None, rows=None):
        self.fail_on_connect = fail_on_connect
        self.fail_on_insert = fail_on_insert
        self.rows = rows if rows is not None else []
        self.inserted = []
        self.queries = []
        self.opened = 0
        self.closed = 0

    @contextmanager
    def session(self):
        if self.fail_on_connect:
            raise ConnectionError("connection refused")
        self.opened += 1
        try:
            yield self
        finally:
            self.closed += 1

    def insert(self, handle, record):
        if self.fail_on_insert is not None and self.fail_on_insert(len(self.inserted)):
            self.inserted.append(None)
            raise RuntimeError("insert rejected")
        self.inserted.append(record)

    def query(self, handle, query):
        self.queries.append(query)
        return self.rows[query.skip:query.skip + query.limit]


@pytest.fixture
def fake_backend_cls():
    return FakeBackend
