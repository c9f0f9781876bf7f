"""
Shared fixtures: an isolated environment, a JSON-backed schedule store,
an in-memory stand-in for the Supabase client and a Flask test client.
"""

import logging
from types import SimpleNamespace

import pytest

from courier_routes.core.storage import JsonScheduleStore


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep every test away from real credentials and the repo's data/ dir."""
    for name in ("SUPABASE_URL", "SUPABASE_KEY", "ADMIN_TOKEN", "MIN_LOOKUP_LENGTH", "SUPPORT_PHONE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("SCHEDULE_JSON_PATH", str(tmp_path / "state" / "schedules.json"))
    yield
    # setup_logging() detaches the package logger from root, undo that for caplog
    pkg_logger = logging.getLogger("courier_routes")
    for h in list(pkg_logger.handlers):
        h.close()
        pkg_logger.removeHandler(h)
    pkg_logger.propagate = True


@pytest.fixture
def json_store(tmp_path):
    return JsonScheduleStore(tmp_path / "state" / "schedules.json")


class FakeQuery:
    """Just enough of the postgrest builder for SupabaseScheduleStore."""

    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.op = "select"
        self.payload = None
        self.filters = []
        self.order_by = None

    def select(self, _cols="*"):
        self.op = "select"
        return self

    def insert(self, row):
        self.op, self.payload = "insert", dict(row)
        return self

    def update(self, values):
        self.op, self.payload = "update", dict(values)
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, key, value):
        self.filters.append((key, value))
        return self

    def order(self, key, desc=False):
        self.order_by = (key, desc)
        return self

    def _match(self, row):
        return all(row.get(k) == v for k, v in self.filters)

    def execute(self):
        if self.client.fail:
            raise RuntimeError("connection refused")
        rows = self.client.tables.setdefault(self.table, [])
        self.client.calls.append((self.table, self.op, self.payload, list(self.filters)))

        if self.op == "insert":
            row = {"id": str(len(rows) + 1), **self.payload}
            rows.append(row)
            return SimpleNamespace(data=[row])
        if self.op == "update":
            hit = [r for r in rows if self._match(r)]
            for r in hit:
                r.update(self.payload)
            return SimpleNamespace(data=hit)
        if self.op == "delete":
            hit = [r for r in rows if self._match(r)]
            self.client.tables[self.table] = [r for r in rows if not self._match(r)]
            return SimpleNamespace(data=hit)

        hit = [dict(r) for r in rows if self._match(r)]
        if self.order_by:
            key, desc = self.order_by
            hit.sort(key=lambda r: r.get(key) or "", reverse=desc)
        return SimpleNamespace(data=hit)


class FakeSupabase:
    def __init__(self, tables=None, fail=False):
        self.tables = tables or {}
        self.fail = fail
        self.calls = []

    def table(self, name):
        return FakeQuery(self, name)


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def failing_supabase():
    return FakeSupabase(fail=True)


@pytest.fixture
def app_client(json_store):
    from app import app

    app.config["TESTING"] = True
    app.config["SCHEDULE_STORE"] = json_store
    with app.test_client() as client:
        yield client
    app.config.pop("SCHEDULE_STORE", None)
