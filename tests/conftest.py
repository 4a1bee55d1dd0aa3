"""
Pytest fixtures for directory gateway tests
"""

import copy
import re
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from directory_gateway.models.result import QueryResult

VALID_TOKEN = "valid-access-token"

EMBED = re.compile(r"(\w+)\(\*\)")


class InMemorySupabase:
    """Stands in for SupabaseClient, keeping tables in dictionaries"""

    def __init__(self, tables: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self.tables = copy.deepcopy(tables or {})
        self.calls: List[tuple] = []
        self.fail_with: Optional[str] = None
        self.tokens = {VALID_TOKEN: SimpleNamespace(id="auth-user-1", email="ada@example.com")}
        self.auth_exception: Optional[Exception] = None
        self._next_id = 1000

    def is_available(self) -> bool:
        return True

    def _rows(self, table: str) -> List[Dict[str, Any]]:
        return self.tables.setdefault(table, [])

    def _failed(self) -> Optional[QueryResult]:
        if self.fail_with:
            return QueryResult.failure(self.fail_with)
        return None

    async def select(self, table, columns="*", filters=None):
        self.calls.append(("select", table, columns, filters))
        if self._failed():
            return self._failed()

        rows = [
            dict(row) for row in self._rows(table)
            if all(v is None or row.get(k) == v for k, v in (filters or {}).items())
        ]
        foreign_key = table.rstrip("s") + "_id"
        for embedded in EMBED.findall(columns):
            for row in rows:
                row[embedded] = [
                    dict(child) for child in self._rows(embedded)
                    if child.get(foreign_key) == row["id"]
                ]
        return QueryResult.success(rows)

    async def insert(self, table, row):
        self.calls.append(("insert", table, row))
        if self._failed():
            return self._failed()

        self._next_id += 1
        stored = {"id": self._next_id, **row}
        self._rows(table).append(stored)
        return QueryResult.success([dict(stored)])

    async def update(self, table, row, record_id):
        self.calls.append(("update", table, row, record_id))
        if self._failed():
            return self._failed()

        updated = []
        for stored in self._rows(table):
            if stored["id"] == record_id:
                stored.update(row)
                updated.append(dict(stored))
        return QueryResult.success(updated)

    async def delete(self, table, record_id):
        self.calls.append(("delete", table, record_id))
        if self._failed():
            return self._failed()

        removed = [r for r in self._rows(table) if r["id"] == record_id]
        self.tables[table] = [r for r in self._rows(table) if r["id"] != record_id]
        return QueryResult.success(removed)

    async def verify_token(self, token):
        self.calls.append(("verify_token", token))
        if self.auth_exception is not None:
            raise self.auth_exception
        user = self.tokens.get(token)
        if user is None:
            return QueryResult.failure("invalid JWT")
        return QueryResult.success(user)

    def data_calls(self) -> List[tuple]:
        return [call for call in self.calls if call[0] != "verify_token"]


@pytest.fixture
def sample_tables() -> Dict[str, List[Dict[str, Any]]]:
    """Seed rows for every table the gateway touches"""
    return {
        "groups": [
            {"id": 1, "name": "Study Group A"},
            {"id": 2, "name": "Study Group B"},
        ],
        "members": [
            {
                "id": 10,
                "name": "Grace",
                "major": "Math",
                "email": "grace@example.com",
                "introduction": "Hello",
                "courses": ["MATH200"],
                "group_id": 2,
            },
        ],
        "users": [
            {"id": 100, "name": "Ada", "major": "CS", "email": "ada@example.com"},
            {"id": 101, "name": "Alan", "major": "Math", "email": "alan@example.com"},
        ],
        "user_profiles": [
            {"id": 500, "user_id": 100, "introduction": "Hi, I'm Ada", "courses": ["CS101"]},
        ],
    }


@pytest.fixture
def supabase(sample_tables) -> InMemorySupabase:
    return InMemorySupabase(sample_tables)


@pytest.fixture
def client(supabase):
    """Test client wired to the in-memory Supabase"""
    from directory_gateway.main import app
    from directory_gateway.utils.dependencies import get_supabase

    app.dependency_overrides[get_supabase] = lambda: supabase
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {VALID_TOKEN}"}
