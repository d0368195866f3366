"""In-memory stand-in for the Supabase client, and sample request payloads."""

import copy
import itertools
from typing import Any

LEAD_TABLES = {"lead_sell", "lead_finance", "lead_order", "contact_messages"}


class FakeAPIError(Exception):
    """Stands in for postgrest.APIError."""


class FakeResponse:
    def __init__(self, data: list[dict[str, Any]], count: int | None = None) -> None:
        self.data = data
        self.count = count


class FakeQuery:
    """Chainable subset of the postgrest query builder."""

    def __init__(self, db: "FakeSupabase", table: str) -> None:
        self.db = db
        self.table = table
        self.op = "select"
        self.columns: list[str] | None = None
        self.count_mode: str | None = None
        self.payload: Any = None
        self.filters: list[tuple[str, Any]] = []
        self.orders: list[tuple[str, bool]] = []
        self.row_limit: int | None = None

    def select(self, *columns: str, count: str | None = None) -> "FakeQuery":
        self.op = "select"
        joined = ",".join(columns) if columns else "*"
        self.columns = None if joined.strip() == "*" else [c.strip() for c in joined.split(",")]
        self.count_mode = count
        return self

    def insert(self, rows: Any) -> "FakeQuery":
        self.op = "insert"
        self.payload = rows
        return self

    def update(self, values: dict[str, Any]) -> "FakeQuery":
        self.op = "update"
        self.payload = values
        return self

    def delete(self) -> "FakeQuery":
        self.op = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self.orders.append((column, desc))
        return self

    def limit(self, size: int) -> "FakeQuery":
        self.row_limit = size
        return self

    def _matching(self) -> list[dict[str, Any]]:
        rows = self.db.tables.setdefault(self.table, [])
        return [r for r in rows if all(r.get(c) == v for c, v in self.filters)]

    def execute(self) -> FakeResponse:
        if (self.table, self.op) in self.db.fail_ops:
            raise FakeAPIError(f"{self.op} on {self.table} failed")
        self.db.calls.append((self.table, self.op, list(self.filters)))
        handler = getattr(self, f"_execute_{self.op}")
        return handler()

    def _execute_select(self) -> FakeResponse:
        matched = self._matching()
        count = len(matched) if self.count_mode else None
        for column, desc in reversed(self.orders):
            matched.sort(key=lambda r: (r.get(column) is not None, r.get(column)), reverse=desc)
        if self.row_limit is not None:
            matched = matched[: self.row_limit]
        if self.columns is not None:
            matched = [{c: r.get(c) for c in self.columns} for r in matched]
        return FakeResponse(copy.deepcopy(matched), count)

    def _execute_insert(self) -> FakeResponse:
        rows = self.payload if isinstance(self.payload, list) else [self.payload]
        inserted = []
        for row in rows:
            record = dict(row)
            record.setdefault("id", f"{self.table}-{next(self.db.ids)}")
            record.setdefault("created_at", f"2025-01-01T00:00:{next(self.db.ticks):02d}+00:00")
            if self.table in LEAD_TABLES:
                record.setdefault("status", "new")
            self.db.tables.setdefault(self.table, []).append(record)
            inserted.append(copy.deepcopy(record))
        return FakeResponse(inserted)

    def _execute_update(self) -> FakeResponse:
        matched = self._matching()
        for row in matched:
            row.update(self.payload)
        return FakeResponse(copy.deepcopy(matched))

    def _execute_delete(self) -> FakeResponse:
        matched = self._matching()
        rows = self.db.tables.setdefault(self.table, [])
        self.db.tables[self.table] = [r for r in rows if r not in matched]
        return FakeResponse(copy.deepcopy(matched))


class FakeBucket:
    def __init__(self, storage: "FakeStorage", bucket: str) -> None:
        self.storage = storage
        self.bucket = bucket

    def upload(self, path: str, content: bytes, options: dict[str, str]) -> None:
        self.storage.objects[(self.bucket, path)] = (content, options)

    def get_public_url(self, path: str) -> str:
        return f"https://example.supabase.co/storage/v1/object/public/{self.bucket}/{path}"


class FakeStorage:
    def __init__(self) -> None:
        self.objects: dict[tuple[str, str], tuple[bytes, dict[str, str]]] = {}

    def from_(self, bucket: str) -> FakeBucket:
        return FakeBucket(self, bucket)


class FakeSupabase:
    """In-memory replacement for ``supabase.Client``."""

    def __init__(self, tables: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self.tables: dict[str, list[dict[str, Any]]] = copy.deepcopy(tables or {})
        self.storage = FakeStorage()
        self.fail_ops: set[tuple[str, str]] = set()
        self.calls: list[tuple[str, str, list[tuple[str, Any]]]] = []
        self.ids = itertools.count(1)
        self.ticks = itertools.count(1)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)


def make_vehicle(**overrides: Any) -> dict[str, Any]:
    vehicle = {
        "id": "veh-1",
        "marca": "BMW",
        "model": "X5",
        "an": 2021,
        "km": 45000,
        "pret": 52000,
        "combustibil": "motorina",
        "transmisie": "automata",
        "caroserie": "suv",
        "culoare": "Negru",
        "descriere": "Pachet M, panoramic",
        "status": "active",
        "images": [],
        "badges": [],
        "created_at": "2025-01-10T10:00:00+00:00",
        "updated_at": "2025-01-10T10:00:00+00:00",
    }
    vehicle.update(overrides)
    return vehicle


def sell_payload(**overrides):
    payload = {
        "marca": "Dacia",
        "model": "Logan",
        "an": 2018,
        "km": 120000,
        "combustibil": "benzina",
        "transmisie": "manuala",
        "caroserie": "berlina",
        "judet": "Cluj",
        "oras": "Cluj-Napoca",
        "images": ["https://cdn.example.com/1.jpg", "https://cdn.example.com/2.jpg",
                   "https://cdn.example.com/3.jpg"],
        "nume": "Ion Popescu",
        "telefon": "0722123456",
        "email": "ion@example.com",
        "gdpr": True,
    }
    payload.update(overrides)
    return payload


def finance_payload(**overrides):
    payload = {
        "pret": 20000,
        "avans": 4000,
        "perioada": 60,
        "dobanda": 8.5,
        "nume": "Maria Ionescu",
        "email": "maria@example.com",
        "telefon": "+40722123456",
    }
    payload.update(overrides)
    return payload


def contact_payload(**overrides):
    payload = {
        "nume": "Andrei",
        "email": "andrei@example.com",
        "subiect": "Programare test drive",
        "mesaj": "As dori un test drive pentru BMW X5 sambata.",
        "gdpr": True,
    }
    payload.update(overrides)
    return payload
