import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from er_triage.modules.patients.repository import InsertResult


@dataclass
class StoredPatient:
    name: str
    code: str
    severity: float
    wait_time: float
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class FakePatientStore:
    """In-memory PatientStore that records every call."""

    def __init__(self, acknowledge: bool = True, fail_with: Exception | None = None):
        self.records: list[StoredPatient] = []
        self.calls: list[str] = []
        self.acknowledge = acknowledge
        self.fail_with = fail_with

    def _enter(self, op: str) -> None:
        self.calls.append(op)
        if self.fail_with is not None:
            raise self.fail_with

    async def insert_one(self, **data) -> InsertResult:
        self._enter("insert_one")
        if not self.acknowledge:
            return InsertResult(acknowledged=False)
        record = StoredPatient(**data)
        self.records.append(record)
        return InsertResult(acknowledged=True, inserted_id=record.id)

    async def find_all(self):
        self._enter("find_all")
        return list(self.records)

    async def find_one(self, name: str):
        self._enter("find_one")
        return next((r for r in self.records if r.name == name), None)
