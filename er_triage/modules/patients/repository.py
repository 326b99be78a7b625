import uuid
from dataclasses import dataclass
from typing import Protocol, Sequence
from sqlalchemy import select, insert
from sqlalchemy.ext.asyncio import AsyncSession
from er_triage.modules.patients.models import Patient

@dataclass(frozen=True)
class InsertResult:
    acknowledged: bool
    inserted_id: uuid.UUID | None = None

class PatientStore(Protocol):
    """The narrow store surface the triage service depends on."""

    async def insert_one(self, **data) -> InsertResult: ...

    async def find_all(self) -> Sequence[Patient]: ...

    async def find_one(self, name: str) -> Patient | None: ...

class PatientRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert_one(self, **data) -> InsertResult:
        q = insert(Patient).values(id=uuid.uuid4(), **data).returning(Patient.id)
        res = await self.session.execute(q)
        inserted_id = res.scalar_one_or_none()
        if inserted_id is None:
            await self.session.rollback()
            return InsertResult(acknowledged=False)
        await self.session.commit()
        return InsertResult(acknowledged=True, inserted_id=inserted_id)

    async def find_all(self) -> Sequence[Patient]:
        res = await self.session.execute(select(Patient))
        return res.scalars().all()

    async def find_one(self, name: str) -> Patient | None:
        q = select(Patient).where(Patient.name == name).limit(1)
        res = await self.session.execute(q)
        return res.scalars().first()
