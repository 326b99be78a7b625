from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Float
from er_triage.core.base import Base, RecordMixin
from er_triage.core.config import settings

class Patient(Base, RecordMixin):
    __tablename__ = settings.COLLECTION_NAME

    name: Mapped[str] = mapped_column(String(200), index=True)  # lookup key, not unique
    code: Mapped[str] = mapped_column(String(64))               # triage category label
    severity: Mapped[float] = mapped_column(Float)
    wait_time: Mapped[float] = mapped_column(Float)             # caller-supplied units
