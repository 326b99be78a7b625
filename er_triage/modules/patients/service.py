import logging
from typing import Any, Sequence
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from er_triage.core.errors import MissingField, InvalidType, NotFound, StoreUnavailable, WriteNotAcknowledged
from er_triage.modules.patients.repository import PatientStore
from er_triage.modules.patients.schemas import PatientCreate, PatientCreated, WaitTimeOut

logger = logging.getLogger(__name__)

# what the store driver raises when it cannot be reached or rejects a query
STORE_ERRORS = (SQLAlchemyError, OSError)

TEXT_FIELDS = {"name", "code"}

def parse_new_patient(body: Any) -> PatientCreate:
    """Validate an add-patient body before anything touches the store.

    Absent, null and empty-text fields are ``MissingField``; anything else pydantic
    rejects is ``InvalidType``. Missing fields win when both occur.
    """
    if not isinstance(body, dict):
        raise MissingField()
    try:
        return PatientCreate.model_validate(body)
    except ValidationError as e:
        missing, wrong_text = False, False
        for err in e.errors():
            field = err["loc"][0] if err["loc"] else None
            if err["type"] in ("missing", "string_too_short") or err.get("input", ...) is None:
                missing = True
            elif field in TEXT_FIELDS:
                wrong_text = True
        if missing:
            raise MissingField() from e
        if wrong_text:
            raise InvalidType("Name and code must be text") from e
        raise InvalidType() from e

class TriageService:
    def __init__(self, store: PatientStore):
        self.store = store

    async def add_patient(self, body: Any) -> PatientCreated:
        try:
            payload = parse_new_patient(body)
        except (MissingField, InvalidType) as e:
            logger.error(f"Validation failed: {e.message}")
            raise

        data = payload.model_dump()
        logger.info(f"Adding new patient: {data}")
        try:
            result = await self.store.insert_one(**data)
        except STORE_ERRORS as e:
            logger.error(f"Error in add_patient: {e}")
            raise StoreUnavailable() from e

        if not result.acknowledged:
            logger.error("Failed to add patient")
            raise WriteNotAcknowledged()
        logger.info(f"Patient added successfully: {result.inserted_id}")
        return PatientCreated(success=True, patient_id=result.inserted_id)

    async def list_patients(self) -> Sequence:
        try:
            patients = await self.store.find_all()
        except STORE_ERRORS as e:
            logger.error(f"Error in list_patients: {e}")
            raise StoreUnavailable("Unable to retrieve triage list due to server error") from e

        if not patients:
            logger.warning("No patients found in the triage list")
        else:
            logger.info(f"Retrieved triage list with {len(patients)} patients")
        return patients

    async def get_wait_time(self, name: str | None) -> WaitTimeOut:
        if not name or not name.strip():
            logger.error("Validation failed: Patient name is missing")
            raise MissingField("Patient name is required")

        try:
            patient = await self.store.find_one(name)
        except STORE_ERRORS as e:
            logger.error(f"Error in get_wait_time: {e}")
            raise StoreUnavailable() from e

        if patient is None:
            logger.warning(f"Patient '{name}' not found")
            raise NotFound()
        logger.info(f"Retrieved wait time for '{name}'")
        return WaitTimeOut(wait_time=patient.wait_time)
