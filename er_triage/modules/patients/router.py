from typing import Any
from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from er_triage.core.config import settings
from er_triage.core.db import get_session
from er_triage.modules.patients.repository import PatientRepository, PatientStore
from er_triage.modules.patients.schemas import PatientCreated, PatientOut, WaitTimeOut
from er_triage.modules.patients.service import TriageService

router = APIRouter()

def get_store(session: AsyncSession = Depends(get_session)) -> PatientStore:
    return PatientRepository(session)

def svc(store: PatientStore = Depends(get_store)) -> TriageService:
    return TriageService(store)

@router.post("/addPatient", response_model=PatientCreated, status_code=status.HTTP_201_CREATED)
async def add_patient(
    body: Any = Body(default=None),
    service: TriageService = Depends(svc),
):
    return await service.add_patient(body)

@router.get("/getTriageList", response_model=list[PatientOut])
async def get_triage_list(service: TriageService = Depends(svc)):
    patients = await service.list_patients()
    if not patients and settings.EMPTY_LIST_AS_NOT_FOUND:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": "No patients found"})
    return patients

@router.get("/getPatientWaitTime", response_model=WaitTimeOut)
async def get_patient_wait_time(
    name: str | None = Query(default=None),
    service: TriageService = Depends(svc),
):
    return await service.get_wait_time(name)
