from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from er_triage.modules.patients.router import router as patients_router

WELCOME = "Welcome to the Emergency Room Triage System!"

api_router = APIRouter()
api_router.include_router(patients_router, tags=["patients"])

@api_router.get("/", response_class=PlainTextResponse, tags=["home"])
async def home():
    return WELCOME

@api_router.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}
