import time
import logging
from dotenv import load_dotenv

# Load environment variables from .env file before anything else
load_dotenv()

import uvicorn
from fastapi import FastAPI, Request
from er_triage.core.config import settings
from er_triage.core.db import Database
from er_triage.core.errors import register_error_handlers
from er_triage.core.logging import setup_logging, request_id_ctx
from er_triage.api.router import api_router


setup_logging()
app = FastAPI(title=settings.APP_NAME)
logger = logging.getLogger(__name__)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = (time.time() - start_time) * 1000
    formatted_process_time = f"{process_time:.2f}ms"

    logger.info(
        f"Request: {request.method} {request.url.path} - Response: {response.status_code} - Time: {formatted_process_time}"
    )

    return response

# registered last so it runs first and the request id is set for the log line above
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    rid = request.headers.get("x-request-id", "-")
    request_id_ctx.set(rid)
    response = await call_next(request)
    return response


register_error_handlers(app)


@app.on_event("startup")
async def on_startup():
    # a store placed on app.state beforehand (tests, scripts) is used instead of settings
    store = getattr(app.state, "store", None) or Database.from_settings(settings)
    try:
        await store.connect()
    except Exception:
        logger.critical("Failed to connect to the store", exc_info=True)
        raise
    app.state.store = store
    logger.info(f"Server is running on http://{settings.HOST}:{settings.PORT}")

@app.on_event("shutdown")
async def on_shutdown():
    store = getattr(app.state, "store", None)
    if store:
        await store.close()


app.include_router(api_router)


def run():
    uvicorn.run("er_triage.main:app", host=settings.HOST, port=settings.PORT)
