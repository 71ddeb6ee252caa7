# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Person Service
==============
CRUD REST API over a single Person entity (id, name, email) backed by a
relational store, plus a free-memory health indicator and a Prometheus
request counter.

    GET    /api/persons          list
    GET    /api/persons/{id}     get      (404 empty when absent)
    POST   /api/persons          create
    PUT    /api/persons/{id}     update   (404 empty when absent)
    DELETE /api/persons/{id}     delete   (204, or 404 empty when absent)

Port: 8080
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from person_service.controllers import person_controller, system_controller
from person_service.core.config import settings
from person_service.core.database import create_schema, engine
from person_service.core.logging import get_logger
from person_service.middleware import RequestIDMiddleware
from person_service.schemas import ErrorResponse

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    logger.info("Person service starting — backend=%s", settings.REPOSITORY_BACKEND)
    if settings.REPOSITORY_BACKEND == "sql" and settings.CREATE_SCHEMA:
        create_schema(engine)
    yield
    engine.dispose()
    logger.info("Person service shutting down")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Person Service",
    description="CRUD API over Person records with health and metrics endpoints.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    responses={
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestIDMiddleware)


# ── Global exception handler ─────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
    )


app.include_router(system_controller.router)
app.include_router(person_controller.router)


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
