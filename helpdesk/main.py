# helpdesk/main.py
from contextlib import asynccontextmanager

import structlog
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from helpdesk.core.config import get_settings
from helpdesk.core.database import Storage, get_storage
from helpdesk.core.errors import ApiError
from helpdesk.core.logging import configure_logging
from helpdesk.ticket.routes import router as ticket_router

logger = structlog.get_logger()

settings = get_settings()
configure_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # the process keeps serving when the database is unreachable
    storage = Storage.from_settings(settings)
    if storage.connect():
        storage.ensure_indexes()
    app.state.storage = storage
    try:
        yield
    finally:
        storage.close()


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESC,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

origins = settings.cors_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def malformed_body_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected request body", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=400,
        content={"message": "Malformed request body", "errors": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


# Routers
app.include_router(ticket_router)


@app.get("/health", tags=["Health"])
def health(storage: Storage = Depends(get_storage)):
    return {"status": "ok", "database": "up" if storage.ping() else "down"}
