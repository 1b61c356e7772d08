"""FastAPI application entrypoint. No business logic; only wiring, middleware and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from fzscripts.api import router as api_router
from fzscripts.core.config import settings
from fzscripts.core.database import SessionLocal, create_tables
from fzscripts.core.errors import InternalFailure, ServiceError
from fzscripts.services.seed import seed_bootstrap_admin

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Create tables if configured and seed the bootstrap admin once per process."""
    if settings.CREATE_TABLES_ON_STARTUP:
        create_tables()
    db = SessionLocal()
    try:
        seed_bootstrap_admin(db, settings)
    finally:
        db.close()
    yield


app = FastAPI(
    title="FZ Scripts API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(_request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Body/param validation failures are 400 with the first problem spelled out."""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        field = ".".join(
            p for p in first.get("loc", ()) if isinstance(p, str) and p != "body"
        )
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Store failures never leak detail to the client; operators get the traceback."""
    logger.exception(
        "Store failure",
        extra={"path": request.url.path, "method": request.method},
        exc_info=exc,
    )
    failure = InternalFailure()
    return JSONResponse(status_code=failure.status_code, content={"error": failure.message})


app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "FZ Scripts API"}
