"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from trolly import __version__
from trolly.api.routes import content, health, observe
from trolly.core.config import settings
from trolly.core.contract import AUTHORITY
from trolly.core.exceptions import InsertFailedError
from trolly.services.shopping_list import init_provider, shutdown_provider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    await init_provider(settings.DATABASE_URL)

    yield

    # Shutdown
    await shutdown_provider()


app = FastAPI(
    title="Trolly Content API",
    description="URI-addressed access to the shopping list",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(health.router)
app.include_router(content.router, prefix="/api")
app.include_router(observe.router, prefix="/api")


# Unknown identifiers, bad projections and malformed selections
@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc.orig)})


@app.exception_handler(InsertFailedError)
async def insert_failed_handler(request: Request, exc: InsertFailedError) -> JSONResponse:
    logger.error("%s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)}
    )


@app.get("/")
async def root():
    """API info."""
    return {
        "name": "Trolly Content API",
        "version": __version__,
        "authority": AUTHORITY,
    }
