"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from authapi.api import router as api_router
from authapi.core.config import settings
from authapi.core.exceptions import AccountError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)

WELCOME_MESSAGE = "Welcome to the Accounts API"

app = FastAPI(
    title="Accounts API",
    version="0.1.0",
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.exception_handler(AccountError)
async def account_error_handler(_request: Request, exc: AccountError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.get("/")
def root() -> dict[str, str]:
    """Root route; fixed welcome payload, doubles as a liveness check."""
    return {"message": WELCOME_MESSAGE}
