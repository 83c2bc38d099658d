import logging
from typing import AsyncIterator

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from .batch import run_batch
from .config import Settings, get_settings
from .errors import NameValidationError
from .models import BatchSummary, ErrorResponse, HealthResponse
from .names import load_names
from .validator import NameValidator

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Unexpected error while validating user names."

app = FastAPI(
    title="name-validator",
    description="Normalizes names and checks them against a remote validation service",
    version="0.1.0",
)


async def get_validator(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[NameValidator]:
    async with NameValidator(settings.validation_url, timeout=settings.remote_timeout) as validator:
        yield validator


@app.exception_handler(NameValidationError)
async def name_validation_error_handler(request: Request, exc: NameValidationError):
    logger.error("Batch aborted: %s", exc)
    return JSONResponse(status_code=500, content={"error": str(exc) or GENERIC_ERROR_MESSAGE})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unexpected error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": str(exc) or GENERIC_ERROR_MESSAGE})


@app.get("/health", response_model=HealthResponse)
def health():
    return {"status": "ok"}


@app.get(
    "/api/validate-users",
    response_model=BatchSummary,
    responses={500: {"model": ErrorResponse}},
)
async def validate_users(
    settings: Settings = Depends(get_settings),
    validator: NameValidator = Depends(get_validator),
):
    names = await run_in_threadpool(load_names, settings.users_path)
    return await run_batch(names, validator)
