from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from formbuilder.errors import AppError, ValidationFailed
from formbuilder.responses import success
from formbuilder.utils import now_iso
from formbuilder.validation import HEALTH, validate

logger = logging.getLogger(__name__)
router = APIRouter()

SERVICE_NAME = "api"


@router.get("/health", tags=["system"])
async def health() -> JSONResponse:
    data = {"service": SERVICE_NAME, "time": now_iso()}
    try:
        validate(HEALTH, data)
    except ValidationFailed as exc:
        logger.error("Health payload rejected: %s", exc.details)
        raise AppError(
            "Invalid health payload", status_code=500, code="INTERNAL_SERVER_ERROR"
        ) from exc
    return success(data)
