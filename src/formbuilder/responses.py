from __future__ import annotations

from typing import Any

import orjson
from fastapi import Request
from fastapi.responses import JSONResponse

from formbuilder.errors import AppError


def success(data: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse({"ok": True, "data": data}, status_code=status_code)


async def read_json(request: Request) -> Any:
    """Decode the request body; an empty body reads as an empty object."""
    body = await request.body()
    if not body.strip():
        return {}
    try:
        return orjson.loads(body)
    except orjson.JSONDecodeError as exc:
        raise AppError("Malformed JSON body", status_code=400, code="INVALID_JSON") from exc
