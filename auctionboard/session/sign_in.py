"""Sign-in endpoint.

Sign-in is a no-op callback: the form is checked for shape only and the
credentials are neither verified nor stored.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request
from jsonschema import ValidationError

router = APIRouter(prefix="/session", tags=["session"])

logger = logging.getLogger(__name__)


@router.post("/sign-in")
async def sign_in(request: Request, payload: dict[str, Any] = Body(...)) -> dict[str, str]:
    try:
        request.app.state.schema_registry.validate("sign_in", payload)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc.message)) from exc
    logger.info("Sign-in callback invoked")
    return {"status": "signed_in"}
