"""
User endpoints — thin HTTP layer, delegates all logic to services.
"""

import json
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.dependencies import get_auth_provider, get_user_service
from app.domain.errors import UserSyncError
from app.domain.models import ErrorResponse
from app.ports.auth_port import AuthPort
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


async def _read_json_object(request: Request) -> dict[str, Any]:
    """Parse the body as a JSON object; anything else reads as empty."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        return {}
    return body if isinstance(body, dict) else {}


@router.post(
    "/sync",
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def sync_user(
    request: Request,
    auth: AuthPort = Depends(get_auth_provider),
    svc: UserService = Depends(get_user_service),
):
    """Create or update the authenticated user's profile from {email, name, imageUrl}."""
    subject = await auth.get_subject(request)

    # Body is only parsed once a subject is resolved
    payload = await _read_json_object(request) if subject else {}

    try:
        user = await svc.sync_user(subject, payload)
    except UserSyncError as exc:
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.message).model_dump(),
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(user))
