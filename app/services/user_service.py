"""
User service — profile sync orchestration.
Depends on ports only (Dependency Inversion).
"""

import logging
from typing import Any

from pydantic import ValidationError

from app.domain.errors import (
    AuthenticationMissingError,
    StoreFailureError,
    ValidationFailureError,
)
from app.domain.models import UserRecord
from app.ports.user_port import UserPort

_REQUIRED_FIELDS = ("email", "name", "imageUrl")


class UserService:
    """Orchestrates user-related business logic."""

    def __init__(
        self,
        store: UserPort,
        logger: logging.Logger | None = None,
    ) -> None:
        self._store = store
        self._logger = logger or logging.getLogger(__name__)

    async def sync_user(
        self, subject: str | None, payload: dict[str, Any]
    ) -> dict[str, Any]:
        """
        Upsert the authenticated user's profile:
        1. Require a session subject
        2. Require truthy email, name and imageUrl in the payload
        3. Upsert {id: subject, email, name, imageUrl} once
        4. Return whatever the store persisted

        The record id always comes from the session, never from the payload.
        """
        if not subject:
            raise AuthenticationMissingError()

        record = self._build_record(subject, payload)

        try:
            return await self._store.upsert_user(record)
        except Exception as exc:
            self._logger.exception(f"Error syncing user {subject}: {exc}")
            raise StoreFailureError() from exc

    @staticmethod
    def _build_record(subject: str, payload: dict[str, Any]) -> UserRecord:
        # Empty-or-absent check: any falsy value counts as missing
        if not all(payload.get(field) for field in _REQUIRED_FIELDS):
            raise ValidationFailureError()

        try:
            return UserRecord(
                id=subject,
                email=payload["email"],
                name=payload["name"],
                imageUrl=payload["imageUrl"],
            )
        except ValidationError as exc:
            # Present but not a string (e.g. a number or object)
            raise ValidationFailureError() from exc
