from abc import ABC, abstractmethod
from typing import Any

from app.domain.models import UserRecord


class UserPort(ABC):
    @abstractmethod
    async def upsert_user(self, record: UserRecord) -> dict[str, Any]:
        """Create or update a user record keyed by `record.id` and return the stored row."""
        ...
