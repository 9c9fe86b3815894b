"""
Abstract interface for resolving the authenticated principal of a request.
"""

from abc import ABC, abstractmethod

from fastapi import Request


class AuthPort(ABC):
    """Port for looking up the session subject behind an incoming request."""

    @abstractmethod
    async def get_subject(self, request: Request) -> str | None:
        """
        Resolve the session subject for this request.

        Args:
            request: The incoming HTTP request (headers and state).

        Returns:
            The authenticated user's id, or None when the request is not
            authenticated. Never raises for bad or missing credentials.
        """
        ...
