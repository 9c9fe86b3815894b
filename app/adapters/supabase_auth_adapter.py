"""
Concrete implementation of AuthPort for Supabase-issued JWTs.
"""

import logging

import jwt
from fastapi import Request

from app.ports.auth_port import AuthPort

logger = logging.getLogger(__name__)

_BEARER_PREFIX = "bearer "


class SupabaseAuthAdapter(AuthPort):
    """Resolves the session subject from middleware state or a bearer token."""

    def __init__(self, jwt_secret: str, leeway: int = 30) -> None:
        self._secret = jwt_secret
        self._leeway = leeway

    async def get_subject(self, request: Request) -> str | None:
        # Upstream middleware may have authenticated the request already
        user_id = getattr(request.state, "user_id", None)
        if user_id:
            return user_id

        token = self._extract_bearer(request.headers.get("authorization"))
        if not token:
            return None
        return self._decode_subject(token)

    @staticmethod
    def _extract_bearer(header: str | None) -> str | None:
        if not header or not header.lower().startswith(_BEARER_PREFIX):
            return None
        return header[len(_BEARER_PREFIX):].strip() or None

    def _decode_subject(self, token: str) -> str | None:
        """Verify the token signature and expiry, then return its `sub` claim."""
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=["HS256"],
                options={
                    "verify_exp": True,
                    "verify_aud": False,    # Supabase sets aud="authenticated"
                    "verify_iat": False,    # disabled — clock skew causes false rejections
                },
                leeway=self._leeway,
            )
        except jwt.ExpiredSignatureError:
            logger.warning("Rejected expired session token")
            return None
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected invalid session token: {e}")
            return None

        subject = payload.get("sub")
        if not subject or not isinstance(subject, str):
            logger.warning("Session token missing user ID (sub claim)")
            return None
        return subject
