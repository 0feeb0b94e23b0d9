from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from ..core.exceptions import SchemaError


@dataclass(frozen=True)
class Session:
    """Authenticated user context issued by the identity provider."""

    user_id: str
    email: Optional[str]
    access_token: str
    expires_at: Optional[int] = None

    @classmethod
    def from_provider(cls, session: Any) -> "Session":
        user = getattr(session, "user", None)
        access_token = getattr(session, "access_token", None)
        if user is None or not access_token:
            raise SchemaError("provider session is missing user or access token")
        return cls(
            user_id=str(user.id),
            email=getattr(user, "email", None),
            access_token=access_token,
            expires_at=getattr(session, "expires_at", None),
        )


@dataclass(frozen=True)
class SessionEstablished:
    session: Session


@dataclass(frozen=True)
class SessionEnded:
    reason: str = "signed_out"


SessionEvent = Union[SessionEstablished, SessionEnded]
