from __future__ import annotations

from typing import Callable, Optional, Protocol

from .model import Session

# (event name, session or None); event names follow the provider
# ("INITIAL_SESSION", "SIGNED_IN", "SIGNED_OUT", "TOKEN_REFRESHED", ...).
AuthStateCallback = Callable[[str, Optional[Session]], None]


class Subscription(Protocol):
    def unsubscribe(self) -> None:
        raise NotImplementedError


class AuthProvider(Protocol):
    """Boundary to the hosted authentication service."""

    def get_session(self) -> Optional[Session]:
        raise NotImplementedError

    def on_auth_state_change(self, callback: AuthStateCallback) -> Subscription:
        raise NotImplementedError

    def sign_in_url(self, provider: str, *, redirect_to: str) -> str:
        raise NotImplementedError

    def exchange_code(self, code: str) -> Session:
        raise NotImplementedError

    def sign_out(self) -> None:
        """Revoke the session; raises `AuthenticationError` when the service refuses."""
        raise NotImplementedError
