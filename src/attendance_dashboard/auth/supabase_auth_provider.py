from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from supabase import Client
from supabase_auth.errors import AuthError

from ..core.exceptions import AuthenticationError, SchemaError
from .model import Session
from .provider import AuthStateCallback, Subscription

logger = logging.getLogger(__name__)


class SupabaseAuthProvider:
    """`AuthProvider` over the Supabase auth client of one request.

    Note: once a session is known its access token is applied to the data
    client, so table queries run under the signed-in user's policies.
    """

    def __init__(self, client: Client):
        self._client = client

    def _to_session(self, raw: Any) -> Optional[Session]:
        if raw is None:
            return None
        try:
            session = Session.from_provider(raw)
        except SchemaError:
            logger.warning("ignoring malformed provider session")
            return None
        self._client.postgrest.auth(session.access_token)
        return session

    def get_session(self) -> Optional[Session]:
        return self._to_session(self._client.auth.get_session())

    def on_auth_state_change(self, callback: AuthStateCallback) -> Subscription:
        def _listener(event, raw_session):
            callback(str(event), self._to_session(raw_session))

        return self._client.auth.on_auth_state_change(_listener)

    def sign_in_url(self, provider: str, *, redirect_to: str) -> str:
        try:
            response = self._client.auth.sign_in_with_oauth(
                {"provider": provider, "options": {"redirect_to": redirect_to}}
            )
        except (AuthError, httpx.HTTPError) as exc:
            raise AuthenticationError(f"Sign-in with {provider} is unavailable") from exc
        return response.url

    def exchange_code(self, code: str) -> Session:
        try:
            response = self._client.auth.exchange_code_for_session({"auth_code": code})
        except (AuthError, httpx.HTTPError) as exc:
            raise AuthenticationError("Sign-in failed") from exc

        session = self._to_session(response.session)
        if session is None:
            raise AuthenticationError("Sign-in failed")
        return session

    def sign_out(self) -> None:
        try:
            self._client.auth.sign_out()
        except (AuthError, httpx.HTTPError) as exc:
            # The client raises before it drops the stored session.
            logger.warning("remote sign-out failed: %s", exc)
            raise AuthenticationError("Sign-out failed") from exc
