from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from flask import g, session
from supabase import Client, ClientOptions, create_client
from supabase_auth import SyncSupportedStorage


@dataclass
class BackendConfig:
    url: str
    key: str


class FlaskSessionStorage(SyncSupportedStorage):
    """Auth storage backed by the signed Flask session cookie.

    Holds the provider session and the PKCE code verifier between the
    sign-in redirect and the callback. Keys are namespaced so `clear()`
    only touches what the auth client wrote.
    """

    prefix = "auth:"

    def get_item(self, key: str) -> Optional[str]:
        return session.get(self.prefix + key)

    def set_item(self, key: str, value: str) -> None:
        session[self.prefix + key] = value

    def remove_item(self, key: str) -> None:
        session.pop(self.prefix + key, None)

    def clear(self) -> None:
        for key in [k for k in session if k.startswith(self.prefix)]:
            session.pop(key, None)


class BackendConnection:
    """Per-request Supabase client factory.

    Note: A client carries the signed-in user's token, so one is created per
    request and cached on `flask.g`; it is never shared between requests.
    """

    def __init__(self, config: BackendConfig):
        self._config = config

    def connect(self) -> Client:
        if "supabase" not in g:
            g.supabase = create_client(
                self._config.url,
                self._config.key,
                options=ClientOptions(storage=FlaskSessionStorage(), flow_type="pkce"),
            )
        return g.supabase

    def forget_session(self) -> None:
        """Drop the locally stored auth session without calling the service."""
        FlaskSessionStorage().clear()
