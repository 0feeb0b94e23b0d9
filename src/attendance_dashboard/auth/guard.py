from __future__ import annotations

import logging
from typing import Optional

from .model import Session, SessionEnded, SessionEstablished
from .provider import AuthProvider, Subscription
from .router import Router

logger = logging.getLogger(__name__)


class SessionGuard:
    """Gates a view on the presence of a session.

    `mount()` subscribes to auth state changes and checks the current
    session; the outcome is published to the router as `SessionEstablished`
    or `SessionEnded`. `teardown()` releases the subscription. Usable as a
    context manager around a request.
    """

    def __init__(self, auth: AuthProvider, router: Router, *, check_session: bool = True):
        self._auth = auth
        self._router = router
        self._check_session = check_session
        self._subscription: Optional[Subscription] = None
        self.session: Optional[Session] = None

    def mount(self) -> Optional[Session]:
        if self._subscription is None:
            self._subscription = self._auth.on_auth_state_change(self._on_auth_state_change)

        if self._check_session:
            self.session = self._current_session()
            if self.session is None:
                logger.debug("no active session")
                self._router.handle(SessionEnded(reason="no_session"))
            else:
                self._router.handle(SessionEstablished(self.session))
        return self.session

    def teardown(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    @property
    def mounted(self) -> bool:
        return self._subscription is not None

    def _current_session(self) -> Optional[Session]:
        # No retries: a failed check counts as "no session".
        try:
            return self._auth.get_session()
        except Exception as exc:
            logger.warning("session check failed: %s", exc)
            return None

    def _on_auth_state_change(self, event: str, session: Optional[Session]) -> None:
        if session is not None:
            self.session = session
            self._router.handle(SessionEstablished(session))
        elif event == "SIGNED_OUT":
            self.session = None
            self._router.handle(SessionEnded(reason="signed_out"))

    def __enter__(self) -> "SessionGuard":
        self.mount()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()
