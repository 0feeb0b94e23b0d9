from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from flask import redirect, url_for

from ..core.enums import Route
from .model import SessionEnded, SessionEstablished, SessionEvent

logger = logging.getLogger(__name__)


def route_for(event: SessionEvent) -> Route:
    if isinstance(event, SessionEstablished):
        return Route.DASHBOARD
    if isinstance(event, SessionEnded):
        return Route.LOGIN
    raise TypeError(f"Unsupported session event: {event!r}")


class Router(Protocol):
    def handle(self, event: SessionEvent) -> None:
        raise NotImplementedError


class NavigationRouter:
    """Turns session events into navigation decisions.

    Navigation to the current route is ignored; the latest decision wins.
    """

    def __init__(self, current: Optional[Route] = None):
        self.current = current
        self.target: Optional[Route] = None
        self.events: List[SessionEvent] = []

    def handle(self, event: SessionEvent) -> None:
        self.events.append(event)
        self.navigate(route_for(event))

    def navigate(self, route: Route) -> None:
        if route == self.current:
            self.target = None
            return
        logger.debug("navigating %s -> %s", self.current, route)
        self.target = route

    @property
    def should_redirect(self) -> bool:
        return self.target is not None


class FlaskRouter(NavigationRouter):
    """`NavigationRouter` that renders its decision as a Flask redirect."""

    def response(self):
        if self.target is None:
            return None
        return redirect(url_for(self.target.value))
