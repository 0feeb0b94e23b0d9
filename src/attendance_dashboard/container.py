from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from .attendance.cache import QueryCache
from .attendance.service import AttendanceViewModel
from .attendance.supabase_attendance_repository import SupabaseAttendanceRepository
from .auth.guard import SessionGuard
from .auth.provider import AuthProvider
from .auth.router import Router
from .auth.supabase_auth_provider import SupabaseAuthProvider
from .backend.connection import BackendConfig, BackendConnection
from .common.notifications import Notifier
from .core.constants import DEFAULT_AUTH_PROVIDERS, DEFAULT_AUTH_THEME, DEFAULT_CACHE_TTL_SECONDS
from .employees.supabase_employee_repository import SupabaseEmployeeRepository


@dataclass(frozen=True)
class Container:
    """App-wide objects; per-request ones are built from them on demand.

    Every per-request object shares the request's backend client, so the
    session found by the guard authorizes the view-model's queries.
    """

    conn: BackendConnection
    cache: QueryCache
    auth_providers: Tuple[str, ...] = DEFAULT_AUTH_PROVIDERS
    auth_theme: str = DEFAULT_AUTH_THEME

    def auth_provider(self) -> AuthProvider:
        return SupabaseAuthProvider(self.conn.connect())

    def session_guard(self, router: Router, *, check_session: bool = True) -> SessionGuard:
        return SessionGuard(self.auth_provider(), router, check_session=check_session)

    def view_model(self, notifier: Notifier, *, scope: str = "") -> AttendanceViewModel:
        client = self.conn.connect()
        return AttendanceViewModel(
            SupabaseEmployeeRepository(client),
            SupabaseAttendanceRepository(client),
            self.cache,
            notifier,
            scope=scope,
        )


def build_container(*, settings: Any) -> Container:
    config = BackendConfig(
        url=str(getattr(settings, "SUPABASE_URL", "") or ""),
        key=str(getattr(settings, "SUPABASE_KEY", "") or ""),
    )
    # create_client rejects an empty url or key.
    if not config.url or not config.key:
        raise RuntimeError("SUPABASE_URL and SUPABASE_KEY must be set")
    return Container(
        conn=BackendConnection(config),
        cache=QueryCache(ttl_seconds=int(getattr(settings, "CACHE_TTL_SECONDS", DEFAULT_CACHE_TTL_SECONDS))),
        auth_providers=tuple(getattr(settings, "AUTH_PROVIDERS", DEFAULT_AUTH_PROVIDERS)),
        auth_theme=str(getattr(settings, "AUTH_THEME", DEFAULT_AUTH_THEME)),
    )
