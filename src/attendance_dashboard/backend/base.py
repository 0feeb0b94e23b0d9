from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Type

import httpx
from postgrest.exceptions import APIError

from ..core.exceptions import BackendError

logger = logging.getLogger(__name__)


@contextmanager
def backend_call(action: str, *, error_cls: Type[BackendError] = BackendError) -> Iterator[None]:
    """Translate client library failures into `BackendError`.

    The cause (network, permission, conflict) is kept on `__cause__` for the
    logs only; callers see a single error kind.
    """

    try:
        yield
    except APIError as exc:
        logger.warning("backend rejected %s: code=%s message=%s", action, exc.code, exc.message)
        raise error_cls(f"{action} failed") from exc
    except httpx.HTTPError as exc:
        logger.warning("backend unreachable during %s: %s", action, exc)
        raise error_cls(f"{action} failed") from exc


def rows(response: Any) -> List[Dict[str, Any]]:
    data = getattr(response, "data", None)
    if data is None:
        return []
    if isinstance(data, dict):
        return [data]
    return list(data)


def require_single_row(response: Any, action: str) -> Dict[str, Any]:
    """Return the only affected row, or fail when the filter matched nothing."""

    data = rows(response)
    if not data:
        logger.warning("%s matched no rows", action)
        raise BackendError(f"{action} failed: no matching row")
    return data[0]
