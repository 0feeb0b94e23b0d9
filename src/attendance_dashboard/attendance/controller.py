from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, flash, g, redirect, render_template, request, url_for

from ..auth.router import FlaskRouter
from ..common.datetime_utils import today_local
from ..common.notifications import FlashNotifier
from ..common.validators import require_iso_date, require_status
from ..core.constants import DASHBOARD_TITLE
from ..core.enums import AttendanceStatus, Route
from ..core.exceptions import ValidationError
from ..container import Container
from .service import AttendanceViewModel

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def session_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            router = FlaskRouter(current=Route.DASHBOARD)
            with container.session_guard(router) as guard:
                # Redirect before any data is fetched.
                if router.should_redirect:
                    flash("Please sign in to continue.", "info")
                    return router.response()
                g.current_session = guard.session
                return view(*args, **kwargs)

        return wrapper

    def _view_model() -> AttendanceViewModel:
        return container.view_model(FlashNotifier(), scope=g.current_session.user_id)

    @app.route("/dashboard", endpoint="dashboard")
    @session_required
    def dashboard():
        state = _view_model().load()
        return render_template(
            "dashboard.html",
            title=DASHBOARD_TITLE,
            state=state,
            employees=state.employees.data,
            records=state.attendance.data,
            today=today_local().isoformat(),
            statuses=list(AttendanceStatus),
            current_user=g.current_session,
        )

    @app.route("/attendance", methods=["POST"], endpoint="mark_attendance")
    @session_required
    def mark_attendance():
        try:
            work_date = require_iso_date(request.form.get("date") or today_local().isoformat())
            status = require_status(request.form.get("status"))
            _view_model().mark_attendance(
                work_date=work_date,
                status=status,
                employee_id=request.form.get("employee_id"),
            )
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("mark attendance crashed")
            flash("System error while marking attendance", "danger")
        return redirect(url_for(Route.DASHBOARD.value))

    @app.route("/attendance/<record_id>/toggle", methods=["POST"], endpoint="toggle_attendance")
    @session_required
    def toggle_attendance(record_id: str):
        try:
            current = require_status(request.form.get("status"))
            _view_model().toggle_status(record_id, current)
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("toggle attendance crashed")
            flash("System error while updating attendance", "danger")
        return redirect(url_for(Route.DASHBOARD.value))

    @app.route("/attendance/<record_id>/delete", methods=["POST"], endpoint="delete_attendance")
    @session_required
    def delete_attendance(record_id: str):
        try:
            _view_model().delete_attendance(record_id)
        except Exception:
            logger.exception("delete attendance crashed")
            flash("System error while deleting attendance", "danger")
        return redirect(url_for(Route.DASHBOARD.value))
