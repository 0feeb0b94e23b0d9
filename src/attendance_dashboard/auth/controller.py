from __future__ import annotations

import logging

from flask import Flask, abort, flash, redirect, render_template, request, url_for

from ..core.constants import APP_TITLE
from ..core.enums import Route
from ..core.exceptions import AuthenticationError
from ..container import Container
from .router import FlaskRouter

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="index")
    def index():
        return redirect(url_for(Route.DASHBOARD.value))

    @app.route("/auth", endpoint="login")
    def login():
        router = FlaskRouter(current=Route.LOGIN)
        with container.session_guard(router):
            if router.should_redirect:
                return router.response()

        return render_template(
            "login.html",
            title=APP_TITLE,
            providers=container.auth_providers,
            theme=container.auth_theme,
        )

    @app.route("/auth/<provider>", endpoint="sign_in")
    def sign_in(provider: str):
        if provider not in container.auth_providers:
            abort(404)

        # Post-login redirect derived from the current origin.
        redirect_to = request.host_url.rstrip("/") + url_for("auth_callback")
        try:
            url = container.auth_provider().sign_in_url(provider, redirect_to=redirect_to)
        except AuthenticationError as e:
            flash(str(e), "danger")
            return redirect(url_for(Route.LOGIN.value))
        return redirect(url)

    @app.route("/auth/callback", endpoint="auth_callback")
    def auth_callback():
        code = request.args.get("code", "").strip()
        if not code:
            flash(request.args.get("error_description") or "Sign-in failed", "danger")
            return redirect(url_for(Route.LOGIN.value))

        router = FlaskRouter()
        with container.session_guard(router, check_session=False):
            try:
                container.auth_provider().exchange_code(code)
            except AuthenticationError as e:
                flash(str(e), "danger")
                return redirect(url_for(Route.LOGIN.value))
            except Exception:
                logger.exception("code exchange crashed")
                flash("System error while signing in", "danger")
                return redirect(url_for(Route.LOGIN.value))

        # SIGNED_IN routes to the dashboard, whose guard re-checks the session.
        return router.response() or redirect(url_for(Route.DASHBOARD.value))

    @app.route("/logout", endpoint="logout")
    def logout():
        with container.session_guard(FlaskRouter()) as guard:
            signed_in = guard.session
            try:
                container.auth_provider().sign_out()
            except AuthenticationError:
                container.conn.forget_session()

        if signed_in is not None:
            container.cache.drop_scope(signed_in.user_id)
        flash("Signed out.", "info")
        # Sign-out was requested, so the login view regardless of events.
        return redirect(url_for(Route.LOGIN.value))
