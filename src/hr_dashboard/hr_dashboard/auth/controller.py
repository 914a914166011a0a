from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, flash, g, redirect, render_template, request, session, url_for

from ..container import Container
from .session import SessionContext

logger = logging.getLogger(__name__)

NAV_ITEMS = (
    ("dashboard", "Dashboard"),
    ("employees", "Employees"),
    ("attendance", "Attendance & Leave"),
    ("payroll", "Payroll"),
)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not g.session_ctx.is_authenticated:
            flash("Please sign in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["csrf_token"] = lambda: ""

    @app.before_request
    def load_session_context():
        g.session_ctx = SessionContext(session, container.auth_service)

    @app.context_processor
    def inject_user():
        ctx = getattr(g, "session_ctx", None)
        return {
            "current_user": ctx.current_user() if ctx else None,
            "nav_items": NAV_ITEMS,
        }

    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if g.session_ctx.is_authenticated:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")
            remember = request.form.get("remember_me")

            try:
                if g.session_ctx.login(email, password):
                    session.permanent = bool(remember)
                    flash(f"Welcome back, {g.session_ctx.current_user().name}!", "success")
                    return redirect(url_for("dashboard"))
                flash("Invalid email or password", "danger")
            except Exception as e:
                logger.exception("login failed unexpectedly")
                if bool(app.config.get("DEBUG", False)):
                    flash(f"System error during login: {e}", "danger")
                else:
                    flash("System error during login", "danger")

        return render_template("login.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        g.session_ctx.logout()
        flash("You have been signed out.", "info")
        return redirect(url_for("login"))
