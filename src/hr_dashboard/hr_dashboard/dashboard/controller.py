from __future__ import annotations

from flask import Flask, render_template

from ..auth.controller import login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        summary = container.dashboard_service.summary()
        return render_template("dashboard.html", summary=summary, active_page="dashboard")
