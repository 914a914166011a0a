from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..auth.controller import login_required
from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.enums import LeaveStatus

ACTIONS = {"approve": LeaveStatus.APPROVED, "deny": LeaveStatus.DENIED}


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/attendance", endpoint="attendance")
    @login_required
    def attendance():
        q = request.args.get("q", "")
        return render_template(
            "attendance/index.html",
            sheets=service.search(q),
            q=q,
            leave_queue=service.leave_queue(),
            pending=service.pending_leaves(),
            counts={status.value: n for status, n in service.leave_counts().items()},
            tab=request.args.get("tab", "attendance"),
            active_page="attendance",
        )

    @app.route(
        "/attendance/leaves/<int:employee_id>/<leave_date>/<action>",
        methods=["POST"],
        endpoint="decide_leave",
    )
    @login_required
    def decide_leave(employee_id: int, leave_date: str, action: str):
        status = ACTIONS.get(action)
        try:
            day = parse_iso_date(leave_date)
        except ValueError:
            day = None

        if status is None or day is None:
            flash("Invalid leave action", "danger")
        elif service.decide_leave(employee_id=employee_id, leave_date=day, status=status):
            flash(f"The leave request has been {status.value.lower()}.", "success")
        else:
            flash("This leave request has already been handled.", "warning")

        return redirect(url_for("attendance", tab="leave"))
