from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..auth.controller import login_required
from ..container import Container
from ..core.exceptions import NotFoundError


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.route("/payroll", endpoint="payroll")
    @login_required
    def payroll():
        q = request.args.get("q", "")
        return render_template(
            "payroll/index.html",
            lines=service.search(q),
            totals=service.totals(),
            q=q,
            active_page="payroll",
        )

    @app.route("/payroll/<int:employee_id>/payslip", endpoint="payslip")
    @login_required
    def payslip(employee_id: int):
        try:
            slip = service.payslip(employee_id)
        except NotFoundError as e:
            flash(str(e), "danger")
            return redirect(url_for("payroll"))
        return render_template("payroll/payslip.html", slip=slip, active_page="payroll")

    @app.route("/payroll/<int:employee_id>/payslip/download", methods=["POST"], endpoint="download_payslip")
    @login_required
    def download_payslip(employee_id: int):
        try:
            flash(service.download_payslip(employee_id), "success")
        except NotFoundError as e:
            flash(str(e), "danger")
            return redirect(url_for("payroll"))
        return redirect(url_for("payslip", employee_id=employee_id))
