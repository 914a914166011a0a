from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..auth.controller import login_required
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from .service import EmployeeForm

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    def render_form(*, employee=None, form=None, errors=None, status=200):
        return (
            render_template(
                "employees/form.html",
                employee=employee,
                form=form or {},
                errors=errors or {},
                departments=service.departments,
                active_page="employees",
            ),
            status,
        )

    @app.route("/employees", endpoint="employees")
    @login_required
    def employees():
        q = request.args.get("q", "")
        return render_template(
            "employees/index.html",
            employees=service.search(q),
            q=q,
            active_page="employees",
        )

    @app.route("/employees/new", methods=["GET", "POST"], endpoint="add_employee")
    @login_required
    def add_employee():
        if request.method == "POST":
            try:
                emp = service.create(EmployeeForm.from_mapping(request.form))
                flash(f"{emp.name} has been added to the system.", "success")
                return redirect(url_for("employees"))
            except ValidationError as e:
                return render_form(form=request.form, errors=e.errors, status=400)
            except Exception:
                logger.exception("adding employee failed")
                flash("System error while adding employee", "danger")

        return render_form()

    @app.route("/employees/<int:employee_id>/edit", methods=["GET", "POST"], endpoint="edit_employee")
    @login_required
    def edit_employee(employee_id: int):
        try:
            employee = service.get(employee_id)
        except NotFoundError as e:
            flash(str(e), "danger")
            return redirect(url_for("employees"))

        if request.method == "POST":
            try:
                emp = service.update(employee_id, EmployeeForm.from_mapping(request.form))
                flash(f"{emp.name}'s information has been updated.", "success")
                return redirect(url_for("employees"))
            except ValidationError as e:
                return render_form(employee=employee, form=request.form, errors=e.errors, status=400)
            except NotFoundError as e:
                flash(str(e), "danger")
                return redirect(url_for("employees"))
            except Exception:
                logger.exception("updating employee %s failed", employee_id)
                flash("System error while updating employee", "danger")

        return render_form(employee=employee)

    @app.route("/employees/<int:employee_id>/delete", methods=["POST"], endpoint="delete_employee")
    @login_required
    def delete_employee(employee_id: int):
        try:
            employee = service.get(employee_id)
            service.delete(employee_id)
            flash(f"{employee.name} has been removed from the system.", "success")
        except NotFoundError as e:
            flash(str(e), "danger")

        return redirect(url_for("employees"))
