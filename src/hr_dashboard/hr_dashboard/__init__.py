"""HR dashboard package.

Organized by feature modules (auth, employees, attendance, payroll, dashboard)
with a thin Flask controller layer over service/repository layers backed by
in-memory fixtures.
"""
