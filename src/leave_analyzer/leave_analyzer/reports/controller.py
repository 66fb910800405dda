from __future__ import annotations

from flask import Flask, request

from ..common.http import fail, ok
from ..common.validators import require_month_key
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _arg(name: str):
        value = (request.args.get(name) or "").strip()
        return value or None

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_stats")
    def attendance_stats():
        """Monthly stats per employee: {employees: {employeeId: {"YYYY-MM": stats}}}."""
        nested = container.report_service.monthly_stats(employee_id=_arg("employee"), month=_arg("month"))
        return ok(
            {
                "employees": {
                    emp_id: {m: s.to_dict() for m, s in months.items()}
                    for emp_id, months in nested.items()
                }
            }
        )

    @app.route("/api/report", methods=["GET"], endpoint="month_report")
    def month_report():
        month = _arg("month")
        if not month:
            return fail("Month parameter required (format: YYYY-MM)", status=400)
        summary = container.report_service.month_summary(require_month_key(month))
        return ok(summary.to_dict())

    @app.route("/api/employees", methods=["GET"], endpoint="employees")
    def employees():
        return ok(container.report_service.list_employees())

    @app.route("/api/employees/<employee_id>/periods", methods=["GET"], endpoint="employee_periods")
    def employee_periods(employee_id: str):
        periods = container.report_service.periods_for(employee_id)
        return ok([{"year": year, "months": months} for year, months in periods.items()])
