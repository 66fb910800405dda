from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, record: AttendanceRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(employee_id, employee_name, work_date, in_time, out_time)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    employee_name=VALUES(employee_name),
                    in_time=VALUES(in_time),
                    out_time=VALUES(out_time)
                """,
                (
                    record.employee_id,
                    record.employee_name,
                    record.work_date,
                    record.in_time,
                    record.out_time,
                ),
            )

    def list_records(
        self,
        *,
        employee_id: Optional[str] = None,
        month: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses: list[str] = []
        params: list[object] = []

        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)
        if month is not None:
            clauses.append("DATE_FORMAT(work_date, '%%Y-%%m')=%s")
            params.append(month)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT employee_id, employee_name, work_date, in_time, out_time
                FROM attendance
                {where}
                ORDER BY employee_id, work_date
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    employee_id=r["employee_id"] or r["employee_name"],
                    employee_name=r["employee_name"],
                    work_date=r["work_date"],
                    in_time=normalize_mysql_time(r.get("in_time")),
                    out_time=normalize_mysql_time(r.get("out_time")),
                )
                for r in rows
            ]

    def list_employees(self) -> Sequence[tuple[str, str]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, MAX(employee_name) AS employee_name
                FROM attendance
                GROUP BY employee_id
                ORDER BY employee_name
                """
            )
            return [(r["employee_id"], r["employee_name"]) for r in fetchall(cur)]
