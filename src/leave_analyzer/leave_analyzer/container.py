from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceIngestService
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import MonthlyReportService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: AttendanceRepository

    ingest_service: AttendanceIngestService
    report_service: MonthlyReportService


def build_services(attendance_repo: AttendanceRepository, *, conn: Optional[DatabaseConnection] = None) -> Container:
    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        ingest_service=AttendanceIngestService(attendance_repo),
        report_service=MonthlyReportService(attendance_repo),
    )


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)
    return build_services(MySQLAttendanceRepository(conn), conn=conn)
