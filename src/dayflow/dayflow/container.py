from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_POOL_ACQUIRE_TIMEOUT, DEFAULT_POOL_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.repository import PayrollRepository
from .payroll.service import PayrollService
from .system.mysql_health_repository import MySQLHealthRepository
from .system.repository import HealthRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    health_repo: HealthRepository
    employees_repo: EmployeeRepository
    leaves_repo: LeaveRepository
    attendance_repo: AttendanceRepository
    payroll_repo: PayrollRepository

    employee_service: EmployeeService
    leave_service: LeaveService
    attendance_service: AttendanceService
    payroll_service: PayrollService


def assemble_container(
    *,
    health_repo: HealthRepository,
    employees_repo: EmployeeRepository,
    leaves_repo: LeaveRepository,
    attendance_repo: AttendanceRepository,
    payroll_repo: PayrollRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of any set of repositories (MySQL or in-memory)."""

    return Container(
        conn=conn,
        health_repo=health_repo,
        employees_repo=employees_repo,
        leaves_repo=leaves_repo,
        attendance_repo=attendance_repo,
        payroll_repo=payroll_repo,
        employee_service=EmployeeService(employees_repo),
        leave_service=LeaveService(leaves_repo),
        attendance_service=AttendanceService(attendance_repo),
        payroll_service=PayrollService(payroll_repo),
    )


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(db_config.get("pool_size", DEFAULT_POOL_SIZE)),
        acquire_timeout=float(db_config.get("acquire_timeout", DEFAULT_POOL_ACQUIRE_TIMEOUT)),
    )
    conn = DatabaseConnection(config)

    return assemble_container(
        conn=conn,
        health_repo=MySQLHealthRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        leaves_repo=MySQLLeaveRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        payroll_repo=MySQLPayrollRepository(conn),
    )
