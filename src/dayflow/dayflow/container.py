from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .leave.mysql_leave_repository import MySQLLeaveRepository
from .leave.repository import LeaveRepository
from .leave.service import LeaveService
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.repository import PayrollRepository
from .payroll.service import PayrollService
from .reports.mysql_report_repository import MySQLReportRepository
from .reports.repository import ReportRepository
from .reports.service import ReportService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, EmployeeService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    attendance_repo: AttendanceRepository
    leave_repo: LeaveRepository
    payroll_repo: PayrollRepository
    reports_repo: ReportRepository

    auth_service: AuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    leave_service: LeaveService
    payroll_service: PayrollService
    report_service: ReportService


def wire_services(
    *,
    users_repo: UserRepository,
    attendance_repo: AttendanceRepository,
    leave_repo: LeaveRepository,
    payroll_repo: PayrollRepository,
    reports_repo: ReportRepository,
) -> Container:
    """Build every service on top of the given repositories."""
    return Container(
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        leave_repo=leave_repo,
        payroll_repo=payroll_repo,
        reports_repo=reports_repo,
        auth_service=AuthService(users_repo),
        employee_service=EmployeeService(users_repo),
        attendance_service=AttendanceService(attendance_repo),
        leave_service=LeaveService(leave_repo, attendance_repo),
        payroll_service=PayrollService(payroll_repo, users_repo),
        report_service=ReportService(reports_repo, attendance_repo, payroll_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return wire_services(
        users_repo=MySQLUserRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        leave_repo=MySQLLeaveRepository(conn),
        payroll_repo=MySQLPayrollRepository(conn),
        reports_repo=MySQLReportRepository(conn),
    )
