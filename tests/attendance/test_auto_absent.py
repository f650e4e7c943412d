from __future__ import annotations

from datetime import timedelta

from src.bus_attendance.bus_attendance.attendance.service import AttendanceService
from src.bus_attendance.bus_attendance.core.enums import AttendanceStatus, Role
from src.bus_attendance.bus_attendance.qr import codec
from src.bus_attendance.bus_attendance.reports.service import AttendanceReportService


def test_sweep_marks_unscanned_riders_absent(users_repo, attendance_repo, fixed_now):
    users_repo.add("U1", "Alice", "B1")
    users_repo.add("U2", "Bob", "B2")
    svc = AttendanceService(attendance_repo, users_repo)

    svc.scan(codec.encode("U1", "Alice", "B1", "user"), "B1", now=fixed_now)
    result = svc.auto_absent(now=fixed_now + timedelta(hours=12))

    assert result.checked == 2
    assert result.marked_absent == 1
    assert [e.status for e in attendance_repo.for_user("U1")] == [AttendanceStatus.PRESENT]
    [absent] = attendance_repo.for_user("U2")
    assert absent.status == AttendanceStatus.ABSENT
    assert absent.bus == "B2"


def test_sweep_twice_same_day_writes_nothing_new(users_repo, attendance_repo, fixed_now):
    users_repo.add("U1", "Alice", "B1")
    users_repo.add("U2", "Bob", "B1")
    svc = AttendanceService(attendance_repo, users_repo)

    svc.auto_absent(now=fixed_now)
    second = svc.auto_absent(now=fixed_now + timedelta(minutes=5))

    assert second.marked_absent == 0
    assert len(attendance_repo.entries) == 2


def test_sweep_skips_admins(users_repo, attendance_repo, fixed_now):
    users_repo.add("A1", "Station", "B1", role=Role.ADMIN)
    svc = AttendanceService(attendance_repo, users_repo)

    result = svc.auto_absent(now=fixed_now)

    assert result.checked == 0
    assert attendance_repo.entries == []


def test_sweep_then_monthly_summary_counts_absence(users_repo, attendance_repo, fixed_now):
    users_repo.add("U2", "Bob", "B1")
    svc = AttendanceService(attendance_repo, users_repo)
    reports = AttendanceReportService(attendance_repo)

    svc.auto_absent(now=fixed_now)
    summary = reports.monthly_summary("U2", fixed_now.month, fixed_now.year)

    assert summary.present_days == 0
    assert summary.absent_days == summary.total_days == 28
    assert [e.status for e in summary.details] == [AttendanceStatus.ABSENT]
