from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .absences.memory_absence_repository import InMemoryAbsenceRepository, InMemoryNotificationRepository
from .absences.service import AbsenceService
from .attendance.service import AttendanceService
from .directory.memory_directory_repository import InMemoryDirectoryRepository
from .directory.repository import DirectoryRepository


@dataclass(frozen=True)
class Container:
    directory: DirectoryRepository

    absences_repo: InMemoryAbsenceRepository
    notifications_repo: InMemoryNotificationRepository

    absence_service: AbsenceService
    attendance_service: AttendanceService


def build_container(*, directory: Optional[DirectoryRepository] = None) -> Container:
    """Wire one instance of every repository and service.

    Both services share the same directory, and the aggregator reads the
    register through ``AbsenceService.list_by_child``.
    """
    directory = directory or InMemoryDirectoryRepository.demo()

    absences_repo = InMemoryAbsenceRepository()
    notifications_repo = InMemoryNotificationRepository()

    absence_service = AbsenceService(absences_repo, notifications_repo, directory)
    attendance_service = AttendanceService(absence_service, directory)

    return Container(
        directory=directory,
        absences_repo=absences_repo,
        notifications_repo=notifications_repo,
        absence_service=absence_service,
        attendance_service=attendance_service,
    )
