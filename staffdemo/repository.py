"""In-memory repositories of staff and projects, and loading them from raw records."""

from __future__ import annotations

import re
from collections import deque

from staffdemo.employee import Cleaner, Driver, Employee, TempEmployee
from staffdemo.engineering import (
    Engineer,
    Programmer,
    Project,
    ProjectManager,
    SeniorManager,
    TeamLeader,
    Tester,
)
from staffdemo.utils import split_file_line

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_salary(text: str) -> int:
    """Parse the leading integer of ``text``; anything unparsable gives 0."""
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        return 0
    return value


class StaffRepository:
    """Staff members keyed by id; listings are ordered by id."""

    def __init__(self) -> None:
        self._staff: dict[str, Employee] = {}

    def __len__(self) -> int:
        return len(self._staff)

    def __contains__(self, staff: object) -> bool:
        return isinstance(staff, Employee) and self._staff.get(staff.id) is staff

    def add_staff(self, staff: Employee | None) -> bool:
        """Store ``staff``; False if it is None or its id is already taken."""
        if staff is None or staff.id in self._staff:
            return False
        self._staff[staff.id] = staff
        return True

    def remove_staff(self, staff: Employee | None) -> bool:
        """Remove exactly this object, detaching an engineer from its projects."""
        if staff is None or self._staff.get(staff.id) is not staff:
            return False
        if isinstance(staff, Engineer):
            staff.remove_all_projects()
        del self._staff[staff.id]
        return True

    def clear(self) -> bool:
        """Remove everyone, detaching engineers from their projects."""
        for staff in self._staff.values():
            if isinstance(staff, Engineer):
                staff.remove_all_projects()
        self._staff.clear()
        return True

    def _select(self, keep) -> dict[str, Employee]:
        return {key: staff for key, staff in sorted(self._staff.items()) if keep(staff)}

    def all_staff(self) -> dict[str, Employee]:
        return self._select(lambda staff: True)

    def by_name(self, text: str) -> dict[str, Employee]:
        """Staff whose name contains ``text``."""
        return self._select(lambda staff: text in staff.name)

    def by_position(self, position: str) -> dict[str, Employee]:
        return self._select(lambda staff: staff.position == position)

    def by_payment_above(self, payment: int) -> dict[str, Employee]:
        """Staff paid strictly more than ``payment``."""
        return self._select(lambda staff: staff.payment > payment)

    def by_payment_below(self, payment: int) -> dict[str, Employee]:
        """Staff paid strictly less than ``payment``."""
        return self._select(lambda staff: staff.payment < payment)


class ProjectRepository:
    """Projects keyed by name; listings are ordered by name."""

    def __init__(self) -> None:
        self._projects: dict[str, Project] = {}

    def __len__(self) -> int:
        return len(self._projects)

    def add_project(self, project: Project | None) -> bool:
        """Store ``project``; False if it is None or its name is taken."""
        if project is None or project.name in self._projects:
            return False
        self._projects[project.name] = project
        return True

    def remove_project(self, project: Project | None) -> bool:
        """Remove exactly this project after detaching all its members."""
        if project is None:
            return False
        key = next((name for name, stored in self._projects.items() if stored is project), None)
        if key is None:
            return False
        for member in project.members():
            project.remove_member(member)
        del self._projects[key]
        return True

    def all_projects(self) -> dict[str, Project]:
        return dict(sorted(self._projects.items()))

    def project_staff(self, project: Project | None) -> list[Engineer]:
        if project is None:
            return []
        return project.members()

    def add_staff(self, staff: Engineer | None, project: Project | None) -> bool:
        if project is None:
            return False
        return project.add_member(staff)

    def remove_staff(self, staff: Engineer | None, project: Project | None) -> bool:
        if project is None:
            return False
        return project.remove_member(staff)

    def relocate_staff(
        self,
        staff: Engineer | None,
        from_project: Project | None,
        to_project: Project | None,
    ) -> bool:
        """Move ``staff`` from one project to another."""
        if staff is None or from_project is None or to_project is None:
            return False
        if not from_project.remove_member(staff):
            return False
        return to_project.add_member(staff)


_LINE_ENGINEERS = {
    "programmer": lambda t, salary: Programmer(t.id, t.name, t.position, 0, 0, salary, None),
    "tester": lambda t, salary: Tester(t.id, t.name, t.position, 0, 0, salary, None),
    "teamleader": lambda t, salary: TeamLeader(t.id, t.name, t.position, 0, 0, salary, 0, None),
    "pmanager": lambda t, salary: ProjectManager(t.id, t.name, t.position, 0, 0, 0, []),
}


class RepositoryInstruments:
    """Both repositories together, with loading from raw employee records."""

    def __init__(self) -> None:
        self.staff_repository = StaffRepository()
        self.project_repository = ProjectRepository()

    def _load_one(self, temp: TempEmployee) -> None:
        salary = _parse_salary(temp.salary)

        if temp.position == "cleaner":
            self.staff_repository.add_staff(Cleaner(temp.id, temp.name, temp.position, salary))
            return
        if temp.position == "driver":
            self.staff_repository.add_staff(Driver(temp.id, temp.name, temp.position, salary, 0))
            return
        if temp.position == "smanager":
            projects = [Project(name) for name in split_file_line(temp.project, ",")]
            manager = SeniorManager(temp.id, temp.name, temp.position, 0, 0, 0, [])
            for project in projects:
                project.add_member(manager)
                self.project_repository.add_project(project)
            self.staff_repository.add_staff(manager)
            return

        project = Project(temp.project)
        build = _LINE_ENGINEERS.get(temp.position)
        engineer = build(temp, salary) if build is not None else None
        project.add_member(engineer)
        self.project_repository.add_project(project)
        self.staff_repository.add_staff(engineer)

    def load_staff_from_queue(self, queue: deque[TempEmployee]) -> bool:
        """Consume every record in ``queue``; False if it was empty."""
        if not queue:
            return False
        while queue:
            self._load_one(queue.popleft())
        return True

    def download_staffs(self) -> list[Employee]:
        """All staff, ordered by id."""
        return list(self.staff_repository.all_staff().values())