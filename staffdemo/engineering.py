"""Projects and the engineering staff that work on them."""

from __future__ import annotations

import weakref
from abc import abstractmethod
from functools import total_ordering

from staffdemo.employee import Employee, Heading, ProjectBudget, WorkBaseTime


@total_ordering
class Project:
    """A named project with a budget and a set of engineers working on it.

    Members are held weakly: an engineer that no longer exists drops out of
    the project on its own. Projects compare and hash by name.
    """

    def __init__(self, name: str, budget: int = 0) -> None:
        self.name = name
        self.total_budget = budget
        self._members: list[weakref.ref[Engineer]] = []

    def members(self) -> list[Engineer]:
        """Return the engineers still alive in this project, in join order."""
        return [member for ref in self._members if (member := ref()) is not None]

    def _find(self, member: Engineer) -> int | None:
        return next(
            (index for index, ref in enumerate(self._members) if ref() is member),
            None,
        )

    def add_member(self, member: Engineer | None) -> bool:
        """Add ``member`` and point it at this project; False if already here."""
        if member is None or self._find(member) is not None:
            return False
        member.add_project(self)
        self._members.append(weakref.ref(member))
        return True

    def remove_member(self, member: Engineer | None) -> bool:
        """Remove ``member`` and detach it from this project; False if absent."""
        if member is None:
            return False
        index = self._find(member)
        if index is None:
            return False
        member.remove_project(self)
        del self._members[index]
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self.name < other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Project(name={self.name!r}, budget={self.total_budget!r})"


class Engineer(Employee, WorkBaseTime, ProjectBudget):
    """Staff paid partly from project budgets and professional additions."""

    def __init__(
        self,
        id: str,
        name: str,
        position: str,
        part_of_budget: float,
        pro_additions: int,
    ) -> None:
        super().__init__(id, name, position)
        self.part_of_budget = part_of_budget
        self.pro_additions = pro_additions

    def calc_base(self, salary: int, work_time: int) -> int:
        return salary * work_time

    def calc_bonus(self) -> int:
        return 0

    def calc_budget_part(self, part: float, budget: int) -> int:
        """Return ``part`` percent (at most 100) of ``budget``, truncated."""
        part = min(part, 100)
        return int(part * float(budget) / 100)

    def calc_pro_additions(self) -> int:
        return int(self.pro_additions)

    def add_pro_additions(self, amount: int) -> None:
        self.pro_additions += amount

    def remove_pro_additions(self, amount: int) -> None:
        """Subtract ``amount``, never going below zero."""
        self.pro_additions -= min(amount, self.pro_additions)

    @abstractmethod
    def project_names(self) -> list[str]:
        """Names of the projects this engineer works on."""

    @abstractmethod
    def add_project(self, project: Project | None) -> bool:
        """Attach the engineer to ``project``."""

    @abstractmethod
    def remove_project(self, project: Project | None) -> bool:
        """Detach the engineer from ``project``."""

    @abstractmethod
    def remove_all_projects(self) -> bool:
        """Detach the engineer from every project."""


class LineEngineer(Engineer):
    """An engineer on an hourly salary who works on a single project."""

    def __init__(
        self,
        id: str,
        name: str,
        position: str,
        part_of_budget: float,
        pro_additions: int,
        salary: int,
        project: Project | None,
    ) -> None:
        super().__init__(id, name, position, part_of_budget, pro_additions)
        self.salary = salary
        self._project: weakref.ref[Project] | None = (
            weakref.ref(project) if project is not None else None
        )

    @property
    def project(self) -> Project | None:
        """The current project, or None if there is none or it is gone."""
        return self._project() if self._project is not None else None

    def _require_project(self) -> Project:
        project = self.project
        if project is None:
            raise ValueError(f"employee {self.id!r} has no project")
        return project

    def calc(self) -> None:
        project = self._require_project()
        self._payment = (
            self.calc_base(self.salary, self.work_time)
            + self.calc_pro_additions()
            + self.calc_budget_part(self.part_of_budget, project.total_budget)
        )

    def project_names(self) -> list[str]:
        project = self.project
        return [project.name] if project is not None else []

    def add_project(self, project: Project | None) -> bool:
        self._project = weakref.ref(project) if project is not None else None
        return True

    def remove_project(self, project: Project | None) -> bool:
        if project is None or project is not self.project:
            return False
        self._project = None
        return True

    def remove_all_projects(self) -> bool:
        project = self.project
        if project is None:
            return True
        if not project.remove_member(self):
            return False
        self._project = None
        return True

    def make_line_for_file(self, delim: str, sub_delim: str = ",") -> str:
        project = self.project
        return delim.join(
            [
                self.id,
                self.name,
                self.position,
                str(self.salary),
                project.name if project is not None else "",
            ]
        )


class ManagerEngineer(Engineer, Heading):
    """An engineer who leads and may oversee several projects."""

    def __init__(
        self,
        id: str,
        name: str,
        position: str,
        part_of_budget: float,
        pro_additions: int,
        heading: int,
        projects,
    ) -> None:
        super().__init__(id, name, position, part_of_budget, pro_additions)
        self.heading = heading
        self._projects: list[weakref.ref[Project]] = [
            weakref.ref(project) for project in projects or () if project is not None
        ]

    @property
    def projects(self) -> list[Project]:
        """The projects still alive, in the order they were added."""
        return [project for ref in self._projects if (project := ref()) is not None]

    def project_names(self) -> list[str]:
        return [project.name for project in self.projects]

    def calc_heads(self) -> int:
        return int(self.heading)

    def calc(self) -> None:
        budget_part = sum(
            self.calc_budget_part(self.part_of_budget, project.total_budget)
            for project in self.projects
        )
        self._payment = self.calc_pro_additions() + self.calc_heads() + budget_part

    def make_line_for_file(self, delim: str, sub_delim: str = ",") -> str:
        names = sub_delim.join(self.project_names())
        return delim.join([self.id, self.name, self.position, "", names])


class Programmer(LineEngineer):
    """A programmer."""


class Tester(LineEngineer):
    """A tester."""


class TeamLeader(Programmer, Heading):
    """A programmer who also leads a team."""

    def __init__(
        self,
        id: str,
        name: str,
        position: str,
        part_of_budget: float,
        pro_additions: int,
        salary: int,
        heading: int,
        project: Project | None,
    ) -> None:
        super().__init__(id, name, position, part_of_budget, pro_additions, salary, project)
        self.heading = heading

    def add_heading(self, amount: int) -> None:
        self.heading += amount

    def remove_heading(self, amount: int) -> None:
        """Subtract ``amount``, never going below zero."""
        self.heading -= min(amount, self.heading)

    def calc_heads(self) -> int:
        return int(self.heading)

    def calc(self) -> None:
        project = self._require_project()
        self._payment = (
            self.calc_base(self.salary, self.work_time)
            + self.calc_pro_additions()
            + self.calc_budget_part(self.part_of_budget, project.total_budget)
            + self.calc_heads()
        )


class ProjectManager(ManagerEngineer):
    """A manager in charge of exactly one project at a time."""

    def add_project(self, project: Project | None) -> bool:
        if project is None:
            return False
        current = self.projects
        if self._projects and self._projects[0]() is project:
            return False
        del current
        self._projects = [weakref.ref(project)]
        return True

    def remove_project(self, project: Project | None) -> bool:
        if project is None or not self._projects:
            return False
        current = self._projects[0]()
        if current is not None and current is project:
            self._projects.clear()
            return True
        return False

    def remove_all_projects(self) -> bool:
        self._projects.clear()
        return True


class SeniorManager(ManagerEngineer):
    """A manager overseeing any number of projects."""

    def add_project(self, project: Project | None) -> bool:
        if project is None:
            return False
        if any(ref() is project for ref in self._projects):
            return False
        self._projects.append(weakref.ref(project))
        return True

    def remove_project(self, project: Project | None) -> bool:
        for index, ref in enumerate(self._projects):
            current = ref()
            if current is not None and current is project:
                del self._projects[index]
                return True
        return False

    def remove_all_projects(self) -> bool:
        self._projects.clear()
        return True