"""Staff base classes, payment interfaces and hourly personnel."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class WorkBaseTime(ABC):
    """Payment based on hours worked."""

    @abstractmethod
    def calc_base(self, salary: int, work_time: int) -> int: ...

    @abstractmethod
    def calc_bonus(self) -> int: ...


class ProjectBudget(ABC):
    """Payment drawn from a project's budget."""

    @abstractmethod
    def calc_budget_part(self, part: float, budget: int) -> int: ...

    @abstractmethod
    def calc_pro_additions(self) -> int: ...


class Heading(ABC):
    """Payment for leading people."""

    @abstractmethod
    def calc_heads(self) -> int: ...


@dataclass
class TempEmployee:
    """Raw, untyped employee record as read from storage."""

    id: str = ""
    name: str = ""
    position: str = ""
    salary: str = ""
    project: str = ""
    night_bonus: str = ""
    part_of_budget: str = ""
    pro_additions: str = ""
    heading: str = ""


@dataclass
class TempProject:
    """Raw project record: only the project name."""

    name: str = ""


class Employee(ABC):
    """Common data of every staff member. Employees are identified by id."""

    def __init__(self, id: str, name: str, position: str) -> None:
        self.id = id
        self.name = name
        self.position = position
        self.work_time = 0
        self._payment = 0

    @property
    def payment(self) -> int:
        """Payment as of the last call to :meth:`calc`."""
        return self._payment

    @abstractmethod
    def calc(self) -> None:
        """Recompute :attr:`payment`."""

    @abstractmethod
    def make_line_for_file(self, delim: str, sub_delim: str = ",") -> str:
        """Render the employee as one storage record."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, name={self.name!r}, position={self.position!r})"


class Personal(Employee, WorkBaseTime):
    """Staff paid by the hour."""

    def __init__(self, id: str, name: str, position: str, salary: int) -> None:
        super().__init__(id, name, position)
        self.salary = salary

    def calc_base(self, salary: int, work_time: int) -> int:
        return salary * work_time

    def calc_bonus(self) -> int:
        return 0

    def calc(self) -> None:
        self._payment = self.calc_base(self.salary, self.work_time) + self.calc_bonus()

    def make_line_for_file(self, delim: str, sub_delim: str = ",") -> str:
        return delim.join([self.id, self.name, self.position, str(self.salary), ""])


class Cleaner(Personal):
    """Cleaning staff."""


class Driver(Personal):
    """Driver with a bonus for night shifts."""

    def __init__(self, id: str, name: str, position: str, salary: int, night_bonus: int) -> None:
        super().__init__(id, name, position, salary)
        self.night_bonus = night_bonus

    def calc_bonus(self) -> int:
        return self.night_bonus