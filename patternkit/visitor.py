"""Employees visited for KPI rankings and salary statements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, TextIO


class Employee(ABC):
    """An employee who reports a KPI and accepts visitors."""

    name: str

    @abstractmethod
    def kpi(self) -> str:
        """Describe what the employee achieved."""

    @abstractmethod
    def accept(self, visitor: EmployeeVisitor) -> Any:
        """Let ``visitor`` visit this employee; return what the visitor returns."""


@dataclass
class ProductManager(Employee):
    """A product manager: products launched and average satisfaction."""

    name: str
    product_num: int
    satisfaction: int

    def kpi(self) -> str:
        return f"产品经理{self.name}，上线{self.product_num}个产品，平均满意度为{self.satisfaction}"

    def accept(self, visitor: EmployeeVisitor) -> Any:
        return visitor.visit_product_manager(self)


@dataclass
class SoftwareEngineer(Employee):
    """A software engineer: requirements done and bugs fixed."""

    name: str
    requirement_num: int
    bug_num: int

    def kpi(self) -> str:
        return f"软件工程师{self.name}，完成{self.requirement_num}个需求，修复{self.bug_num}个问题"

    def accept(self, visitor: EmployeeVisitor) -> Any:
        return visitor.visit_software_engineer(self)


@dataclass
class HR(Employee):
    """A human resources officer: people recruited."""

    name: str
    recruit_num: int

    def kpi(self) -> str:
        return f"人力资源{self.name}，招聘{self.recruit_num}名员工"

    def accept(self, visitor: EmployeeVisitor) -> Any:
        return visitor.visit_hr(self)


class EmployeeVisitor(ABC):
    """A visitor with one operation for each kind of employee."""

    @abstractmethod
    def visit_product_manager(self, pm: ProductManager) -> Any:
        """Visit a product manager."""

    @abstractmethod
    def visit_software_engineer(self, se: SoftwareEngineer) -> Any:
        """Visit a software engineer."""

    @abstractmethod
    def visit_hr(self, hr: HR) -> Any:
        """Visit a human resources officer."""


@dataclass
class Kpi:
    """An employee's name and KPI total."""

    name: str
    sum: int


class KpiTopVisitor(EmployeeVisitor):
    """Collects KPI totals and publishes a ranking."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.top: list[Kpi] = []
        self.out = out

    def visit_product_manager(self, pm: ProductManager) -> None:
        self.top.append(Kpi(pm.name, pm.product_num + pm.satisfaction))

    def visit_software_engineer(self, se: SoftwareEngineer) -> None:
        self.top.append(Kpi(se.name, se.requirement_num + se.bug_num))

    def visit_hr(self, hr: HR) -> None:
        self.top.append(Kpi(hr.name, hr.recruit_num))

    def publish(self) -> list[str]:
        """Rank by KPI total, highest first; write and return one line per rank."""
        self.top.sort(key=lambda k: k.sum, reverse=True)
        lines = [
            f"第{rank}名{entry.name}：完成KPI总数{entry.sum}"
            for rank, entry in enumerate(self.top, start=1)
        ]
        for line in lines:
            print(line, file=self.out)
        return lines


class SalaryVisitor(EmployeeVisitor):
    """Writes and returns a salary statement for each employee visited."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out

    def visit_product_manager(self, pm: ProductManager) -> str:
        total = (pm.product_num + pm.satisfaction) * 100 + 1000
        return self._emit(
            "产品经理基本薪资：1000元，KPI单位薪资：100元，" f"{pm.kpi()}，总工资为{total}元"
        )

    def visit_software_engineer(self, se: SoftwareEngineer) -> str:
        total = (se.requirement_num + se.bug_num) * 80 + 1500
        return self._emit(
            "软件工程师基本薪资：1500元，KPI单位薪资：80元，" f"{se.kpi()}，总工资为{total}元"
        )

    def visit_hr(self, hr: HR) -> str:
        total = hr.recruit_num * 120 + 800
        return self._emit(
            "人力资源基本薪资：800元，KPI单位薪资：120元，" f"{hr.kpi()}，总工资为{total}元"
        )

    def _emit(self, line: str) -> str:
        print(line, file=self.out)
        return line