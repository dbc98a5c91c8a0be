import io

import pytest

from patternkit.visitor import (
    HR,
    EmployeeVisitor,
    KpiTopVisitor,
    ProductManager,
    SalaryVisitor,
    SoftwareEngineer,
)


def _staff():
    return [
        ProductManager("pm", 2, 3),
        SoftwareEngineer("dev", 10, 20),
        HR("hr", 7),
    ]


def test_kpi_mentions_name_and_inputs():
    pm = ProductManager("pm", 2, 3)
    assert pm.kpi().startswith("产品经理pm")
    se = SoftwareEngineer("dev", 10, 20)
    assert se.kpi().startswith("软件工程师dev")
    assert HR("hr", 7).kpi().startswith("人力资源hr")


def test_hr_kpi_pinned():
    assert HR("hr", 7).kpi() == "人力资源hr，招聘7名员工"


def test_kpi_top_collects_one_entry_per_employee():
    visitor = KpiTopVisitor(out=io.StringIO())
    staff = _staff()
    for employee in staff:
        employee.accept(visitor)
    assert [k.name for k in visitor.top] == [e.name for e in staff]


def test_publish_ranks_descending():
    out = io.StringIO()
    visitor = KpiTopVisitor(out=out)
    for employee in _staff():
        employee.accept(visitor)
    lines = visitor.publish()
    sums = [k.sum for k in visitor.top]
    assert sums == sorted(sums, reverse=True)
    assert len(lines) == 3
    assert lines[0].startswith("第1名")
    assert lines[-1].startswith("第3名")
    assert out.getvalue().splitlines() == lines


def test_publish_top_entry_pinned():
    visitor = KpiTopVisitor(out=io.StringIO())
    for employee in _staff():
        employee.accept(visitor)
    assert visitor.publish()[0] == "第1名dev：完成KPI总数30"


def test_publish_empty():
    assert KpiTopVisitor(out=io.StringIO()).publish() == []


def test_salary_lines_contain_kpi():
    out = io.StringIO()
    visitor = SalaryVisitor(out=out)
    lines = [employee.accept(visitor) for employee in _staff()]
    for employee, line in zip(_staff(), lines):
        assert employee.kpi() in line
    assert lines[0].startswith("产品经理基本薪资：1000元，KPI单位薪资：100元，")
    assert lines[1].startswith("软件工程师基本薪资：1500元，KPI单位薪资：80元，")
    assert lines[2].startswith("人力资源基本薪资：800元，KPI单位薪资：120元，")
    assert out.getvalue().splitlines() == lines


def test_hr_salary_pinned():
    line = HR("hr", 0).accept(SalaryVisitor(out=io.StringIO()))
    assert line.endswith("总工资为800元")


def test_visitor_base_is_abstract():
    with pytest.raises(TypeError):
        EmployeeVisitor()