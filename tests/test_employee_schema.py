"""Tests for the employee record and its listing format."""

import math

import pytest

from employee_directory_api.app.schemas.employee import Employee, format_salary


@pytest.mark.parametrize(
    "value, expected",
    [
        (60000.0, "60000"),
        (55000.5, "55000.5"),
        (0.1, "0.1"),
        (0.0001, "0.0001"),
        (0.00001, "1E-05"),
        (123456789012345.0, "123456789012345"),
        (1e15, "1E+15"),
        (1.5e20, "1.5E+20"),
        (-2500.25, "-2500.25"),
        (0.0, "0"),
        (math.inf, "∞"),
        (-math.inf, "-∞"),
        (math.nan, "NaN"),
    ],
)
def test_format_salary(value, expected):
    assert format_salary(value) == expected


def test_to_line():
    emp = Employee(id=4, name="Alice", position="Tester", salary=55000)

    assert emp.to_line() == "ID: 4, Name: Alice, Position: Tester, Salary: 55000"


def test_defaults():
    emp = Employee(id=1)

    assert (emp.name, emp.position, emp.salary) == ("", "", 0.0)
