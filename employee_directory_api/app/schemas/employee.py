"""
Pydantic model for employee records.

An employee has an identifier assigned by the repository, a name, a
position and a salary.  The identifier cannot be changed after the
record is created; the other fields are updated in place by
``EmployeeRepository.update``.
"""

import math
from decimal import Decimal

from pydantic import BaseModel, Field


def format_salary(value: float) -> str:
    """Render a salary the way the listing endpoint prints it.

    Uses the shortest decimal that round-trips to the same float.
    Whole numbers carry no fractional part (``60000``), and very large
    or very small magnitudes switch to exponent notation (``1E+15``,
    ``1E-05``).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    number = Decimal(repr(value)).normalize()
    sign, digits, exponent = number.as_tuple()
    scientific_exponent = len(digits) - 1 + exponent
    if -5 < scientific_exponent < 15:
        return format(number, "f")

    mantissa = "".join(str(d) for d in digits)
    if len(mantissa) > 1:
        mantissa = mantissa[0] + "." + mantissa[1:]
    exponent_sign = "+" if scientific_exponent >= 0 else "-"
    return "{}{}E{}{:02d}".format(
        "-" if sign else "", mantissa, exponent_sign, abs(scientific_exponent)
    )


class Employee(BaseModel):
    """A single employee record."""

    id: int = Field(..., frozen=True, description="Identifier assigned by the repository")
    name: str = Field("", examples=["John Doe"])
    position: str = Field("", examples=["Software Engineer"])
    salary: float = Field(0.0, examples=[60000])

    def to_line(self) -> str:
        """Return the record as one line of the employee listing."""
        return (
            f"ID: {self.id}, Name: {self.name}, Position: {self.position}, "
            f"Salary: {format_salary(self.salary)}"
        )
