"""Employee directory API client.

A thin wrapper around the plain-text employee directory service using
the ``requests`` library.  Data is sent as URL-encoded forms and the
text responses are parsed back into Python values.

The client exposes one method per operation of the service:

* :meth:`EmployeeDirectoryClient.echo` – return the request echo of ``GET /``.
* :meth:`EmployeeDirectoryClient.list_employees` – return all employees.
* :meth:`EmployeeDirectoryClient.create_employee` – create an employee.
* :meth:`EmployeeDirectoryClient.update_employee` – update an employee.
* :meth:`EmployeeDirectoryClient.delete_employee` – delete an employee.

Methods never raise on HTTP or network failures.  Each returns a tuple
``(result, error)`` where ``error`` is ``None`` on success and otherwise
a dictionary with the keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Tuple

import requests

from employee_directory_api.app.core.parsing import parse_float
from employee_directory_api.app.schemas.employee import Employee

logger = logging.getLogger(__name__)

Error = Dict[str, Any]

_EMPLOYEE_LINE_RE = re.compile(
    r"^ID: (?P<id>-?\d+), Name: (?P<name>.*), Position: (?P<position>.*), Salary: (?P<salary>.*)$"
)
_CREATED_RE = re.compile(r"Employee created with ID: (?P<id>-?\d+)")


def parse_employee_line(line: str) -> Optional[Employee]:
    """Parse one line of the employee listing, or return ``None``."""
    match = _EMPLOYEE_LINE_RE.match(line)
    if not match:
        return None
    return Employee(
        id=int(match.group("id")),
        name=match.group("name"),
        position=match.group("position"),
        salary=parse_float(match.group("salary")),
    )


class EmployeeDirectoryClient:
    """Client for the employee directory service."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        form: Dict[str, Any] | None = None,
    ) -> Tuple[Optional[str], Optional[Error]]:
        """Perform an HTTP request to the service.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/employees``).
            params: Query parameters to include in the request.
            form: Fields sent as a URL-encoded body.
        Returns:
            A tuple ``(text, error)``.  ``text`` holds the response body
            on success.  On failure it is ``None`` and ``error`` describes
            the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                data=form,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.text, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text.strip() if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def echo(self) -> Tuple[Optional[str], Optional[Error]]:
        """Return the service's echo of this client's request."""
        return self._request("GET", "/")

    def list_employees(self) -> Tuple[List[Employee], Optional[Error]]:
        """Retrieve all employees in listing order.

        Lines that do not look like employee records are skipped.
        """
        text, error = self._request("GET", "/employees")
        if error:
            return [], error
        employees = []
        for line in text.splitlines():
            if not line:
                continue
            emp = parse_employee_line(line)
            if emp is None:
                logger.warning("Skipping unexpected listing line %r", line)
                continue
            employees.append(emp)
        return employees, None

    def create_employee(
        self, name: str, position: str, salary: float
    ) -> Tuple[Optional[int], Optional[Error]]:
        """Create an employee and return the identifier it was given."""
        text, error = self._request(
            "POST",
            "/employees",
            form={"name": name, "position": position, "salary": repr(float(salary))},
        )
        if error:
            return None, error
        match = _CREATED_RE.search(text)
        if not match:
            message = f"Unexpected response: {text.strip()}"
            logger.error("Employee creation failed: %s", message)
            return None, {"status_code": None, "message": message}
        return int(match.group("id")), None

    def update_employee(
        self,
        employee_id: int,
        *,
        name: Optional[str] = None,
        position: Optional[str] = None,
        salary: Optional[float] = None,
    ) -> Tuple[bool, Optional[Error]]:
        """Update an employee.

        Fields left as ``None`` are not sent and keep their stored value.
        The service ignores salaries that are not greater than zero.

        Returns:
            A tuple ``(updated, error)``.  ``updated`` is ``False`` when
            the employee does not exist.
        """
        form: Dict[str, Any] = {"id": employee_id}
        if name is not None:
            form["name"] = name
        if position is not None:
            form["position"] = position
        if salary is not None:
            form["salary"] = repr(float(salary))
        text, error = self._request("PUT", "/employees", form=form)
        if error:
            return False, error
        return "updated successfully" in text, None

    def delete_employee(self, employee_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete an employee.

        Returns:
            A tuple ``(deleted, error)``.  ``deleted`` is ``False`` when
            the employee does not exist.
        """
        text, error = self._request("DELETE", "/employees", params={"id": employee_id})
        if error:
            return False, error
        return "deleted successfully" in text, None
