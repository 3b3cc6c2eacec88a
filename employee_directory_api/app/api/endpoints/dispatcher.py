"""
Request dispatcher for the employee directory.

A single catch-all route receives every request and branches on the
HTTP method and the path prefix:

* ``GET /`` echoes the method, path and request headers;
* ``GET /employees`` lists all employees;
* ``POST /employees`` creates an employee from a URL-encoded body;
* ``PUT /employees`` updates an employee from a URL-encoded body;
* ``DELETE /employees?id=N`` deletes an employee.

Any other method is answered with 405.  A supported method on a path
outside these prefixes gets an empty 200 response.  Every response is
plain text with ``\\r\\n`` line endings, and unknown employees are
reported in the body with status 200 rather than 404.

Malformed numbers never cause a 400: ``id`` falls back to 0, which
matches no employee, and ``salary`` falls back to 0, which leaves the
stored salary untouched on update.
"""

import logging
from typing import Dict, Iterable, List

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse

from employee_directory_api.app.core.dependencies import get_repository
from employee_directory_api.app.core.parsing import (
    FormValues,
    parse_float,
    parse_form,
    parse_int,
    starts_with_segments,
)
from employee_directory_api.app.services.employee_service import EmployeeRepository

logger = logging.getLogger(__name__)

router = APIRouter()

ROOT_PATH = "/"
EMPLOYEES_PATH = "/employees"

LINE_END = "\r\n"
METHOD_NOT_SUPPORTED = "Method not supported."

# Methods routed to the dispatcher.  Anything else is rejected by the
# framework before reaching it and turned into the same 405 response by
# the handler installed in ``main.create_app``.
ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH", "OPTIONS", "TRACE"]


def text_response(lines: Iterable[str], status_code: int = status.HTTP_200_OK) -> PlainTextResponse:
    """Build a plain-text response with one ``\\r\\n`` terminated line per item."""
    body = "".join(f"{line}{LINE_END}" for line in lines)
    return PlainTextResponse(body, status_code=status_code)


def method_not_supported() -> PlainTextResponse:
    return text_response([METHOD_NOT_SUPPORTED], status.HTTP_405_METHOD_NOT_ALLOWED)


async def read_form(request: Request) -> FormValues:
    body = await request.body()
    return parse_form(body.decode("utf-8-sig", errors="replace"))


def header_lines(request: Request) -> List[str]:
    # Repeated headers are folded into one line.
    headers: Dict[str, List[str]] = {}
    for raw_key, raw_value in request.headers.raw:
        key = raw_key.decode("latin-1")
        headers.setdefault(key, []).append(raw_value.decode("latin-1"))
    return [f"{key}: {','.join(values)}" for key, values in headers.items()]


@router.api_route("/{path:path}", methods=ROUTED_METHODS, include_in_schema=False)
async def dispatch(
    request: Request,
    repository: EmployeeRepository = Depends(get_repository),
) -> PlainTextResponse:
    """Route a request to the matching employee operation."""
    method = request.method
    # Decoded path; an encoded "?" or "#" stays part of it.
    path = request.scope["path"]
    logger.debug("Dispatching %s %s", method, path)

    if method == "GET":
        if starts_with_segments(path, ROOT_PATH):
            lines = [
                f"The method used is: {method}",
                f"The URL is: {path}",
                "Headers:",
            ]
            lines.extend(header_lines(request))
            return text_response(lines)
        if starts_with_segments(path, EMPLOYEES_PATH):
            return text_response(emp.to_line() for emp in repository.list())
        return text_response([])

    if method == "POST":
        if starts_with_segments(path, EMPLOYEES_PATH):
            form = await read_form(request)
            emp = repository.add(
                form.get("name") or "",
                form.get("position") or "",
                parse_float(form.get("salary")),
            )
            return text_response([f"Employee created with ID: {emp.id}"])
        return text_response([])

    if method == "PUT":
        if starts_with_segments(path, EMPLOYEES_PATH):
            form = await read_form(request)
            employee_id = parse_int(form.get("id"))
            updated = repository.update(
                employee_id,
                form.get("name") or "",
                form.get("position") or "",
                parse_float(form.get("salary")),
            )
            if updated:
                return text_response([f"Employee with ID {employee_id} updated successfully."])
            return text_response([f"Employee with ID {employee_id} not found."])
        return text_response([])

    if method == "DELETE":
        if starts_with_segments(path, EMPLOYEES_PATH):
            query = parse_form(request.scope["query_string"].decode("latin-1"))
            employee_id = parse_int(query.get("id"))
            if repository.delete(employee_id):
                return text_response([f"Employee with ID {employee_id} deleted successfully."])
            return text_response([f"Employee with ID {employee_id} not found."])
        return text_response([])

    logger.warning("Rejected unsupported method %s %s", method, path)
    return method_not_supported()
