"""FastAPI dependencies shared by the endpoints."""

from fastapi import Request

from employee_directory_api.app.services.employee_service import EmployeeRepository


def get_repository(request: Request) -> EmployeeRepository:
    """Return the repository owned by the running application.

    ``create_app`` stores it on ``app.state``.  Tests may swap it out
    through ``app.dependency_overrides``.
    """
    return request.app.state.repository
