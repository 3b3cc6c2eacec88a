# Test configuration
import os

# Set test environment variables BEFORE importing app modules
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_EMPLOYEES"] = "true"

import pytest
from fastapi.testclient import TestClient

from employee_directory_api.app.main import create_app
from employee_directory_api.app.services.employee_service import EmployeeRepository


@pytest.fixture
def repository():
    """Fresh repository holding the three seed employees."""
    return EmployeeRepository()


@pytest.fixture
def app(repository):
    return create_app(repository=repository)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
