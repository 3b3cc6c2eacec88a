"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: ``core`` for configuration and helpers, ``schemas`` for
the employee record, ``services`` for the repository and ``api`` for
the request dispatcher.
"""

from .main import app, create_app  # noqa: F401
