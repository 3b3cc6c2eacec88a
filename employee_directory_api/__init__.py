"""
Employee directory service.

An HTTP service keeping employee records in memory, plus a ``requests``
based client for it in :mod:`employee_directory_api.client`.
"""

__version__ = "1.0.0"
