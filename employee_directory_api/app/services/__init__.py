"""
Service layer abstraction.

Services own the application's data and the rules for changing it.
Endpoints call them and only translate between HTTP and service calls.
"""
