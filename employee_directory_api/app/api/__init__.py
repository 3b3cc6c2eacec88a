"""
API package containing the routes of the service.

``router`` in :mod:`.router` aggregates the endpoint modules found in
``endpoints``.
"""
