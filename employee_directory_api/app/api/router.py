"""
Top-level router of the API.

The service exposes its operations at the root of the URL space
(``/`` and ``/employees``), so the dispatcher router is included
without a prefix.
"""

from fastapi import APIRouter

from .endpoints import dispatcher

router = APIRouter()

router.include_router(dispatcher.router, tags=["employees"])
