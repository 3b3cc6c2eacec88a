"""Endpoint modules, each exposing a ``router``."""
