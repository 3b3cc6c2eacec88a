"""Configuration, logging and request-parsing helpers."""
