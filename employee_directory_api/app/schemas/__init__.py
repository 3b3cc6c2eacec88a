"""
Pydantic models for the records handled by the API.

Responses are plain text, so these models describe the stored data
rather than JSON payloads.
"""
