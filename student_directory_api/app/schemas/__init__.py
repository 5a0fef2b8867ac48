"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the store so that the JSON representation
of a record does not depend on how records are held in memory.
"""
