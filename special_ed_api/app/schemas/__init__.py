"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies for the generated
documentation; they are separate from the storage layer, which keeps
records as plain dictionaries.
"""
