"""
Pydantic schema definitions for API payloads.

Schemas describe the records served by the lookup endpoint and the
shape of its error body.
"""
