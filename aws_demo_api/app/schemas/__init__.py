"""
Pydantic schema definitions for API payloads.

Schemas are separated from the SQL in the service layer so the API
representation can evolve independently of the table layout.
"""
