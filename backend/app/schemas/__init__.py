"""Pydantic Schemas — request/response contracts for the API.

Invariants:
    - Schemas validate at the system boundary (request bodies) and shape every response
"""
