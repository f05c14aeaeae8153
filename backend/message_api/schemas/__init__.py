"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Schemas are API contracts; models/ is persistence; core/message.py is the domain copy
"""
