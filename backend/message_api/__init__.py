"""Message API Package — organization-scoped message management service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
