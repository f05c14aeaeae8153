"""Services Layer — message logic orchestrating core rules around store IO.

Invariants:
    - Services depend on core Protocols, never on concrete repositories
"""
