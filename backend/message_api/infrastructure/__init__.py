"""Infrastructure Layer — database access, store implementations, logging setup.

Invariants:
    - Infrastructure implements core Protocols; core never imports from here
"""
