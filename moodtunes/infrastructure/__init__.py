"""Infrastructure Layer — process-level concerns (logging).

Invariants:
    - Nothing here is imported by core/
"""
