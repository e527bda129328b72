"""Weight Range Application Package — Hamwi healthy-weight calculator and usage counter.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
