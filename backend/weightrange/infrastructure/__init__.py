"""Infrastructure Layer — storage backends and cross-cutting concerns.

Invariants:
    - Infrastructure never imports core/ domain logic beyond types, errors and protocols
    - All storage failures mapped to the typed errors in core/errors.py
"""
