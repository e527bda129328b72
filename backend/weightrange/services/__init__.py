"""Services Layer — imperative shell: usage counter and calculation handler.

Invariants:
    - Services orchestrate IO around pure core/ functions
    - Services never contain formula logic
"""
