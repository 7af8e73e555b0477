"""Service Layer: one async function per task operation.

Invariants:
    - Services receive the store as an argument (never look it up themselves)
"""
