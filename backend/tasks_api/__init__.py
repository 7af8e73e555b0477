"""Tasks API package: CRUD over a single collection of task documents.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
