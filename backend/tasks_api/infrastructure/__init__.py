"""Infrastructure Layer: document store clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api or services
    - All client errors mapped to core/errors.py types before leaving this layer
"""
