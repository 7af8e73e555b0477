"""Core Layer: pure field shaping, error hierarchy and store contract.

Invariants:
    - Core never imports from infrastructure, api or services
    - No IO in core functions
"""
