"""Core Layer — process-wide values and the error hierarchy, no IO.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
"""
