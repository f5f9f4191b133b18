"""Demo HTTP Server Package — five JSON endpoints behind CORS and logging middleware.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
