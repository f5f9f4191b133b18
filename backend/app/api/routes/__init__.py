"""Route Modules — one file per endpoint.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Paths are exact matches; no path parameters
    - Every route answers ACCEPTED_METHODS; OPTIONS is answered by the CORS middleware
"""

ACCEPTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]
