# File: swatches/core/errors.py

"""
Error types raised by the API routes and the store.

Each error knows its HTTP status and renders as ``{"error": <message>}``,
which is the only failure shape clients ever see.
"""


class SwatchesError(Exception):
    http_status: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message}


class ValidationError(SwatchesError):
    """A required request field is absent or falsy."""

    http_status = 422


class NotFoundError(SwatchesError):
    """No row matched the requested id."""

    http_status = 404


class StoreError(SwatchesError):
    """Any failure reported by the database layer."""

    http_status = 500

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
