"""
Domain exceptions raised by the service layer.

Endpoints translate these into ``HTTPException`` instances: a missing
record becomes a 404 and a rejected payload becomes a 400.  Anything
else escaping a handler is treated as an internal error by the
middleware installed in ``main.py``.
"""


class RecordNotFoundError(LookupError):
    """The requested id is not present in the store."""

    def __init__(self, message: str, record_id: str) -> None:
        super().__init__(message)
        self.record_id = record_id


class RecordValidationError(ValueError):
    """The payload is well formed but violates a store constraint."""
