"""Transport-related exceptions."""

from typing import Any, Dict, Optional

from . import AssetsClientError


class TransportError(AssetsClientError):
    """Raised by a gateway when a call to the server fails.

    Covers network failures, non-2xx HTTP statuses and bodies that are not
    valid JSON. ``status_code`` carries the HTTP status when one was received.
    """

    def __init__(
        self,
        message: str = "Request to the Assets server failed",
        code: str = "TRANSPORT_ERROR",
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 502,
    ):
        super().__init__(
            message=message, code=code, details=details, status_code=status_code
        )


class AuthenticationError(TransportError):
    """Raised when the server rejects the login."""

    def __init__(
        self,
        message: str = "Authentication failed",
        code: str = "AUTHENTICATION_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details, status_code=401)
