"""Exceptions raised by client-side checks, before or between server calls."""

from typing import Any, Dict, Optional

from . import AssetsClientError


class BusinessError(AssetsClientError):
    """Base class for errors detected by the client itself."""

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 422,
    ):
        super().__init__(
            message=message, code=code, details=details, status_code=status_code
        )


class ValidationError(BusinessError):
    """A required request field is empty; raised before any transport call."""

    def __init__(
        self,
        message: str = "Invalid request",
        code: str = "VALIDATION_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details, status_code=400)


class NotFoundError(BusinessError):
    """An expected resource does not exist."""

    def __init__(
        self,
        message: str = "Resource not found",
        code: str = "NOT_FOUND",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details, status_code=404)


class AssetNotFoundError(NotFoundError):
    """A search for a single asset returned no hits."""

    def __init__(
        self,
        query: str,
        message: str = "Asset not found",
        code: str = "ASSET_NOT_FOUND",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            details={"query": query, **(details or {})},
        )


class IntegrityError(BusinessError):
    """Server data violates an invariant the client relies on."""

    def __init__(
        self,
        message: str = "Data integrity violation",
        code: str = "INTEGRITY_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details, status_code=409)


class DuplicateAssetError(IntegrityError):
    """A lookup expected to be unique returned more than one hit."""

    def __init__(
        self,
        query: str,
        hit_count: int,
        message: str = "Multiple assets found",
        code: str = "DUPLICATE_ASSET",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            details={"query": query, "hit_count": hit_count, **(details or {})},
        )


class RelationDataError(IntegrityError):
    """A relation search hit carries no relation id."""

    def __init__(
        self,
        message: str = "Relation ID not found in search response",
        code: str = "RELATION_DATA_MISSING",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
