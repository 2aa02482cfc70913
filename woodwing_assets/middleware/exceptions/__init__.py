"""Exception handling for the WoodWing Assets client."""

from typing import Any, Dict, Optional


class AssetsClientError(Exception):
    """Base exception for all WoodWing Assets client errors."""

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.status_code = status_code


from .business import (
    AssetNotFoundError,
    BusinessError,
    DuplicateAssetError,
    IntegrityError,
    NotFoundError,
    RelationDataError,
    ValidationError,
)
from .operations import (
    BrowseFailedError,
    CheckoutFailedError,
    CopyFailedError,
    CreateFailedError,
    CreateFolderFailedError,
    CreateRelationFailedError,
    DownloadFailedError,
    GetFolderFailedError,
    MoveFailedError,
    OperationError,
    RemoveFailedError,
    RemoveFolderFailedError,
    RemoveRelationFailedError,
    SearchFailedError,
    UpdateBulkFailedError,
    UpdateFailedError,
    UpdateFolderFailedError,
)
from .transport import AuthenticationError, TransportError

__all__ = [
    # Base
    "AssetsClientError",
    # Transport Errors
    "TransportError",
    "AuthenticationError",
    # Operation Errors
    "OperationError",
    "SearchFailedError",
    "BrowseFailedError",
    "CreateFailedError",
    "UpdateFailedError",
    "UpdateBulkFailedError",
    "CheckoutFailedError",
    "CopyFailedError",
    "MoveFailedError",
    "RemoveFailedError",
    "CreateRelationFailedError",
    "RemoveRelationFailedError",
    "GetFolderFailedError",
    "CreateFolderFailedError",
    "UpdateFolderFailedError",
    "RemoveFolderFailedError",
    "DownloadFailedError",
    # Business Errors
    "BusinessError",
    "ValidationError",
    "NotFoundError",
    "AssetNotFoundError",
    "IntegrityError",
    "DuplicateAssetError",
    "RelationDataError",
]
