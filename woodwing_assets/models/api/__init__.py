"""API models for request/response handling."""

from .requests import (
    AssetsRequest,
    BrowseRequest,
    CheckoutRequest,
    CopyAssetRequest,
    CreateFolderRequest,
    CreateRelationRequest,
    CreateRequest,
    GetFolderRequest,
    MoveRequest,
    RemoveFolderRequest,
    RemoveRelationRequest,
    RemoveRequest,
    SearchRequest,
    UpdateBulkRequest,
    UpdateFolderRequest,
    UpdateRequest,
)
from .responses import (
    AssetResponse,
    AssetsResponse,
    BrowseItem,
    BrowseResponse,
    CheckoutResponse,
    FolderResponse,
    LoginResponse,
    ProcessResponse,
    SearchResponse,
)

__all__ = [
    # Requests
    'AssetsRequest',
    'BrowseRequest',
    'CheckoutRequest',
    'CopyAssetRequest',
    'CreateFolderRequest',
    'CreateRelationRequest',
    'CreateRequest',
    'GetFolderRequest',
    'MoveRequest',
    'RemoveFolderRequest',
    'RemoveRelationRequest',
    'RemoveRequest',
    'SearchRequest',
    'UpdateBulkRequest',
    'UpdateFolderRequest',
    'UpdateRequest',

    # Responses
    'AssetResponse',
    'AssetsResponse',
    'BrowseItem',
    'BrowseResponse',
    'CheckoutResponse',
    'FolderResponse',
    'LoginResponse',
    'ProcessResponse',
    'SearchResponse',
]
