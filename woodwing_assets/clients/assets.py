"""Client facade for the WoodWing Assets server operations."""

from ..middleware.exceptions import (
    BrowseFailedError,
    CheckoutFailedError,
    CopyFailedError,
    CreateFailedError,
    CreateFolderFailedError,
    CreateRelationFailedError,
    GetFolderFailedError,
    MoveFailedError,
    RemoveFailedError,
    RemoveFolderFailedError,
    RemoveRelationFailedError,
    SearchFailedError,
    UpdateBulkFailedError,
    UpdateFailedError,
    UpdateFolderFailedError,
)
from ..middleware.logging import log_operation
from ..models.api.requests import (
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
from ..models.api.responses import (
    AssetResponse,
    BrowseResponse,
    CheckoutResponse,
    FolderResponse,
    ProcessResponse,
    SearchResponse,
)
from ..models.domain.profile import ASSETS_PROFILE, ApiProfile
from .gateway import HttpGateway


class AssetsClient:
    """Typed operations of the Assets server REST API.

    Every method takes a request model, calls the gateway at the endpoint of
    the operation and decodes the answer. Gateway failures are re-raised as
    the ``OperationError`` subclass of the operation, chained to the
    original exception.
    """

    def __init__(self, gateway: HttpGateway, profile: ApiProfile = ASSETS_PROFILE) -> None:
        """Initialize the client.

        Args:
            gateway: Transport used for all server calls
            profile: Protocol differences of the server flavor
        """
        self.gateway = gateway
        self.profile = profile

    def search(self, request: SearchRequest) -> SearchResponse:
        """Search for assets.

        Raises:
            SearchFailedError: If the gateway call fails
        """
        try:
            response = self.gateway.service_request("search", request.to_transport_params())
        except Exception as e:
            raise SearchFailedError.wrap(
                e, f"Search failed for query <{request.q}>", details={"query": request.q}
            ) from e

        log_operation("search", "Search performed", mutating=False, query=request.q)

        return SearchResponse.from_transport_json(response)

    def browse(self, request: BrowseRequest) -> BrowseResponse:
        """List folders and collections below a path.

        Raises:
            BrowseFailedError: If the gateway call fails
        """
        try:
            response = self.gateway.service_request("browse", request.to_transport_params())
        except Exception as e:
            raise BrowseFailedError.wrap(
                e, f"Browse failed for path <{request.path}>", details={"path": request.path}
            ) from e

        log_operation("browse", "Browse performed", mutating=False, path=request.path)

        return BrowseResponse.from_transport_json(response)

    def create(self, request: CreateRequest) -> AssetResponse:
        """Create (upload) an asset.

        Raises:
            CreateFailedError: If the gateway call fails
        """
        try:
            response = self.gateway.service_request("create", request.to_transport_params())
        except Exception as e:
            raise CreateFailedError.wrap(
                e, "Create failed", details={"metadata": request.metadata}
            ) from e

        asset = AssetResponse.from_transport_json(response)

        log_operation(
            "create",
            f"Asset <{asset.id}> created",
            mutating=True,
            asset_id=asset.id,
            metadata=request.metadata,
        )

        return asset

    def update(self, request: UpdateRequest) -> None:
        """Update the metadata and/or the file of an asset.

        Raises:
            ValidationError: If the asset id is empty
            UpdateFailedError: If the gateway call fails
        """
        request.validate_required("update")
        params = request.to_transport_params(self.profile)

        try:
            self.gateway.service_request("update", params)
        except Exception as e:
            raise UpdateFailedError.wrap(
                e,
                f"Update failed for asset <{request.id}>",
                details={"asset_id": request.id, "params": _loggable(params)},
            ) from e

        updated = [key for key in ("metadata", "Filedata") if key in params]
        log_operation(
            "update",
            f"Updated {' and '.join(updated) or 'nothing'} for asset <{request.id}>",
            mutating=True,
            asset_id=request.id,
            metadata=request.metadata,
        )

    def update_bulk(self, request: UpdateBulkRequest) -> ProcessResponse:
        """Update the metadata of all assets matching a query.

        Raises:
            ValidationError: If the query is empty
            UpdateBulkFailedError: If the gateway call fails
        """
        request.validate_required("update_bulk")
        params = request.to_transport_params()

        try:
            response = self.gateway.service_request("updatebulk", params)
        except Exception as e:
            raise UpdateBulkFailedError.wrap(
                e,
                f"Update bulk failed for query <{request.q}>",
                details={"query": request.q, "params": params},
            ) from e

        log_operation(
            "update_bulk",
            f"Updated bulk for query <{request.q}>",
            mutating=True,
            query=request.q,
            metadata=request.metadata,
        )

        return ProcessResponse.from_transport_json(response)

    def checkout(self, request: CheckoutRequest) -> CheckoutResponse:
        """Check out an asset without downloading its file.

        Raises:
            ValidationError: If the asset id is empty
            CheckoutFailedError: If the gateway call fails
        """
        request.validate_required("checkout")
        request = request.model_copy(update={"download": False})

        try:
            response = self.gateway.service_request(
                request.endpoint, request.to_transport_params()
            )
        except Exception as e:
            raise CheckoutFailedError.wrap(
                e, f"Checkout of asset <{request.id}> failed", details={"asset_id": request.id}
            ) from e

        log_operation(
            "checkout",
            f"Asset <{request.id}> checked out",
            mutating=True,
            asset_id=request.id,
            download=False,
        )

        return CheckoutResponse.from_transport_json(response)

    def checkout_and_download(self, request: CheckoutRequest, target_path: str) -> None:
        """Check out an asset and write its file to ``target_path``.

        Raises:
            ValidationError: If the asset id is empty
            CheckoutFailedError: If the checkout or the download fails
        """
        request.validate_required("checkout_and_download")
        request = request.model_copy(update={"download": True})

        try:
            response = self.gateway.raw_service_request(
                request.endpoint, request.to_transport_params()
            )
            self.gateway.write_response_body_to_path(response, target_path)
        except Exception as e:
            raise CheckoutFailedError.wrap(
                e,
                f"Checkout of asset <{request.id}> failed",
                details={"asset_id": request.id, "target_path": target_path},
            ) from e

        log_operation(
            "checkout_and_download",
            f"Asset <{request.id}> checked out and downloaded to <{target_path}>",
            mutating=True,
            asset_id=request.id,
            target_path=target_path,
            download=True,
        )

    def copy_asset(self, request: CopyAssetRequest) -> ProcessResponse:
        """Copy an asset.

        Raises:
            ValidationError: If source or target is empty
            CopyFailedError: If the gateway call fails
        """
        request.validate_required("copy_asset")

        try:
            response = self.gateway.service_request("copy", request.to_transport_params())
        except Exception as e:
            raise CopyFailedError.wrap(
                e,
                f"Copy from <{request.source}> to <{request.target}> failed",
                details={"source": request.source, "target": request.target},
            ) from e

        log_operation(
            "copy_asset",
            f"Asset copied to <{request.target}>",
            mutating=True,
            source=request.source,
            target=request.target,
            file_replace_policy=request.file_replace_policy.value,
        )

        return ProcessResponse.from_transport_json(response)

    def move(self, request: MoveRequest) -> ProcessResponse:
        """Move or rename an asset or folder.

        Raises:
            ValidationError: If source or target is empty
            MoveFailedError: If the gateway call fails
        """
        request.validate_required("move")

        try:
            response = self.gateway.service_request("move", request.to_transport_params())
        except Exception as e:
            raise MoveFailedError.wrap(
                e,
                f"Move/Rename from <{request.source}> to <{request.target}> failed",
                details={"source": request.source, "target": request.target},
            ) from e

        log_operation(
            "move",
            f"Asset/Folder moved to <{request.target}>",
            mutating=True,
            source=request.source,
            target=request.target,
            file_replace_policy=request.file_replace_policy.value,
            folder_replace_policy=request.folder_replace_policy.value,
            filter_query=request.filter_query,
        )

        return ProcessResponse.from_transport_json(response)

    def remove_asset(self, request: RemoveRequest) -> ProcessResponse:
        """Remove assets, collections or a folder.

        Raises:
            ValidationError: If none of q, ids and folder_path is set
            RemoveFailedError: If the gateway call fails
        """
        request.validate_required("remove_asset")
        context = {"query": request.q, "ids": request.ids, "folder_path": request.folder_path}

        try:
            response = self.gateway.service_request("remove", request.to_transport_params())
        except Exception as e:
            raise RemoveFailedError.wrap(e, "Remove failed", details=context) from e

        log_operation(
            "remove_asset", "Assets/Folders removed", mutating=True, response=response, **context
        )

        return ProcessResponse.from_transport_json(response)

    def create_relation(self, request: CreateRelationRequest) -> None:
        """Create a relation between two assets.

        Raises:
            ValidationError: If the relation type or a target id is empty
            CreateRelationFailedError: If the gateway call fails
        """
        request.validate_required("create_relation")
        context = {
            "relation_type": request.relation_type,
            "target1_id": request.target1_id,
            "target2_id": request.target2_id,
        }

        try:
            self.gateway.service_request("createRelation", request.to_transport_params())
        except Exception as e:
            raise CreateRelationFailedError.wrap(
                e,
                f"Create relation ({request.relation_type}) between "
                f"<{request.target1_id}> and <{request.target2_id}> failed",
                details=context,
            ) from e

        log_operation(
            "create_relation",
            f"Relation ({request.relation_type}) created between "
            f"<{request.target1_id}> and <{request.target2_id}>",
            mutating=True,
            **context,
        )

    def remove_relation(self, request: RemoveRelationRequest) -> ProcessResponse:
        """Remove relations by id.

        Raises:
            ValidationError: If no relation id is given
            RemoveRelationFailedError: If the gateway call fails
        """
        request.validate_required("remove_relation")

        try:
            response = self.gateway.service_request(
                "removeRelation", request.to_transport_params()
            )
        except Exception as e:
            raise RemoveRelationFailedError.wrap(
                e,
                f"Remove relation failed for <{', '.join(request.relation_ids)}>",
                details={"relation_ids": request.relation_ids},
            ) from e

        log_operation(
            "remove_relation",
            "Relations removed",
            mutating=True,
            relation_ids=request.relation_ids,
            response=response,
        )

        return ProcessResponse.from_transport_json(response)

    def get_folder(self, request: GetFolderRequest) -> FolderResponse:
        """Get a folder and its metadata by path.

        Raises:
            ValidationError: If the path is empty
            GetFolderFailedError: If the gateway call fails
        """
        request.validate_required("get_folder")

        try:
            response = self.gateway.api_request("GET", "folder/get", request.to_transport_params())
        except Exception as e:
            raise GetFolderFailedError.wrap(
                e,
                f"Get folder <{request.path}> failed",
                details={"folder_path": request.path},
            ) from e

        log_operation(
            "get_folder",
            f"Folder <{request.path}> retrieved",
            mutating=False,
            folder_path=request.path,
        )

        return FolderResponse.from_transport_json(response)

    def create_folder(self, request: CreateFolderRequest) -> FolderResponse:
        """Create a folder with metadata.

        Raises:
            ValidationError: If the path is empty
            CreateFolderFailedError: If the gateway call fails
        """
        request.validate_required("create_folder")

        try:
            response = self.gateway.api_request("POST", "folder", request.to_transport_params())
        except Exception as e:
            raise CreateFolderFailedError.wrap(
                e,
                f"Create folder <{request.path}> failed",
                details={"folder_path": request.path},
            ) from e

        log_operation(
            "create_folder",
            f"Folder <{request.path}> created",
            mutating=True,
            folder_path=request.path,
            metadata=request.metadata,
        )

        return FolderResponse.from_transport_json(response)

    def update_folder(self, request: UpdateFolderRequest) -> FolderResponse:
        """Update the metadata of a folder.

        Raises:
            ValidationError: If the folder id is empty; no call is made
            UpdateFolderFailedError: If the gateway call fails
        """
        request.validate_required("update_folder")
        context = {"folder_id": request.id, "folder_path": request.path}

        try:
            response = self.gateway.api_request(
                "PUT", request.api_path, request.to_transport_params()
            )
        except Exception as e:
            raise UpdateFolderFailedError.wrap(
                e, f"Update folder <{request.path}> ({request.id}) failed", details=context
            ) from e

        log_operation(
            "update_folder",
            f"Updated metadata for folder <{request.path}> ({request.id})",
            mutating=True,
            **context,
        )

        return FolderResponse.from_transport_json(response)

    def remove_folder(self, request: RemoveFolderRequest) -> None:
        """Remove a folder.

        Raises:
            ValidationError: If the folder id is empty; no call is made
            RemoveFolderFailedError: If the gateway call fails
        """
        request.validate_required("remove_folder")
        context = {"folder_id": request.id, "folder_path": request.path}

        try:
            response = self.gateway.api_request("DELETE", request.api_path)
        except Exception as e:
            raise RemoveFolderFailedError.wrap(
                e, f"Remove folder <{request.path}> ({request.id}) failed", details=context
            ) from e

        log_operation(
            "remove_folder", "Folder removed", mutating=True, response=response, **context
        )


def _loggable(params):
    """Drop file handles from transport params before they go into error details."""
    return {key: value for key, value in params.items() if isinstance(value, str)}
