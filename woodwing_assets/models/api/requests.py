"""Request models for the Assets server operations.

Each model is an immutable value built once per call. ``to_transport_params``
shapes it into what the gateway sends: a flat form parameter map for the
``services/`` endpoints, a JSON body for the ``api/`` endpoints.
"""

from typing import Any, ClassVar, Dict, List, Optional, Tuple
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from ...middleware.exceptions import ValidationError
from ...utils.params import bool_flag, encode_metadata, has_file, join_values
from ..domain.enums import FileReplacePolicy, FolderReplacePolicy, RelationType
from ..domain.metadata import Metadata, normalize_metadata
from ..domain.profile import ASSETS_PROFILE, ApiProfile

TransportParams = Dict[str, Any]


class AssetsRequest(BaseModel):
    """Base class for all request models.

    Subclasses list the fields the endpoint cannot do without in
    ``required_fields``; ``validate_required`` checks them before dispatch.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    required_fields: ClassVar[Tuple[str, ...]] = ()

    def validate_required(self, operation: str) -> None:
        """Reject the request if a required field is empty.

        Args:
            operation: Name of the operation, used in the error message

        Raises:
            ValidationError: If a required field is empty or blank
        """
        empty = [name for name in self.required_fields if _is_blank(getattr(self, name))]
        if empty:
            raise ValidationError(
                f"{operation}: {', '.join(empty)} is empty in {type(self).__name__}",
                details={"operation": operation, "fields": empty},
            )

    def to_transport_params(self) -> TransportParams:
        """Shape the request into what the gateway sends.

        Every operation request overrides this; the base class has no wire form.
        """
        raise NotImplementedError(f"{type(self).__name__} has no transport params")


def _is_blank(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple)):
        return all(_is_blank(item) for item in value)
    if isinstance(value, dict):
        return len(value) == 0
    return value is None


def _non_blank(values: List[str]) -> List[str]:
    return [value for value in values if value.strip()]


class SearchRequest(AssetsRequest):
    """Parameters for the ``search`` endpoint."""

    q: str = Field("", description="Query string")
    start: int = Field(0, ge=0, description="Index of the first hit to return")
    num: int = Field(50, ge=0, description="Maximum number of hits to return")
    sort: List[str] = Field(default_factory=list, description="Sort fields")
    metadata_to_return: List[str] = Field(
        default_factory=lambda: ["all"], description="Metadata fields to return"
    )
    facets: List[str] = Field(default_factory=list, description="Facet fields")
    append_request_secret: bool = False
    return_highlighted_text: bool = True
    return_thumbnail_hits: bool = False
    log_search: bool = False

    def to_transport_params(self) -> TransportParams:
        params: TransportParams = {
            "q": self.q,
            "start": str(self.start),
            "num": str(self.num),
            "metadataToReturn": join_values(self.metadata_to_return),
            "appendRequestSecret": bool_flag(self.append_request_secret),
            "returnHighlightedText": bool_flag(self.return_highlighted_text),
            "returnThumbnailHits": bool_flag(self.return_thumbnail_hits),
            "logSearch": bool_flag(self.log_search),
        }
        if self.sort:
            params["sort"] = join_values(self.sort)
        if self.facets:
            params["facets"] = join_values(self.facets)
        return params


class BrowseRequest(AssetsRequest):
    """Parameters for the ``browse`` endpoint."""

    path: str = Field("/", description="Folder path to list")
    from_root: str = Field("", description="Return the tree from this root down to path")
    include_folders: bool = True
    include_assets: bool = True
    include_extensions: List[str] = Field(
        default_factory=list, description="Extensions of assets to include"
    )

    def to_transport_params(self) -> TransportParams:
        params: TransportParams = {
            "path": self.path,
            "includeFolders": bool_flag(self.include_folders),
            "includeAssets": bool_flag(self.include_assets),
        }
        if self.from_root:
            params["fromRoot"] = self.from_root
        if self.include_extensions:
            params["includeExtensions"] = join_values(self.include_extensions)
        return params


class CreateRequest(AssetsRequest):
    """Parameters for the ``create`` endpoint."""

    filedata: Optional[Any] = Field(None, description="Open binary file to upload")
    metadata: Metadata = Field(default_factory=dict)
    metadata_to_return: List[str] = Field(default_factory=lambda: ["all"])
    parse_metadata_modification: bool = False

    def to_transport_params(self) -> TransportParams:
        params: TransportParams = {
            "metadata": encode_metadata(self.metadata),
            "metadataToReturn": join_values(self.metadata_to_return),
            "parseMetadataModifications": bool_flag(self.parse_metadata_modification),
        }
        if has_file(self.filedata):
            params["Filedata"] = self.filedata
        return params


class UpdateRequest(AssetsRequest):
    """Parameters for the ``update`` (check-in) endpoint."""

    required_fields: ClassVar[Tuple[str, ...]] = ("id",)

    id: str = Field(..., description="Asset id")
    metadata: Metadata = Field(default_factory=dict)
    filedata: Optional[Any] = Field(None, description="Open binary file to check in")
    parse_metadata_modification: bool = False
    clear_checkout_state: bool = True

    def to_transport_params(self, profile: ApiProfile = ASSETS_PROFILE) -> TransportParams:
        params: TransportParams = {
            "id": self.id,
            "parseMetadataModifications": bool_flag(self.parse_metadata_modification),
        }
        if self.metadata or profile.update_always_sends_metadata:
            params["metadata"] = encode_metadata(self.metadata)
        if profile.update_sends_file and has_file(self.filedata):
            params["Filedata"] = self.filedata
            params["clearCheckoutState"] = bool_flag(self.clear_checkout_state)
        return params


class UpdateBulkRequest(AssetsRequest):
    """Parameters for the ``updatebulk`` endpoint."""

    required_fields: ClassVar[Tuple[str, ...]] = ("q",)

    q: str = Field(..., description="Query selecting the assets to update")
    metadata: Metadata = Field(default_factory=dict)
    parse_metadata_modification: bool = False

    def to_transport_params(self) -> TransportParams:
        return {
            "q": self.q,
            "metadata": encode_metadata(self.metadata),
            "parseMetadataModifications": bool_flag(self.parse_metadata_modification),
        }


class CheckoutRequest(AssetsRequest):
    """Parameters for the ``checkout/{id}`` endpoint."""

    required_fields: ClassVar[Tuple[str, ...]] = ("id",)

    id: str = Field(..., description="Asset id")
    download: bool = False

    @property
    def endpoint(self) -> str:
        return f"checkout/{quote(self.id, safe='')}"

    def to_transport_params(self) -> TransportParams:
        return {"download": bool_flag(self.download)}


class CopyAssetRequest(AssetsRequest):
    """Parameters for the ``copy`` endpoint."""

    required_fields: ClassVar[Tuple[str, ...]] = ("source", "target")

    source: str = Field(..., description="Asset path to copy")
    target: str = Field(..., description="Asset path of the copy")
    file_replace_policy: FileReplacePolicy = FileReplacePolicy.AUTO_RENAME

    def to_transport_params(self) -> TransportParams:
        return {
            "source": self.source,
            "target": self.target,
            "fileReplacePolicy": self.file_replace_policy.value,
        }


class MoveRequest(AssetsRequest):
    """Parameters for the ``move`` (rename) endpoint."""

    required_fields: ClassVar[Tuple[str, ...]] = ("source", "target")

    source: str = Field(..., description="Asset or folder path to move")
    target: str = Field(..., description="New asset or folder path")
    folder_replace_policy: FolderReplacePolicy = FolderReplacePolicy.AUTO_RENAME
    file_replace_policy: FileReplacePolicy = FileReplacePolicy.AUTO_RENAME
    filter_query: str = Field("", description="Only move assets matching this query")
    flatten_folders: bool = False

    def to_transport_params(self) -> TransportParams:
        return {
            "source": self.source,
            "target": self.target,
            "folderReplacePolicy": self.folder_replace_policy.value,
            "fileReplacePolicy": self.file_replace_policy.value,
            "filterQuery": self.filter_query,
            "flattenFolders": bool_flag(self.flatten_folders),
        }


class RemoveRequest(AssetsRequest):
    """Parameters for the ``remove`` endpoint."""

    q: str = ""
    ids: List[str] = Field(default_factory=list)
    folder_path: str = ""

    def validate_required(self, operation: str) -> None:
        if not self.to_transport_params():
            raise ValidationError(
                f"{operation}: one of q, ids or folderPath is required in RemoveRequest",
                details={"operation": operation, "fields": ["q", "ids", "folderPath"]},
            )

    def to_transport_params(self) -> TransportParams:
        # Empty keys must be left out, otherwise the server removes only the
        # contents of folderPath instead of the folder itself
        params = {
            "q": self.q,
            "ids": join_values(_non_blank(self.ids)),
            "folderPath": self.folder_path,
        }
        return {key: value for key, value in params.items() if value}


class CreateRelationRequest(AssetsRequest):
    """Parameters for the ``createRelation`` endpoint."""

    required_fields: ClassVar[Tuple[str, ...]] = ("relation_type", "target1_id", "target2_id")

    relation_type: str = Field(RelationType.CONTAINS.value, description="Relation type")
    target1_id: str = Field(..., description="Id of the first (parent) asset")
    target2_id: str = Field(..., description="Id of the second (child) asset")

    def to_transport_params(self) -> TransportParams:
        return {
            "relationType": self.relation_type,
            "target1Id": self.target1_id,
            "target2Id": self.target2_id,
        }


class RemoveRelationRequest(AssetsRequest):
    """Parameters for the ``removeRelation`` endpoint."""

    required_fields: ClassVar[Tuple[str, ...]] = ("relation_ids",)

    relation_ids: List[str] = Field(default_factory=list)

    def to_transport_params(self) -> TransportParams:
        return {"relationIds": join_values(_non_blank(self.relation_ids))}


class GetFolderRequest(AssetsRequest):
    """Body for ``GET api/folder/get``."""

    required_fields: ClassVar[Tuple[str, ...]] = ("path",)

    path: str = Field(..., description="Folder path")

    def to_transport_params(self) -> TransportParams:
        return {"path": self.path}


class CreateFolderRequest(AssetsRequest):
    """Body for ``POST api/folder``."""

    required_fields: ClassVar[Tuple[str, ...]] = ("path",)

    path: str = Field(..., description="Folder path")
    metadata: Metadata = Field(default_factory=dict)

    def to_transport_params(self) -> TransportParams:
        return {"path": self.path, "metadata": normalize_metadata(self.metadata)}


class UpdateFolderRequest(AssetsRequest):
    """Body for ``PUT api/folder/{id}``."""

    required_fields: ClassVar[Tuple[str, ...]] = ("id",)

    id: str = Field("", description="Folder id")
    path: str = Field("", description="Folder path, for logging only")
    metadata: Metadata = Field(default_factory=dict)

    @property
    def api_path(self) -> str:
        return f"folder/{quote(self.id, safe='')}"

    def to_transport_params(self) -> TransportParams:
        return {"metadata": normalize_metadata(self.metadata)}


class RemoveFolderRequest(AssetsRequest):
    """Target of ``DELETE api/folder/{id}``; sends no body."""

    required_fields: ClassVar[Tuple[str, ...]] = ("id",)

    id: str = Field("", description="Folder id")
    path: str = Field("", description="Folder path, for logging only")

    @property
    def api_path(self) -> str:
        return f"folder/{quote(self.id, safe='')}"

    def to_transport_params(self) -> TransportParams:
        return {}
