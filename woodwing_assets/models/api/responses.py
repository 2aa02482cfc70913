"""Response models for the Assets server operations.

The server omits fields freely and adds new ones between versions, so every
field has a zero value and unknown keys are ignored. Values of the wrong JSON
type decode to the zero value instead of failing.
"""

from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain.metadata import Metadata


def _as_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_dict_list(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


class AssetsResponse(BaseModel):
    """Base class for all response models."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @classmethod
    def from_transport_json(cls, json: Any) -> "AssetsResponse":
        """Decode a JSON body returned by the gateway.

        Args:
            json: Decoded JSON body

        Returns:
            Response instance; absent fields keep their zero values
        """
        return cls.model_validate(json if isinstance(json, dict) else {})


class AssetResponse(AssetsResponse):
    """A single asset, as returned by create and as a search hit.

    Attributes:
        id: Asset id
        permissions: Permission letters of the current user
        metadata: Metadata fields requested via metadataToReturn
        highlighted_text: Search hit highlight
        original_url: URL of the original file
        preview_url: URL of the preview rendition
        thumbnail_url: URL of the thumbnail rendition
        relation: Relation data, present on hits of ``relatedTo:`` searches
    """

    id: str = ""
    permissions: str = ""
    metadata: Metadata = Field(default_factory=dict)
    highlighted_text: str = Field("", alias="highlightedText")
    original_url: str = Field("", alias="originalUrl")
    preview_url: str = Field("", alias="previewUrl")
    thumbnail_url: str = Field("", alias="thumbnailUrl")
    relation: Dict[str, Any] = Field(default_factory=dict)

    @field_validator(
        "id",
        "permissions",
        "highlighted_text",
        "original_url",
        "preview_url",
        "thumbnail_url",
        mode="before",
    )
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        return _as_str(value)

    @field_validator("metadata", "relation", mode="before")
    @classmethod
    def _coerce_dict(cls, value: Any) -> Dict[str, Any]:
        return _as_dict(value)

    @property
    def relation_id(self) -> str:
        """Id of the embedded relation, or an empty string."""
        return _as_str(self.relation.get("relationId"))


class FolderResponse(AssetsResponse):
    """A folder from the ``api/folder`` endpoints."""

    id: str = ""
    name: str = ""
    path: str = ""
    permissions: str = ""
    metadata: Metadata = Field(default_factory=dict)

    @field_validator("id", "name", "path", "permissions", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        return _as_str(value)

    @field_validator("metadata", mode="before")
    @classmethod
    def _coerce_dict(cls, value: Any) -> Dict[str, Any]:
        return _as_dict(value)


class SearchResponse(AssetsResponse):
    """Result page of a search."""

    first_result: int = Field(0, alias="firstResult")
    max_result_hits: int = Field(0, alias="maxResultHits")
    total_hits: int = Field(0, alias="totalHits")
    hits: List[AssetResponse] = Field(default_factory=list)
    facets: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("first_result", "max_result_hits", "total_hits", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> int:
        return _as_int(value)

    @field_validator("hits", mode="before")
    @classmethod
    def _coerce_hits(cls, value: Any) -> List[Dict[str, Any]]:
        return _as_dict_list(value)

    @field_validator("facets", mode="before")
    @classmethod
    def _coerce_dict(cls, value: Any) -> Dict[str, Any]:
        return _as_dict(value)


class BrowseItem(AssetsResponse):
    """One folder or collection listed by browse."""

    name: str = ""
    asset_path: str = Field("", alias="assetPath")
    directory: bool = False
    collection: bool = False
    permissions: str = ""

    @field_validator("name", "asset_path", "permissions", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        return _as_str(value)

    @field_validator("directory", "collection", mode="before")
    @classmethod
    def _coerce_bool(cls, value: Any) -> bool:
        return _as_bool(value)


class BrowseResponse(AssetsResponse):
    """Listing returned by browse."""

    items: List[BrowseItem] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def _coerce_items(cls, value: Any) -> List[Dict[str, Any]]:
        return _as_dict_list(value)

    @classmethod
    def from_transport_json(cls, json: Union[List[Any], Dict[str, Any]]) -> "BrowseResponse":
        # The endpoint answers with a bare JSON array
        if isinstance(json, list):
            json = {"items": json}
        return super().from_transport_json(json)


class ProcessResponse(AssetsResponse):
    """Counters returned by bulk operations (copy, move, remove, updatebulk)."""

    processed_count: int = Field(0, alias="processedCount")
    error_count: int = Field(0, alias="errorCount")

    @field_validator("processed_count", "error_count", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> int:
        return _as_int(value)


class CheckoutResponse(AssetsResponse):
    """Checkout state of an asset."""

    checked_out: int = Field(0, alias="checkedOut", description="Epoch millis")
    checked_out_by: str = Field("", alias="checkedOutBy")
    checked_out_on_client: str = Field("", alias="checkedOutOnClient")

    @field_validator("checked_out", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> int:
        return _as_int(value)

    @field_validator("checked_out_by", "checked_out_on_client", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> str:
        return _as_str(value).strip()


class LoginResponse(AssetsResponse):
    """Result of ``services/apilogin``."""

    login_success: bool = Field(False, alias="loginSuccess")
    login_fault_message: str = Field("", alias="loginFaultMessage")
    server_version: str = Field("", alias="serverVersion")
    user_profile: Dict[str, Any] = Field(default_factory=dict, alias="userProfile")
    csrf_token: str = Field("", alias="csrfToken")

    @field_validator("login_success", mode="before")
    @classmethod
    def _coerce_bool(cls, value: Any) -> bool:
        return _as_bool(value)

    @field_validator("login_fault_message", "server_version", "csrf_token", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        return _as_str(value)

    @field_validator("user_profile", mode="before")
    @classmethod
    def _coerce_dict(cls, value: Any) -> Dict[str, Any]:
        return _as_dict(value)
