"""Service for operations composed from several Assets server calls."""

from typing import List, Optional

from ..clients.assets import AssetsClient
from ..middleware.exceptions import (
    AssetNotFoundError,
    DownloadFailedError,
    DuplicateAssetError,
    NotFoundError,
    RelationDataError,
)
from ..middleware.logging import logger
from ..models.api.requests import (
    CreateRelationRequest,
    CreateRequest,
    RemoveRelationRequest,
    RemoveRequest,
    SearchRequest,
)
from ..models.api.responses import AssetResponse, ProcessResponse
from ..models.domain.enums import RelationTarget, RelationType
from ..models.domain.metadata import Metadata


class AssetsService:
    """Helpers built on top of ``AssetsClient``.

    None of these map to a single server endpoint; they run one or more
    client operations and check the intermediate results.
    """

    def __init__(self, client: AssetsClient) -> None:
        """Initialize the service.

        Args:
            client: Client used for all server operations
        """
        self.client = client

    def remove_by_id(self, asset_id: str) -> ProcessResponse:
        """Remove a single asset by id."""
        return self.client.remove_asset(RemoveRequest(ids=[asset_id]))

    def add_to_container(self, asset_id: str, container_id: str) -> None:
        """Add an asset to a collection or other container."""
        self.client.create_relation(
            CreateRelationRequest(
                relation_type=RelationType.CONTAINS.value,
                target1_id=container_id,
                target2_id=asset_id,
            )
        )

    def remove_from_container(self, asset_id: str, container_id: str) -> ProcessResponse:
        """Remove an asset from a container by removing their relation.

        The relation id is looked up with a relation search; an asset that is
        not in the container is not an error and nothing gets removed.

        Args:
            asset_id: Id of the contained asset
            container_id: Id of the container

        Returns:
            Counters of the relation removal, or zero counters if there was
            no relation to remove

        Raises:
            RelationDataError: If the search hit carries no relation id
            SearchFailedError: If the relation search fails
            RemoveRelationFailedError: If the removal fails
        """
        q = (
            self.get_relation_search_q(
                container_id, RelationTarget.CHILD.value, RelationType.CONTAINS.value
            )
            + f" id:{asset_id}"
        )
        search_response = self.client.search(
            SearchRequest(q=q, num=2, metadata_to_return=["id"])
        )

        if search_response.total_hits == 0 or not search_response.hits:
            return ProcessResponse(processed_count=0, error_count=0)

        relation_id = search_response.hits[0].relation_id
        if relation_id == "":
            raise RelationDataError(
                f"Relation ID not found in search response for asset <{asset_id}> "
                f"in container <{container_id}>",
                details={"asset_id": asset_id, "container_id": container_id, "query": q},
            )

        response = self.client.remove_relation(
            RemoveRelationRequest(relation_ids=[relation_id])
        )

        logger.info(
            "Relation removed",
            extra={
                "operation": "remove_from_container",
                "asset_id": asset_id,
                "container_id": container_id,
                "relation_id": relation_id,
            },
        )

        return response

    def create_collection(
        self, asset_path: str, metadata: Optional[Metadata] = None
    ) -> AssetResponse:
        """Create a collection.

        Args:
            asset_path: Full path of the collection, including the
                ``.collection`` extension
            metadata: Additional metadata of the collection
        """
        metadata = {**(metadata or {}), "assetPath": asset_path}
        return self.client.create(CreateRequest(metadata=metadata))

    def search_asset(
        self, asset_id: str, metadata_to_return: Optional[List[str]] = None
    ) -> AssetResponse:
        """Find an asset by id.

        Args:
            asset_id: Asset id
            metadata_to_return: Metadata fields to return; all if omitted

        Returns:
            The asset

        Raises:
            AssetNotFoundError: If no asset has this id
            DuplicateAssetError: If more than one asset has this id
        """
        q = f"id:{asset_id}"
        request = SearchRequest(q=q)
        if metadata_to_return:
            request = request.model_copy(update={"metadata_to_return": metadata_to_return})

        response = self.client.search(request)

        if response.total_hits == 0 or not response.hits:
            raise AssetNotFoundError(
                query=q,
                message=f"search_asset: Asset with ID <{asset_id}> not found",
                details={"asset_id": asset_id},
            )

        if response.total_hits > 1:
            raise DuplicateAssetError(
                query=q,
                hit_count=response.total_hits,
                message=f"search_asset: Multiple assets with ID <{asset_id}> found",
                details={"asset_id": asset_id},
            )

        return response.hits[0]

    def search_asset_id(self, q: str, fail_if_multiple_hits: bool) -> str:
        """Find the id of the asset matching a query.

        Only two hits are requested, which is enough to tell one match from
        several.

        Args:
            q: Query string
            fail_if_multiple_hits: Raise if more than one asset matches;
                otherwise the first match is returned

        Returns:
            Asset id of the (first) hit

        Raises:
            AssetNotFoundError: If nothing matches
            DuplicateAssetError: If several assets match and
                ``fail_if_multiple_hits`` is set
        """
        response = self.client.search(SearchRequest(q=q, num=2, metadata_to_return=[""]))

        if response.total_hits == 0 or not response.hits:
            raise AssetNotFoundError(
                query=q, message=f"search_asset_id: No asset found for query <{q}>"
            )

        if response.total_hits > 1 and fail_if_multiple_hits:
            raise DuplicateAssetError(
                query=q,
                hit_count=response.total_hits,
                message=f"search_asset_id: {response.total_hits} assets found for query <{q}>",
            )

        return response.hits[0].id

    def search_relations(self, asset_id: str, relation_type: str) -> List[AssetResponse]:
        """Return the assets related to an asset by a relation type."""
        q = self.get_relation_search_q(asset_id, relation_type=relation_type)
        return self.client.search(SearchRequest(q=q)).hits

    @staticmethod
    def get_relation_search_q(
        related_to: str, relation_target: str = "", relation_type: str = ""
    ) -> str:
        """Build a ``relatedTo:`` query.

        Args:
            related_to: Id of the asset the hits are related to
            relation_target: Optional side of the relation (parent, child, any)
            relation_type: Optional relation type, e.g. contains

        Returns:
            Query string
        """
        q = f"relatedTo:{related_to}"
        if relation_target != "":
            q += f" relationTarget:{relation_target}"
        if relation_type != "":
            q += f" relationType:{relation_type}"
        return q

    def download_original_file(self, asset: AssetResponse, target_path: str) -> None:
        """Download the original file of an asset.

        Args:
            asset: Asset with an original URL, e.g. a search hit
            target_path: Local file to write

        Raises:
            NotFoundError: If the asset has no original URL
            DownloadFailedError: If the download fails
        """
        if len(asset.original_url) == 0:
            raise NotFoundError(
                f"download_original_file: Original URL of asset <{asset.id}> is empty",
                details={"asset_id": asset.id},
            )

        try:
            self.client.gateway.download_file_to_path(asset.original_url, target_path)
        except Exception as e:
            raise DownloadFailedError.wrap(
                e,
                f"Download of asset <{asset.id}> to <{target_path}> failed",
                details={"asset_id": asset.id, "target_path": target_path},
            ) from e

        logger.debug(
            f"Original file of <{asset.id}> downloaded to <{target_path}>",
            extra={
                "operation": "download_original_file",
                "asset_id": asset.id,
                "target_path": target_path,
            },
        )
