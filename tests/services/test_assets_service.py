"""Unit tests for the composite Assets service helpers."""

import unittest
from unittest.mock import MagicMock, patch

from woodwing_assets.clients.assets import AssetsClient
from woodwing_assets.middleware.exceptions import (
    AssetNotFoundError,
    DownloadFailedError,
    DuplicateAssetError,
    IntegrityError,
    NotFoundError,
    RelationDataError,
    TransportError,
)
from woodwing_assets.models.api.requests import (
    CreateRelationRequest,
    CreateRequest,
    RemoveRelationRequest,
    RemoveRequest,
)
from woodwing_assets.models.api.responses import (
    AssetResponse,
    ProcessResponse,
    SearchResponse,
)
from woodwing_assets.services.assets import AssetsService


def search_response(*hits):
    """Build a search response with the given hit mappings."""
    return SearchResponse.from_transport_json({"totalHits": len(hits), "hits": list(hits)})


class TestAssetsService(unittest.TestCase):
    """Test cases for the Assets service."""

    def setUp(self):
        """Set up test fixtures."""
        self.mock_client = MagicMock(spec=AssetsClient)
        self.mock_client.gateway = MagicMock()
        self.service = AssetsService(self.mock_client)

        self.log_patch = patch("woodwing_assets.services.assets.logger")
        self.mock_logger = self.log_patch.start()

    def tearDown(self):
        """Tear down test fixtures."""
        self.log_patch.stop()

    def test_remove_by_id(self):
        """Test remove_by_id removes exactly one id."""
        self.mock_client.remove_asset.return_value = ProcessResponse(processed_count=1)

        result = self.service.remove_by_id("a1")

        self.mock_client.remove_asset.assert_called_once_with(RemoveRequest(ids=["a1"]))
        self.assertEqual(1, result.processed_count)

    def test_add_to_container(self):
        """Test the container is target1 and the asset target2."""
        self.service.add_to_container("a1", "c1")

        self.mock_client.create_relation.assert_called_once_with(
            CreateRelationRequest(relation_type="contains", target1_id="c1", target2_id="a1")
        )

    def test_remove_from_container(self):
        """Test the relation found by search is removed."""
        # Arrange
        self.mock_client.search.return_value = search_response(
            {"id": "a1", "relation": {"relationId": "r1", "relationType": "contains"}}
        )
        self.mock_client.remove_relation.return_value = ProcessResponse(processed_count=1)

        # Act
        result = self.service.remove_from_container("a1", "c1")

        # Assert
        request = self.mock_client.search.call_args[0][0]
        self.assertEqual(
            "relatedTo:c1 relationTarget:child relationType:contains id:a1", request.q
        )
        self.assertEqual(2, request.num)
        self.assertEqual(["id"], request.metadata_to_return)
        self.mock_client.remove_relation.assert_called_once_with(
            RemoveRelationRequest(relation_ids=["r1"])
        )
        self.assertEqual(1, result.processed_count)

    def test_remove_from_container_without_hits(self):
        """Test nothing is removed when the asset is not in the container."""
        self.mock_client.search.return_value = search_response()

        result = self.service.remove_from_container("a1", "c1")

        self.assertEqual(ProcessResponse(processed_count=0, error_count=0), result)
        self.mock_client.remove_relation.assert_not_called()

    def test_remove_from_container_without_relation_data(self):
        """Test a hit without relation id is an integrity error."""
        self.mock_client.search.return_value = search_response({"id": "a1"})

        with self.assertRaises(RelationDataError) as ctx:
            self.service.remove_from_container("a1", "c1")

        self.assertIsInstance(ctx.exception, IntegrityError)
        self.assertIn("a1", ctx.exception.message)
        self.assertIn("c1", ctx.exception.message)
        self.mock_client.remove_relation.assert_not_called()

    def test_create_collection(self):
        """Test the asset path is added to the metadata."""
        self.mock_client.create.return_value = AssetResponse(id="c1")
        metadata = {"description": "Demo"}

        result = self.service.create_collection("/Demo/c.collection", metadata)

        self.mock_client.create.assert_called_once_with(
            CreateRequest(metadata={"description": "Demo", "assetPath": "/Demo/c.collection"})
        )
        self.assertEqual("c1", result.id)
        self.assertEqual({"description": "Demo"}, metadata)

    def test_search_asset(self):
        """Test a unique hit is returned."""
        self.mock_client.search.return_value = search_response({"id": "X"})

        result = self.service.search_asset("X", ["name"])

        request = self.mock_client.search.call_args[0][0]
        self.assertEqual("id:X", request.q)
        self.assertEqual(["name"], request.metadata_to_return)
        self.assertEqual("X", result.id)

    def test_search_asset_not_found(self):
        """Test zero hits raise a not-found error naming the id."""
        self.mock_client.search.return_value = search_response()

        with self.assertRaises(AssetNotFoundError) as ctx:
            self.service.search_asset("X")

        self.assertIsInstance(ctx.exception, NotFoundError)
        self.assertIn("X", ctx.exception.message)
        self.assertEqual("X", ctx.exception.details["asset_id"])

    def test_search_asset_duplicate(self):
        """Test two hits for one id raise an integrity error."""
        self.mock_client.search.return_value = search_response({"id": "X"}, {"id": "X"})

        with self.assertRaises(DuplicateAssetError) as ctx:
            self.service.search_asset("X")

        self.assertIsInstance(ctx.exception, IntegrityError)
        self.assertEqual(2, ctx.exception.details["hit_count"])

    def test_search_asset_id_first_hit(self):
        """Test multiple hits return the first id when not opted in."""
        self.mock_client.search.return_value = search_response({"id": "a1"}, {"id": "a2"})

        result = self.service.search_asset_id("name:a.jpg", fail_if_multiple_hits=False)

        request = self.mock_client.search.call_args[0][0]
        self.assertEqual(2, request.num)
        self.assertEqual([""], request.metadata_to_return)
        self.assertEqual("a1", result)

    def test_search_asset_id_multiple_hits(self):
        """Test multiple hits raise with the hit count when opted in."""
        self.mock_client.search.return_value = search_response({"id": "a1"}, {"id": "a2"})

        with self.assertRaises(DuplicateAssetError) as ctx:
            self.service.search_asset_id("name:a.jpg", fail_if_multiple_hits=True)

        self.assertIn("2 assets found", ctx.exception.message)

    def test_search_asset_id_not_found(self):
        """Test zero hits raise a not-found error naming the query."""
        self.mock_client.search.return_value = search_response()

        with self.assertRaises(AssetNotFoundError) as ctx:
            self.service.search_asset_id("name:a.jpg", fail_if_multiple_hits=False)

        self.assertIn("name:a.jpg", ctx.exception.message)

    def test_search_relations(self):
        """Test related assets are returned as hits."""
        self.mock_client.search.return_value = search_response({"id": "a1"}, {"id": "a2"})

        result = self.service.search_relations("c1", "contains")

        self.assertEqual("relatedTo:c1 relationType:contains", self.mock_client.search.call_args[0][0].q)
        self.assertEqual(["a1", "a2"], [hit.id for hit in result])

    def test_get_relation_search_q(self):
        """Test optional clauses are appended only when given."""
        self.assertEqual(
            "relatedTo:C123 relationTarget:child relationType:contains",
            AssetsService.get_relation_search_q("C123", "child", "contains"),
        )
        self.assertEqual("relatedTo:C123", AssetsService.get_relation_search_q("C123"))
        self.assertEqual(
            "relatedTo:C123 relationType:contains",
            AssetsService.get_relation_search_q("C123", relation_type="contains"),
        )

    def test_download_original_file(self):
        """Test the original URL is downloaded to the target path."""
        asset = AssetResponse(id="a1", original_url="https://assets.example.com/file/a1")

        self.service.download_original_file(asset, "/tmp/a1.jpg")

        self.mock_client.gateway.download_file_to_path.assert_called_once_with(
            "https://assets.example.com/file/a1", "/tmp/a1.jpg"
        )

    def test_download_original_file_without_url(self):
        """Test an asset without original URL cannot be downloaded."""
        with self.assertRaises(NotFoundError):
            self.service.download_original_file(AssetResponse(id="a1"), "/tmp/a1.jpg")

        self.mock_client.gateway.download_file_to_path.assert_not_called()

    def test_download_original_file_failure(self):
        """Test download errors are wrapped."""
        self.mock_client.gateway.download_file_to_path.side_effect = TransportError("timeout")
        asset = AssetResponse(id="a1", original_url="https://assets.example.com/file/a1")

        with self.assertRaises(DownloadFailedError) as ctx:
            self.service.download_original_file(asset, "/tmp/a1.jpg")

        self.assertEqual("a1", ctx.exception.details["asset_id"])


if __name__ == "__main__":
    unittest.main()
