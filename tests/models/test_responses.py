"""Unit tests for the response models."""

import unittest

from woodwing_assets.models.api.responses import (
    AssetResponse,
    BrowseResponse,
    CheckoutResponse,
    FolderResponse,
    LoginResponse,
    ProcessResponse,
    SearchResponse,
)


class TestAssetResponse(unittest.TestCase):
    """Test cases for AssetResponse decoding."""

    def test_full_hit(self):
        """Test all known fields are decoded."""
        # Arrange
        json = {
            "id": "a1",
            "permissions": "VPUMERXC",
            "metadata": {"name": "a.jpg", "tags": ["x"]},
            "highlightedText": "<em>a</em>",
            "originalUrl": "https://assets.example.com/file/a1/*/a.jpg",
            "previewUrl": "https://assets.example.com/preview/a1",
            "thumbnailUrl": "https://assets.example.com/thumbnail/a1",
            "relation": {"relationId": "r1", "relationType": "contains"},
            "unknownField": 42,
        }

        # Act
        asset = AssetResponse.from_transport_json(json)

        # Assert
        self.assertEqual("a1", asset.id)
        self.assertEqual("VPUMERXC", asset.permissions)
        self.assertEqual({"name": "a.jpg", "tags": ["x"]}, asset.metadata)
        self.assertEqual("<em>a</em>", asset.highlighted_text)
        self.assertEqual("https://assets.example.com/file/a1/*/a.jpg", asset.original_url)
        self.assertEqual("r1", asset.relation_id)

    def test_missing_fields_have_zero_values(self):
        """Test an empty mapping decodes to zero values."""
        asset = AssetResponse.from_transport_json({})

        self.assertEqual("", asset.id)
        self.assertEqual("", asset.original_url)
        self.assertEqual({}, asset.metadata)
        self.assertEqual({}, asset.relation)
        self.assertEqual("", asset.relation_id)

    def test_wrong_types_and_nulls(self):
        """Test nulls and wrongly typed values decode to zero values."""
        asset = AssetResponse.from_transport_json(
            {"id": None, "metadata": ["not", "a", "mapping"], "relation": "x"}
        )

        self.assertEqual("", asset.id)
        self.assertEqual({}, asset.metadata)
        self.assertEqual({}, asset.relation)

    def test_decoding_is_idempotent(self):
        """Test decoding the same mapping twice gives equal results."""
        json = {"id": "a1", "metadata": {"name": "a.jpg"}}

        self.assertEqual(
            AssetResponse.from_transport_json(json), AssetResponse.from_transport_json(json)
        )


class TestSearchResponse(unittest.TestCase):
    """Test cases for SearchResponse decoding."""

    def test_hits(self):
        """Test hits and counters are decoded."""
        search = SearchResponse.from_transport_json(
            {
                "firstResult": 0,
                "maxResultHits": "50",
                "totalHits": 2,
                "hits": [{"id": "a1"}, {"id": "a2"}, "garbage"],
                "facets": {"tags": {"x": 1}},
            }
        )

        self.assertEqual(2, search.total_hits)
        self.assertEqual(50, search.max_result_hits)
        self.assertEqual(["a1", "a2"], [hit.id for hit in search.hits])
        self.assertEqual({"tags": {"x": 1}}, search.facets)

    def test_empty(self):
        """Test missing fields give an empty result page."""
        search = SearchResponse.from_transport_json({})

        self.assertEqual(0, search.total_hits)
        self.assertEqual([], search.hits)

    def test_non_numeric_counter(self):
        """Test counters that cannot be parsed default to 0."""
        search = SearchResponse.from_transport_json({"totalHits": "many"})

        self.assertEqual(0, search.total_hits)


class TestOtherResponses(unittest.TestCase):
    """Test cases for the remaining response models."""

    def test_process(self):
        """Test processed and error counters."""
        process = ProcessResponse.from_transport_json({"processedCount": "3", "errorCount": 1})

        self.assertEqual(3, process.processed_count)
        self.assertEqual(1, process.error_count)
        self.assertEqual(
            ProcessResponse(processed_count=0, error_count=0),
            ProcessResponse.from_transport_json({}),
        )

    def test_folder(self):
        """Test folder decoding."""
        folder = FolderResponse.from_transport_json(
            {"id": "f1", "name": "Demo", "path": "/Demo", "metadata": {"folderDescription": "x"}}
        )

        self.assertEqual("f1", folder.id)
        self.assertEqual("Demo", folder.name)
        self.assertEqual("/Demo", folder.path)
        self.assertEqual("", folder.permissions)
        self.assertEqual({"folderDescription": "x"}, folder.metadata)

    def test_checkout(self):
        """Test checkout decoding trims strings and coerces the timestamp."""
        checkout = CheckoutResponse.from_transport_json(
            {"checkedOut": "1700000000000", "checkedOutBy": " jdoe ", "checkedOutOnClient": "web\n"}
        )

        self.assertEqual(1700000000000, checkout.checked_out)
        self.assertEqual("jdoe", checkout.checked_out_by)
        self.assertEqual("web", checkout.checked_out_on_client)
        self.assertEqual(0, CheckoutResponse.from_transport_json({}).checked_out)

    def test_login(self):
        """Test login decoding keeps the user profile apart from the token."""
        login = LoginResponse.from_transport_json(
            {
                "loginSuccess": True,
                "serverVersion": "6.90",
                "userProfile": {"username": "api"},
                "csrfToken": "token",
            }
        )

        self.assertTrue(login.login_success)
        self.assertEqual("6.90", login.server_version)
        self.assertEqual({"username": "api"}, login.user_profile)
        self.assertEqual("token", login.csrf_token)
        self.assertFalse(LoginResponse.from_transport_json({}).login_success)

    def test_browse_array(self):
        """Test browse decodes the bare JSON array the endpoint returns."""
        browse = BrowseResponse.from_transport_json(
            [
                {"name": "Demo", "assetPath": "/Demo", "directory": True},
                {"name": "c.collection", "assetPath": "/c.collection", "collection": "true"},
            ]
        )

        self.assertEqual(["/Demo", "/c.collection"], [item.asset_path for item in browse.items])
        self.assertTrue(browse.items[0].directory)
        self.assertTrue(browse.items[1].collection)
        self.assertEqual([], BrowseResponse.from_transport_json({}).items)

    def test_non_mapping_body(self):
        """Test a body that is not a mapping decodes to zero values."""
        self.assertEqual(ProcessResponse(), ProcessResponse.from_transport_json(None))


if __name__ == "__main__":
    unittest.main()
