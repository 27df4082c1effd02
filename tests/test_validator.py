"""Tests for bid request validation."""

import logging

import pytest

from src.btbidder.adapter import BlockthroughAdapter
from src.btbidder.models import BidRequest


def make_bid(params):
    """Build a bid request carrying the given params."""
    return BidRequest.from_dict({
        "bidId": "123",
        "adUnitCode": "leaderboard",
        "mediaTypes": {"banner": {"sizes": [[300, 250]]}},
        "params": params,
    })


class TestIsBidRequestValid:
    """Test suite for BlockthroughAdapter.is_bid_request_valid."""

    @pytest.fixture
    def adapter(self):
        """Create an adapter with default configuration."""
        return BlockthroughAdapter()

    @pytest.fixture
    def valid_params(self):
        """Params with every required field."""
        return {
            "blockthrough": {
                "orgID": "4829",
                "websiteID": "5654012",
                "ab": True,
            },
            "pubmatic": {"publisherId": 55555},
        }

    def test_valid_params(self, adapter, valid_params):
        """String ids and a boolean ab pass."""
        assert adapter.is_bid_request_valid(make_bid(valid_params)) is True

    def test_ab_false_is_valid(self, adapter, valid_params):
        """A false experiment flag is still a boolean."""
        valid_params["blockthrough"]["ab"] = False
        assert adapter.is_bid_request_valid(make_bid(valid_params)) is True

    def test_empty_params(self, adapter):
        """No params at all fails."""
        assert adapter.is_bid_request_valid(make_bid({})) is False

    def test_missing_params_key(self, adapter):
        """A bid without a params object fails."""
        bid = BidRequest.from_dict({"bidId": "123"})
        assert adapter.is_bid_request_valid(bid) is False

    def test_empty_vendor_object(self, adapter):
        """An empty blockthrough object fails."""
        assert adapter.is_bid_request_valid(make_bid({"blockthrough": {}})) is False

    def test_vendor_object_not_a_mapping(self, adapter):
        """A non-object blockthrough value fails."""
        assert adapter.is_bid_request_valid(make_bid({"blockthrough": "4829"})) is False

    @pytest.mark.parametrize("field", ["orgID", "websiteID", "ab"])
    def test_missing_required_field(self, adapter, valid_params, field):
        """Each required field is mandatory."""
        del valid_params["blockthrough"][field]
        assert adapter.is_bid_request_valid(make_bid(valid_params)) is False

    @pytest.mark.parametrize("value", [4829, "", None, ["4829"]])
    def test_org_id_must_be_non_empty_string(self, adapter, valid_params, value):
        """orgID of any other type fails."""
        valid_params["blockthrough"]["orgID"] = value
        assert adapter.is_bid_request_valid(make_bid(valid_params)) is False

    @pytest.mark.parametrize("value", [5654012, "", None])
    def test_website_id_must_be_non_empty_string(self, adapter, valid_params, value):
        """websiteID of any other type fails."""
        valid_params["blockthrough"]["websiteID"] = value
        assert adapter.is_bid_request_valid(make_bid(valid_params)) is False

    @pytest.mark.parametrize("value", [1, 0, "true", None])
    def test_ab_must_be_strict_boolean(self, adapter, valid_params, value):
        """Truthy or falsy non-booleans are rejected."""
        valid_params["blockthrough"]["ab"] = value
        assert adapter.is_bid_request_valid(make_bid(valid_params)) is False

    def test_does_not_raise_on_garbage(self, adapter):
        """Malformed params never raise."""
        assert adapter.is_bid_request_valid(make_bid({"blockthrough": {"unknown": 1}})) is False

    @pytest.mark.parametrize("params", ["garbage", 7, ["blockthrough"]])
    def test_params_not_a_mapping(self, adapter, params):
        """Non-mapping params parse as empty and fail validation."""
        assert adapter.is_bid_request_valid(make_bid(params)) is False

    def test_warning_names_failing_field(self, adapter, valid_params, caplog):
        """The warning identifies the missing field."""
        del valid_params["blockthrough"]["websiteID"]

        with caplog.at_level(logging.WARNING):
            adapter.is_bid_request_valid(make_bid(valid_params))

        assert "websiteID" in caplog.text

    def test_short_circuits_on_first_failure(self, adapter, caplog):
        """Only the first failing rule is reported."""
        params = {"blockthrough": {"ab": "yes"}}

        with caplog.at_level(logging.WARNING):
            assert adapter.is_bid_request_valid(make_bid(params)) is False

        assert "orgID" in caplog.text
        assert "websiteID" not in caplog.text
