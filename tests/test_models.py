"""Tests for request models and nested-dict helpers."""

from src.btbidder.models import BidParameters, BidRequest, BidderRequest, BlockthroughParams, OutboundRequest
from src.btbidder.utils.objects import deep_access, deep_set_value, merge_deep


class TestBidParameters:
    """Tests for the typed split of publisher params."""

    def test_split_vendor_and_partners(self):
        """The vendor object is typed; the rest stays a partner map."""
        params = BidParameters.from_dict({
            "blockthrough": {"orgID": "1", "websiteID": "2", "ab": False, "auctionID": "a", "custom": 5},
            "bidderA": {"pubId": "11111"},
            "bidderB": {"zone": 7},
        })

        assert params.blockthrough == BlockthroughParams(
            org_id="1", website_id="2", ab=False, auction_id="a", extra={"custom": 5},
        )
        assert params.partners == {"bidderA": {"pubId": "11111"}, "bidderB": {"zone": 7}}

    def test_site_ext_drops_auction_id(self):
        """The promoted object keeps extra keys but not the auction ID."""
        vendor = BlockthroughParams.from_dict(
            {"orgID": "1", "websiteID": "2", "ab": True, "auctionID": "a", "custom": 5}
        )
        assert vendor.to_site_ext() == {"orgID": "1", "websiteID": "2", "ab": True, "custom": 5}

    def test_non_mapping_vendor(self):
        """A vendor value that is not a mapping is treated as absent."""
        params = BidParameters.from_dict({"blockthrough": ["x"], "bidderA": {}})
        assert params.blockthrough is None
        assert params.partners == {"bidderA": {}}

    def test_empty_vendor(self):
        """An empty vendor object is reported as empty."""
        assert BidParameters.from_dict({"blockthrough": {}}).blockthrough.is_empty is True


class TestBidRequest:
    """Tests for host bid request parsing."""

    def test_from_dict(self):
        """camelCase fields are parsed."""
        bid = BidRequest.from_dict({
            "bidId": "b1",
            "adUnitCode": "slot",
            "transactionId": "t",
            "mediaTypes": {"banner": {"sizes": [[300, 250], [300, 600]]}},
            "ortb2Imp": {"ext": {"gpid": "/1/slot"}},
        })
        assert bid.bid_id == "b1"
        assert bid.ad_unit_code == "slot"
        assert bid.transaction_id == "t"
        assert bid.banner_sizes == [(300, 250), (300, 600)]
        assert bid.ortb2_imp == {"ext": {"gpid": "/1/slot"}}
        assert bid.get_floor is None

    def test_params_not_a_mapping(self):
        """Non-mapping params parse as empty."""
        bid = BidRequest.from_dict({"bidId": "a", "params": "garbage"})
        assert bid.params.blockthrough is None
        assert bid.params.partners == {}

    def test_single_size_pair(self):
        """A flat [w, h] pair is one size."""
        bid = BidRequest.from_dict({"bidId": "b1", "mediaTypes": {"banner": {"sizes": [728, 90]}}})
        assert bid.banner_sizes == [(728, 90)]

    def test_legacy_sizes(self):
        """Top-level sizes imply a banner slot."""
        bid = BidRequest.from_dict({"bidId": "b1", "sizes": [[300, 250]]})
        assert bid.media_types == {"banner": {"sizes": [[300, 250]]}}
        assert bid.banner_sizes == [(300, 250)]

    def test_no_banner(self):
        """Slots without banner have no banner sizes."""
        bid = BidRequest.from_dict({"bidId": "b1", "mediaTypes": {"video": {"playerSize": [640, 480]}}})
        assert bid.banner_sizes == []


class TestBidderRequest:
    """Tests for bidder request parsing."""

    def test_from_dict(self):
        """Auction fields, bids and first-party data are parsed."""
        bidder_request = BidderRequest.from_dict({
            "auctionId": "a1",
            "bidderCode": "blockthrough",
            "timeout": 1200,
            "refererInfo": {"page": "https://example.com/"},
            "ortb2": {"source": {"tid": "tid-1"}},
            "bids": [{"bidId": "b1"}, {"bidId": "b2"}],
        })
        assert bidder_request.auction_id == "a1"
        assert bidder_request.timeout == 1200
        assert bidder_request.refer_page == "https://example.com/"
        assert bidder_request.transaction_id == "tid-1"
        assert [bid.bid_id for bid in bidder_request.bids] == ["b1", "b2"]

    def test_non_mapping_consent(self):
        """Consent values that are not mappings parse as absent."""
        bidder_request = BidderRequest.from_dict({
            "gdprConsent": True,
            "gppConsent": "DBABMA~x",
            "bids": [],
        })
        assert bidder_request.consent.gdpr is None
        assert bidder_request.consent.gpp is None

    def test_outbound_descriptor(self):
        """The descriptor lists echoed bid IDs."""
        bid = BidRequest(bid_id="b1")
        request = OutboundRequest(url="https://x.example/", data={"id": "r"}, bids=(bid,))
        assert request.to_dict() == {
            "method": "POST",
            "url": "https://x.example/",
            "data": {"id": "r"},
            "bids": ["b1"],
        }
        assert request.body == '{"id":"r"}'


class TestObjectHelpers:
    """Tests for nested-dict helpers."""

    def test_deep_access(self):
        """Dotted paths read through dicts and default elsewhere."""
        obj = {"a": {"b": {"c": 1}}, "x": 5}
        assert deep_access(obj, "a.b.c") == 1
        assert deep_access(obj, "a.missing") is None
        assert deep_access(obj, "x.y", "default") == "default"

    def test_deep_set_value(self):
        """Intermediate dicts are created or replaced."""
        obj = {"ext": "scalar"}
        deep_set_value(obj, "ext.prebid.blockthrough.auctionID", "a")
        assert obj == {"ext": {"prebid": {"blockthrough": {"auctionID": "a"}}}}

    def test_merge_deep(self):
        """Dicts merge recursively without touching inputs."""
        parent = {"a": {"b": 1, "c": [1]}, "d": 1}
        child = {"a": {"c": [2]}, "e": 2}

        merged = merge_deep(parent, child)

        assert merged == {"a": {"b": 1, "c": [2]}, "d": 1, "e": 2}
        assert parent == {"a": {"b": 1, "c": [1]}, "d": 1}
