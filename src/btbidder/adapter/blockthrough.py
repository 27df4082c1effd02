"""
Blockthrough bid adapter.

Translates host bid requests into one OpenRTB 2.5 request for the
Blockthrough exchange, translates the exchange's seat bids back into
host bids, and produces the consent-aware user-sync iframe.
"""

import copy
from typing import Any, Optional
from urllib.parse import urlencode

from ..config.adapter_config import AdapterConfig
from ..logging import AuctionLogContext, adapter_logger
from ..models.bid_request import BidderRequest, BidRequest
from ..models.bid_response import (
    NormalizedBid,
    OutboundRequest,
    ServerResponse,
    SyncOptions,
    UserSync,
)
from ..ortb.converter import BuildBidResponse, BuildImp, BuildRequest, OrtbConverter
from ..privacy.consent_models import ConsentSignals, GDPRConsent, GPPConsent
from ..utils.constants import (
    BIDDER_CODE,
    GVLID,
    SUPPORTED_MEDIA_TYPES,
    VENDOR_PARAMS_KEY,
)
from ..utils.objects import deep_access, deep_set_value
from .registry import BidderRegistry, get_bidder_registry

logger = adapter_logger(BIDDER_CODE)


class BlockthroughAdapter:
    """
    Bid adapter for the Blockthrough exchange.

    Every operation is a pure function of its arguments and the
    read-only AdapterConfig given at construction.
    """

    code: str = BIDDER_CODE
    gvlid: Optional[int] = GVLID
    supported_media_types: list[str] = list(SUPPORTED_MEDIA_TYPES)

    def __init__(self, config: Optional[AdapterConfig] = None):
        self.config = config or AdapterConfig()
        self.converter = OrtbConverter(
            self.config,
            imp=self._imp,
            request=self._request,
            bid_response=self._bid_response,
        )

    # ------------------------------------------------------------------
    # Converter hooks
    # ------------------------------------------------------------------

    def _imp(self, build_imp: BuildImp, bid_request: BidRequest, context: dict[str, Any]) -> Optional[dict[str, Any]]:
        """Impression carrying partner params, auction ID and gpid."""
        imp = build_imp(bid_request, context)
        if imp is None:
            return None

        params = bid_request.params
        imp["ext"] = copy.deepcopy(params.partners)

        vendor = params.blockthrough
        if vendor is not None and vendor.auction_id:
            deep_set_value(
                imp,
                f"ext.prebid.{VENDOR_PARAMS_KEY}.auctionID",
                vendor.auction_id,
            )

        gpid = deep_access(bid_request.ortb2_imp, "ext.gpid")
        if gpid:
            imp["gpid"] = gpid

        return imp

    def _request(
        self,
        build_request: BuildRequest,
        imps: list[dict[str, Any]],
        bidder_request: BidderRequest,
        context: dict[str, Any],
    ) -> dict[str, Any]:
        """Request with the site-level vendor object and the test flag."""
        request = build_request(imps, bidder_request, context)

        bid_requests: list[BidRequest] = context.get("bid_requests") or list(bidder_request.bids)
        vendor = bid_requests[0].params.blockthrough if bid_requests else None
        if vendor is not None:
            deep_set_value(request, f"site.ext.{VENDOR_PARAMS_KEY}", vendor.to_site_ext())

        if self.config.debug:
            request["test"] = 1

        return request

    def _bid_response(
        self,
        build_bid_response: BuildBidResponse,
        bid: dict[str, Any],
        context: dict[str, Any],
    ) -> NormalizedBid:
        """Bid labelled with the seat that produced it."""
        bid_response = build_bid_response(bid, context)
        seatbid = context.get("seatbid") or {}
        bid_response.bt_bidder_code = seatbid.get("seat")
        return bid_response

    # ------------------------------------------------------------------
    # Host operations
    # ------------------------------------------------------------------

    def is_bid_request_valid(self, bid: BidRequest) -> bool:
        """
        Check the publisher's ``blockthrough`` parameters.

        Requires a non-empty ``blockthrough`` object with string ``orgID``
        and ``websiteID`` and a boolean ``ab``. Logs a warning naming the
        first failing field.
        """
        vendor = bid.params.blockthrough
        if vendor is None or vendor.is_empty:
            logger.warning(
                'BT Bid Adapter: a object type "blockthrough" with site ids and adblock data must be provided.',
                field=VENDOR_PARAMS_KEY,
                bid_id=bid.bid_id,
            )
            return False

        if not vendor.org_id or not isinstance(vendor.org_id, str):
            logger.warning(
                'BT Bid Adapter: a string type "orgID" must be provided.',
                field="orgID",
                bid_id=bid.bid_id,
            )
            return False

        if not vendor.website_id or not isinstance(vendor.website_id, str):
            logger.warning(
                'BT Bid Adapter: a string type "websiteID" must be provided.',
                field="websiteID",
                bid_id=bid.bid_id,
            )
            return False

        if not isinstance(vendor.ab, bool):
            logger.warning(
                'BT Bid Adapter: a boolean type "ab" must be provided.',
                field="ab",
                bid_id=bid.bid_id,
            )
            return False

        return True

    def build_requests(
        self,
        valid_bid_requests: list[BidRequest],
        bidder_request: BidderRequest,
    ) -> list[OutboundRequest]:
        """
        Build the single batched request for all valid bid requests.

        Returns:
            One POST descriptor, or an empty list when there is nothing to bid on
        """
        if not valid_bid_requests:
            return []

        with AuctionLogContext(bidder_request.auction_id):
            data = self.converter.to_ortb(list(valid_bid_requests), bidder_request)
            logger.debug(
                "Built OpenRTB request",
                request_id=data.get("id"),
                imps=len(data.get("imp") or []),
                test=data.get("test", 0),
                consent=bidder_request.consent.get_restrictions_summary(),
            )

        return [
            OutboundRequest(
                url=self.config.endpoint_url,
                data=data,
                bids=tuple(valid_bid_requests),
            )
        ]

    def interpret_response(
        self,
        server_response: Optional[ServerResponse],
        request: Optional[OutboundRequest],
    ) -> list[NormalizedBid]:
        """Map the exchange's seat bids to host bids; absent input yields none."""
        if not server_response or not request:
            return []

        bids = self.converter.from_ortb(server_response.body, request.data)
        logger.debug(
            "Interpreted OpenRTB response",
            request_id=request.data.get("id"),
            bids=len(bids),
        )
        return bids

    def get_user_syncs(
        self,
        sync_options: SyncOptions,
        server_responses: Optional[list[ServerResponse]] = None,
        gdpr_consent: Optional[GDPRConsent] = None,
        usp_consent: Optional[str] = None,
        gpp_consent: Optional[GPPConsent] = None,
    ) -> list[UserSync]:
        """
        User-sync iframe carrying whichever consent signals are present.

        Only iframe syncing is offered; without it no sync is returned.
        """
        if not sync_options.iframe_enabled:
            return []

        signals = ConsentSignals(gdpr=gdpr_consent, us_privacy=usp_consent, gpp=gpp_consent)
        params = signals.to_sync_params()

        url = self.config.sync_url
        if params:
            separator = "&" if "?" in url else "?"
            url = f"{url}{separator}{urlencode(params)}"

        return [UserSync(type="iframe", url=url)]


def register_blockthrough(
    config: Optional[AdapterConfig] = None,
    registry: Optional[BidderRegistry] = None,
) -> BlockthroughAdapter:
    """
    Create the adapter and register it with the host.

    Args:
        config: Adapter configuration (defaults when not provided)
        registry: Target registry (uses global if not provided)

    Returns:
        The registered adapter
    """
    adapter = BlockthroughAdapter(config)
    (registry or get_bidder_registry()).register(adapter)
    return adapter
