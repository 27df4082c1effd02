"""Contract between a bid adapter and the header-bidding host."""

from typing import Optional, Protocol, runtime_checkable

from ..models.bid_request import BidderRequest, BidRequest
from ..models.bid_response import (
    NormalizedBid,
    OutboundRequest,
    ServerResponse,
    SyncOptions,
    UserSync,
)
from ..privacy.consent_models import GDPRConsent, GPPConsent

# Operations the host calls on every registered adapter
BIDDER_OPERATIONS: tuple[str, ...] = (
    "is_bid_request_valid",
    "build_requests",
    "interpret_response",
    "get_user_syncs",
)


@runtime_checkable
class BidderSpec(Protocol):
    """
    A bid adapter as seen by the host.

    Attributes:
        code: Unique bidder code
        gvlid: IAB Global Vendor List ID
        supported_media_types: Media types the adapter can bid on
    """

    code: str
    gvlid: Optional[int]
    supported_media_types: list[str]

    def is_bid_request_valid(self, bid: BidRequest) -> bool:
        ...

    def build_requests(
        self,
        valid_bid_requests: list[BidRequest],
        bidder_request: BidderRequest,
    ) -> list[OutboundRequest]:
        ...

    def interpret_response(
        self,
        server_response: Optional[ServerResponse],
        request: Optional[OutboundRequest],
    ) -> list[NormalizedBid]:
        ...

    def get_user_syncs(
        self,
        sync_options: SyncOptions,
        server_responses: list[ServerResponse],
        gdpr_consent: Optional[GDPRConsent] = None,
        usp_consent: Optional[str] = None,
        gpp_consent: Optional[GPPConsent] = None,
    ) -> list[UserSync]:
        ...
