"""Outbound request, server response, normalized bid and user-sync models."""

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from .bid_request import BidRequest


@dataclass(frozen=True)
class OutboundRequest:
    """
    HTTP request the host performs on the adapter's behalf.

    Attributes:
        method: Always POST
        url: Exchange endpoint
        data: OpenRTB 2.5 request object
        bids: The bid requests this request was built from
    """

    url: str
    data: dict[str, Any]
    bids: tuple[BidRequest, ...] = ()
    method: str = "POST"

    @property
    def body(self) -> str:
        """Serialized OpenRTB request."""
        return json.dumps(self.data, separators=(",", ":"))

    def to_dict(self) -> dict[str, Any]:
        """Convert to the host's request descriptor shape."""
        return {
            "method": self.method,
            "url": self.url,
            "data": self.data,
            "bids": [bid.bid_id for bid in self.bids],
        }


@dataclass(frozen=True)
class ServerResponse:
    """Raw HTTP response envelope delivered by the host."""

    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class NormalizedBid:
    """
    The host's bid shape.

    Attributes:
        request_id: Bid ID of the originating slot (the bid's impid)
        cpm: Bid price
        currency: ISO 4217 currency of the price
        width, height: Creative dimensions
        ad: Creative markup
        ad_url: Creative URL, used when no markup is returned
        ttl: Seconds the bid stays valid
        creative_id: Exchange creative ID
        net_revenue: Whether the price is net of fees
        media_type: Host media type of the creative
        advertiser_domains: Advertiser domains for brand-safety checks
        bt_bidder_code: Seat that produced the bid
    """

    request_id: str
    cpm: float
    currency: str
    width: Optional[int] = None
    height: Optional[int] = None
    ad: Optional[str] = None
    ad_url: Optional[str] = None
    ttl: int = 30
    creative_id: Optional[str] = None
    net_revenue: bool = True
    media_type: str = "banner"
    deal_id: Optional[str] = None
    burl: Optional[str] = None
    advertiser_domains: list[str] = field(default_factory=list)
    bt_bidder_code: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the host's camelCase bid object."""
        result: dict[str, Any] = {
            "requestId": self.request_id,
            "cpm": self.cpm,
            "currency": self.currency,
            "width": self.width,
            "height": self.height,
            "ttl": self.ttl,
            "creativeId": self.creative_id,
            "creative_id": self.creative_id,
            "netRevenue": self.net_revenue,
            "mediaType": self.media_type,
            "meta": {},
        }
        if self.ad is not None:
            result["ad"] = self.ad
        if self.ad_url is not None:
            result["adUrl"] = self.ad_url
        if self.deal_id is not None:
            result["dealId"] = self.deal_id
        if self.burl is not None:
            result["burl"] = self.burl
        if self.advertiser_domains:
            result["meta"]["advertiserDomains"] = list(self.advertiser_domains)
        if self.bt_bidder_code is not None:
            result["btBidderCode"] = self.bt_bidder_code
        return result


@dataclass(frozen=True)
class SyncOptions:
    """User-sync capabilities the host allows for this bidder."""

    iframe_enabled: bool = False
    pixel_enabled: bool = False


@dataclass(frozen=True)
class UserSync:
    """A user-sync descriptor: ``iframe`` or ``image`` plus its URL."""

    type: str
    url: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "url": self.url}
