"""
Inbound request models.

These dataclasses describe what the host hands the adapter: one
``BidRequest`` per ad slot and one ``BidderRequest`` per auction. Both
accept the host's camelCase dictionaries through ``from_dict``.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from ..privacy.consent_models import ConsentSignals, GDPRConsent, GPPConsent
from ..utils.constants import VENDOR_KNOWN_FIELDS, VENDOR_PARAMS_KEY

# getFloor({"currency", "mediaType", "size"}) -> {"floor", "currency"}
FloorFunction = Callable[[dict[str, Any]], Optional[dict[str, Any]]]


@dataclass(frozen=True)
class BlockthroughParams:
    """
    The adapter's own parameters (``params.blockthrough``).

    Values are kept exactly as the publisher supplied them so the
    validator can judge their types.

    Attributes:
        org_id: Organization identifier (``orgID``)
        website_id: Website identifier (``websiteID``)
        ab: Adblock experiment flag
        auction_id: Optional exchange-side auction correlation ID
        extra: Any other keys the publisher placed in the object
    """

    org_id: Any = None
    website_id: Any = None
    ab: Any = None
    auction_id: Any = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """True when the publisher supplied no keys at all."""
        return (
            self.org_id is None
            and self.website_id is None
            and self.ab is None
            and self.auction_id is None
            and not self.extra
        )

    def to_site_ext(self) -> dict[str, Any]:
        """
        Object promoted to ``site.ext.blockthrough``.

        The auction ID travels on the impression instead and is left out.
        """
        result: dict[str, Any] = {}
        if self.org_id is not None:
            result["orgID"] = self.org_id
        if self.website_id is not None:
            result["websiteID"] = self.website_id
        if self.ab is not None:
            result["ab"] = self.ab
        result.update(self.extra)
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BlockthroughParams":
        """Create from dictionary."""
        return cls(
            org_id=data.get("orgID"),
            website_id=data.get("websiteID"),
            ab=data.get("ab"),
            auction_id=data.get("auctionID"),
            extra={k: v for k, v in data.items() if k not in VENDOR_KNOWN_FIELDS},
        )


@dataclass(frozen=True)
class BidParameters:
    """
    Publisher-declared parameters for one ad slot.

    Attributes:
        blockthrough: The adapter's own parameters, None when absent or
                      not a mapping
        partners: Per-demand-partner parameters (every other key)
    """

    blockthrough: Optional[BlockthroughParams] = None
    partners: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "BidParameters":
        """Create from the host's ``params`` object."""
        data = data if isinstance(data, dict) else {}
        vendor = data.get(VENDOR_PARAMS_KEY)
        return cls(
            blockthrough=(
                BlockthroughParams.from_dict(vendor) if isinstance(vendor, dict) else None
            ),
            partners={k: v for k, v in data.items() if k != VENDOR_PARAMS_KEY},
        )


def _normalize_sizes(sizes: Any) -> list[tuple[int, int]]:
    """Accept ``[w, h]`` or ``[[w, h], ...]`` and return a list of pairs."""
    if not sizes:
        return []
    if len(sizes) == 2 and all(isinstance(v, int) for v in sizes):
        return [(sizes[0], sizes[1])]
    return [
        (size[0], size[1])
        for size in sizes
        if isinstance(size, (list, tuple)) and len(size) == 2
    ]


@dataclass(frozen=True)
class BidRequest:
    """
    One validated ad-slot bid request as built by the host.

    The adapter never mutates it.
    """

    bid_id: str
    params: BidParameters = field(default_factory=BidParameters)
    bidder: str = ""
    ad_unit_code: str = ""
    transaction_id: Optional[str] = None
    auction_id: Optional[str] = None
    bidder_request_id: Optional[str] = None
    media_types: dict[str, dict[str, Any]] = field(default_factory=dict)
    get_floor: Optional[FloorFunction] = None
    ortb2_imp: dict[str, Any] = field(default_factory=dict)
    schain: Optional[dict[str, Any]] = None
    user_id_as_eids: list[dict[str, Any]] = field(default_factory=list)

    @property
    def banner_sizes(self) -> list[tuple[int, int]]:
        """Declared banner sizes as (w, h) pairs."""
        banner = self.media_types.get("banner") or {}
        return _normalize_sizes(banner.get("sizes"))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BidRequest":
        """Create from the host's bid request object."""
        media_types = data.get("mediaTypes") or {}
        # Legacy top-level sizes imply a banner slot
        if not media_types and data.get("sizes"):
            media_types = {"banner": {"sizes": data["sizes"]}}

        return cls(
            bid_id=data.get("bidId", ""),
            params=BidParameters.from_dict(data.get("params")),
            bidder=data.get("bidder", ""),
            ad_unit_code=data.get("adUnitCode", ""),
            transaction_id=data.get("transactionId"),
            auction_id=data.get("auctionId"),
            bidder_request_id=data.get("bidderRequestId"),
            media_types=media_types,
            get_floor=data.get("getFloor"),
            ortb2_imp=data.get("ortb2Imp") or {},
            schain=data.get("schain"),
            user_id_as_eids=data.get("userIdAsEids") or [],
        )


@dataclass(frozen=True)
class BidderRequest:
    """
    Shared per-auction context (consent, first-party data, timeout).

    Attributes:
        auction_id: Host auction ID
        bids: Bid requests of this auction for this bidder
        consent: GDPR / US Privacy / GPP signals
        ortb2: Global first-party data (site, device, user, regs, source)
        timeout: Auction timeout in milliseconds
        refer_page: Page URL the host resolved, overrides configuration
    """

    auction_id: Optional[str] = None
    bidder_request_id: Optional[str] = None
    bidder_code: str = ""
    bids: tuple[BidRequest, ...] = ()
    consent: ConsentSignals = field(default_factory=ConsentSignals)
    ortb2: dict[str, Any] = field(default_factory=dict)
    timeout: Optional[int] = None
    refer_page: Optional[str] = None

    @property
    def transaction_id(self) -> Optional[str]:
        """Auction-level transaction ID from first-party source data."""
        source = self.ortb2.get("source") or {}
        return source.get("tid")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BidderRequest":
        """Create from the host's bidder request object."""
        refer_info = data.get("refererInfo") or {}
        return cls(
            auction_id=data.get("auctionId"),
            bidder_request_id=data.get("bidderRequestId"),
            bidder_code=data.get("bidderCode", ""),
            bids=tuple(BidRequest.from_dict(bid) for bid in data.get("bids") or []),
            consent=ConsentSignals(
                gdpr=GDPRConsent.from_dict(data.get("gdprConsent")),
                us_privacy=data.get("uspConsent"),
                gpp=GPPConsent.from_dict(data.get("gppConsent")),
            ),
            ortb2=data.get("ortb2") or {},
            timeout=data.get("timeout"),
            refer_page=refer_info.get("page"),
        )
