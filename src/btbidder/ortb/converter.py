"""
OpenRTB 2.5 request/response converter.

Builds default impressions and requests from host bid requests, and
default bids from an OpenRTB response. Adapters customize the output by
passing ``imp``, ``request`` and ``bid_response`` hooks; each hook
receives the default builder, its input and a context dict, and returns
the final object.
"""

import copy
from typing import Any, Callable, Optional

from ..config.adapter_config import AdapterConfig
from ..logging import ortb_logger
from ..models.bid_request import BidderRequest, BidRequest
from ..models.bid_response import NormalizedBid
from ..utils.constants import BANNER, MTYPE_MEDIA_TYPES, SUPPORTED_MEDIA_TYPES
from ..utils.id_generator import generate_transaction_id
from ..utils.objects import merge_deep
from .enrichment import (
    build_device,
    build_regs,
    build_site,
    build_source,
    build_user,
)

BuildImp = Callable[[BidRequest, dict[str, Any]], dict[str, Any]]
BuildRequest = Callable[[list[dict[str, Any]], BidderRequest, dict[str, Any]], dict[str, Any]]
BuildBidResponse = Callable[[dict[str, Any], dict[str, Any]], NormalizedBid]

ImpHook = Callable[[BuildImp, BidRequest, dict[str, Any]], dict[str, Any]]
RequestHook = Callable[[BuildRequest, list[dict[str, Any]], BidderRequest, dict[str, Any]], dict[str, Any]]
BidResponseHook = Callable[[BuildBidResponse, dict[str, Any], dict[str, Any]], NormalizedBid]

# First-party keys with dedicated builders
_FPD_SECTIONS = ("site", "device", "user", "regs", "source")

logger = ortb_logger()


def _default_imp_hook(build_imp: BuildImp, bid_request: BidRequest, context: dict[str, Any]) -> dict[str, Any]:
    return build_imp(bid_request, context)


def _default_request_hook(
    build_request: BuildRequest,
    imps: list[dict[str, Any]],
    bidder_request: BidderRequest,
    context: dict[str, Any],
) -> dict[str, Any]:
    return build_request(imps, bidder_request, context)


def _default_bid_response_hook(
    build_bid_response: BuildBidResponse,
    bid: dict[str, Any],
    context: dict[str, Any],
) -> NormalizedBid:
    return build_bid_response(bid, context)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class OrtbConverter:
    """
    Converts between host bid objects and OpenRTB 2.5 documents.

    Stateless apart from its configuration and hooks; one instance serves
    every auction.
    """

    def __init__(
        self,
        config: AdapterConfig,
        context: Optional[dict[str, Any]] = None,
        imp: Optional[ImpHook] = None,
        request: Optional[RequestHook] = None,
        bid_response: Optional[BidResponseHook] = None,
    ):
        """
        Initialize the converter.

        Args:
            config: Adapter configuration
            context: Base context; ``net_revenue`` and ``ttl`` default from config
            imp: Impression hook
            request: Request hook
            bid_response: Bid response hook
        """
        self.config = config
        self.context = {
            "net_revenue": config.net_revenue,
            "ttl": config.ttl,
            "currency": config.currency,
            **(context or {}),
        }
        self._imp_hook = imp or _default_imp_hook
        self._request_hook = request or _default_request_hook
        self._bid_response_hook = bid_response or _default_bid_response_hook

    # ------------------------------------------------------------------
    # Request side
    # ------------------------------------------------------------------

    def to_ortb(
        self,
        bid_requests: list[BidRequest],
        bidder_request: BidderRequest,
    ) -> dict[str, Any]:
        """
        Build one OpenRTB request covering every bid request.

        Args:
            bid_requests: Validated bid requests of this auction
            bidder_request: Shared auction context

        Returns:
            OpenRTB 2.5 request dict
        """
        imps: list[dict[str, Any]] = []
        for bid_request in bid_requests:
            context = dict(self.context)
            imp = self._imp_hook(self.build_imp, bid_request, context)
            if imp is not None:
                imps.append(imp)

        context = dict(self.context, bid_requests=list(bid_requests))
        return self._request_hook(self.build_request, imps, bidder_request, context)

    def build_imp(self, bid_request: BidRequest, context: dict[str, Any]) -> Optional[dict[str, Any]]:
        """
        Default impression for one bid request.

        Only banner is supported; a slot declaring no banner yields None.
        """
        declared = [media_type for media_type in SUPPORTED_MEDIA_TYPES if media_type in bid_request.media_types]
        if not declared:
            logger.debug(
                "No supported media type on bid request",
                bid_id=bid_request.bid_id,
                media_types=sorted(bid_request.media_types),
            )
            return None

        imp = copy.deepcopy(bid_request.ortb2_imp)
        imp["id"] = bid_request.bid_id
        if bid_request.ad_unit_code and "tagid" not in imp:
            imp["tagid"] = bid_request.ad_unit_code
        imp.setdefault("secure", 1)

        sizes = bid_request.banner_sizes
        banner: dict[str, Any] = {"topframe": 1}
        if sizes:
            banner["format"] = [{"w": w, "h": h} for w, h in sizes]
        imp[BANNER] = merge_deep(banner, imp.get(BANNER) or {})

        floor = self._get_floor(bid_request, BANNER, sizes, context["currency"])
        if floor is not None:
            imp["bidfloor"], imp["bidfloorcur"] = floor

        return imp

    def _get_floor(
        self,
        bid_request: BidRequest,
        media_type: str,
        sizes: list[tuple[int, int]],
        currency: str,
    ) -> Optional[tuple[float, str]]:
        """
        Ask the host's floor function for this impression's floor.

        The single declared size is passed when there is exactly one,
        otherwise the wildcard ``*``.
        """
        if bid_request.get_floor is None:
            return None

        size: Any = list(sizes[0]) if len(sizes) == 1 else "*"
        try:
            result = bid_request.get_floor(
                {"currency": currency, "mediaType": media_type, "size": size}
            )
        except Exception as e:
            logger.warning(
                "Floor function failed",
                bid_id=bid_request.bid_id,
                error=str(e),
            )
            return None

        if not isinstance(result, dict) or not _is_number(result.get("floor")):
            return None
        return float(result["floor"]), result.get("currency") or currency

    def build_request(
        self,
        imps: list[dict[str, Any]],
        bidder_request: BidderRequest,
        context: dict[str, Any],
    ) -> dict[str, Any]:
        """Default request: imps plus first-party, consent and source data."""
        bid_requests: list[BidRequest] = context.get("bid_requests") or list(bidder_request.bids)
        ortb2 = bidder_request.ortb2

        request: dict[str, Any] = {
            key: copy.deepcopy(value)
            for key, value in ortb2.items()
            if key not in _FPD_SECTIONS
        }

        transaction_id = self._transaction_id(bid_requests, bidder_request)
        page_url = bidder_request.refer_page or self.config.page_url

        request["id"] = transaction_id
        request["imp"] = imps
        request["site"] = build_site(ortb2, page_url)
        request["device"] = build_device(ortb2, self.config.runtime)
        request["user"] = build_user(ortb2, bidder_request.consent, bid_requests)
        request["source"] = build_source(ortb2, transaction_id, bid_requests)

        regs = build_regs(ortb2, bidder_request.consent)
        if regs:
            request["regs"] = regs

        request["cur"] = [context["currency"]]
        if bidder_request.timeout:
            request["tmax"] = bidder_request.timeout

        return request

    @staticmethod
    def _transaction_id(bid_requests: list[BidRequest], bidder_request: BidderRequest) -> str:
        """Shared auction transaction ID, generated when the host has none."""
        if bidder_request.transaction_id:
            return bidder_request.transaction_id
        for bid in bid_requests:
            if bid.transaction_id:
                return bid.transaction_id
        if bidder_request.auction_id:
            return bidder_request.auction_id
        return generate_transaction_id()

    # ------------------------------------------------------------------
    # Response side
    # ------------------------------------------------------------------

    def from_ortb(
        self,
        response: Optional[dict[str, Any]],
        request: dict[str, Any],
    ) -> list[NormalizedBid]:
        """
        Extract bids from an OpenRTB response.

        Args:
            response: OpenRTB response body, may be None
            request: The OpenRTB request the response answers

        Returns:
            One NormalizedBid per bid whose impid matches a request imp
        """
        if not isinstance(response, dict):
            return []

        imps = {imp.get("id"): imp for imp in request.get("imp") or []}
        bids: list[NormalizedBid] = []

        for seatbid in response.get("seatbid") or []:
            if not isinstance(seatbid, dict):
                continue
            for bid in seatbid.get("bid") or []:
                if not isinstance(bid, dict):
                    continue
                imp = imps.get(bid.get("impid"))
                if imp is None:
                    logger.warning(
                        "Response bid does not match any imp",
                        impid=bid.get("impid"),
                        seat=seatbid.get("seat"),
                    )
                    continue

                context = dict(
                    self.context,
                    seatbid=seatbid,
                    imp=imp,
                    response_currency=response.get("cur"),
                )
                bids.append(
                    self._bid_response_hook(self.build_bid_response, bid, context)
                )

        return bids

    def build_bid_response(self, bid: dict[str, Any], context: dict[str, Any]) -> NormalizedBid:
        """Default normalized bid for one OpenRTB bid."""
        # Every imp is a banner imp, so banner is the fallback
        media_type = MTYPE_MEDIA_TYPES.get(bid.get("mtype"), BANNER)

        ttl = bid.get("exp")
        if not isinstance(ttl, int) or isinstance(ttl, bool) or ttl <= 0:
            ttl = context["ttl"]

        ad = bid.get("adm")
        ad_url = None if ad else bid.get("nurl")

        return NormalizedBid(
            request_id=bid.get("impid"),
            cpm=bid.get("price"),
            currency=bid.get("cur") or context.get("response_currency") or context["currency"],
            width=bid.get("w"),
            height=bid.get("h"),
            ad=ad,
            ad_url=ad_url,
            ttl=ttl,
            creative_id=bid.get("crid"),
            net_revenue=context["net_revenue"],
            media_type=media_type,
            deal_id=bid.get("dealid"),
            burl=bid.get("burl"),
            advertiser_domains=list(bid.get("adomain") or []),
        )
