"""
First-party data for the OpenRTB request.

Each builder prefers what the host supplied in ``ortb2`` and falls back
to values derived from the adapter configuration and consent signals.
"""

import copy
from typing import Any, Optional
from urllib.parse import urlparse

from ..config.adapter_config import RuntimeEnvironment
from ..models.bid_request import BidRequest
from ..privacy.consent_models import ConsentSignals
from ..utils.objects import deep_access, deep_set_value
from ..utils.user_agent import classify_device_type


def build_device(ortb2: dict[str, Any], runtime: RuntimeEnvironment) -> dict[str, Any]:
    """
    Device object: host first-party data, or derived from the runtime.

    The derived device carries viewport size, user agent, language and
    an OpenRTB devicetype when the user agent can be classified.
    """
    device = ortb2.get("device")
    if device:
        return copy.deepcopy(device)

    derived: dict[str, Any] = {}
    if runtime.viewport_width is not None:
        derived["w"] = runtime.viewport_width
    if runtime.viewport_height is not None:
        derived["h"] = runtime.viewport_height
    if runtime.user_agent:
        derived["ua"] = runtime.user_agent
    if runtime.language:
        derived["language"] = runtime.language

    device_type = classify_device_type(runtime.user_agent, runtime.opera_mini)
    if device_type is not None:
        derived["devicetype"] = device_type

    return derived


def build_site(ortb2: dict[str, Any], page_url: Optional[str]) -> dict[str, Any]:
    """Site object: host first-party data, or page and domain from the page URL."""
    site = ortb2.get("site")
    if site:
        return copy.deepcopy(site)

    if not page_url:
        return {}

    derived: dict[str, Any] = {"page": page_url}
    hostname = urlparse(page_url).hostname
    if hostname:
        derived["domain"] = hostname
    return derived


def build_user(
    ortb2: dict[str, Any],
    consent: ConsentSignals,
    bid_requests: list[BidRequest],
) -> dict[str, Any]:
    """
    User object with the TCF consent string always present.

    Identity envelopes are taken from the first bid that carries any,
    unless the host already placed eids in first-party user data.
    """
    user = copy.deepcopy(ortb2.get("user") or {})

    consent_string = consent.consent_string
    if consent_string or deep_access(user, "ext.consent") is None:
        deep_set_value(user, "ext.consent", consent_string)

    if not deep_access(user, "ext.eids"):
        for bid in bid_requests:
            if bid.user_id_as_eids:
                deep_set_value(user, "ext.eids", copy.deepcopy(bid.user_id_as_eids))
                break

    return user


def build_regs(ortb2: dict[str, Any], consent: ConsentSignals) -> dict[str, Any]:
    """Regs object: host first-party data, or synthesized from consent signals."""
    regs = ortb2.get("regs")
    if regs:
        return copy.deepcopy(regs)
    return consent.to_regs()


def build_source(
    ortb2: dict[str, Any],
    transaction_id: str,
    bid_requests: list[BidRequest],
) -> dict[str, Any]:
    """Source object with the transaction ID and supply chain, when known."""
    source = copy.deepcopy(ortb2.get("source") or {})
    source["tid"] = transaction_id

    if deep_access(source, "ext.schain") is None:
        for bid in bid_requests:
            if bid.schain:
                deep_set_value(source, "ext.schain", copy.deepcopy(bid.schain))
                break

    return source
