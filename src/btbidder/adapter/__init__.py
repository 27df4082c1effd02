"""
Bid Adapter Module

Components:
- base.py: The contract every adapter implements
- registry.py: Registration of adapters with the host
- blockthrough.py: The Blockthrough exchange adapter

Usage:
    from src.btbidder.adapter import register_blockthrough
    from src.btbidder.config import load_adapter_config

    adapter = register_blockthrough(load_adapter_config())

    valid = [bid for bid in bids if adapter.is_bid_request_valid(bid)]
    requests = adapter.build_requests(valid, bidder_request)
"""

from .base import BIDDER_OPERATIONS, BidderSpec
from .blockthrough import BlockthroughAdapter, register_blockthrough
from .registry import (
    BidderAlreadyRegisteredError,
    BidderNotFoundError,
    BidderRegistry,
    BidderRegistryError,
    InvalidBidderSpecError,
    get_bidder,
    get_bidder_registry,
    register_bidder,
)

__all__ = [
    "BIDDER_OPERATIONS",
    "BidderSpec",
    "BlockthroughAdapter",
    "register_blockthrough",
    "BidderAlreadyRegisteredError",
    "BidderNotFoundError",
    "BidderRegistry",
    "BidderRegistryError",
    "InvalidBidderSpecError",
    "get_bidder",
    "get_bidder_registry",
    "register_bidder",
]
