"""Adapter Models and Data Types."""

from .bid_request import (
    BidParameters,
    BidRequest,
    BidderRequest,
    BlockthroughParams,
    FloorFunction,
)
from .bid_response import (
    NormalizedBid,
    OutboundRequest,
    ServerResponse,
    SyncOptions,
    UserSync,
)

__all__ = [
    "BidParameters",
    "BidRequest",
    "BidderRequest",
    "BlockthroughParams",
    "FloorFunction",
    "NormalizedBid",
    "OutboundRequest",
    "ServerResponse",
    "SyncOptions",
    "UserSync",
]
