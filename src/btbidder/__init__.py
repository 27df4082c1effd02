"""
Blockthrough bid adapter for header-bidding hosts.

Translates ad-slot bid requests into OpenRTB 2.5 auction requests for the
Blockthrough exchange and translates seat bids back into host bids.
"""

from .adapter import BlockthroughAdapter, register_blockthrough
from .config import AdapterConfig, RuntimeEnvironment, load_adapter_config
from .models import (
    BidderRequest,
    BidRequest,
    NormalizedBid,
    OutboundRequest,
    ServerResponse,
    SyncOptions,
    UserSync,
)

__version__ = '1.0.0'

__all__ = [
    'BlockthroughAdapter',
    'register_blockthrough',
    'AdapterConfig',
    'RuntimeEnvironment',
    'load_adapter_config',
    'BidderRequest',
    'BidRequest',
    'NormalizedBid',
    'OutboundRequest',
    'ServerResponse',
    'SyncOptions',
    'UserSync',
]
