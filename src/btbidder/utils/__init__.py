"""Adapter Utilities."""

from .constants import BIDDER_CODE, ENDPOINT_URL, GVLID, SYNC_URL
from .id_generator import generate_transaction_id
from .objects import deep_access, deep_set_value, merge_deep
from .user_agent import classify_device_type

__all__ = [
    'BIDDER_CODE',
    'ENDPOINT_URL',
    'GVLID',
    'SYNC_URL',
    'generate_transaction_id',
    'deep_access',
    'deep_set_value',
    'merge_deep',
    'classify_device_type',
]
