"""
ID generation utilities for outbound requests.

Used when the host supplies no transaction identifier for an auction.
"""

import uuid


def generate_transaction_id() -> str:
    """
    Generate a random transaction ID.

    Returns:
        A UUID4 string
        Example: "3f2b8c1e-6a4d-4f0e-9b7a-2d5c8e1f0a93"
    """
    return str(uuid.uuid4())
