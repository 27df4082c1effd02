"""
Bidder Registry - registration of bid adapters with the host.

Adapters register once at process start; the host looks them up by
bidder code for every auction.
"""

from typing import Optional

from ..logging import get_logger
from .base import BIDDER_OPERATIONS, BidderSpec

logger = get_logger(__name__)


class BidderRegistryError(Exception):
    """Base exception for bidder registry errors."""
    pass


class BidderNotFoundError(BidderRegistryError):
    """Raised when no adapter is registered under a bidder code."""
    pass


class BidderAlreadyRegisteredError(BidderRegistryError):
    """Raised when registering a bidder code twice."""
    pass


class InvalidBidderSpecError(BidderRegistryError):
    """Raised when an adapter does not satisfy the bidder contract."""
    pass


class BidderRegistry:
    """Holds registered adapters keyed by bidder code."""

    def __init__(self):
        self._specs: dict[str, BidderSpec] = {}

    def register(self, spec: BidderSpec, replace: bool = False) -> BidderSpec:
        """
        Register an adapter.

        Args:
            spec: The adapter
            replace: Allow replacing an adapter with the same code

        Returns:
            The registered adapter

        Raises:
            InvalidBidderSpecError: If a code or operation is missing
            BidderAlreadyRegisteredError: If the code is taken and replace is False
        """
        code = getattr(spec, "code", None)
        if not code or not isinstance(code, str):
            raise InvalidBidderSpecError("Bidder spec must declare a string code")

        missing = [
            name for name in BIDDER_OPERATIONS
            if not callable(getattr(spec, name, None))
        ]
        if missing:
            raise InvalidBidderSpecError(
                f"Bidder spec {code} is missing operations: {', '.join(missing)}"
            )

        if not getattr(spec, "supported_media_types", None):
            raise InvalidBidderSpecError(f"Bidder spec {code} declares no media types")

        if code in self._specs and not replace:
            raise BidderAlreadyRegisteredError(f"Bidder already registered: {code}")

        self._specs[code] = spec
        logger.info(
            "Bidder registered",
            bidder=code,
            gvlid=getattr(spec, "gvlid", None),
            media_types=list(spec.supported_media_types),
        )
        return spec

    def get(self, code: str) -> BidderSpec:
        """
        Get an adapter by bidder code.

        Raises:
            BidderNotFoundError: If nothing is registered under the code
        """
        try:
            return self._specs[code]
        except KeyError:
            raise BidderNotFoundError(f"Bidder not found: {code}") from None

    def unregister(self, code: str) -> bool:
        """Remove an adapter. Returns True if one was removed."""
        return self._specs.pop(code, None) is not None

    def codes(self) -> list[str]:
        """Registered bidder codes, sorted."""
        return sorted(self._specs)

    def __contains__(self, code: str) -> bool:
        return code in self._specs


# Global instance for easy access
_registry: Optional[BidderRegistry] = None


def get_bidder_registry() -> BidderRegistry:
    """Get the global bidder registry instance."""
    global _registry
    if _registry is None:
        _registry = BidderRegistry()
    return _registry


def register_bidder(spec: BidderSpec, replace: bool = False) -> BidderSpec:
    """Register an adapter with the global registry."""
    return get_bidder_registry().register(spec, replace=replace)


def get_bidder(code: str) -> BidderSpec:
    """Look up an adapter in the global registry."""
    return get_bidder_registry().get(code)
