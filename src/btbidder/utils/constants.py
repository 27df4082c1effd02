"""Adapter Constants and OpenRTB Code Tables."""

BIDDER_CODE: str = "blockthrough"

# IAB Global Vendor List ID
GVLID: int = 815

ENDPOINT_URL: str = "https://pbs.btloader.com/openrtb2/auction"
SYNC_URL: str = "https://cdn.btloader.com/user_sync.html"

DEFAULT_CURRENCY: str = "USD"
DEFAULT_TTL: int = 30
NET_REVENUE: bool = True

# Media types the exchange accepts
BANNER: str = "banner"
SUPPORTED_MEDIA_TYPES: list[str] = [BANNER]

# OpenRTB 2.5 device.devicetype
DEVICE_TYPE_MOBILE: int = 1  # Mobile/Tablet
DEVICE_TYPE_PC: int = 2  # Personal Computer

# OpenRTB bid.mtype -> host media type
MTYPE_MEDIA_TYPES: dict[int, str] = {
    1: "banner",
    2: "video",
    3: "audio",
    4: "native",
}

# Key under which the adapter's own parameters travel in bid params
VENDOR_PARAMS_KEY: str = "blockthrough"

# Keys of the vendor object with a dedicated field
VENDOR_KNOWN_FIELDS: tuple[str, ...] = ("orgID", "websiteID", "ab", "auctionID")
