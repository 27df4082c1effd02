"""User Agent sniffing for coarse OpenRTB device classification."""

import re

from .constants import DEVICE_TYPE_MOBILE, DEVICE_TYPE_PC

# Explicit mobile marker, checked first
MOBILE_TOKEN_PATTERN: re.Pattern = re.compile(r"mobile", re.I)

# Mobile OS / browser tokens (order matters - checked before desktop)
MOBILE_PATTERNS: list[re.Pattern] = [
    re.compile(r"Android", re.I),
    re.compile(r"webOS", re.I),
    re.compile(r"iPhone|iPad|iPod", re.I),
    re.compile(r"BlackBerry|BB10", re.I),
    re.compile(r"IEMobile|Windows Phone", re.I),
    re.compile(r"Kindle|Silk", re.I),
]

# Opera Mini only counts when the runtime exposes its global object
OPERA_MINI_PATTERN: re.Pattern = re.compile(r"Opera Mini", re.I)

# Desktop OS tokens
DESKTOP_PATTERNS: list[re.Pattern] = [
    re.compile(r"Windows NT", re.I),
    re.compile(r"Macintosh|Mac OS X", re.I),
    re.compile(r"CrOS", re.I),
    re.compile(r"X11|Linux", re.I),
]


def is_mobile(ua_string: str, opera_mini: bool = False) -> bool:
    """Check if user agent indicates a mobile device."""
    if MOBILE_TOKEN_PATTERN.search(ua_string):
        return True
    if any(pattern.search(ua_string) for pattern in MOBILE_PATTERNS):
        return True
    return bool(opera_mini and OPERA_MINI_PATTERN.search(ua_string))


def is_desktop(ua_string: str) -> bool:
    """Check if user agent indicates a desktop OS."""
    return any(pattern.search(ua_string) for pattern in DESKTOP_PATTERNS)


def classify_device_type(ua_string: str, opera_mini: bool = False) -> int | None:
    """
    Classify a user agent as OpenRTB mobile or personal computer.

    Mobile tokens take precedence over desktop tokens, so an Android
    agent that also mentions Linux is mobile.

    Args:
        ua_string: The user agent string to classify
        opera_mini: Whether the runtime exposes the Opera Mini global

    Returns:
        DEVICE_TYPE_MOBILE, DEVICE_TYPE_PC, or None when unclassifiable
    """
    if not ua_string:
        return None
    if is_mobile(ua_string, opera_mini):
        return DEVICE_TYPE_MOBILE
    if is_desktop(ua_string):
        return DEVICE_TYPE_PC
    return None
