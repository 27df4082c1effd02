"""Tests for user agent device classification."""

import pytest

from src.btbidder.utils.constants import DEVICE_TYPE_MOBILE, DEVICE_TYPE_PC
from src.btbidder.utils.user_agent import classify_device_type, is_desktop, is_mobile


class TestClassifyDeviceType:
    """Test suite for classify_device_type."""

    @pytest.mark.parametrize("ua", [
        # iPhone Safari
        "Mozilla/5.0 (iPhone; CPU iPhone OS 16_0 like Mac OS X) AppleWebKit/605.1.15 "
        "(KHTML, like Gecko) Version/16.0 Mobile/15E148 Safari/604.1",
        # Android Chrome
        "Mozilla/5.0 (Linux; Android 13; Pixel 7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36",
        # Android tablet (no Mobile token)
        "Mozilla/5.0 (Linux; Android 12; SM-X700) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        # iPad
        "Mozilla/5.0 (iPad; CPU OS 15_0 like Mac OS X) AppleWebKit/605.1.15",
        "Mozilla/5.0 (BlackBerry; U; BlackBerry 9900; en) AppleWebKit/534.11+",
        "Mozilla/5.0 (compatible; MSIE 10.0; Windows Phone 8.0; Trident/6.0; IEMobile/10.0)",
        "Mozilla/5.0 (webOS/1.4.0; U; en-US) AppleWebKit/532.2",
    ])
    def test_mobile(self, ua):
        """Known mobile agents are mobile."""
        assert classify_device_type(ua) == DEVICE_TYPE_MOBILE

    @pytest.mark.parametrize("ua", [
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
        "(KHTML, like Gecko) Version/17.0 Safari/605.1.15",
        "Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0",
        "Mozilla/5.0 (X11; CrOS x86_64 14541.0.0) AppleWebKit/537.36",
    ])
    def test_desktop(self, ua):
        """Known desktop agents are personal computers."""
        assert classify_device_type(ua) == DEVICE_TYPE_PC

    @pytest.mark.parametrize("ua", ["", "curl/8.4.0", "Wget/1.21"])
    def test_unclassifiable(self, ua):
        """Anything else has no device type."""
        assert classify_device_type(ua) is None

    def test_mobile_checked_before_desktop(self):
        """Android agents mention Linux but are mobile."""
        ua = "Mozilla/5.0 (Linux; Android 13) AppleWebKit/537.36"
        assert is_desktop(ua) is True
        assert classify_device_type(ua) == DEVICE_TYPE_MOBILE

    def test_explicit_mobile_token(self):
        """A bare mobile token is enough."""
        assert is_mobile("SomeBrowser/1.0 mobile") is True

    def test_opera_mini_requires_runtime_flag(self):
        """Opera Mini only counts when its global object is present."""
        bare = "Opera/9.80 (J2ME/MIDP; Opera Mini/9.80) Presto/2.5.25"

        assert classify_device_type(bare) is None
        assert classify_device_type(bare, opera_mini=True) == DEVICE_TYPE_MOBILE
