"""OpenRTB 2.5 conversion."""

from .converter import OrtbConverter
from .enrichment import (
    build_device,
    build_regs,
    build_site,
    build_source,
    build_user,
)

__all__ = [
    "OrtbConverter",
    "build_device",
    "build_regs",
    "build_site",
    "build_source",
    "build_user",
]
