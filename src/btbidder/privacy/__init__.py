"""
Privacy Module - GDPR, CCPA, and GPP signal forwarding.
"""

from .consent_models import (
    ConsentSignals,
    GDPRConsent,
    GPPConsent,
)

__all__ = [
    'ConsentSignals',
    'GDPRConsent',
    'GPPConsent',
]
