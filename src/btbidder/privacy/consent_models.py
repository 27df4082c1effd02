"""
Consent signal models forwarded to the exchange.

Supports:
- GDPR TCF v2 (Transparency and Consent Framework)
- CCPA/CPRA (US Privacy string)
- GPP (Global Privacy Platform)

The adapter never interprets consent; it only forwards the signals the
host's consent modules resolved, either into the OpenRTB ``regs``/``user``
objects or as user-sync query parameters.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class GDPRConsent:
    """
    GDPR consent as resolved by the host's consent management module.

    Attributes:
        gdpr_applies: Whether GDPR applies to this user (None = unknown)
        consent_string: Raw TCF consent string
    """
    gdpr_applies: Optional[bool] = None
    consent_string: Optional[str] = None

    @property
    def applies_flag(self) -> int:
        """GDPR applicability as the 0/1 integer OpenRTB expects."""
        return 1 if self.gdpr_applies else 0

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> Optional["GDPRConsent"]:
        """Create from the host's ``gdprConsent`` object."""
        if not isinstance(data, dict):
            return None
        applies = data.get("gdprApplies")
        return cls(
            gdpr_applies=None if applies is None else bool(applies),
            consent_string=data.get("consentString"),
        )


@dataclass(frozen=True)
class GPPConsent:
    """
    Global Privacy Platform (GPP) consent signal.

    Attributes:
        gpp_string: Raw GPP string (tilde-delimited sections)
        applicable_sections: Section IDs that apply to this request
    """
    gpp_string: Optional[str] = None
    applicable_sections: tuple[int, ...] = ()

    @property
    def sid_param(self) -> str:
        """Applicable sections as a comma-joined string."""
        return ",".join(str(sid) for sid in self.applicable_sections)

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> Optional["GPPConsent"]:
        """Create from the host's ``gppConsent`` object."""
        if not isinstance(data, dict):
            return None
        return cls(
            gpp_string=data.get("gppString"),
            applicable_sections=tuple(data.get("applicableSections") or ()),
        )


@dataclass(frozen=True)
class ConsentSignals:
    """
    Unified container for the consent signals of one auction.

    Builds:
    - regs.ext.gdpr + user.ext.consent (TCF)
    - regs.ext.us_privacy (CCPA)
    - regs.gpp + regs.gpp_sid (GPP)
    """
    gdpr: Optional[GDPRConsent] = None
    us_privacy: Optional[str] = None
    gpp: Optional[GPPConsent] = None

    @property
    def consent_string(self) -> str:
        """TCF consent string, empty when absent."""
        if self.gdpr and self.gdpr.consent_string:
            return self.gdpr.consent_string
        return ""

    def to_regs(self) -> dict[str, Any]:
        """
        Synthesize an OpenRTB ``regs`` object from the discrete signals.

        Signals that are absent are omitted, so an auction without any
        consent signal yields an empty dict.
        """
        regs: dict[str, Any] = {}
        ext: dict[str, Any] = {}

        if self.gdpr is not None:
            ext["gdpr"] = self.gdpr.applies_flag
        if self.us_privacy:
            ext["us_privacy"] = self.us_privacy
        if self.gpp is not None:
            if self.gpp.gpp_string:
                regs["gpp"] = self.gpp.gpp_string
            if self.gpp.applicable_sections:
                regs["gpp_sid"] = list(self.gpp.applicable_sections)

        if ext:
            regs["ext"] = ext
        return regs

    def to_sync_params(self) -> list[tuple[str, str]]:
        """
        Build user-sync query parameters, in a stable order.

        Returns:
            List of (name, value) pairs for gdpr, gdpr_consent, gpp,
            gpp_sid and us_privacy, each only when its signal is present
        """
        params: list[tuple[str, str]] = []

        if self.gdpr is not None:
            params.append(("gdpr", str(self.gdpr.applies_flag)))
            params.append(("gdpr_consent", self.gdpr.consent_string or ""))
        if self.gpp is not None:
            params.append(("gpp", self.gpp.gpp_string or ""))
            params.append(("gpp_sid", self.gpp.sid_param))
        if self.us_privacy:
            params.append(("us_privacy", self.us_privacy))

        return params

    def get_restrictions_summary(self) -> dict:
        """Get a summary of forwarded signals for logging."""
        return {
            'gdpr_applies': self.gdpr.gdpr_applies if self.gdpr else None,
            'has_tcf_string': bool(self.consent_string),
            'us_privacy': self.us_privacy,
            'gpp_sections': list(self.gpp.applicable_sections) if self.gpp else [],
        }
