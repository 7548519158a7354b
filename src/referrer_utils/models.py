"""Pydantic models for the referrer API."""

from pydantic import BaseModel, Field

from .referrer import ReferrerInfo


class UTMReport(BaseModel):
    """UTM values found on the referrer."""

    source: str | None = None
    medium: str | None = None
    campaign: str | None = None
    term: str | None = None
    content: str | None = None


class ReferrerReport(BaseModel):
    """Classification of one referrer."""

    url: str | None = None
    is_valid: bool = False

    # Domain
    domain: str | None = None
    root_domain: str | None = None
    is_external: bool = False

    # Matches
    search_engine: str | None = None
    social_platform: str | None = None
    search_terms: str | None = None

    # Campaign
    utm_parameters: UTMReport = Field(default_factory=UTMReport)

    traffic_source: str = "direct"  # search, social, direct, referral, campaign, unknown

    @classmethod
    def from_info(cls, info: ReferrerInfo) -> "ReferrerReport":
        return cls(**info.to_dict())


class OptionItem(BaseModel):
    """A value/label pair for pickers."""

    value: str
    label: str
