"""
UTM parameter extraction for campaign attribution.

UTM (Urchin Tracking Module) parameters are the industry standard for
tagging marketing links:
- utm_source: Where the traffic came from (e.g., "google", "newsletter")
- utm_medium: Marketing medium (e.g., "cpc", "email", "social")
- utm_campaign: Campaign name (e.g., "spring_sale", "product_launch")
- utm_term: Paid search keywords (optional)
- utm_content: Differentiates similar content/links (optional)

Only the five canonical names are read. Values are sanitized before they
are returned, so they are safe to render or store.
"""

from dataclasses import asdict, dataclass

from .context import resolve_referrer
from .sanitize import sanitize_text
from .urls import is_valid, parse_query

# utm_* query parameter -> UTMParams field
UTM_FIELDS = {
    "utm_source": "source",
    "utm_medium": "medium",
    "utm_campaign": "campaign",
    "utm_term": "term",
    "utm_content": "content",
}

# Any one of these marks the referrer as campaign traffic
CAMPAIGN_FIELDS = ("source", "medium", "campaign")


@dataclass(frozen=True)
class UTMParams:
    """
    UTM parameters extracted from a referrer URL.

    All fields are optional. A parameter that is missing, empty, or nothing
    but markup is None, never an empty string.

    Attributes:
        source: utm_source
        medium: utm_medium
        campaign: utm_campaign
        term: utm_term
        content: utm_content
    """
    source: str | None = None
    medium: str | None = None
    campaign: str | None = None
    term: str | None = None
    content: str | None = None

    @property
    def has_utm(self) -> bool:
        """Check if any UTM parameters are present."""
        return any([
            self.source,
            self.medium,
            self.campaign,
            self.term,
            self.content,
        ])

    @property
    def is_campaign(self) -> bool:
        """True when source, medium or campaign is set."""
        return any(getattr(self, name) for name in CAMPAIGN_FIELDS)

    def to_dict(self) -> dict[str, str | None]:
        """All five fields, None for the unset ones."""
        return asdict(self)


def _clean_param(value: str | None) -> str | None:
    """Sanitize a parameter value; None for empty results."""
    if not value:
        return None
    return sanitize_text(value) or None


def get_utm_parameters(url: str | None = None) -> UTMParams:
    """
    Extract UTM parameters from a referrer URL.

    Args:
        url: Referrer URL; omit to use the current request's referrer

    Returns:
        UTMParams with every field None when the URL is invalid or untagged

    Examples:
        >>> get_utm_parameters("https://example.com/?utm_source=google&utm_medium=cpc")
        UTMParams(source='google', medium='cpc', campaign=None, term=None, content=None)

        >>> get_utm_parameters("not-a-valid-url")
        UTMParams(source=None, medium=None, campaign=None, term=None, content=None)
    """
    url = resolve_referrer(url)
    if not is_valid(url):
        return UTMParams()

    params = parse_query(url)
    if not params:
        return UTMParams()

    return UTMParams(**{
        field: _clean_param(params.get(param))
        for param, field in UTM_FIELDS.items()
    })


def get_campaign_source(url: str | None = None) -> str | None:
    """The referrer's utm_source, if any."""
    return get_utm_parameters(url).source
