"""
Exceptions raised by referrer-utils.

Classification itself never raises: malformed referrers degrade to
``None``/``False``/``TrafficSource.UNKNOWN``. These exceptions cover
mistakes made while wiring the library up (bad configuration, overlapping
domain tables, unknown option groups).
"""


class ReferrerError(Exception):
    """Base class for all referrer-utils errors."""
    pass


class ConfigError(ReferrerError, ValueError):
    """Raised when a ReferrerConfig value is invalid."""
    pass


class DuplicateHostnameError(ReferrerError, ValueError):
    """Raised when a hostname is listed under two keys of one domain table."""

    def __init__(self, table: str, hostname: str, first_key: str, second_key: str):
        self.table = table
        self.hostname = hostname
        self.first_key = first_key
        self.second_key = second_key
        super().__init__(
            f"{table}: hostname {hostname!r} is listed under both "
            f"{first_key!r} and {second_key!r}"
        )


class UnknownOptionGroupError(ReferrerError, KeyError):
    """Raised when options are requested for a group that doesn't exist."""
    pass
