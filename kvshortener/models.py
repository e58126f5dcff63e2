from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class URLRecord:
    """Represent a short key to original URL mapping.

    Attributes:
        shortcode (str):
            Base62 short key derived from the target URL.
        target (str):
            The original long URL that the short key resolves to.
        expires_at (datetime | None):
            Moment after which the store drops the record.
            None if the record never expires.

    Example:
        >>> record = URLRecord(shortcode='kPpCoVygmnp', target='https://example.com')
        >>> record.target
        'https://example.com'
        >>> record.expires_at is None
        True
    """

    # fmt: off
    shortcode: str                      # Base62 short key
    target: str                         # Original long URL
    expires_at: datetime | None = None  # None if the record never expires
    # fmt: on
