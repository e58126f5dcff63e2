"""In-memory implementation of ShortURLBaseDAO

Keeps short key mappings in a process-local dict. Useful for unit tests and
local development where no Redis server is available.

Expired records are evicted lazily: on lookup of the expired key, and on
every save (which prunes all records past their expiry).
"""

import threading
from datetime import datetime, timedelta, UTC

from beartype import beartype

from kvshortener.models import URLRecord
from kvshortener.constants import TTL
from kvshortener.dao.base import ShortURLBaseDAO
from kvshortener.dao.exceptions import ShortURLNotFoundError
from kvshortener.utils.helpers import ttl_seconds


class ShortURLMemoryDAO(ShortURLBaseDAO):
    """Dict-backed DAO for short URL mappings.

    Attributes:
        records (dict[str, URLRecord]):
            Stored mappings keyed by short key.

    Example:
        >>> dao = ShortURLMemoryDAO()
        >>> dao.save('kPpCoVygmnp', 'https://example.com').get('kPpCoVygmnp').target
        'https://example.com'
    """

    def __init__(self, **kwargs):
        self.records: dict[str, URLRecord] = {}
        self._lock = threading.Lock()

    @beartype
    def save(self, shortcode: str, target: str, ttl: int | timedelta = TTL.NO_EXPIRY, **kwargs) -> 'ShortURLMemoryDAO':
        seconds = ttl_seconds(ttl)
        now = datetime.now(UTC)
        expires_at = now + timedelta(seconds=seconds) if seconds else None

        with self._lock:
            expired = [key for key, record in self.records.items() if record.expires_at is not None and record.expires_at <= now]
            for key in expired:
                del self.records[key]
            self.records[shortcode] = URLRecord(shortcode=shortcode, target=target, expires_at=expires_at)
        return self

    @beartype
    def get(self, shortcode: str, **kwargs) -> URLRecord:
        with self._lock:
            record = self.records.get(shortcode)
            if record is not None and record.expires_at is not None and record.expires_at <= datetime.now(UTC):
                del self.records[shortcode]
                record = None

        if record is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return record

    def __len__(self) -> int:
        return len(self.records)
