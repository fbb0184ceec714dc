from datetime import datetime, timedelta
from typing import List

# Buckets are keyed by minute-of-hour only, so each one has to be gone
# before the same slot comes round again an hour later.
BUCKET_TTL_SECONDS = 60 * 59

DEFAULT_TIMESPAN_MINUTES = 5


class RedisKeys:
    """Centralised Redis key pattern definitions"""

    ACTIVE_SESSIONS_BUCKET = "active_{category}_sessions_minute_{minute:02d}"

    @classmethod
    def bucket_key(cls, category: str, time: datetime) -> str:
        """Minute bucket holding the sessions of ``category`` seen at ``time``."""
        return cls.ACTIVE_SESSIONS_BUCKET.format(category=category, minute=time.minute)

    @classmethod
    def window_keys(
        cls, category: str, timespan_in_minutes: int, time: datetime
    ) -> List[str]:
        """Bucket keys for the last ``timespan_in_minutes`` minutes, newest first."""
        if timespan_in_minutes < 1:
            raise ValueError(
                f"timespan_in_minutes must be at least 1, got {timespan_in_minutes}"
            )
        return [
            cls.bucket_key(category, time - timedelta(minutes=offset))
            for offset in range(timespan_in_minutes)
        ]
