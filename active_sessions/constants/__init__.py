from .policies import ErrorPolicy
from .redis_keys import BUCKET_TTL_SECONDS, DEFAULT_TIMESPAN_MINUTES, RedisKeys

__all__ = [
    "ErrorPolicy",
    "RedisKeys",
    "BUCKET_TTL_SECONDS",
    "DEFAULT_TIMESPAN_MINUTES",
]
