import secrets
from datetime import datetime
from typing import Any, List, Optional, Union

from .config import settings
from .constants import BUCKET_TTL_SECONDS, DEFAULT_TIMESPAN_MINUTES, RedisKeys
from .infrastructure.redis.client import AsyncSetStore, SetStore
from .logging.logger import get_logger
from .metrics import SUPPRESSED_ERRORS, TRACKED
from .models import TrackerOptions

logger = get_logger(__name__, auto_configure=False)

SessionId = Union[str, int]


class _BaseSessionTracker:
    """Key layout and error policy shared by the sync and async trackers.

    Notes:
        - One Redis set per minute-of-hour bucket, per category.
        - Every write refreshes the bucket TTL so a slot is empty before the
          next hour reuses it.
        - Only ``track`` honours the error policy; queries always propagate.
    """

    def __init__(self, category: str, config: Any):
        self.category = category
        self.options = TrackerOptions.coerce(config)
        self.store = self.options.store
        self.error_policy = self.options.error_policy

    def bucket_key(self, time: Optional[datetime] = None) -> str:
        return RedisKeys.bucket_key(self.category, time or datetime.now())

    def window_keys(
        self,
        timespan_in_minutes: int = DEFAULT_TIMESPAN_MINUTES,
        time: Optional[datetime] = None,
    ) -> List[str]:
        return RedisKeys.window_keys(
            self.category, timespan_in_minutes, time or datetime.now()
        )

    def random_key(self) -> str:
        return f"{settings.tracker_temp_key_prefix}{secrets.token_hex(16)}"

    def _record_suppressed(self, key: str, session_id: SessionId):
        SUPPRESSED_ERRORS.labels(category=self.category).inc()
        logger.warning(
            "Suppressed store failure while tracking",
            extra={"category": self.category, "bucket": key, "session_id": session_id},
            exc_info=True,
        )


class SessionTracker(_BaseSessionTracker):
    """Counts active sessions of one category over sliding minute windows.

    ``config`` is a ``TrackerOptions``, a mapping of its fields, or the Redis
    client itself.
    """

    store: SetStore

    def track(self, session_id: Optional[SessionId], time: Optional[datetime] = None):
        if session_id is None:
            return
        key = self.bucket_key(time)
        try:
            self.store.sadd(key, session_id)
            self.store.expire(key, BUCKET_TTL_SECONDS)
        except Exception:
            if self.error_policy.propagates:
                raise
            self._record_suppressed(key, session_id)
            return
        TRACKED.labels(category=self.category).inc()

    def untrack(
        self,
        session_id: SessionId,
        timespan_in_minutes: int = DEFAULT_TIMESPAN_MINUTES,
        time: Optional[datetime] = None,
    ):
        for key in self.window_keys(timespan_in_minutes, time):
            self.store.srem(key, session_id)

    def active_users(
        self,
        timespan_in_minutes: int = DEFAULT_TIMESPAN_MINUTES,
        time: Optional[datetime] = None,
    ) -> int:
        return len(self.active_users_data(timespan_in_minutes, time))

    def active_users_data(
        self,
        timespan_in_minutes: int = DEFAULT_TIMESPAN_MINUTES,
        time: Optional[datetime] = None,
    ):
        return self.store.sunion(*self.window_keys(timespan_in_minutes, time))

    def active_friends(
        self,
        friend_set_key: str,
        timespan_in_minutes: int = DEFAULT_TIMESPAN_MINUTES,
        time: Optional[datetime] = None,
    ):
        """Members of ``friend_set_key`` active within the timespan."""
        keys = self.window_keys(timespan_in_minutes, time)
        tmp_key = self.random_key()
        logger.debug("Union of %d buckets stored in %s", len(keys), tmp_key)
        try:
            self.store.sunionstore(tmp_key, *keys)
            return self.store.sinter(tmp_key, friend_set_key)
        finally:
            self.store.delete(tmp_key)


class AsyncSessionTracker(_BaseSessionTracker):
    """``SessionTracker`` for ``redis.asyncio`` clients."""

    store: AsyncSetStore

    async def track(
        self, session_id: Optional[SessionId], time: Optional[datetime] = None
    ):
        if session_id is None:
            return
        key = self.bucket_key(time)
        try:
            await self.store.sadd(key, session_id)
            await self.store.expire(key, BUCKET_TTL_SECONDS)
        except Exception:
            if self.error_policy.propagates:
                raise
            self._record_suppressed(key, session_id)
            return
        TRACKED.labels(category=self.category).inc()

    async def untrack(
        self,
        session_id: SessionId,
        timespan_in_minutes: int = DEFAULT_TIMESPAN_MINUTES,
        time: Optional[datetime] = None,
    ):
        for key in self.window_keys(timespan_in_minutes, time):
            await self.store.srem(key, session_id)

    async def active_users(
        self,
        timespan_in_minutes: int = DEFAULT_TIMESPAN_MINUTES,
        time: Optional[datetime] = None,
    ) -> int:
        return len(await self.active_users_data(timespan_in_minutes, time))

    async def active_users_data(
        self,
        timespan_in_minutes: int = DEFAULT_TIMESPAN_MINUTES,
        time: Optional[datetime] = None,
    ):
        return await self.store.sunion(*self.window_keys(timespan_in_minutes, time))

    async def active_friends(
        self,
        friend_set_key: str,
        timespan_in_minutes: int = DEFAULT_TIMESPAN_MINUTES,
        time: Optional[datetime] = None,
    ):
        keys = self.window_keys(timespan_in_minutes, time)
        tmp_key = self.random_key()
        logger.debug("Union of %d buckets stored in %s", len(keys), tmp_key)
        try:
            await self.store.sunionstore(tmp_key, *keys)
            return await self.store.sinter(tmp_key, friend_set_key)
        finally:
            await self.store.delete(tmp_key)
