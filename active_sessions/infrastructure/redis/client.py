from typing import Any, Awaitable, Optional, Protocol, Union, runtime_checkable

import redis
import redis.asyncio

from ...config import TrackerSettings, settings

Member = Union[str, int, bytes]


@runtime_checkable
class SetStore(Protocol):
    """The subset of the Redis command surface a tracker relies on."""

    def sadd(self, name: str, *values: Member) -> Any: ...

    def srem(self, name: str, *values: Member) -> Any: ...

    def sunion(self, keys: Any, *args: str) -> Any: ...

    def sunionstore(self, dest: str, keys: Any, *args: str) -> Any: ...

    def sinter(self, keys: Any, *args: str) -> Any: ...

    def delete(self, *names: str) -> Any: ...

    def expire(self, name: str, time: int) -> Any: ...


@runtime_checkable
class AsyncSetStore(Protocol):
    def sadd(self, name: str, *values: Member) -> Awaitable[Any]: ...

    def srem(self, name: str, *values: Member) -> Awaitable[Any]: ...

    def sunion(self, keys: Any, *args: str) -> Awaitable[Any]: ...

    def sunionstore(self, dest: str, keys: Any, *args: str) -> Awaitable[Any]: ...

    def sinter(self, keys: Any, *args: str) -> Awaitable[Any]: ...

    def delete(self, *names: str) -> Awaitable[Any]: ...

    def expire(self, name: str, time: int) -> Awaitable[Any]: ...


def create_client(config: Optional[TrackerSettings] = None) -> redis.Redis:
    config = config or settings
    return redis.Redis.from_url(
        config.redis_url, decode_responses=config.redis_decode_responses
    )


def create_async_client(
    config: Optional[TrackerSettings] = None,
) -> redis.asyncio.Redis:
    config = config or settings
    return redis.asyncio.Redis.from_url(
        config.redis_url, decode_responses=config.redis_decode_responses
    )
