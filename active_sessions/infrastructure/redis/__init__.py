from .client import AsyncSetStore, SetStore, create_async_client, create_client

__all__ = ["SetStore", "AsyncSetStore", "create_client", "create_async_client"]
