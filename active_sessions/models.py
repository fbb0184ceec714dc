from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from .config import TrackerSettings, settings
from .constants import ErrorPolicy


class TrackerConfigError(ValueError):
    """Raised when a tracker cannot be built from the supplied configuration."""


class TrackerOptions(BaseModel):
    """Resolved tracker configuration.

    Fields:
        store: Redis client (or anything exposing the same set commands).
        propagate_exceptions: Re-raise store failures from ``track`` instead
            of swallowing them.
    """

    model_config = ConfigDict(frozen=True)

    store: Any
    propagate_exceptions: bool = False

    @property
    def error_policy(self) -> ErrorPolicy:
        return ErrorPolicy.from_flag(self.propagate_exceptions)

    @classmethod
    def coerce(cls, config: Union["TrackerOptions", Mapping[str, Any], Any]):
        """Accept options, an options mapping, or a bare store handle.

        A mapping may name the client ``store`` or ``redis``.
        """
        if isinstance(config, TrackerOptions):
            return config
        if isinstance(config, Mapping):
            data = dict(config)
            if "redis" in data:
                if "store" in data:
                    raise TrackerConfigError("pass either 'store' or 'redis', not both")
                data["store"] = data.pop("redis")
            if data.get("store") is None:
                raise TrackerConfigError("tracker options need a 'store' client")
            unknown = set(data) - set(cls.model_fields)
            if unknown:
                raise TrackerConfigError(
                    f"unknown tracker options: {', '.join(sorted(unknown))}"
                )
            return cls(**data)
        if config is None:
            raise TrackerConfigError("tracker options need a 'store' client")
        return cls(store=config)

    @classmethod
    def from_settings(
        cls, config: Optional[TrackerSettings] = None, asyncio: bool = False
    ) -> "TrackerOptions":
        """Build a Redis client and error policy from environment settings."""
        from .infrastructure.redis.client import create_async_client, create_client

        config = config or settings
        factory = create_async_client if asyncio else create_client
        return cls(
            store=factory(config),
            propagate_exceptions=config.tracker_propagate_exceptions,
        )
