"""Prometheus counters for tracker activity.

Thin wrappers around prometheus_client primitives with service name
prefixing and basic naming validation. The default registry is used so a
host process exposes these alongside its own metrics.
"""

from __future__ import annotations

import re

from prometheus_client import Counter

_NAME_RE = re.compile(r"^[a-z_][a-z0-9_]*$")

SERVICE = "session_tracker"


def _validate(name: str) -> str:
    if not _NAME_RE.match(name):  # pragma: no cover - simple guard
        raise ValueError(
            f"Invalid metric name '{name}'. Use snake_case alphanumerics/underscores."
        )
    return name


def _prefix(name: str, service: str | None) -> str:
    if service and not name.startswith(service + "_"):
        return f"{service}_{name}"
    return name


def get_counter(
    name: str,
    documentation: str,
    service: str | None = None,
    labelnames: tuple[str, ...] = (),
) -> Counter:
    return Counter(_validate(_prefix(name, service)), documentation, labelnames)


TRACKED = get_counter(
    "tracked",
    "Session ids recorded into a minute bucket",
    SERVICE,
    labelnames=("category",),
)
SUPPRESSED_ERRORS = get_counter(
    "suppressed_errors",
    "Store failures swallowed while tracking a session",
    SERVICE,
    labelnames=("category",),
)


__all__ = ["get_counter", "TRACKED", "SUPPRESSED_ERRORS", "SERVICE"]
