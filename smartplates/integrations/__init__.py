"""Clients for third-party services."""

from smartplates.integrations.spoonacular import (
    RateLimitExceeded,
    SpoonacularClient,
    SpoonacularError,
    UpstreamAPIError,
)

__all__ = [
    "RateLimitExceeded",
    "SpoonacularClient",
    "SpoonacularError",
    "UpstreamAPIError",
]
