"""Configuration module for the TripIt client.

Provides centralized configuration management with type-safe enums.

Usage:
    from tripit.core.config import settings, ObjectType

    client = TripItClient(authorizer, api_url=settings.API_URL)
"""

from tripit.core.config.enums import Environment, Filter, ListType, ObjectType
from tripit.core.config.settings import Settings

__all__ = [
    "Settings",
    "Environment",
    "Filter",
    "ListType",
    "ObjectType",
    "settings",
]

# Singleton settings instance
settings = Settings()
