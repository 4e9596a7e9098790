# src/billbridge/infrastructure/__init__.py
"""Infrastructure layer - settings, outbound HTTP and collaborator adapters."""

from billbridge.infrastructure.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
