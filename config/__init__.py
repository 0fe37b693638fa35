"""
Config module - Connector defaults and API endpoints.
"""

from .settings import DEFAULT_SETTINGS, DELIVERY_API_URL, PREVIEW_API_URL, PROVIDER_NAME

__all__ = [
    'DEFAULT_SETTINGS',
    'DELIVERY_API_URL',
    'PREVIEW_API_URL',
    'PROVIDER_NAME',
]
