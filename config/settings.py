"""
Settings — Default configuration values for the Kontent source connector.

This module provides the DEFAULT_SETTINGS dict that the orchestrator uses as
fallback values when environment variables are not set. The actual
configuration is loaded from .env at runtime.

Configuration precedence (highest to lowest):
  1. CLI flags (--debug, --preview, --languages)
  2. Environment variables (from .env file)
  3. DEFAULT_SETTINGS (this file)

Settings reference:
  PROVIDER_NAME               Label used in output folder naming
  KONTENT_LANGUAGE_CODENAMES  Comma-separated language codenames; the first
                              one is the default language
  KONTENT_USE_PREVIEW         Read from the Preview Delivery API
  KONTENT_INCLUDE_TAXONOMIES  Whether to create taxonomy nodes
  OUTPUT_DIR                  Where to write run output (default: ./output)
  SAVE_JSON                   Whether to write nodes.json (default: True)
  DEBUG                       Whether to print verbose output (default: False)
  REQUEST_TIMEOUT             Per-request HTTP timeout in seconds
"""

PROVIDER_NAME = "Kontent_Source"

DELIVERY_API_URL = "https://deliver.kontent.ai"
PREVIEW_API_URL = "https://preview-deliver.kontent.ai"

DEFAULT_SETTINGS = {
    "PROVIDER_NAME": PROVIDER_NAME,
    "KONTENT_LANGUAGE_CODENAMES": "default",
    "KONTENT_USE_PREVIEW": False,
    "KONTENT_INCLUDE_TAXONOMIES": True,
    "OUTPUT_DIR": "./output",
    "SAVE_JSON": True,
    "DEBUG": False,
    "REQUEST_TIMEOUT": 30,
}
