"""
Kontent Delivery Client — Read-only HTTP access to the Kontent Delivery API.

This module is responsible for all HTTP communication with Kentico Kontent.
Three endpoints are used, each scoped to a project:

    GET {base}/{project_id}/types
    GET {base}/{project_id}/items?language={codename}&depth=0
    GET {base}/{project_id}/taxonomies

Base URL is https://deliver.kontent.ai, or https://preview-deliver.kontent.ai
when reading unpublished content. A secure-access key (or the preview key in
preview mode) is sent as a Bearer token when configured.

All listing endpoints are paginated. The response carries
    "pagination": {"skip": 0, "limit": 1000, "count": 1000, "next_page": "..."}
and the client keeps requesting with an increasing skip until next_page is
empty.

Requests run sequentially and are not retried; any failure aborts the run.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from config import DELIVERY_API_URL, PREVIEW_API_URL

from .exceptions import DeliveryApiError

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 1000


class KontentDeliveryClient:
    """Client for the Kontent Delivery API.

    Attributes:
        project_id: Kontent project ID.
        use_preview: If True, read from the Preview Delivery API.
        timeout: Per-request timeout in seconds.
        page_size: Records requested per page on listing endpoints.
        debug: If True, print request details.
    """

    def __init__(
        self,
        project_id: str,
        secure_api_key: str = "",
        preview_api_key: str = "",
        use_preview: bool = False,
        timeout: int = 30,
        page_size: int = DEFAULT_PAGE_SIZE,
        debug: bool = False,
    ):
        self.project_id = project_id
        self.use_preview = use_preview
        self.timeout = timeout
        self.page_size = page_size
        self.debug = debug
        self._session = requests.Session()

        api_key = preview_api_key if use_preview else secure_api_key
        if api_key:
            self._session.headers.update({"Authorization": f"Bearer {api_key}"})

    @property
    def base_url(self) -> str:
        root = PREVIEW_API_URL if self.use_preview else DELIVERY_API_URL
        return f"{root}/{self.project_id}"

    def get_types(self) -> List[Dict[str, Any]]:
        """Fetch every content type of the project."""
        return self._get_all("types", "types")

    def get_items(self, language_codename: str) -> List[Dict[str, Any]]:
        """Fetch every content item in one language.

        Linked items are not expanded (depth=0); references stay as codenames
        and are resolved by the decorators.
        """
        params = {"language": language_codename, "depth": 0}
        return self._get_all("items", "items", params)

    def get_taxonomies(self) -> List[Dict[str, Any]]:
        """Fetch every taxonomy group of the project."""
        return self._get_all("taxonomies", "taxonomies")

    def _get_all(self, path: str, key: str, params: Optional[Dict] = None) -> List[Dict[str, Any]]:
        """Collect every record of a paginated listing endpoint."""
        records: List[Dict[str, Any]] = []
        skip = 0

        while True:
            page_params = dict(params or {})
            page_params.update({"skip": skip, "limit": self.page_size})
            result = self._get(path, page_params)

            page = result.get(key, [])
            records.extend(page)

            pagination = result.get("pagination") or {}
            if not pagination.get("next_page") or not page:
                break
            skip += pagination.get("count") or len(page)

        if self.debug:
            print(f"  Fetched {len(records)} {key} from /{path}")

        return records

    def _get(self, path: str, params: Optional[Dict] = None) -> Dict[str, Any]:
        """Issue a GET request and return the decoded JSON body.

        Raises:
            DeliveryApiError: If the API answers with an error status.
        """
        url = f"{self.base_url}/{path}"
        logger.debug("GET %s params=%s", url, params)

        response = self._session.get(url, params=params, timeout=self.timeout)
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            error_code = None
            message = str(e)
            try:
                body = response.json()
                message = body.get("message", message)
                error_code = body.get("error_code")
            except ValueError:
                pass
            raise DeliveryApiError(
                f"Delivery API request to /{path} failed ({response.status_code}): {message}",
                status_code=response.status_code,
                error_code=error_code,
            ) from e

        return response.json()
