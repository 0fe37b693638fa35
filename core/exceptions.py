"""
Exceptions raised by the Kontent source pipeline.

  ConfigurationError   Invalid connector configuration. Fatal; raised before
                       any request is made.
  ItemStructureError   A content item node lacks the minimal
                       {system: {codename}, elements: {...}} shape. Raised by
                       validation checks and caught per item by decorators.
  DeliveryApiError     The Delivery API returned an error response.
"""

from typing import Optional


class KontentSourceError(Exception):
    """Base class for all errors raised by this connector."""


class ConfigurationError(KontentSourceError):
    pass


class ItemStructureError(KontentSourceError):
    pass


class DeliveryApiError(KontentSourceError):
    """An HTTP or API-level failure talking to the Delivery API.

    Attributes:
        status_code: HTTP status of the failed response, if any.
        error_code: Kontent ``error_code`` from the response body, if any.
    """

    def __init__(self, message: str, status_code: Optional[int] = None,
                 error_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
