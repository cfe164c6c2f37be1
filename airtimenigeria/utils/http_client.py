"""
HTTP client for AirtimeNigeria API communication.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import requests
from urllib3.exceptions import ReadTimeoutError

from ..constants import DEFAULT_TIMEOUT
from ..exceptions import (
    ConfigurationError,
    NetworkError,
    RequestTimeoutError,
    ResponseParseError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class APIResponse:
    """Transport result: HTTP status code and decoded JSON body."""
    status_code: int
    data: Any


class HTTPClient:
    """
    HTTP client wrapper for AirtimeNigeria API requests.
    Handles bearer auth, JSON encoding/decoding, timeouts and logging.

    The status code is returned untouched; whether a call succeeded is
    decided by the caller from the ``success`` field of the body.
    Nothing is retried.
    """

    def __init__(self, base_url: str, api_token: str, timeout: float = DEFAULT_TIMEOUT):
        """
        Initialize HTTP client.

        Args:
            base_url: Base URL for API requests (http or https)
            api_token: Bearer token sent with every request
            timeout: Request timeout in seconds
        """
        scheme = urlparse(base_url).scheme
        if scheme not in ('http', 'https'):
            raise ConfigurationError(
                f"Base URL must use http or https. Got: {base_url}"
            )

        self.base_url = base_url.rstrip('/')
        self.api_token = api_token
        self.timeout = timeout

    def _get_full_url(self, endpoint: str) -> str:
        """Get full URL for endpoint."""
        endpoint = endpoint.lstrip('/')
        return f"{self.base_url}/{endpoint}"

    def _build_headers(self, body: Optional[bytes]) -> Dict[str, str]:
        headers = {
            'Authorization': f'Bearer {self.api_token}',
            'Accept': 'application/json',
            'Content-Type': 'application/json',
        }
        if body is not None:
            headers['Content-Length'] = str(len(body))
        return headers

    def _log_request(self, method: str, url: str, headers: Dict, data: Optional[Dict] = None):
        """Log API request details."""
        logger.info(f"AirtimeNigeria API Request: {method} {url}")
        logger.debug(f"Headers: {self._sanitize_headers(headers)}")
        if data:
            logger.debug(f"Payload: {data}")

    def _log_response(self, response: requests.Response):
        """Log API response details."""
        logger.info(f"AirtimeNigeria API Response: {response.status_code}")
        logger.debug(f"Response: {response.text}")

    def _sanitize_headers(self, headers: Dict) -> Dict:
        """Remove sensitive data from headers for logging."""
        sanitized = headers.copy()
        if 'Authorization' in sanitized:
            sanitized['Authorization'] = 'Bearer ***'
        return sanitized

    def request(
        self,
        endpoint: str,
        method: str = 'GET',
        data: Optional[Dict[str, Any]] = None
    ) -> APIResponse:
        """
        Make a request to the API.

        Args:
            endpoint: API endpoint path, resolved against the base URL
            method: HTTP method
            data: JSON body; omitted entirely when None

        Returns:
            APIResponse with the status code and decoded body

        Raises:
            RequestTimeoutError: If no response arrives within the timeout
            NetworkError: On connection-level failures
            ResponseParseError: If the body is not valid JSON
        """
        url = self._get_full_url(endpoint)
        method = method.upper()
        body = json.dumps(data).encode('utf-8') if data is not None else None
        headers = self._build_headers(body)

        self._log_request(method, url, headers, data)

        # A fresh session per call keeps concurrent calls independent
        try:
            with requests.Session() as session:
                response = session.request(
                    method,
                    url,
                    data=body,
                    headers=headers,
                    timeout=self.timeout
                )
        except requests.Timeout as e:
            logger.error(f"Request to {url} timed out after {self.timeout}s: {str(e)}")
            raise RequestTimeoutError("Request timeout")
        except requests.ConnectionError as e:
            # A stalled body read surfaces as ConnectionError(ReadTimeoutError)
            if e.args and isinstance(e.args[0], ReadTimeoutError):
                logger.error(f"Request to {url} timed out after {self.timeout}s: {str(e)}")
                raise RequestTimeoutError("Request timeout")
            logger.error(f"Request to {url} failed: {str(e)}")
            raise NetworkError(f"Request failed: {str(e)}")
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {str(e)}")
            raise NetworkError(f"Request failed: {str(e)}")

        self._log_response(response)

        try:
            parsed = response.json()
        except ValueError as e:
            raise ResponseParseError(
                f"Failed to parse response: {str(e)}",
                error_code=response.status_code,
                response_data=response.text
            )

        return APIResponse(status_code=response.status_code, data=parsed)

    def get(self, endpoint: str) -> APIResponse:
        """Make GET request."""
        return self.request(endpoint, 'GET')

    def post(self, endpoint: str, data: Optional[Dict[str, Any]] = None) -> APIResponse:
        """Make POST request."""
        return self.request(endpoint, 'POST', data)
