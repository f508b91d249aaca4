from typing import Any, Dict, Optional

import requests
import urllib3

from .logging import get_logger
from .exceptions import SpotifyAPIError, SpotifyAuthenticationError

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.spotify.com/v1"

SUPPORTED_METHODS = ("GET", "POST", "PUT")


class SpotifyClient:
    """
    HTTP client for the Spotify Web API.

    The client holds an access token and a ``requests.Session`` and performs
    single requests on behalf of the endpoint functions in
    :mod:`spotify_web_api.personalization` and :mod:`spotify_web_api.player`.
    It returns the raw ``requests.Response``; status handling and decoding are
    left to :func:`spotify_web_api.responses.build_response`.

    Note:
        The access token is used as given. Obtaining and refreshing tokens
        (OAuth authorization code or client credentials flows) is up to the caller;
        an expired token shows up as a 401 error response.
    """

    def __init__(
        self,
        access_token,
        base_url=DEFAULT_BASE_URL,
        timeout=None,
        verify_ssl=True,
        session=None,
    ):
        """
        Initialize the Spotify client.

        Args:
            access_token: OAuth access token sent as a bearer token on every request.
            base_url: Base URL of the Web API. Defaults to ``https://api.spotify.com/v1``.
            timeout: Optional request timeout in seconds, passed to requests as is.
            verify_ssl: Whether to verify SSL certificates. Can be:
                       - True: Verify SSL certificates (default, recommended)
                       - False: Disable verification (insecure, not recommended)
                       - str: Path to a CA bundle file or directory with certificates of trusted CAs
            session: Optional existing ``requests.Session`` to send requests with.

        Raises:
            SpotifyAuthenticationError: If no access token is given.
        """
        if not access_token:
            raise SpotifyAuthenticationError("An access token is required")

        logger.debug(f"Initializing SpotifyClient with base URL: {base_url}")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.session = session if session is not None else requests.Session()
        self._access_token = access_token

        if not verify_ssl:
            logger.warning(
                "SSL certificate verification is disabled. This is not recommended for production use."
            )
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        """Close the underlying HTTP session."""
        self.session.close()

    def set_access_token(self, access_token):
        """
        Replace the access token used for subsequent requests.

        Raises:
            SpotifyAuthenticationError: If the token is empty.
        """
        if not access_token:
            raise SpotifyAuthenticationError("An access token is required")
        self._access_token = access_token

    def _auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._access_token}"}

    def _invoke_api_call(
        self,
        method: str,
        url: str,
        json_payload: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        """
        Make an API request with the specified method.

        Unlike ``requests``' ``raise_for_status`` flow, HTTP error statuses are
        not raised here: the response is handed back so the caller can pattern
        match on the status code.

        Args:
            method: HTTP method ('GET', 'POST' or 'PUT').
            url: The full URL for the API endpoint, query string included.
            json_payload: Optional dictionary to send as JSON body.
            headers: Optional dictionary of additional headers.

        Returns:
            requests.Response: The response object from the requests library.

        Raises:
            SpotifyAPIError: If the request could not be sent or no response arrived.
            ValueError: If an unsupported HTTP method is provided.
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        request_headers = self._auth_headers()
        if headers:
            request_headers.update(headers)

        request_kwargs = {
            "headers": request_headers,
            "verify": self.verify_ssl,
            "timeout": self.timeout,
        }
        if json_payload is not None:
            request_kwargs["json"] = json_payload

        logger.info(f"API {method} request to {url}")
        try:
            response = self.session.request(method, url, **request_kwargs)
        except requests.exceptions.RequestException as e:
            error_msg = f"API {method} request to {url} failed: {str(e)}"
            logger.error(error_msg)
            raise SpotifyAPIError(error_msg) from e

        logger.debug(
            f"API {method} request to {url} returned status {response.status_code}")
        return response

    def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> requests.Response:
        """Send a GET request. See :meth:`_invoke_api_call`."""
        return self._invoke_api_call("GET", url, headers=headers)

    def put(
        self,
        url: str,
        json_payload: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        """Send a PUT request with an optional JSON body. See :meth:`_invoke_api_call`."""
        return self._invoke_api_call("PUT", url, json_payload=json_payload, headers=headers)

    def post(
        self,
        url: str,
        json_payload: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        """Send a POST request with an optional JSON body. See :meth:`_invoke_api_call`."""
        return self._invoke_api_call("POST", url, json_payload=json_payload, headers=headers)
