"""
Vimeo API Client
Thin async wrapper around the Vimeo REST API using a single bearer token
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.vimeo.com"
DEFAULT_API_VERSION = "3.4"


@dataclass
class VimeoResponse:
    """Status code and parsed JSON body of one Vimeo API call"""

    status: int
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def parse_body(raw: bytes) -> Dict[str, Any]:
    """
    Parse a response body defensively

    Empty bodies, malformed JSON and JSON values that are not objects
    all resolve to an empty dict.
    """
    if not raw:
        return {}

    try:
        parsed = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        logger.debug(f"Ignoring unparseable response body: {e}")
        return {}

    if not isinstance(parsed, dict):
        logger.debug(f"Ignoring non-object response body: {type(parsed).__name__}")
        return {}

    return parsed


class VimeoClient:
    """
    Vimeo API client

    Every request carries the bearer token and the versioned Accept header.
    Non-2xx responses are returned as data; only transport failures raise.
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout_seconds: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize Vimeo API client

        Args:
            access_token: Vimeo personal access token
            base_url: API host, including scheme
            api_version: Version pinned in the Accept header
            timeout_seconds: Per-request timeout
            http_client: Pre-built httpx client (used by tests)
        """
        if not access_token:
            raise ValueError("Vimeo access token is required")

        self.base_url = base_url.rstrip("/")
        self.headers = {
            "Authorization": f"bearer {access_token}",
            "Accept": f"application/vnd.vimeo.*+json;version={api_version}",
            "Content-Type": "application/json",
        }
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout_seconds)
        logger.info(f"✅ Vimeo API client initialized ({self.base_url}, version {api_version})")

    @classmethod
    def from_config(cls, vimeo_config, http_client: Optional[httpx.AsyncClient] = None) -> "VimeoClient":
        """Build a client from a VimeoAPIConfig section"""
        return cls(
            access_token=vimeo_config.access_token,
            base_url=vimeo_config.base_url,
            api_version=vimeo_config.api_version,
            timeout_seconds=vimeo_config.timeout_seconds,
            http_client=http_client
        )

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Any] = None
    ) -> VimeoResponse:
        """
        Perform one API request

        Args:
            path: Endpoint path including any query string, e.g. "/me/videos?page=1"
            method: HTTP method
            body: JSON-serializable request body (omitted when None)

        Returns:
            VimeoResponse with the status code and parsed body

        Raises:
            httpx.TransportError: On connection-level failure or timeout
        """
        url = f"{self.base_url}{path}"
        content = json.dumps(body).encode("utf-8") if body is not None else None

        logger.debug(f"{method} {path}")
        response = await self._http.request(
            method,
            url,
            headers=self.headers,
            content=content
        )
        result = VimeoResponse(status=response.status_code, data=parse_body(response.content))
        logger.debug(f"{method} {path} -> {result.status}")
        return result

    async def aclose(self) -> None:
        """Release the underlying connection pool if this client created it"""
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "VimeoClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
