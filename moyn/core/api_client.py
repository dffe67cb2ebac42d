"""API client for the moyn blogging service."""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote, urlparse

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from moyn import __version__
from moyn.core.errors import ServerError, TransportError, ValidationError, error_for_status
from moyn.core.models import Post, PostSummary, Session, Space, Visibility

logger = logging.getLogger(__name__)

TOKEN_PREFIX = "moyn_"


class APIClient:
    """HTTP client bound to one session. Every call is a single round trip."""

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        session: Session,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.session = session
        self.base_url = session.api_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout,
                transport=self.transport,
                headers={
                    "Authorization": f"Bearer {self.session.api_token}",
                    "Accept": "application/json",
                    "User-Agent": f"moyn-cli/{__version__}",
                },
            )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _request(self, method: str, endpoint: str, json: Optional[dict] = None) -> httpx.Response:
        """Send one request and raise the matching error for non-2xx answers."""
        url = f"{self.base_url}{endpoint}"

        try:
            response = self.client.request(method, url, json=json)
        except httpx.ConnectError as e:
            raise TransportError(f"Connection to {self.base_url} failed: {e}") from e
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timed out after {self.timeout:g}s") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request failed: {type(e).__name__}: {e}") from e

        logger.debug("%s %s -> %s", method, url, response.status_code)

        if not response.is_success:
            raise error_for_status(response.status_code, _error_detail(response))
        return response

    def _parse(self, response: httpx.Response, key: str, model: type[BaseModel]) -> Any:
        """Pull ``key`` out of a JSON response and validate it against ``model``."""
        try:
            data = response.json()
        except ValueError as e:
            raise ServerError("Could not parse response: not JSON", response.status_code) from e

        if not isinstance(data, dict) or key not in data:
            raise ServerError(f"Could not parse response: missing '{key}'", response.status_code)

        value = data[key]
        try:
            if isinstance(value, list):
                return [model.model_validate(item) for item in value]
            return model.model_validate(value)
        except PydanticValidationError as e:
            raise ServerError(f"Could not parse response: {e}", response.status_code) from e

    # Auth
    def verify(self) -> None:
        """Check that the token is accepted by the server."""
        self._request("GET", "/api/v1/posts")

    # Posts
    def publish(self, post: Post) -> PostSummary:
        """Create a post, in its space when the post names one."""
        if post.space:
            endpoint = f"/api/v1/spaces/{quote(post.space, safe='')}/posts"
        else:
            endpoint = "/api/v1/posts"
        response = self._request("POST", endpoint, json=post.to_payload())
        return self._parse(response, "post", PostSummary)

    def list_posts(self) -> list[PostSummary]:
        response = self._request("GET", "/api/v1/posts")
        return self._parse(response, "posts", PostSummary)

    def delete_post(self, post_id: int) -> None:
        self._request("DELETE", f"/api/v1/posts/{post_id}")

    # Spaces
    def list_spaces(self) -> list[Space]:
        response = self._request("GET", "/api/v1/spaces")
        return self._parse(response, "spaces", Space)

    def create_space(
        self,
        name: str,
        visibility: Visibility = Visibility.PRIVATE,
        slug: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Space:
        space: dict[str, Any] = {"name": name, "visibility": Visibility(visibility).value}
        if slug:
            space["slug"] = slug
        if description:
            space["description"] = description
        response = self._request("POST", "/api/v1/spaces", json={"space": space})
        return self._parse(response, "space", Space)

    def show_space(self, slug: str) -> Space:
        response = self._request("GET", f"/api/v1/spaces/{quote(slug, safe='')}")
        return self._parse(response, "space", Space)


def normalize_url(url: str) -> str:
    url = url.strip().rstrip("/")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError(f"Invalid API URL '{url}'. Expected http(s)://host")
    return url


def login(
    token: str,
    base_url: str,
    verify: bool = True,
    timeout: float = APIClient.DEFAULT_TIMEOUT,
    transport: Optional[httpx.BaseTransport] = None,
) -> Session:
    """Validate a token and build the session to store.

    The token must look like ``moyn_...``. Unless ``verify`` is False, one
    authenticated request confirms the server accepts it.
    """
    token = token.strip()
    if not token.startswith(TOKEN_PREFIX):
        raise ValidationError(f"Invalid token format. Token should start with '{TOKEN_PREFIX}'")

    session = Session(api_token=token, api_url=normalize_url(base_url))

    if verify:
        with APIClient(session, timeout=timeout, transport=transport) as api:
            api.verify()
    return session


def _error_detail(response: httpx.Response) -> Optional[str]:
    """Best-effort error text from an error response."""
    try:
        data = response.json()
    except ValueError:
        text = response.text.strip()
        return text[:200] or None

    if not isinstance(data, dict):
        return str(data)

    for key in ("error", "message", "errors"):
        value = data.get(key)
        if not value:
            continue
        if isinstance(value, list):
            return "; ".join(str(v) for v in value)
        if isinstance(value, dict):
            return "; ".join(
                f"{k} {', '.join(map(str, v)) if isinstance(v, list) else v}"
                for k, v in value.items()
            )
        return str(value)
    return None
