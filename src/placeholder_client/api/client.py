"""
API Client Module

Generic HTTP client for the JSONPlaceholder API. Builds request URLs from
a base URL and an endpoint, issues GET/POST requests with httpx and decodes
the JSON response into the requested type.

Every outcome is returned as a Result; nothing is raised past the client.
"""

import logging
from typing import Any, AsyncIterator, Dict, List, Optional, Type, TypeVar

import httpx

from ..config import APIConfig
from .codec import DecodingError, EncodingError, JSONDecoder, JSONEncoder
from .endpoints import CommentDetail, Comments, Endpoint, Posts
from .errors import APIError
from .models import Comment, Post
from .result import Failure, Result, Success


logger = logging.getLogger(__name__)

T = TypeVar("T")

Parameters = Dict[str, str]


class ApiClient:
    """
    HTTP client for the JSONPlaceholder API.

    Three ways to issue a GET:
    - get(): blocking, returns a Result
    - get_async(): coroutine, resolves once with a Result
    - get_stream(): async iterator that emits exactly one Result

    Fields are fixed at construction. A transport can be injected for
    tests (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        api_config: Optional[APIConfig] = None,
        decoder: Optional[JSONDecoder] = None,
        encoder: Optional[JSONEncoder] = None,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the API client.

        Args:
            api_config: Base URL, timeout and user agent (defaults to APIConfig()).
            decoder: Response decoder (defaults to JSONDecoder()).
            encoder: Request body encoder (defaults to JSONEncoder()).
            transport: Transport for blocking requests.
            async_transport: Transport for async requests. Falls back to
                ``transport`` when that also supports async use.
        """
        api_config = api_config or APIConfig()
        self._base_url = api_config.base_url or None
        self._timeout = api_config.timeout_seconds
        self._headers = {"User-Agent": api_config.user_agent}
        self._decoder = decoder or JSONDecoder()
        self._encoder = encoder or JSONEncoder()
        self._transport = transport
        if async_transport is None and isinstance(transport, httpx.AsyncBaseTransport):
            async_transport = transport
        self._async_transport = async_transport
        logger.info(f"ApiClient initialized (base_url: {self._base_url})")

    @property
    def base_url(self) -> Optional[str]:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def decoder(self) -> JSONDecoder:
        return self._decoder

    def build_url(self, endpoint: Endpoint, parameters: Optional[Parameters] = None) -> httpx.URL:
        """
        Build the full request URL for an endpoint.

        Args:
            endpoint: Route to target.
            parameters: Optional query-string parameters.

        Returns:
            The base URL joined with the endpoint path, plus the query string.

        Raises:
            APIError: INVALID_REQUEST if the base URL is unset or malformed.
        """
        if not self._base_url:
            raise APIError.invalid_request("base URL is not set")

        joined = f"{self._base_url.rstrip('/')}/{endpoint.path().lstrip('/')}"
        try:
            url = httpx.URL(joined)
        except httpx.InvalidURL as e:
            raise APIError.invalid_request(f"invalid URL {joined!r}: {e}") from e
        if not url.scheme or not url.host:
            raise APIError.invalid_request(f"base URL is not absolute: {self._base_url!r}")

        if parameters:
            url = url.copy_merge_params(parameters)
        return url

    # -- GET ---------------------------------------------------------------

    def get(
        self,
        endpoint: Endpoint,
        response_type: Type[T],
        parameters: Optional[Parameters] = None,
    ) -> Result:
        """
        Issue a GET and decode the response body.

        Args:
            endpoint: Route to fetch.
            response_type: Type to decode the body into (e.g. ``List[Comment]``).
            parameters: Optional query-string parameters.

        Returns:
            Success with the decoded value, or Failure with an APIError.
        """
        try:
            url = self.build_url(endpoint, parameters)
        except APIError as e:
            return self._failure("GET", endpoint, e)

        logger.info(f"GET {url}")
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(url, headers=self._headers)
        except httpx.RequestError as e:
            return self._failure("GET", endpoint, APIError.network_error(_describe_error(e)))

        return self._handle_response("GET", endpoint, response, response_type)

    async def get_async(
        self,
        endpoint: Endpoint,
        response_type: Type[T],
        parameters: Optional[Parameters] = None,
    ) -> Result:
        """Non-blocking GET. Resolves exactly once with a Result."""
        try:
            url = self.build_url(endpoint, parameters)
        except APIError as e:
            return self._failure("GET", endpoint, e)

        logger.info(f"GET {url} (async)")
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._async_transport) as client:
                response = await client.get(url, headers=self._headers)
        except httpx.RequestError as e:
            return self._failure("GET", endpoint, APIError.network_error(_describe_error(e)))

        return self._handle_response("GET", endpoint, response, response_type)

    async def get_stream(
        self,
        endpoint: Endpoint,
        response_type: Type[T],
        parameters: Optional[Parameters] = None,
    ) -> AsyncIterator[Result]:
        """
        Stream form of GET.

        Emits a single Result and then completes. Failures are emitted as
        values; iteration itself never raises.
        """
        yield await self.get_async(endpoint, response_type, parameters)

    # -- POST --------------------------------------------------------------

    def post(self, endpoint: Endpoint, body: Any, response_type: Type[T]) -> Result:
        """
        Send ``body`` as JSON and decode the response.

        Args:
            endpoint: Route to post to.
            body: A pydantic model, dataclass, mapping, list or JSON primitive.
            response_type: Type to decode the response body into.

        Returns:
            Success with the decoded value, or Failure with an APIError.
            A body that cannot be serialized gives INVALID_REQUEST and no
            request is sent.
        """
        try:
            url, payload = self._prepare_post(endpoint, body)
        except APIError as e:
            return self._failure("POST", endpoint, e)

        logger.info(f"POST {url} ({len(payload)} bytes)")
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.post(url, content=payload, headers=self._post_headers())
        except httpx.RequestError as e:
            return self._failure("POST", endpoint, APIError.network_error(_describe_error(e)))

        return self._handle_response("POST", endpoint, response, response_type)

    async def post_async(self, endpoint: Endpoint, body: Any, response_type: Type[T]) -> Result:
        """Non-blocking POST. Same outcomes as post()."""
        try:
            url, payload = self._prepare_post(endpoint, body)
        except APIError as e:
            return self._failure("POST", endpoint, e)

        logger.info(f"POST {url} ({len(payload)} bytes, async)")
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._async_transport) as client:
                response = await client.post(url, content=payload, headers=self._post_headers())
        except httpx.RequestError as e:
            return self._failure("POST", endpoint, APIError.network_error(_describe_error(e)))

        return self._handle_response("POST", endpoint, response, response_type)

    # -- Convenience -------------------------------------------------------

    def fetch_posts(self, max_posts: Optional[int] = None) -> Result:
        """Fetch posts, optionally limited server-side."""
        parameters = {"_limit": str(max_posts)} if max_posts is not None else None
        return self.get(Posts(), List[Post], parameters)

    def fetch_comments(self, post_id: Optional[int] = None) -> Result:
        """Fetch all comments, or only those of one post."""
        parameters = {"postId": str(post_id)} if post_id is not None else None
        return self.get(Comments(), List[Comment], parameters)

    def fetch_comment(self, comment_id: int) -> Result:
        """Fetch a single comment by id."""
        return self.get(CommentDetail(comment_id), Comment)

    def test_connection(self) -> bool:
        """
        Check that the API is reachable.

        Returns:
            True if a minimal posts request succeeds, False otherwise.
        """
        result = self.get(Posts(), List[Any], {"_limit": "1"})
        if result.is_failure:
            logger.warning(f"Connection test failed: {result.error}")
        return result.is_success

    # -- Internals ---------------------------------------------------------

    def _prepare_post(self, endpoint: Endpoint, body: Any):
        url = self.build_url(endpoint)
        try:
            payload = self._encoder.encode(body)
        except EncodingError as e:
            raise APIError.invalid_request(f"cannot serialize body: {e}") from e
        return url, payload

    def _post_headers(self) -> Dict[str, str]:
        return {**self._headers, "Content-Type": "application/json"}

    def _handle_response(
        self,
        method: str,
        endpoint: Endpoint,
        response: httpx.Response,
        response_type: Any,
    ) -> Result:
        if not response.is_success:
            return self._failure(method, endpoint, APIError.no_response(f"HTTP {response.status_code}"))

        if not response.content:
            return self._failure(method, endpoint, APIError.invalid_request("empty response body"))

        try:
            value = self._decoder.decode(response_type, response.content)
        except DecodingError as e:
            return self._failure(method, endpoint, APIError.json_decoding_error(str(e)))

        logger.debug(f"{method} {endpoint.path()} decoded {len(response.content)} bytes")
        return Success(value)

    def _failure(self, method: str, endpoint: Endpoint, error: APIError) -> Failure:
        logger.warning(f"{method} {endpoint.path()} failed: {error}")
        return Failure(error)


def _describe_error(error: Exception) -> str:
    message = str(error)
    name = type(error).__name__
    return f"{name}: {message}" if message else name
