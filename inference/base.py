import json
import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, Dict, Optional, Tuple, Union

import httpx
from pydantic import ValidationError

from config import Config
from .errors import (
    ConfigurationError,
    HandlerError,
    InvalidRequestError,
    MethodNotAllowedError,
    MissingPromptError,
)
from .types import GenerateRequest, HandlerResponse, error_envelope

logger = logging.getLogger(__name__)

# httpx logs each request URL at INFO, and the Gemini key is part of that URL
logging.getLogger("httpx").setLevel(logging.WARNING)

ConfigProvider = Callable[[str], Optional[str]]
RawBody = Union[bytes, str, Dict[str, Any], None]


class ProviderHandler(ABC):
    """
    Provider boundary.

    One instance per upstream provider. Routes depend ONLY on handle(), which
    runs the whole pipeline for a single invocation:

        OPTIONS / method check → API key lookup → body validation
        → generate() → HandlerResponse

    Subclasses implement generate(); everything else is shared.
    """

    label: str = ""
    api_key_env: str = ""

    def __init__(
        self,
        config_provider: Optional[ConfigProvider] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout_s: Optional[float] = None,
    ):
        """
        Args:
            config_provider: Lookup function for secrets, called once per
                invocation. Defaults to Config.get (process environment).
            client: Shared httpx client. When omitted, one is opened and
                closed per invocation.
            timeout_s: Outbound timeout, defaults to Config.UPSTREAM_TIMEOUT_S.
        """
        self._config = config_provider or Config.get
        self._client = client
        self._timeout_s = timeout_s if timeout_s is not None else Config.UPSTREAM_TIMEOUT_S

    async def handle(self, method: str, body: RawBody = None) -> HandlerResponse:
        """
        Serve one inbound call.

        Never raises: handler errors become their error envelope and any other
        exception becomes a 500 internal error.
        """
        try:
            return await self._run(method.upper(), body)
        except HandlerError as e:
            return HandlerResponse(status_code=e.status_code, body=e.body)
        except Exception as e:
            logger.error(f"{self.label} handler server error: {e}", exc_info=True)
            return HandlerResponse(
                status_code=500,
                body=error_envelope("Internal server error", message=str(e)),
            )

    async def _run(self, method: str, body: RawBody) -> HandlerResponse:
        # Preflight
        if method == "OPTIONS":
            return HandlerResponse(status_code=200)

        if method != "POST":
            logger.warning(f"{self.label}: rejected {method} request")
            raise MethodNotAllowedError()

        api_key = self._config(self.api_key_env)
        if not api_key:
            logger.error(f"{self.api_key_env} environment variable is not set")
            raise ConfigurationError(self.api_key_env)

        try:
            request = self.parse_body(body)
        except InvalidRequestError as e:
            logger.warning(f"{self.label}: {e.body['message']}")
            raise

        if not request.prompt:
            logger.warning(f"{self.label}: request without prompt")
            raise MissingPromptError()

        async with self._http_client() as client:
            data = await self.generate(client, api_key, request)

        return HandlerResponse(status_code=200, body=data)

    @staticmethod
    def parse_body(body: RawBody) -> GenerateRequest:
        """Decode and validate the inbound JSON body."""
        if body is None or body == b"" or body == "":
            data: Any = {}
        elif isinstance(body, (bytes, str)):
            try:
                data = json.loads(body)
            except json.JSONDecodeError as e:
                raise InvalidRequestError(f"Body is not valid JSON: {e.msg}")
        else:
            data = body

        if not isinstance(data, dict):
            raise InvalidRequestError("Body must be a JSON object")

        try:
            return GenerateRequest.model_validate(data)
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise InvalidRequestError(f"Invalid field(s): {fields}")

    @asynccontextmanager
    async def _http_client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self._timeout_s) as client:
            yield client

    async def post_json(
        self,
        client: httpx.AsyncClient,
        url: str,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> Tuple[httpx.Response, Any]:
        """
        POST a JSON payload and decode the JSON reply.

        The body is decoded for error statuses too, since it is forwarded to
        the caller as error details. A non-JSON reply raises and ends up as
        an internal error.
        """
        response = await client.post(
            url,
            json=payload,
            headers={"Content-Type": "application/json", **(headers or {})},
            params=params,
            timeout=self._timeout_s,
        )
        return response, response.json()

    @abstractmethod
    async def generate(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        request: GenerateRequest,
    ) -> Dict[str, Any]:
        """
        Call the provider and return the normalized output envelope.

        Raises:
            UpstreamError: the provider answered with a non-2xx status
        """
        raise NotImplementedError
