import httpx
import logging
from typing import Any, Optional, Type, TypeVar
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError
from pydantic_core import PydanticSerializationError
from completion_sdk.core.config import APISettings
from completion_sdk.core.errors import (
    APIError,
    DecodingError,
    EncodingError,
    RequestFailedError,
    RequestTimeoutError,
    TransportError,
)
from completion_sdk.core.logging import request_context
from completion_sdk.schemas.completion import APIErrorBody

logger = logging.getLogger(__name__)

T = TypeVar("T")


class APIClient:
    """Authenticated JSON-over-HTTPS client bound to one set of settings.

    Holds no per-call state, so a single instance can serve concurrent
    calls from many tasks.
    """

    def __init__(
        self,
        settings: APISettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout),
            transport=transport,
        )

    @property
    def settings(self) -> APISettings:
        return self._settings

    async def post(self, path: str, body: Any, response_type: Type[T]) -> T:
        """POST ``body`` as JSON to ``host + path`` and decode a 200 response."""
        url = f"{self._settings.host}{path}"

        with request_context() as request_id:
            payload = self._encode(body)

            headers = {
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self._settings.secret_key}",
                "X-Request-ID": request_id,
            }
            if self._settings.organization_id:
                headers["OpenAI-Organization"] = self._settings.organization_id

            logger.debug(f"POST {url}")
            try:
                response = await self._client.post(url, json=payload, headers=headers)
            except httpx.TimeoutException as e:
                logger.warning(
                    f"Request to {url} timed out after {self._settings.request_timeout}s"
                )
                raise RequestTimeoutError(
                    f"Request timed out after {self._settings.request_timeout} seconds",
                    original=e,
                ) from e
            except httpx.HTTPError as e:
                logger.error(f"Request to {url} failed: {e}")
                raise TransportError(f"Request failed: {e}", original=e) from e

            logger.debug(f"Response from {url}: {response.status_code}")
            return self._handle_response(response, response_type)

    def _handle_response(self, response: httpx.Response, response_type: Type[T]) -> T:
        if response.status_code == httpx.codes.OK:
            try:
                return TypeAdapter(response_type).validate_json(response.content)
            except ValidationError as e:
                logger.warning(
                    f"Could not decode response into {getattr(response_type, '__name__', response_type)}"
                )
                raise DecodingError(
                    f"Invalid response body: {e.error_count()} error(s)",
                    original=e,
                    body=response.text,
                ) from e

        logger.warning(f"API returned error: {response.status_code}")
        raise self._failure(response)

    @staticmethod
    def _failure(response: httpx.Response) -> RequestFailedError:
        try:
            detail = APIErrorBody.model_validate_json(response.content).error
        except ValidationError:
            return RequestFailedError(response.status_code)
        return APIError(
            response.status_code,
            detail.message,
            error_type=detail.type,
            param=detail.param,
            code=str(detail.code) if detail.code is not None else None,
        )

    @staticmethod
    def _encode(body: Any) -> Any:
        try:
            if isinstance(body, BaseModel):
                return body.model_dump(mode="json", by_alias=True, exclude_none=True)
            return TypeAdapter(type(body)).dump_python(body, mode="json")
        except (PydanticSerializationError, PydanticSchemaGenerationError, TypeError, ValueError) as e:
            logger.error(f"Could not encode {type(body).__name__} request body: {e}")
            raise EncodingError(
                f"Request body is not JSON serializable: {e}", original=e
            ) from e

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
