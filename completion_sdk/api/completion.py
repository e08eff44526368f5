import logging
from typing import Any, Optional
from completion_sdk.core.client import APIClient
from completion_sdk.core.config import APISettings
from completion_sdk.schemas.completion import CompletionRequest, CompletionResponse

logger = logging.getLogger(__name__)

COMPLETIONS_PATH = "/completions"


class Completion:
    """Reusable completion profile.

    Holds a request template in which only the prompt changes between
    ``execute`` calls. The template is an immutable value: each call swaps
    in a new copy and posts that snapshot, so concurrent calls never share
    a partially updated request.

    A client passed in by the caller stays open on ``aclose``; only a client
    built here is closed.
    """

    def __init__(
        self,
        settings: APISettings,
        base: Optional[CompletionRequest] = None,
        *,
        client: Optional[APIClient] = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or APIClient(settings)
        self._base = base or CompletionRequest()

    @property
    def template(self) -> CompletionRequest:
        return self._base

    def set_template(self, request: CompletionRequest) -> None:
        self._base = request

    async def execute(self, prompt: str) -> CompletionResponse:
        self._base = self._base.with_changes(prompt=prompt)
        return await self._post(self._base)

    async def execute_with(self, request: CompletionRequest) -> CompletionResponse:
        return await self._post(request)

    async def _post(self, request: CompletionRequest) -> CompletionResponse:
        logger.debug(
            f"Requesting {request.n} completion(s) from {request.engine.to_name()}"
        )
        response = await self._client.post(
            COMPLETIONS_PATH, request.to_wire(), CompletionResponse
        )
        logger.info(
            f"Completion {response.id} finished "
            f"(total_tokens={response.usage.total_tokens})"
        )
        return response

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "Completion":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
