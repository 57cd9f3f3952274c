import logging

import httpx
from pydantic_core import PydanticSerializationError

from deepcli.core.config import DEEPSEEK_API_URL
from deepcli.core.errors import DeepCliError
from deepcli.models.completion.requests import CompletionRequest
from deepcli.services.llm.llm_service_base import LlmLogger, LlmService, RawCompletion

_log = logging.getLogger(__name__)


class RequestSerializationError(DeepCliError):
    """Raised when a completion request cannot be encoded as JSON"""
    pass


class LlmTransportError(DeepCliError):
    """Raised when the HTTP call fails before a response body is received"""
    pass


class DeepSeekLlmService(LlmService):
    """DeepSeek chat-completion transport over a single HTTPS POST"""

    def __init__(
        self,
        base_url: str = DEEPSEEK_API_URL,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = base_url
        self._timeout = timeout
        self._transport = transport

    def _serialize(self, request: CompletionRequest) -> str:
        try:
            return request.model_dump_json()
        except PydanticSerializationError as e:
            raise RequestSerializationError(f"Error creating JSON request body: {e}") from e

    def _build_headers(self, api_key: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }

    def send_completion(
        self,
        api_key: str,
        request: CompletionRequest,
        logger: LlmLogger | None = None,
    ) -> RawCompletion:
        """
        POST the request to DeepSeek and return status code and body bytes.
        """
        request_json = self._serialize(request)

        if logger:
            logger.log_request(request.model, request_json)

        _log.debug(f"Sending request to {self._url}...")

        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.post(
                    self._url,
                    content=request_json.encode("utf-8"),
                    headers=self._build_headers(api_key),
                )
        except httpx.HTTPError as e:
            raise LlmTransportError(f"Error performing HTTP request: {e}") from e

        raw = RawCompletion(status_code=response.status_code, body=response.content)
        _log.debug(f"Response received, status code: {raw.status_code}")

        if not raw.is_success_status:
            _log.debug(f"Non-2xx status {raw.status_code}, handing the body to the response parser")

        if logger:
            logger.log_response(request.model, raw)

        return raw
