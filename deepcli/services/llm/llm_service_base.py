from abc import abstractmethod, ABC
from dataclasses import dataclass

from deepcli.models.completion.requests import CompletionRequest


@dataclass(frozen=True)
class RawCompletion:
    """Status code and untouched body bytes of a completion response"""
    status_code: int
    body: bytes

    @property
    def is_success_status(self) -> bool:
        return 200 <= self.status_code < 300


class LlmLogger(ABC):
    """Receives the request and response of a completion call for diagnostics"""

    @abstractmethod
    def log_request(self, model: str, request_json: str) -> None:
        pass

    @abstractmethod
    def log_response(self, model: str, response: RawCompletion) -> None:
        pass


class LlmService(ABC):
    """Abstract base class for chat-completion transports"""

    @abstractmethod
    def send_completion(
        self,
        api_key: str,
        request: CompletionRequest,
        logger: LlmLogger | None = None,
    ) -> RawCompletion:
        """
        Send exactly one completion request and return the raw response.
        Non-2xx responses are returned as-is, since the API puts a structured
        error body in them; only transport failures raise.
        """
        pass
