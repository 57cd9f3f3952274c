import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from deepcli.models.completion.requests import CompletionRequest  # noqa: E402
from deepcli.services.llm.llm_service_base import LlmLogger, LlmService, RawCompletion  # noqa: E402


class FakeLlmService(LlmService):
    """Records requests and replays a canned response"""

    def __init__(self, body: bytes, status_code: int = 200) -> None:
        self.response = RawCompletion(status_code=status_code, body=body)
        self.calls: list[tuple[str, CompletionRequest]] = []

    def send_completion(
        self,
        api_key: str,
        request: CompletionRequest,
        logger: LlmLogger | None = None,
    ) -> RawCompletion:
        self.calls.append((api_key, request))
        if logger:
            logger.log_request(request.model, request.model_dump_json())
            logger.log_response(request.model, self.response)
        return self.response


class TtyStream:
    """Stands in for an interactive terminal on stdin"""

    def isatty(self) -> bool:
        return True

    def read(self) -> str:
        raise AssertionError("an interactive terminal must not be read")


def completion_body(content: str = "hello", error_message: str = "") -> bytes:
    return json.dumps({
        "choices": [{"message": {"content": content}}],
        "error": {"message": error_message},
    }).encode("utf-8")


@pytest.fixture
def env_file(tmp_path, monkeypatch):
    """A .env file with an API key, and no key in the process environment"""
    monkeypatch.delenv("DEEPSEEK_API_KEY", raising=False)
    monkeypatch.delenv("DEEPCLI_TIMEOUT", raising=False)
    path = tmp_path / ".env"
    path.write_text("DEEPSEEK_API_KEY=sk-test\n", encoding="utf-8")
    return path


@pytest.fixture
def tty():
    return TtyStream()
