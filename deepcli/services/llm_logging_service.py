from datetime import datetime, timezone
from typing import TextIO

from deepcli.services.llm.llm_service_base import LlmLogger, RawCompletion


class StreamLlmLogger(LlmLogger):
    """Writes completion requests and raw responses to a diagnostic stream"""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def log_request(self, model: str, request_json: str) -> None:
        """Log an LLM request"""
        timestamp = datetime.now(timezone.utc).isoformat()

        self.stream.write(f"REQUEST [{timestamp}]\n")
        self.stream.write(f"Model: {model}\n")
        self.stream.write(f"Request body:\n{request_json}\n")
        self.stream.write("\n")
        self.stream.flush()

    def log_response(self, model: str, response: RawCompletion) -> None:
        """Log an LLM response"""
        timestamp = datetime.now(timezone.utc).isoformat()

        self.stream.write(f"RESPONSE [{timestamp}]\n")
        self.stream.write(f"Model: {model} (status: {response.status_code})\n")
        self.stream.write(f"Raw response:\n{response.body.decode('utf-8', errors='replace')}\n")
        self.stream.write("\n")
        self.stream.flush()


class LlmLoggingService:
    """Service for creating LLM loggers"""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def create(self, verbose: bool) -> StreamLlmLogger | None:
        """Request and response bodies are only logged in verbose mode"""
        if not verbose:
            return None
        return StreamLlmLogger(self.stream)
