import io

from deepcli.services.llm.llm_service_base import RawCompletion
from deepcli.services.llm_logging_service import LlmLoggingService, StreamLlmLogger


def test_logger_only_exists_in_verbose_mode():
    service = LlmLoggingService(io.StringIO())

    assert service.create(verbose=False) is None
    assert isinstance(service.create(verbose=True), StreamLlmLogger)


def test_request_and_response_blocks():
    stream = io.StringIO()
    llm_logger = StreamLlmLogger(stream)

    llm_logger.log_request("deepseek-chat", '{"model": "deepseek-chat"}')
    llm_logger.log_response("deepseek-chat", RawCompletion(status_code=429, body=b'{"error": {}}'))

    output = stream.getvalue()
    assert "REQUEST [" in output
    assert '{"model": "deepseek-chat"}' in output
    assert "RESPONSE [" in output
    assert "status: 429" in output
    assert '{"error": {}}' in output
