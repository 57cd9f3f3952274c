from pydantic import ValidationError

from deepcli.core.config import DEEPSEEK_MODEL
from deepcli.core.errors import DeepCliError
from deepcli.models.completion.requests import CompletionRequest
from deepcli.services.llm.llm_message import LlmMessage
from prompts.assistant_prompts import CODE_CONTEXT_PREFIX, PROGRAMMING_ASSISTANT_SYSTEM_MESSAGE


class InvalidRequestError(DeepCliError):
    """Raised when a completion request cannot be built from the given values"""
    pass


def build_messages(input_text: str, prompt: str) -> list[LlmMessage]:
    """
    Build the ordered conversation: persona and context first (only when there
    is input), then the user's instruction last.
    """
    messages: list[LlmMessage] = []

    if input_text:
        messages.append(LlmMessage.system(PROGRAMMING_ASSISTANT_SYSTEM_MESSAGE))
        messages.append(LlmMessage.user(CODE_CONTEXT_PREFIX + input_text))

    messages.append(LlmMessage.user(prompt))

    return messages


def build_completion_request(
    input_text: str,
    prompt: str,
    temperature: float,
    max_tokens: int,
) -> CompletionRequest:
    messages = build_messages(input_text, prompt)

    try:
        return CompletionRequest(
            model=DEEPSEEK_MODEL,
            messages=[msg.to_chat_message() for msg in messages],
            max_tokens=max_tokens,
            temperature=temperature,
            stream=False,
        )
    except ValidationError as e:
        raise InvalidRequestError(f"Invalid completion request: {e}") from e
