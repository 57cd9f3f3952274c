from dataclasses import dataclass
from typing import Any

from deepcli.models.completion.requests import ChatMessage


@dataclass(frozen=True)
class LlmMessage:
    role: str
    content: str

    @staticmethod
    def user(content: str) -> "LlmMessage":
        return LlmMessage(role="user", content=content)

    @staticmethod
    def system(content: str) -> "LlmMessage":
        return LlmMessage(role="system", content=content)

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role,
            "content": self.content,
        }

    def to_chat_message(self) -> ChatMessage:
        return ChatMessage.model_validate(self.to_dict())
