from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class ChoiceMessageBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: str | None = None


class ChoiceBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: ChoiceMessageBody = Field(default_factory=ChoiceMessageBody)


class ErrorBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str | None = None


class CompletionResponseBody(BaseModel):
    """
    Wire shape of a chat-completion response.
    `choices` and `error` may both be present; see `to_result` for precedence.
    """
    model_config = ConfigDict(extra="ignore")

    choices: list[ChoiceBody] | None = None
    error: ErrorBody | None = None

    def to_result(self) -> "CompletionResult":
        """Classify the body; a non-empty error message wins over any choices"""
        if self.error is not None and self.error.message:
            return CompletionApiError(message=self.error.message)

        if self.choices:
            return CompletionSuccess(content=self.choices[0].message.content or "")

        return CompletionEmpty()


@dataclass(frozen=True)
class CompletionSuccess:
    content: str


@dataclass(frozen=True)
class CompletionApiError:
    message: str


@dataclass(frozen=True)
class CompletionEmpty:
    pass


CompletionResult = CompletionSuccess | CompletionApiError | CompletionEmpty
