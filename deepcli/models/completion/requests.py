from typing import Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"] = Field(..., description="Message role")
    content: str = Field(..., description="Message content")


class CompletionRequest(BaseModel):
    model: str = Field(..., min_length=1, description="Model identifier to use for completion")
    messages: list[ChatMessage] = Field(..., min_length=1, description="Ordered conversation sent to the model")
    max_tokens: int = Field(..., gt=0, description="Maximum number of tokens to generate")
    temperature: float = Field(..., ge=0.0, le=2.0, description="Sampling temperature")
    stream: Literal[False] = Field(False, description="Streaming is never requested")
