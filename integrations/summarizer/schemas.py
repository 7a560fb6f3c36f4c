"""Chat completions response schemas (OpenAI-compatible)."""

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """Message returned by the model."""

    role: str = "assistant"
    content: str | None = None


class ChatChoice(BaseModel):
    """One completion choice."""

    index: int = 0
    message: ChatMessage
    finish_reason: str | None = None


class ChatCompletionResponse(BaseModel):
    """Chat completions body; at least one choice is required."""

    id: str | None = None
    model: str | None = None
    choices: list[ChatChoice] = Field(min_length=1)
