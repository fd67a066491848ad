"""
Pydantic models for the Groq chat-completion wire protocol.
"""

from pydantic import BaseModel, Field, SecretStr


class ChatMessage(BaseModel):
    """A single role-tagged message."""

    role: str = Field(..., description="Message role: 'system', 'user' or 'assistant'")
    content: str = Field(..., description="Message content")


class ChatRequest(BaseModel):
    """Request body for POST /chat/completions."""

    messages: list[ChatMessage] = Field(
        ..., description="System instructions first, then the user prompt"
    )
    model: str = Field(..., description="Model identifier")
    temperature: float = 0.5
    max_tokens: int = 2048
    top_p: float = 1
    stop: str | None = None
    stream: bool = False

    # Sent as the bearer token, never as part of the body.
    api_key: SecretStr = Field(..., exclude=True)


class ChatChoice(BaseModel):
    message: ChatMessage


class ChatUsage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ChatResponse(BaseModel):
    """Response body from POST /chat/completions."""

    choices: list[ChatChoice] = Field(default_factory=list)
    usage: ChatUsage | None = None
