"""Pydantic models describing the Anthropic Messages API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

WEB_SEARCH_RESULT_BLOCK = "web_search_tool_result"


class AnthropicBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ContentBlock(AnthropicBaseModel):
    type: str
    text: str | None = None


class Usage(AnthropicBaseModel):
    input_tokens: int = 0
    output_tokens: int = 0


class MessagesResponse(AnthropicBaseModel):
    id: str | None = None
    model: str | None = None
    content: list[ContentBlock] = Field(default_factory=list)
    stop_reason: str | None = None
    usage: Usage | None = None

    @property
    def text(self) -> str:
        return "\n".join(
            block.text for block in self.content if block.type == "text" and block.text is not None
        )

    @property
    def search_count(self) -> int:
        return sum(1 for block in self.content if block.type == WEB_SEARCH_RESULT_BLOCK)


class ErrorDetail(AnthropicBaseModel):
    type: str = "error"
    message: str = ""


class ErrorResponse(AnthropicBaseModel):
    error: ErrorDetail
