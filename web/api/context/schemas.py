"""Context API response schemas."""

from pydantic import BaseModel, Field


class ContextResponse(BaseModel):
    """Assistant context for one language."""

    success: bool = True
    knowledge_base: str = Field(alias="knowledgeBase")
    qa_pairs: str | None = Field(alias="qaPairs", default=None)
    system_prompt: str | None = Field(alias="systemPrompt", default=None)
    lang: str

    class Config:
        populate_by_name = True
