"""Context API views - thin layer over the context service."""

from app.container import Container
from web.api.errors import validate_lang

from .schemas import ContextResponse


async def get_context(container: Container, lang: str) -> tuple[ContextResponse, str]:
    """Get the assistant context and the tier it came from."""
    validate_lang(lang, container.languages)
    bundle = await container.context.get_context(lang)

    response = ContextResponse(
        knowledge_base=bundle.knowledge_base,
        qa_pairs=bundle.qa_pairs,
        system_prompt=bundle.system_prompt,
        lang=bundle.lang,
    )
    return response, bundle.source
