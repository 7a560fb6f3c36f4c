"""Prompt used to compress the knowledge base into a gist."""

GIST_SYSTEM_PROMPT = """You compress a company knowledge base for a website assistant.
Write a factual summary of at most {words} words.
Keep these VERBATIM, never paraphrased or shortened:
- the organization name
- every project name together with its exact URL
- every service name
- every team member name and role
- every social and contact URL
Do not invent facts or URLs. Do not add a preamble. Return only the summary."""


def build_messages(text: str, words: int) -> list[dict]:
    """Chat messages for one summarization call."""
    return [
        {"role": "system", "content": GIST_SYSTEM_PROMPT.format(words=words)},
        {"role": "user", "content": text},
    ]
