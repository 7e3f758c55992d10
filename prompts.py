SEPARATOR = "####"

SYSTEM_PROMPT_TEMPLATE = """You are a helpful AI that generates educational flashcards. You MUST generate EXACTLY {count} flashcards. Each flashcard must be clearly separated by "{sep}". The output format must be:

Question: <question text>
Answer: <answer text>
{sep}
Question: <question text>
Answer: <answer text>
{sep}
etc.

You must ensure you generate exactly {count} flashcards, no more and no less."""

USER_PROMPT_TEMPLATE = """Generate exactly {count} flashcards based on the following text. Make sure each flashcard has a clear question and answer.

Text: {text}"""

# Stricter variant for the single shortfall retry.
RETRY_SYSTEM_PROMPT_TEMPLATE = """You MUST generate EXACTLY {count} flashcards. No more, no less. Each flashcard must have Question: and Answer: clearly marked. Each flashcard must be separated by "{sep}" on its own line."""

RETRY_USER_PROMPT_TEMPLATE = """Generate EXACTLY {count} flashcards based on this text. I need EXACTLY {count} flashcards separated by "{sep}".

Text: {text}"""


def build_prompts(text: str, count: int) -> tuple[str, str]:
    """(system, user) prompt pair for the first generation pass."""
    return (
        SYSTEM_PROMPT_TEMPLATE.format(count=count, sep=SEPARATOR),
        USER_PROMPT_TEMPLATE.format(count=count, text=text),
    )


def build_retry_prompts(text: str, count: int) -> tuple[str, str]:
    return (
        RETRY_SYSTEM_PROMPT_TEMPLATE.format(count=count, sep=SEPARATOR),
        RETRY_USER_PROMPT_TEMPLATE.format(count=count, sep=SEPARATOR, text=text),
    )
