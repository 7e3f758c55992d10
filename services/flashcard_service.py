"""Flashcard generation pipeline: prompt, parse, retry once on shortfall, reconcile."""

from typing import Callable

from errors import FlashcardGenerationError
from logger_utils import log_event
from models import Flashcard
from prompts import build_prompts, build_retry_prompts
from utils import ResponseShape, is_placeholder, parse_cards, reconcile_count

Completer = Callable[[str, str], str]
EventSink = Callable[..., None]


def _call(complete: Completer, prompts: tuple[str, str], stage: str, emit: EventSink) -> str:
    try:
        content = complete(*prompts)
    except Exception as e:
        emit("generation_failed", stage=stage, error=str(e), error_type=type(e).__name__)
        raise FlashcardGenerationError(f"Error generating flashcards ({stage}): {e}") from e
    emit("response_received", stage=stage, length=len(content))
    return content


def generate_flashcards(text: str, count: int, complete: Completer,
                        on_event: EventSink | None = None) -> list[Flashcard]:
    """
    Generate exactly `count` flashcards from `text`.

    `complete(system_prompt, user_prompt)` is the LLM collaborator. At most two
    calls are made: the first pass and, when it parses short, one stricter retry
    whose output is split on the separator only. Any remaining shortfall is
    padded with placeholder cards. Collaborator failures raise
    FlashcardGenerationError.
    """
    emit = on_event or log_event

    content = _call(complete, build_prompts(text, count), "first_pass", emit)
    cards = parse_cards(content, on_event=emit, stage="first_pass", requested=count)

    if len(cards) < count:
        emit("retry_requested", got=len(cards), need=count)
        content = _call(complete, build_retry_prompts(text, count), "retry", emit)
        extra = parse_cards(content, ResponseShape.DELIMITED, on_event=emit,
                            stage="retry", requested=count)
        cards = cards + extra
        emit("retry_merged", added=len(extra), total=len(cards))

    if len(cards) > count:
        emit("cards_trimmed", had=len(cards), needed=count)
    elif len(cards) < count:
        emit("cards_padded", had=len(cards), needed=count, placeholders=count - len(cards))

    result = reconcile_count(cards, count)
    emit("generation_complete", count=len(result),
         placeholders=sum(1 for c in result if is_placeholder(c)))
    return result
