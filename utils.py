import re
from enum import Enum

from models import Flashcard
from prompts import SEPARATOR
from logger_utils import logger

_SPLIT_RE = re.compile(re.escape(SEPARATOR) + r"\s*")
_PAIR_RE = re.compile(r"Question:\s*(.+?)\s*Answer:\s*(.+?)(?=Question:|\Z)", re.IGNORECASE | re.DOTALL)
_QUESTION_RE = re.compile(r"Question:(.*?)(?=Answer:|\Z)", re.IGNORECASE | re.DOTALL)
_ANSWER_RE = re.compile(r"Answer:(.*)", re.IGNORECASE | re.DOTALL)

PLACEHOLDER_QUESTION = "Flashcard {index} (Please regenerate for better content)"
PLACEHOLDER_ANSWER = "This is a placeholder card. Please regenerate flashcards for better content."


class ResponseShape(Enum):
    DELIMITED = "delimited"  # cards separated by SEPARATOR
    LABELED = "labeled"      # back-to-back Question:/Answer: pairs, no separator


def detect_shape(text: str) -> ResponseShape:
    return ResponseShape.DELIMITED if SEPARATOR in text else ResponseShape.LABELED


def split_delimited(text: str) -> list[str]:
    """Split on the separator, trimming chunks and dropping empty ones."""
    return [c.strip() for c in _SPLIT_RE.split(text) if c.strip()]


def scan_labeled(text: str) -> list[str]:
    """Find Question:/Answer: pairs in undelimited text, one chunk per pair."""
    return [
        f"Question: {m.group(1).strip()}\nAnswer: {m.group(2).strip()}"
        for m in _PAIR_RE.finditer(text)
    ]


def split_chunks(text: str, shape: ResponseShape | None = None) -> list[str]:
    """
    Break a raw completion into per-card chunks.
    With no shape given, the shape is detected from the text; forcing
    DELIMITED on text without a separator yields the whole text as one chunk.
    """
    if shape is None:
        shape = detect_shape(text)
    if shape is ResponseShape.DELIMITED:
        return split_delimited(text)
    return scan_labeled(text)


def extract_card(chunk: str) -> Flashcard | None:
    """Pull question and answer out of one chunk, or None if either is missing."""
    q = _QUESTION_RE.search(chunk)
    a = _ANSWER_RE.search(chunk)
    if not q or not a:
        logger.debug("dropped chunk", extra={
            "reason": "missing question label" if not q else "missing answer label",
            "chunk_preview": chunk[:80],
        })
        return None
    question, answer = q.group(1).strip(), a.group(1).strip()
    if not question or not answer:
        logger.debug("dropped chunk", extra={"reason": "empty field", "chunk_preview": chunk[:80]})
        return None
    return Flashcard(question=question, answer=answer)


def parse_cards(text: str, shape: ResponseShape | None = None, on_event=None,
                stage: str = "first_pass", requested: int | None = None) -> list[Flashcard]:
    """
    Split a raw completion into chunks and extract one card per chunk.
    When `on_event` is given, chunk and parsed counts are reported to it.
    """
    chunks = split_chunks(text, shape)
    if on_event:
        on_event("chunks_split", stage=stage, raw_count=len(chunks), requested=requested)
    cards = []
    for chunk in chunks:
        card = extract_card(chunk)
        if card is not None:
            cards.append(card)
    if on_event:
        on_event("cards_parsed", stage=stage, parsed_count=len(cards), dropped=len(chunks) - len(cards))
    return cards


def placeholder_card(index: int) -> Flashcard:
    """Synthetic card for 1-based result position `index`."""
    return Flashcard(
        question=PLACEHOLDER_QUESTION.format(index=index),
        answer=PLACEHOLDER_ANSWER,
        placeholder=True,
    )


def is_placeholder(card: Flashcard) -> bool:
    return card.placeholder


def reconcile_count(cards: list[Flashcard], count: int) -> list[Flashcard]:
    """Trim surplus cards or pad with placeholders so len(result) == count."""
    if len(cards) >= count:
        return list(cards[:count])
    out = list(cards)
    out.extend(placeholder_card(i + 1) for i in range(len(cards), count))
    return out
