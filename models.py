import os
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from errors import InvalidRequestError

MAX_CARDS = int(os.getenv("FLASHCARDS_MAX_COUNT", "50"))


class Flashcard(BaseModel):
    """One question/answer study card. Placeholders fill a shortfall."""
    question: str
    answer: str
    placeholder: bool = False


class GenerationRequest(BaseModel):
    """Validated input for one generation call. Wire names are `text` and `numCards`."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source_text: str = Field(..., alias="text", min_length=1)
    requested_count: int = Field(..., alias="numCards", gt=0, le=MAX_CARDS)

    @field_validator("source_text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("text must not be blank")
        return v

    @field_validator("requested_count", mode="before")
    @classmethod
    def count_not_bool(cls, v):
        # numeric strings like "5" are coerced; booleans are not counts
        if isinstance(v, bool):
            raise ValueError("numCards must be an integer")
        return v

    @classmethod
    def from_payload(cls, payload) -> "GenerationRequest":
        if not isinstance(payload, dict):
            raise InvalidRequestError("Invalid input.", ["body must be a JSON object"])
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            details = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            raise InvalidRequestError("Invalid input.", details) from e
