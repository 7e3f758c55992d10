import os
from openai import OpenAI, OpenAIError

from errors import AIServiceError
from logger_utils import logger


class AIService:
    def __init__(self, api_key: str | None = None, model: str | None = None,
                 temperature: float | None = None, max_tokens: int | None = None,
                 client=None):
        api_key = api_key or os.getenv("OPENAI_API_KEY")
        if client is None and not api_key:
            raise ValueError("OPENAI_API_KEY environment variable is required")
        # Shortfall is handled by the pipeline's one semantic retry; transport errors are not retried.
        self.client = client or OpenAI(
            api_key=api_key,
            timeout=float(os.getenv("OPENAI_TIMEOUT", "60")),
            max_retries=0,
        )
        self.model = model or os.getenv("OPENAI_MODEL", "gpt-3.5-turbo")
        self.temperature = temperature if temperature is not None else float(os.getenv("OPENAI_TEMPERATURE", "0.3"))
        self.max_tokens = max_tokens or int(os.getenv("OPENAI_MAX_TOKENS", "2000"))

    def complete(self, system_prompt: str, user_prompt: str) -> str:
        """
        Calls the Chat Completions API with a system and a user message.
        Returns the raw text of the first choice ("" when the model sent no content).
        """
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt}
                ],
            )
        except OpenAIError as e:
            logger.error(f"OpenAI request failed: {e}")
            raise AIServiceError(f"OpenAI request failed: {e}") from e

        if not resp.choices:
            raise AIServiceError("OpenAI response contained no choices")
        return resp.choices[0].message.content or ""
