"""
Application-specific exceptions.
"""

class FlashcardAppError(Exception):
    """Base exception for the application."""
    pass

class InvalidRequestError(FlashcardAppError):
    """Raised when a generation request fails validation."""

    def __init__(self, message: str, details: list | None = None):
        super().__init__(message)
        self.details = details or []

class AIServiceError(FlashcardAppError):
    """Raised when the LLM provider call fails."""
    pass

class FlashcardGenerationError(FlashcardAppError):
    """Raised when the pipeline cannot reach the LLM collaborator."""
    pass
