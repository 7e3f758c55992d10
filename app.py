import os
from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException

from errors import FlashcardGenerationError, InvalidRequestError
from logger_utils import logger
from models import GenerationRequest
from services.ai_service import AIService
from services.flashcard_service import generate_flashcards

load_dotenv()  # loads .env


def create_app(ai_service=None):
    """Application factory. `ai_service` defaults to an AIService built on first use."""
    app = Flask(__name__)
    CORS(app)
    app.extensions["ai_service"] = ai_service

    def get_ai():
        if app.extensions["ai_service"] is None:
            try:
                app.extensions["ai_service"] = AIService()
            except ValueError as e:
                raise FlashcardGenerationError(f"LLM service unavailable: {e}") from e
        return app.extensions["ai_service"]

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/generate-flashcards", methods=["POST"])
    def generate():
        payload = request.get_json(silent=True)
        try:
            req = GenerationRequest.from_payload(payload if payload is not None else {})
        except InvalidRequestError as e:
            logger.warning(f"Rejected flashcard request: {e.details}")
            return jsonify({"error": str(e), "details": e.details}), 400

        logger.info(f"Received numCards: {req.requested_count}")
        try:
            cards = generate_flashcards(req.source_text, req.requested_count, get_ai().complete)
        except FlashcardGenerationError as e:
            logger.error(f"Error generating flashcards: {e}", exc_info=True)
            return jsonify({"error": "Failed to generate flashcards.", "flashcards": []}), 502

        return jsonify({"flashcards": [c.model_dump() for c in cards]})

    @app.errorhandler(Exception)
    def handle_exception(error):
        if isinstance(error, HTTPException):
            return jsonify({"error": error.name}), error.code
        logger.error(f"Unhandled exception for path {request.path}: {error}", exc_info=True)
        return jsonify({"error": "Internal Server Error"}), 500

    return app


if __name__ == "__main__":
    create_app().run(port=int(os.getenv("PORT", "5000")))
