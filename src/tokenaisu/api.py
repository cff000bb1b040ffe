"""HTTP API for tokenaisu."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException

from tokenaisu import __version__
from tokenaisu.config import load_config
from tokenaisu.core import tokenize_document
from tokenaisu.languages import resolve_language
from tokenaisu.models import HealthResponse, TokenizeRequest, TokenizeResponse


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="tokenaisu",
        version=__version__,
        description="Moses-style tokenizer service API.",
    )
    config = load_config()

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__, env=config.env)

    @app.post("/v1/tokenize", response_model=TokenizeResponse, tags=["tokenization"])
    def tokenize(request: TokenizeRequest) -> TokenizeResponse:
        try:
            language = resolve_language(request.language)
            options = request.options()
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        lines = tokenize_document(request.lines, language, options, workers=config.workers)
        return TokenizeResponse.from_lines(language.value, lines)

    return app


app = create_app()
