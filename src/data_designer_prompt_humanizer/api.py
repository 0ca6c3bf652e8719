"""
HTTP API -- FastAPI application factory.

    uvicorn data_designer_prompt_humanizer.api:create_app --factory --port 3001

Routes:
  POST /api/transform -- Transform a prompt
  POST /api/analyze   -- Analyze a prompt
  POST /api/suggest   -- Get suggestions
  GET  /api/modifiers -- List modifiers
  GET  /health        -- Liveness probe

Invalid prompts are answered with 400 and ``{"error": ...}``.
"""

from __future__ import annotations

import logging
import os
import random
from typing import Literal, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from data_designer_prompt_humanizer.bands import score_badge, score_band
from data_designer_prompt_humanizer.core import InvalidPromptError, analyze_prompt, require_prompt
from data_designer_prompt_humanizer.modifiers import vocabulary_tree
from data_designer_prompt_humanizer.transformer import TransformConfig, Transformer

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"
DEFAULT_PORT = 3001


def _get_cors_origins() -> list[str]:
    """Load CORS origins from environment; allow any origin by default."""
    origins_env = os.environ.get("CORS_ORIGINS", "")
    if origins_env.strip():
        return [o.strip() for o in origins_env.split(",") if o.strip()]
    return ["*"]


# =============================================================================
# MODELS
# =============================================================================


class PromptRequest(BaseModel):
    prompt: Optional[str] = Field(None, description="The image prompt")


class TransformRequest(PromptRequest):
    style: str = Field("film", description="Photography style: film, digital or phone")
    mood: str = Field("natural", description="Lighting mood: natural, moody or harsh")
    imperfection_level: str = Field("medium", description="Imperfection level: low, medium or high")
    preserve_original: bool = Field(False, description="Keep flagged phrases instead of stripping them")


class IssueModel(BaseModel):
    id: str
    name: str
    description: str
    weight: int
    suggestion: str


class AnalyzeResponse(BaseModel):
    score: int
    band: str
    badge: str
    ai_score: int
    realism_score: int
    issue_count: int
    issues: list[IssueModel]
    realism_signals: list[str]


class TransformResponse(BaseModel):
    original: str
    transformed: str
    original_score: int
    new_score: int
    improvement: int
    issues_fixed: list[str]
    modifiers_added: list[str]


class SuggestResponse(BaseModel):
    score: int
    issues: list[IssueModel]
    recommended_additions: dict[str, list[str]]


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    version: str = API_VERSION


# =============================================================================
# APP
# =============================================================================


def create_app(seed: int | None = None) -> FastAPI:
    """
    Application factory -- creates and configures the FastAPI app.

    Args:
        seed: Seed for modifier selection (random per process if None).
    """
    application = FastAPI(
        title="Prompt Humanizer API",
        description="Transform generic AI image prompts into realistic, photography-grounded ones",
        version=API_VERSION,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=_get_cors_origins(),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    transformer = Transformer(random.Random(seed)) if seed is not None else Transformer()

    @application.exception_handler(InvalidPromptError)
    async def invalid_prompt_handler(_request: Request, exc: InvalidPromptError) -> JSONResponse:
        logger.info(f"Rejected request: {exc}")
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @application.post("/api/transform", response_model=TransformResponse)
    def transform(body: TransformRequest) -> dict:
        config = TransformConfig.resolve(body.style, body.mood, body.imperfection_level, body.preserve_original)
        return transformer.transform(require_prompt(body.prompt, allow_blank=False), config).to_payload()

    @application.post("/api/analyze", response_model=AnalyzeResponse)
    def analyze(body: PromptRequest) -> dict:
        result = analyze_prompt(require_prompt(body.prompt, allow_blank=False))
        payload = result.to_payload()
        payload["band"] = score_band(result.score)
        payload["badge"] = score_badge(result.score)
        return payload

    @application.post("/api/suggest", response_model=SuggestResponse)
    def suggest(body: PromptRequest) -> dict:
        return transformer.suggest(require_prompt(body.prompt, allow_blank=False)).to_payload()

    @application.get("/api/modifiers")
    def modifiers() -> dict:
        return vocabulary_tree()

    @application.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse()

    logger.info("Prompt Humanizer API ready")
    return application


def main() -> None:
    import uvicorn

    port = int(os.environ.get("PORT", DEFAULT_PORT))
    uvicorn.run(create_app(), host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
