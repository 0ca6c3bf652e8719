from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class PromptHumanizerColumnConfig(SingleColumnConfig):
    """Rewrite image-generation prompts so they render less like generic AI output.

    Each row's target columns are joined into one prompt, scored for AI-prone patterns
    (0-100, higher is worse), stripped of flagged phrases, and extended with camera,
    lighting, imperfection and composition modifiers. The rewritten prompt is scored
    again so the improvement can be filtered on.

    Attributes:
        target_columns: Columns whose text is joined (", ") into the prompt.
        style: Camera vocabulary: film stocks, modern digital bodies, or a phone snapshot.
        mood: Lighting vocabulary: natural light, moody low-key, or harsh artificial.
        imperfection_level: How many imperfection phrases to add (1, 2 or 3).
        preserve_original: Keep flagged phrases instead of stripping them first.
        max_score: Highest rewritten score for ``is_valid=True``. Defaults to 40.
        seed: Seed for modifier selection; set it for reproducible columns.
        include_issues: Include the names of the issues found in the original prompt.
        include_modifiers: Include the list of modifier phrases that were appended.
    """

    target_columns: list[str]
    style: Literal["film", "digital", "phone"] = "film"
    mood: Literal["natural", "moody", "harsh"] = "natural"
    imperfection_level: Literal["low", "medium", "high"] = "medium"
    preserve_original: bool = Field(default=False, description="Skip stripping of flagged phrases")
    max_score: int = Field(default=40, ge=0, le=100, description="Maximum rewritten score for is_valid=True")
    seed: int | None = Field(default=None, description="Seed for reproducible modifier selection")
    include_issues: bool = Field(default=True, description="Include issue names found in the original prompt")
    include_modifiers: bool = Field(default=False, description="Include the appended modifier phrases")
    column_type: Literal["prompt-humanizer"] = "prompt-humanizer"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f4f7"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
