# SPDX-License-Identifier: Apache-2.0
"""Prompt Humanizer plugin for NeMo Data Designer.

Adds a ``prompt-humanizer`` column type that scores image-generation prompts for
AI-prone patterns (resolution spam, ArtStation tags, "beautiful", missing camera or
imperfection cues) and rewrites them with photography-grounded modifiers. Pure regex
and vocabulary tables; no model calls.

Usage::

    from data_designer_prompt_humanizer import PromptHumanizerColumnConfig

    builder.add_column(PromptHumanizerColumnConfig(
        name="image_prompt_humanized",
        target_columns=["image_prompt"],
        style="film",
        mood="moody",
    ))

The engine is also usable directly::

    from data_designer_prompt_humanizer import analyze_prompt, transform_prompt

    analyze_prompt("portrait of a man, 8k").score
    transform_prompt("a woman in a coffee shop", style="digital").transformed
"""

from data_designer_prompt_humanizer.config import PromptHumanizerColumnConfig
from data_designer_prompt_humanizer.core import (
    AnalysisResult,
    Hyperparameters,
    InvalidPromptError,
    Issue,
    analyze_prompt,
)
from data_designer_prompt_humanizer.modifiers import balanced_modifiers
from data_designer_prompt_humanizer.transformer import (
    Suggestions,
    TransformConfig,
    Transformer,
    TransformResult,
    humanize,
    suggest_modifiers,
    transform_prompt,
)

__all__ = [
    "PromptHumanizerColumnConfig",
    "AnalysisResult",
    "Hyperparameters",
    "InvalidPromptError",
    "Issue",
    "Suggestions",
    "TransformConfig",
    "TransformResult",
    "Transformer",
    "analyze_prompt",
    "balanced_modifiers",
    "humanize",
    "suggest_modifiers",
    "transform_prompt",
]
