from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_prompt_humanizer.config import PromptHumanizerColumnConfig
from data_designer_prompt_humanizer.core import InvalidPromptError
from data_designer_prompt_humanizer.transformer import TransformConfig, Transformer

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


class PromptHumanizerColumnGenerator(ColumnGeneratorFullColumn[PromptHumanizerColumnConfig]):
    """Column generator that rewrites image prompts with realism modifiers."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f4f7 Humanizing prompts into column {self.config.name!r}")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   style: {self.config.style}, mood: {self.config.mood}, imperfections: {self.config.imperfection_level}")

        transformer = Transformer(random.Random(self.config.seed))
        transform_config = TransformConfig.resolve(
            style=self.config.style,
            mood=self.config.mood,
            imperfection_level=self.config.imperfection_level,
            preserve_original=self.config.preserve_original,
        )

        results = []
        for _, row in data[self.config.target_columns].iterrows():
            prompt = ", ".join(str(v) for v in row.values if v is not None and str(v).strip())
            try:
                result = transformer.transform(prompt, transform_config)
            except InvalidPromptError as exc:
                logger.warning(f"   skipping row with unusable prompt: {exc}")
                results.append({"is_valid": False, "error": str(exc)})
                continue
            output: dict = {
                "is_valid": result.new_score <= self.config.max_score,
                "humanized_prompt": result.transformed,
                "original_score": result.original_score,
                "new_score": result.new_score,
                "improvement": result.improvement,
            }
            if self.config.include_issues:
                output["issues_fixed"] = list(result.issues_fixed)
            if self.config.include_modifiers:
                output["modifiers_added"] = list(result.modifiers_added)
            results.append(output)

        data = data.copy()
        data[self.config.name] = results
        return data
