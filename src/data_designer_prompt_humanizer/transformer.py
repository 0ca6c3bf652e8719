"""Rewrite AI-prone image prompts into photography-grounded ones.

The transformer strips the phrases the analyzer flags, gives bare subjects and
locations concrete detail, and appends camera, lighting, imperfection, composition
and (for people) skin-detail modifiers drawn from the vocabulary tables. Every random
pick goes through an injected random source so results can be replayed.
"""

from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Literal, Mapping, get_args

from data_designer_prompt_humanizer.core import (
    AnalysisResult,
    Issue,
    QualifiedNoun,
    analyze_prompt,
    require_prompt,
    strip_problem_phrases,
)
from data_designer_prompt_humanizer.modifiers import RandomSource, random_modifiers

logger = logging.getLogger(__name__)

Style = Literal["film", "digital", "phone"]
Mood = Literal["natural", "moody", "harsh"]
ImperfectionLevel = Literal["low", "medium", "high"]

STYLES: tuple[str, ...] = get_args(Style)
MOODS: tuple[str, ...] = get_args(Mood)
IMPERFECTION_LEVELS: tuple[str, ...] = get_args(ImperfectionLevel)

SMARTPHONE_PHRASE = "smartphone photo"

_CAMERA_CATEGORY = {"film": "cameras.film", "digital": "cameras.modern"}
_LIGHTING_CATEGORY = {"moody": "lighting.moody", "harsh": "lighting.artificial"}
_IMPERFECTION_COUNT = {"low": 1, "medium": 2, "high": 3}


@dataclass(frozen=True)
class TransformConfig:
    """How a prompt is rewritten. Unknown values resolve to the defaults below."""

    style: Style = "film"
    mood: Mood = "natural"
    imperfection_level: ImperfectionLevel = "medium"
    preserve_original: bool = False

    @classmethod
    def resolve(
        cls,
        style: str | None = None,
        mood: str | None = None,
        imperfection_level: str | None = None,
        preserve_original: bool = False,
    ) -> TransformConfig:
        default = cls()
        return cls(
            style=_choose("style", style, STYLES, default.style),  # type: ignore[arg-type]
            mood=_choose("mood", mood, MOODS, default.mood),  # type: ignore[arg-type]
            imperfection_level=_choose(  # type: ignore[arg-type]
                "imperfection_level", imperfection_level, IMPERFECTION_LEVELS, default.imperfection_level
            ),
            preserve_original=bool(preserve_original),
        )

    def normalized(self) -> TransformConfig:
        return TransformConfig.resolve(self.style, self.mood, self.imperfection_level, self.preserve_original)


def _choose(name: str, value: str | None, allowed: tuple[str, ...], default: str) -> str:
    if value is None:
        return default
    if isinstance(value, str) and value.lower() in allowed:
        return value.lower()
    logger.warning(f"Unknown {name} {value!r}; using {default!r}")
    return default


@dataclass(frozen=True)
class TransformResult:
    original: str
    transformed: str
    original_score: int
    new_score: int
    improvement: int
    issues_fixed: tuple[str, ...]
    modifiers_added: tuple[str, ...]

    def to_payload(self) -> dict[str, object]:
        return {
            "original": self.original,
            "transformed": self.transformed,
            "original_score": self.original_score,
            "new_score": self.new_score,
            "improvement": self.improvement,
            "issues_fixed": list(self.issues_fixed),
            "modifiers_added": list(self.modifiers_added),
        }


@dataclass(frozen=True)
class Suggestions:
    score: int
    issues: tuple[Issue, ...]
    recommended_additions: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def to_payload(self) -> dict[str, object]:
        return {
            "score": self.score,
            "issues": [i.to_payload() for i in self.issues],
            "recommended_additions": {k: list(v) for k, v in self.recommended_additions.items()},
        }


# ---------------------------------------------------------------------------
# Rewrite rules
# ---------------------------------------------------------------------------

_HUMAN_SUBJECT_RE = re.compile(
    r"\b(woman|man|person|girl|boy|child|people|portrait|face|model|figure)\b", re.IGNORECASE
)

_GENDERED_SUBJECT = QualifiedNoun(
    ("woman", "man"),
    disqualifiers=("with", "wearing", "holding", "in", "who", "aged", "around"),
    determiners=("a ",),
    determiner_required=True,
)
_BARE_PERSON = QualifiedNoun(
    ("person",),
    disqualifiers=("with", "wearing", "holding", "in", "who"),
    determiners=("a ",),
    determiner_required=True,
)

_AGES = ("in {poss} 30s", "in {poss} 40s", "middle-aged", "elderly", "young adult")
_SUBJECT_DETAILS = (
    "with visible laugh lines", "with weathered hands", "with tired eyes", "with an asymmetric smile",
)
_PERSON_TYPES = (
    "a tired office worker", "a weathered farmer", "a distracted commuter",
    "a street vendor", "someone caught mid-thought",
)
_POSSESSIVE = {"woman": "her", "man": "his"}

_LOCATION_ENHANCEMENTS: tuple[tuple[QualifiedNoun, tuple[str, ...]], ...] = tuple(
    (QualifiedNoun((noun,), determiners=("in a ", "at a ", "at the "), determiner_required=True), options)
    for noun, options in (
        ("coffee shop", (
            "a worn wooden table at a busy coffee shop with steamed windows",
            "a quiet corner of a cluttered independent coffee shop",
            "a formica counter at a 24-hour diner",
        )),
        ("office", (
            "a fluorescent-lit cubicle with papers everywhere",
            "a messy home office with coffee rings on the desk",
            "a sterile open-plan office with harsh lighting",
        )),
        ("street", (
            "a rain-slicked city street at dusk",
            "a sun-bleached sidewalk in midday heat",
            "a busy crosswalk during rush hour",
        )),
        ("park", (
            "a patchy grass park with worn benches",
            "an overgrown corner of an urban park",
            "a muddy path through a city park after rain",
        )),
    )
)


def has_human_subject(prompt: str) -> bool:
    return _HUMAN_SUBJECT_RE.search(prompt) is not None


# ---------------------------------------------------------------------------
# Transformer
# ---------------------------------------------------------------------------


class Transformer:
    """Prompt rewriter bound to one random source.

    Args:
        rng: Source of uniform choices. Defaults to a private ``random.Random``;
            pass a seeded instance (or any object with ``choice``/``sample``) to make
            output reproducible.
    """

    def __init__(self, rng: RandomSource | None = None) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random()

    def _pick(self, category: str, count: int = 1) -> list[str]:
        return random_modifiers(category, count, rng=self.rng)

    def enhance_subject(self, text: str) -> str:
        def _gendered(m: re.Match[str]) -> str:
            noun = m.group("noun")
            age = self.rng.choice(_AGES).format(poss=_POSSESSIVE[noun.lower()])
            detail = self.rng.choice(_SUBJECT_DETAILS)
            return f"{m.group('determiner')}{noun} {age} {detail}"

        text = _GENDERED_SUBJECT.pattern.sub(_gendered, text)
        return _BARE_PERSON.pattern.sub(lambda _m: self.rng.choice(_PERSON_TYPES), text)

    def enhance_location(self, text: str) -> str:
        for matcher, options in _LOCATION_ENHANCEMENTS:
            if matcher.matches(text):
                replacement = f"at {self.rng.choice(options)}"
                return matcher.pattern.sub(lambda _m: replacement, text)
        return text

    def technical_modifiers(self, config: TransformConfig) -> list[str]:
        if config.style == "phone":
            parts = [SMARTPHONE_PHRASE]
        else:
            parts = self._pick(_CAMERA_CATEGORY[config.style])
            parts += self._pick("lenses")
        parts += self._pick(_LIGHTING_CATEGORY.get(config.mood, "lighting.natural"))
        return parts

    def imperfection_modifiers(self, level: str) -> list[str]:
        count = _IMPERFECTION_COUNT.get(level, 2)
        parts = self._pick("imperfections.film")
        if count >= 2:
            parts += self._pick("imperfections.focus")
        if count >= 3:
            parts += self._pick("imperfections.surface")
        return parts

    def transform(self, prompt: str, config: TransformConfig | None = None) -> TransformResult:
        """Rewrite ``prompt`` and report the score before and after.

        Raises:
            InvalidPromptError: If ``prompt`` is not a string or is blank.
        """
        text = require_prompt(prompt, allow_blank=False)
        cfg = (config or TransformConfig()).normalized()
        before = analyze_prompt(text)

        base = text if cfg.preserve_original else strip_problem_phrases(text)
        base = self.enhance_location(base)
        base = self.enhance_subject(base)

        modifiers = self.technical_modifiers(cfg)
        modifiers += self.imperfection_modifiers(cfg.imperfection_level)
        modifiers += self._pick("composition.natural")
        if has_human_subject(text):
            modifiers += self._pick("human_details", 2)

        transformed = ", ".join(part for part in [base, *modifiers] if part)
        after = analyze_prompt(transformed)
        logger.debug(f"Transformed prompt: score {before.score} -> {after.score} with {len(modifiers)} modifiers")

        return TransformResult(
            original=text,
            transformed=transformed,
            original_score=before.score,
            new_score=after.score,
            improvement=before.score - after.score,
            issues_fixed=tuple(i.name for i in before.issues),
            modifiers_added=tuple(modifiers),
        )

    def suggest(self, prompt: str) -> Suggestions:
        """Analyze ``prompt`` and recommend modifiers without rewriting it."""
        text = require_prompt(prompt, allow_blank=False)
        analysis: AnalysisResult = analyze_prompt(text)
        additions = {
            "camera": tuple(self._pick("cameras.film", 2)),
            "lighting": tuple(self._pick("lighting.natural", 2)),
            "imperfections": tuple(self._pick("imperfections.film", 2)),
            "composition": tuple(self._pick("composition.natural", 2)),
        }
        if has_human_subject(text):
            additions["human_details"] = tuple(self._pick("human_details", 3))
        return Suggestions(score=analysis.score, issues=analysis.issues, recommended_additions=MappingProxyType(additions))


_DEFAULT_TRANSFORMER = Transformer()


def transform_prompt(prompt: str, config: TransformConfig | None = None, **overrides: object) -> TransformResult:
    """Transform with the shared default transformer.

    Keyword overrides (``style``, ``mood``, ``imperfection_level``, ``preserve_original``)
    are applied on top of ``config``.
    """
    cfg = config or TransformConfig()
    if overrides:
        cfg = replace(cfg, **overrides)  # type: ignore[arg-type]
    return _DEFAULT_TRANSFORMER.transform(prompt, cfg)


def suggest_modifiers(prompt: str) -> Suggestions:
    return _DEFAULT_TRANSFORMER.suggest(prompt)


def humanize(prompt: str) -> str:
    """Transform with default settings and return only the rewritten text."""
    return _DEFAULT_TRANSFORMER.transform(prompt).transformed
