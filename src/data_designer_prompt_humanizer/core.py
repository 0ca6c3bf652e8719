# Image prompt linter for AI-prone patterns.
#
# Evaluates a prompt against a fixed, ordered table of weighted detection rules and
# a set of realism indicators, and returns a 0-100 proneness score (higher means more
# likely to render with the generic "AI look") together with the matched issues.

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, ClassVar, Union

# ---------------------------------------------------------------------------
# Hyperparameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Hyperparameters:
    """Score normalization used by the analyzer."""

    score_scale: float = 5.0
    score_min: int = 0
    score_max: int = 100


DEFAULT_HYPERPARAMETERS = Hyperparameters()


class InvalidPromptError(ValueError):
    """Raised when a prompt is missing, empty where content is required, or not a string."""


def require_prompt(prompt: object, *, allow_blank: bool = True) -> str:
    if not isinstance(prompt, str):
        raise InvalidPromptError(f"Prompt must be a string, got {type(prompt).__name__}")
    if not allow_blank and not prompt.strip():
        raise InvalidPromptError("Prompt must not be empty")
    return prompt


# ---------------------------------------------------------------------------
# Matchers
# ---------------------------------------------------------------------------


def _alternation(items: tuple[str, ...]) -> str:
    return "|".join(items)


@dataclass(frozen=True)
class TermSet:
    """Case-insensitive, word-bounded alternation of phrase terms.

    Terms are regex fragments so spelling variants (``hyper[- ]?realistic``) can share
    one entry. ``strip`` removes every occurrence together with one trailing comma and
    any whitespace, so detection and removal always agree on what counts as a hit.
    """

    terms: tuple[str, ...]
    kind: ClassVar[str] = "literal-phrase-set"
    _pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)
    _strip_pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        body = _alternation(self.terms)
        object.__setattr__(self, "_pattern", re.compile(rf"\b(?:{body})\b", re.IGNORECASE))
        object.__setattr__(self, "_strip_pattern", re.compile(rf"\b(?:{body})\b,?\s*", re.IGNORECASE))

    def matches(self, text: str) -> bool:
        return self._pattern.search(text) is not None

    def strip(self, text: str) -> str:
        return self._strip_pattern.sub("", text)


@dataclass(frozen=True)
class QualifiedNoun:
    """A noun that counts only when no qualifying clause follows it.

    ``determiners`` are optional lead-ins ("a ", "in a", "at the"); when
    ``determiner_required`` is set one of them must precede the noun. A match is
    rejected if the noun is directly followed by a space and one of ``disqualifiers``.
    ``anchored`` restricts the match to the start of the text.
    """

    nouns: tuple[str, ...]
    disqualifiers: tuple[str, ...] = ()
    determiners: tuple[str, ...] = ()
    determiner_required: bool = False
    anchored: bool = False
    kind: ClassVar[str] = "qualified-noun"
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        start = "^" if self.anchored else r"\b"
        lead = ""
        if self.determiners:
            lead = rf"(?P<determiner>{_alternation(self.determiners)})"
            lead += "" if self.determiner_required else "?"
        tail = rf"(?! (?:{_alternation(self.disqualifiers)}))" if self.disqualifiers else ""
        regex = rf"{start}{lead}(?P<noun>{_alternation(self.nouns)})\b{tail}"
        object.__setattr__(self, "pattern", re.compile(regex, re.IGNORECASE))

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


@dataclass(frozen=True)
class Predicate:
    """Whole-prompt check, used for rules that detect the absence of a signal."""

    fn: Callable[[str], bool]
    kind: ClassVar[str] = "predicate"

    def matches(self, text: str) -> bool:
        return bool(self.fn(text))


Matcher = Union[TermSet, QualifiedNoun, Predicate]

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DetectionRule:
    id: str
    name: str
    description: str
    weight: int
    matcher: Matcher
    suggestion: str
    strippable: bool = False

    def to_issue(self) -> Issue:
        return Issue(self.id, self.name, self.description, self.weight, self.suggestion)


@dataclass(frozen=True)
class RealismIndicator:
    name: str
    matcher: Matcher
    weight: int


@dataclass(frozen=True)
class Issue:
    id: str
    name: str
    description: str
    weight: int
    suggestion: str

    def to_payload(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "weight": self.weight,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class AnalysisResult:
    score: int
    ai_score: int
    realism_score: int
    issues: tuple[Issue, ...]
    realism_signals: tuple[str, ...] = ()

    @property
    def issue_count(self) -> int:
        return len(self.issues)

    def to_payload(self) -> dict[str, object]:
        return {
            "score": self.score,
            "ai_score": self.ai_score,
            "realism_score": self.realism_score,
            "issues": [i.to_payload() for i in self.issues],
            "issue_count": self.issue_count,
            "realism_signals": list(self.realism_signals),
        }


# ---------------------------------------------------------------------------
# Vocabulary shared by rules and predicates
# ---------------------------------------------------------------------------

_HUMAN_NOUNS = ("woman", "man", "person", "girl", "boy", "child", "people")
_LOCATION_NOUNS = ("coffee shop", "restaurant", "office", "room", "street", "park", "beach", "forest", "city")

_STYLE_WORD_RE = re.compile(r"\b(style|aesthetic|vibe|mood|tone|look|feel)\b", re.IGNORECASE)
_STYLE_STACK_LIMIT = 2
_IMPERFECTION_RE = re.compile(
    r"\b(worn|scratched|faded|dusty|dirty|messy|wrinkled|weathered|aged|vintage|grain|noise|blur|soft focus|imperfect)\b",
    re.IGNORECASE,
)
_CAMERA_RE = re.compile(
    r"\b(shot on|filmed|captured|35mm|50mm|85mm|f/\d|aperture|leica|canon|nikon|hasselblad|kodak|fuji|portra|ektar|tri-x)\b",
    re.IGNORECASE,
)
_CONTENT_RE = re.compile(r"\w")


def _has_content(text: str) -> bool:
    return _CONTENT_RE.search(text) is not None


def _style_stacking(text: str) -> bool:
    distinct = {m.group(1).lower() for m in _STYLE_WORD_RE.finditer(text)}
    return len(distinct) > _STYLE_STACK_LIMIT


def _missing_imperfection(text: str) -> bool:
    return _has_content(text) and _IMPERFECTION_RE.search(text) is None


def _missing_camera(text: str) -> bool:
    return _has_content(text) and _CAMERA_RE.search(text) is None


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------

DETECTION_RULES: tuple[DetectionRule, ...] = (
    DetectionRule(
        "generic-subject", "Generic subject",
        "Unspecific subject without distinguishing details", 4,
        QualifiedNoun(_HUMAN_NOUNS, disqualifiers=("with", "wearing", "holding", "in their", "who"),
                      determiners=("a ", "an "), anchored=True),
        "Add specific details: age, expression, clothing, action, distinguishing features",
    ),
    DetectionRule(
        "generic-location", "Generic location",
        "Vague location without atmosphere or specifics", 3,
        QualifiedNoun(_LOCATION_NOUNS, disqualifiers=("with", "where", "that", "filled"),
                      determiners=("in a ", "at a ", "at the ")),
        "Add atmosphere: time of day, weather, condition (worn, modern, cluttered), specific details",
    ),
    DetectionRule(
        "beautiful-modifier", "Overused beauty modifiers",
        '"Beautiful", "stunning", "gorgeous" lead to over-processed looks', 5,
        TermSet(("beautiful", "stunning", "gorgeous", "amazing", "incredible", "breathtaking", "perfect")),
        "Remove or replace with specific qualities: weathered, sun-dappled, candid, lived-in",
        strippable=True,
    ),
    DetectionRule(
        "hyper-realistic", "Hyper-realistic trap",
        '"Hyper-realistic" often produces the opposite effect', 4,
        TermSet(("hyper[- ]?realistic", "ultra[- ]?realistic", "photo[- ]?realistic")),
        'Use specific camera/film references instead: "shot on Kodak Portra 400", "Leica M6"',
        strippable=True,
    ),
    DetectionRule(
        "8k-4k", "8K/4K resolution spam",
        "Resolution tags rarely help and can trigger over-sharpening", 3,
        TermSet(("8k", "4k", "hd", "uhd", "high resolution", "highly detailed")),
        "Remove. Use film grain, lens characteristics instead for quality",
        strippable=True,
    ),
    DetectionRule(
        "trending-artstation", "Trending/ArtStation clichés",
        "These tags pull toward stylized digital art, not realism", 4,
        TermSet(("trending on artstation", "artstation", "deviantart", "cgsociety", "unreal engine", "octane render")),
        "Remove for realistic photos. Use photography-specific references instead",
        strippable=True,
    ),
    DetectionRule(
        "cinematic-lighting", "Generic lighting terms",
        '"Cinematic lighting" is vague and overused', 3,
        TermSet(("cinematic lighting", "dramatic lighting", "professional lighting", "studio lighting")),
        'Be specific: "golden hour side light", "harsh midday sun", "overcast soft light", "single bare bulb"',
        strippable=True,
    ),
    DetectionRule(
        "portrait-generic", "Generic portrait terms",
        "Plain portrait terms lack character", 3,
        TermSet(("portrait of", "headshot of", "photo of")),
        'Add context: "candid portrait", "environmental portrait", "passport-style photo", "caught mid-laugh"',
    ),
    DetectionRule(
        "style-stacking", "Style keyword stacking",
        "Too many style keywords fight each other", 3,
        Predicate(_style_stacking),
        "Pick one clear style direction instead of stacking multiple",
    ),
    DetectionRule(
        "missing-imperfection", "No imperfections",
        "Perfectly clean prompts yield AI-smooth results", 4,
        Predicate(_missing_imperfection),
        "Add imperfections: film grain, slight blur, worn surfaces, natural mess",
    ),
    DetectionRule(
        "missing-camera", "No camera/lens reference",
        "Missing photography specs leads to generic rendering", 3,
        Predicate(_missing_camera),
        'Add camera specs: "shot on 35mm f/1.8", "Kodak Portra 400", "vintage Polaroid"',
    ),
    DetectionRule(
        "symmetry-trap", "Symmetry/centered composition",
        "Centered, symmetrical compositions feel artificial", 2,
        TermSet(("centered", "symmetrical", "perfectly balanced", "in the middle", "facing camera directly")),
        "Use off-center composition, rule of thirds, candid angles",
    ),
    DetectionRule(
        "direct-gaze", "Direct camera gaze",
        "Subject staring at camera often looks posed/artificial", 2,
        TermSet(("looking at camera", "staring at camera", "eye contact", "facing forward", "looking directly")),
        'Try: "looking away", "caught unaware", "profile view", "looking down at hands"',
    ),
)

REALISM_INDICATORS: tuple[RealismIndicator, ...] = (
    RealismIndicator("candid", TermSet(("candid", "unposed", "caught", "moment", "spontaneous")), 2),
    RealismIndicator("focal-length", TermSet(("35mm", "50mm", "85mm", r"f/\d\.\d")), 3),
    RealismIndicator("film-stock", TermSet(("kodak", "fuji", "portra", "ektar", "tri-x", "ilford")), 3),
    RealismIndicator("texture", TermSet(("grain", "noise", "soft focus", "slight blur", "motion blur")), 2),
    RealismIndicator("wear", TermSet(("worn", "weathered", "aged", "vintage", "faded", "dusty")), 2),
    RealismIndicator("specific-light", TermSet(("golden hour", "overcast", "harsh light", "mixed lighting")), 2),
    RealismIndicator("skin-detail", TermSet(("wrinkles", "pores", "freckles", "asymmetric", "imperfect")), 2),
    RealismIndicator("camera-body", TermSet(("leica", "hasselblad", "contax", "pentax", "mamiya")), 2),
    RealismIndicator("documentary", TermSet(("documentary", "street photography", "photojournalism")), 2),
)

STRIPPABLE_RULES: tuple[DetectionRule, ...] = tuple(r for r in DETECTION_RULES if r.strippable)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_prompt(prompt: str, hyperparameters: Hyperparameters | None = None) -> AnalysisResult:
    """Score an image prompt for AI-prone patterns.

    Args:
        prompt: The prompt to analyze. May be empty; empty text matches nothing.
        hyperparameters: Optional normalization overrides.

    Returns:
        AnalysisResult with the 0-100 score, raw rule and realism sums, and the
        matched issues in rule-definition order.

    Raises:
        InvalidPromptError: If ``prompt`` is not a string.
    """
    text = require_prompt(prompt)
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS

    issues = tuple(rule.to_issue() for rule in DETECTION_RULES if rule.matcher.matches(text))
    signals = tuple(ind for ind in REALISM_INDICATORS if ind.matcher.matches(text))

    ai_score = sum(i.weight for i in issues)
    realism_score = sum(ind.weight for ind in signals)
    raw_score = max(0, ai_score - realism_score)
    score = max(hp.score_min, min(hp.score_max, round(raw_score * hp.score_scale)))

    return AnalysisResult(
        score=int(score),
        ai_score=ai_score,
        realism_score=realism_score,
        issues=issues,
        realism_signals=tuple(ind.name for ind in signals),
    )


def strip_problem_phrases(prompt: str) -> str:
    """Remove every phrase a strippable rule would flag, then tidy separators.

    Removing one phrase can join its neighbours into another flagged phrase
    ("hyper 8k realistic"), so passes repeat until nothing changes.
    """
    cleaned = prompt
    previous = None
    while cleaned != previous:
        previous = cleaned
        for rule in STRIPPABLE_RULES:
            cleaned = rule.matcher.strip(cleaned)  # type: ignore[union-attr]
    cleaned = re.sub(r",\s*,", ",", cleaned)
    cleaned = re.sub(r"\s+", " ", cleaned)
    return re.sub(r"^[,\s]+|[,\s]+$", "", cleaned)
