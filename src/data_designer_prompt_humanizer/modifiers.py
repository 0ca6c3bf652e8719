# Photography vocabulary used to ground image prompts in realistic camera language.
#
# The raw tables are nested by group; at import they are flattened into a single
# read-only mapping of dotted category name -> tuple of phrases.

from __future__ import annotations

import random
from types import MappingProxyType
from typing import Mapping, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can pick uniformly from a sequence (``random.Random`` qualifies)."""

    def choice(self, seq: Sequence[T]) -> T: ...

    def sample(self, population: Sequence[T], k: int) -> list[T]: ...


# ---------------------------------------------------------------------------
# Raw tables
# ---------------------------------------------------------------------------

_CAMERAS = {
    "film": [
        "shot on 35mm film", "shot on Kodak Portra 400", "shot on Kodak Ektar 100",
        "shot on Fuji Pro 400H", "shot on Ilford HP5", "shot on Kodak Tri-X 400",
        "shot on Cinestill 800T", "vintage Polaroid", "instant film photograph",
        "disposable camera photo",
    ],
    "professional": [
        "shot on Leica M6", "shot on Hasselblad 500C", "shot on Contax T2",
        "shot on Mamiya RB67", "shot on Canon AE-1", "shot on Nikon FM2",
        "shot on Pentax K1000", "medium format film", "large format photograph",
    ],
    "modern": [
        "shot on iPhone", "smartphone photo", "DSLR photograph",
        "mirrorless camera", "point and shoot camera",
    ],
}

_LENSES = [
    "35mm lens", "50mm f/1.4", "50mm f/1.8", "85mm portrait lens", "24mm wide angle",
    "135mm telephoto", "f/2.8 aperture", "f/1.4 shallow depth of field",
    "wide open aperture", "bokeh background", "tilt-shift lens", "vintage lens with character",
]

_LIGHTING = {
    "natural": [
        "golden hour light", "blue hour", "harsh midday sun", "overcast soft light",
        "window light", "dappled sunlight through trees", "backlit silhouette",
        "side lighting", "natural ambient light", "cloudy day diffused light",
    ],
    "artificial": [
        "single bare bulb", "fluorescent office lighting", "tungsten warm light",
        "neon sign glow", "streetlight at night", "mixed color temperature",
        "practical lights in frame", "flash photography", "harsh camera flash",
        "ring light catchlights",
    ],
    "moody": [
        "low key lighting", "chiaroscuro", "Rembrandt lighting", "dramatic shadows",
        "rim light", "lens flare", "light leak",
    ],
}

_IMPERFECTIONS = {
    "film": [
        "film grain", "subtle noise", "light leaks", "dust and scratches",
        "slight overexposure", "underexposed shadows", "color shift", "halation", "vignette",
    ],
    "focus": [
        "slight motion blur", "soft focus", "out of focus background",
        "shallow depth of field", "slightly out of focus", "focus falloff",
        "subject blur from movement",
    ],
    "physical": [
        "lens distortion", "chromatic aberration", "barrel distortion",
        "vintage lens flaws", "soft corners", "coma",
    ],
    "surface": [
        "worn surfaces", "weathered", "scratched", "faded colors", "dusty", "dirty",
        "water stains", "patina", "rust", "peeling paint",
    ],
}

_HUMAN_DETAILS = [
    "visible pores", "skin texture", "natural wrinkles", "laugh lines", "freckles",
    "moles", "under-eye circles", "stray hairs", "asymmetric features",
    "natural skin tone variation", "subtle redness", "visible veins", "chapped lips",
    "sweat", "goosebumps",
]

_COMPOSITION = {
    "natural": [
        "off-center composition", "rule of thirds", "negative space", "candid framing",
        "environmental portrait", "unposed", "caught in the moment",
        "documentary style", "street photography",
    ],
    "angles": [
        "eye level", "slightly below eye level", "three-quarter view", "profile view",
        "over the shoulder", "from behind", "birds eye view", "worms eye view",
    ],
    "distance": [
        "close-up", "medium shot", "full body", "wide establishing shot",
        "intimate distance", "personal space",
    ],
}

_ENVIRONMENT = {
    "clutter": [
        "cluttered background", "messy desk", "lived-in space", "papers scattered",
        "coffee cups", "personal belongings visible", "everyday objects", "natural mess",
    ],
    "atmosphere": [
        "hazy atmosphere", "dusty air", "steam", "smoke", "fog", "rain",
        "condensation on windows", "breath visible in cold",
    ],
    "time": [
        "early morning", "late afternoon", "dusk", "middle of the night", "rush hour",
        "quiet Sunday morning",
    ],
}

_STYLES = [
    "documentary photography", "street photography", "photojournalism",
    "candid photography", "snapshot aesthetic", "vernacular photography",
    "found footage look", "surveillance camera", "paparazzi shot", "family album photo",
    "yearbook photo", "passport photo", "ID photo", "amateur photography",
]

_RAW_TABLES: dict[str, list[str] | dict[str, list[str]]] = {
    "cameras": _CAMERAS,
    "lenses": _LENSES,
    "lighting": _LIGHTING,
    "imperfections": _IMPERFECTIONS,
    "human_details": _HUMAN_DETAILS,
    "composition": _COMPOSITION,
    "environment": _ENVIRONMENT,
    "styles": _STYLES,
}


def _normalize(tables: Mapping[str, list[str] | dict[str, list[str]]]) -> Mapping[str, tuple[str, ...]]:
    flat: dict[str, tuple[str, ...]] = {}
    for group, table in tables.items():
        if isinstance(table, dict):
            for leaf, phrases in table.items():
                flat[f"{group}.{leaf}"] = tuple(phrases)
        else:
            flat[group] = tuple(table)
    for name, phrases in flat.items():
        if not phrases:
            raise ValueError(f"Vocabulary category {name!r} is empty")
    return MappingProxyType(flat)


VOCABULARY: Mapping[str, tuple[str, ...]] = _normalize(_RAW_TABLES)

_DEFAULT_RNG = random.Random()


def categories(prefix: str | None = None) -> list[str]:
    """Category names in definition order, optionally limited to one group."""
    if prefix is None:
        return list(VOCABULARY)
    return [name for name in VOCABULARY if name == prefix or name.startswith(prefix + ".")]


def resolve_category(category: str) -> tuple[str, ...]:
    """Return the phrases for a leaf category, or every phrase of a group flattened."""
    if category in VOCABULARY:
        return VOCABULARY[category]
    members = categories(category)
    if not members:
        raise KeyError(f"Unknown vocabulary category: {category!r}")
    return tuple(phrase for name in members for phrase in VOCABULARY[name])


def random_modifiers(category: str, count: int = 1, rng: RandomSource | None = None) -> list[str]:
    """Pick ``count`` distinct phrases uniformly at random from a category.

    Asking for more phrases than the category holds returns all of them, shuffled.
    """
    phrases = resolve_category(category)
    k = max(0, min(count, len(phrases)))
    return list((rng or _DEFAULT_RNG).sample(phrases, k))


def balanced_modifiers(
    include_camera: bool = True,
    include_lighting: bool = True,
    include_imperfections: bool = True,
    include_composition: bool = True,
    human_subject: bool = False,
    rng: RandomSource | None = None,
) -> list[str]:
    """One pick per concern: film camera and lens, natural light, grain and focus
    flaws, a natural framing, plus two skin details when a person is in frame."""
    parts: list[str] = []
    if include_camera:
        parts += random_modifiers("cameras.film", rng=rng)
        parts += random_modifiers("lenses", rng=rng)
    if include_lighting:
        parts += random_modifiers("lighting.natural", rng=rng)
    if include_imperfections:
        parts += random_modifiers("imperfections.film", rng=rng)
        parts += random_modifiers("imperfections.focus", rng=rng)
    if include_composition:
        parts += random_modifiers("composition.natural", rng=rng)
    if human_subject:
        parts += random_modifiers("human_details", 2, rng=rng)
    return parts


def vocabulary_tree() -> dict[str, list[str] | dict[str, list[str]]]:
    """A nested plain-dict copy of the tables, for listing endpoints."""
    tree: dict[str, list[str] | dict[str, list[str]]] = {}
    for name, phrases in VOCABULARY.items():
        group, _, leaf = name.partition(".")
        if leaf:
            tree.setdefault(group, {})[leaf] = list(phrases)  # type: ignore[index]
        else:
            tree[group] = list(phrases)
    return tree
