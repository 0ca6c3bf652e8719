import random
import re

import pytest

from data_designer_prompt_humanizer.core import InvalidPromptError, analyze_prompt
from data_designer_prompt_humanizer.modifiers import VOCABULARY
from data_designer_prompt_humanizer.transformer import (
    TransformConfig,
    Transformer,
    has_human_subject,
    humanize,
    transform_prompt,
)


class FirstPick:
    """Random source stub that always takes the leading items."""

    def choice(self, seq):
        return seq[0]

    def sample(self, population, k):
        return list(population[:k])


COFFEE_SHOP_PROMPT = "a beautiful woman in a coffee shop, 8k, trending on artstation"
FILM_MEDIUM = TransformConfig(style="film", mood="natural", imperfection_level="medium")
QUALIFYING_CLAUSES = {
    "with": "with a red hat",
    "wearing": "wearing a red coat",
    "holding": "holding an umbrella",
    "in": "in a yellow raincoat",
    "who": "who is reading",
    "aged": "aged 70 on a bench",
    "around": "around 40 on a bench",
}
PARK_REWRITES = (
    "a patchy grass park with worn benches",
    "an overgrown corner of an urban park",
    "a muddy path through a city park after rain",
)


class TestTransformDeterministic:
    def test_coffee_shop_example_byte_for_byte(self):
        result = Transformer(FirstPick()).transform(COFFEE_SHOP_PROMPT, FILM_MEDIUM)
        assert result.transformed == (
            "a woman in her 30s with visible laugh lines at a worn wooden table at a busy coffee shop "
            "with steamed windows, shot on 35mm film, 35mm lens, golden hour light, film grain, "
            "slight motion blur, off-center composition, visible pores, skin texture"
        )
        assert result.original == COFFEE_SHOP_PROMPT
        assert result.original_score == 100
        assert result.new_score == 0
        assert result.improvement == 100
        assert result.issues_fixed == (
            "Generic location",
            "Overused beauty modifiers",
            "8K/4K resolution spam",
            "Trending/ArtStation clichés",
            "No imperfections",
            "No camera/lens reference",
        )
        assert result.modifiers_added == (
            "shot on 35mm film",
            "35mm lens",
            "golden hour light",
            "film grain",
            "slight motion blur",
            "off-center composition",
            "visible pores",
            "skin texture",
        )

    def test_phone_style_skips_lens(self):
        config = TransformConfig(style="phone", mood="harsh", imperfection_level="low")
        result = Transformer(FirstPick()).transform("city street at night", config)
        assert result.modifiers_added == ("smartphone photo", "single bare bulb", "film grain", "off-center composition")
        assert result.transformed == (
            "city street at night, smartphone photo, single bare bulb, film grain, off-center composition"
        )

    def test_digital_moody_high_with_person(self):
        config = TransformConfig(style="digital", mood="moody", imperfection_level="high")
        result = Transformer(FirstPick()).transform("a person at the office", config)
        assert result.transformed.startswith(
            "a tired office worker at a fluorescent-lit cubicle with papers everywhere, "
        )
        assert result.modifiers_added == (
            "shot on iPhone",
            "35mm lens",
            "low key lighting",
            "film grain",
            "slight motion blur",
            "worn surfaces",
            "off-center composition",
            "visible pores",
            "skin texture",
        )

    @pytest.mark.parametrize(
        "prompt",
        [f"a {noun} {clause}" for noun in ("woman", "man") for clause in QUALIFYING_CLAUSES.values()]
        + [f"a person {QUALIFYING_CLAUSES[word]}" for word in ("with", "wearing", "holding", "in", "who")],
    )
    def test_qualified_subject_is_left_alone(self, prompt):
        result = Transformer(FirstPick()).transform(prompt, FILM_MEDIUM)
        assert result.transformed.startswith(prompt + ", ")

    def test_qualifying_word_must_follow_directly(self):
        result = Transformer(FirstPick()).transform("a person, with a red hat", FILM_MEDIUM)
        assert result.transformed.startswith("a tired office worker, with a red hat, ")

    def test_repeated_location_gets_one_rewrite(self):
        for seed in range(20):
            result = Transformer(random.Random(seed)).transform("lunch in a park and a nap at the park", FILM_MEDIUM)
            chosen = [option for option in PARK_REWRITES if option in result.transformed]
            assert len(chosen) == 1, result.transformed
            assert result.transformed.count(f"at {chosen[0]}") == 2

    def test_determiner_case_is_kept(self):
        result = Transformer(FirstPick()).transform("A man on a bench", FILM_MEDIUM)
        assert result.transformed.startswith("A man in his 30s with visible laugh lines on a bench, ")

    def test_only_first_location_family_rewritten(self):
        result = Transformer(FirstPick()).transform("walking from the park in a coffee shop", FILM_MEDIUM)
        assert "at a worn wooden table at a busy coffee shop with steamed windows" in result.transformed
        assert "the park" in result.transformed

    def test_preserve_original_keeps_flagged_phrases(self):
        config = TransformConfig(preserve_original=True)
        result = Transformer(FirstPick()).transform("beautiful sunset, 8k", config)
        assert result.transformed.startswith("beautiful sunset, 8k, ")

    def test_no_human_details_without_human_subject(self):
        result = Transformer(FirstPick()).transform("mountain lake at dawn", FILM_MEDIUM)
        assert not set(result.modifiers_added) & set(VOCABULARY["human_details"])
        assert len(result.modifiers_added) == 6

    def test_payload_shape(self):
        payload = Transformer(FirstPick()).transform(COFFEE_SHOP_PROMPT).to_payload()
        assert set(payload) == {
            "original", "transformed", "original_score", "new_score",
            "improvement", "issues_fixed", "modifiers_added",
        }


class TestTransformRandomized:
    def test_coffee_shop_example_contract(self):
        improved = 0
        for seed in range(50):
            result = Transformer(random.Random(seed)).transform(COFFEE_SHOP_PROMPT, FILM_MEDIUM)
            text = result.transformed
            assert not re.search(r"\b8k\b", text, re.IGNORECASE)
            assert "beautiful" not in text.lower()
            assert "trending on artstation" not in text.lower()
            assert "in a coffee shop" not in text
            assert re.match(r"a woman (in her [34]0s|middle-aged|elderly|young adult) with ", text)

            mods = result.modifiers_added
            assert len(mods) == 8
            assert mods[0] in VOCABULARY["cameras.film"]
            assert mods[1] in VOCABULARY["lenses"]
            assert mods[2] in VOCABULARY["lighting.natural"]
            assert mods[3] in VOCABULARY["imperfections.film"]
            assert mods[4] in VOCABULARY["imperfections.focus"]
            assert mods[5] in VOCABULARY["composition.natural"]
            assert set(mods[6:]) <= set(VOCABULARY["human_details"])
            assert mods[6] != mods[7]
            assert text.endswith(", ".join(mods))
            if result.new_score <= result.original_score:
                improved += 1
        assert improved >= 45

    def test_seeded_transformers_agree(self):
        first = Transformer(random.Random(7)).transform(COFFEE_SHOP_PROMPT)
        second = Transformer(random.Random(7)).transform(COFFEE_SHOP_PROMPT)
        assert first == second

    def test_new_score_matches_reanalysis(self):
        result = Transformer(random.Random(3)).transform("portrait of a man, 8k")
        assert result.new_score == analyze_prompt(result.transformed).score
        assert result.improvement == result.original_score - result.new_score


class TestTransformConfig:
    def test_invalid_values_fall_back_to_defaults(self):
        config = TransformConfig.resolve(style="polaroid", mood=None, imperfection_level="extreme")
        assert config == TransformConfig()

    def test_values_are_case_folded(self):
        assert TransformConfig.resolve(style="Digital", mood="MOODY").style == "digital"

    def test_transform_never_fails_on_bad_config(self):
        result = Transformer(FirstPick()).transform("a dog", TransformConfig(style="bogus", mood="gloomy"))
        assert result.modifiers_added[0] == "shot on 35mm film"
        assert result.modifiers_added[2] == "golden hour light"


class TestInvalidInput:
    @pytest.mark.parametrize("prompt", ["", "   ", None, 12])
    def test_transform_rejects(self, prompt):
        with pytest.raises(InvalidPromptError):
            Transformer().transform(prompt)

    def test_suggest_rejects_empty(self):
        with pytest.raises(InvalidPromptError):
            Transformer().suggest("")


class TestSuggest:
    def test_human_prompt_gets_human_details(self):
        suggestions = Transformer(FirstPick()).suggest("a man walking down the street")
        additions = suggestions.recommended_additions
        assert list(additions) == ["camera", "lighting", "imperfections", "composition", "human_details"]
        assert additions["camera"] == ("shot on 35mm film", "shot on Kodak Portra 400")
        assert len(additions["human_details"]) == 3

    def test_non_human_prompt_has_no_human_details(self):
        suggestions = Transformer().suggest("mountain lake at dawn")
        assert "human_details" not in suggestions.recommended_additions
        assert all(len(v) == 2 for v in suggestions.recommended_additions.values())

    def test_matches_analysis(self):
        prompt = "beautiful portrait of a woman, 8k"
        suggestions = Transformer().suggest(prompt)
        analysis = analyze_prompt(prompt)
        assert suggestions.score == analysis.score
        assert suggestions.issues == analysis.issues


class TestHelpers:
    def test_has_human_subject(self):
        assert has_human_subject("Portrait in the rain")
        assert not has_human_subject("an empty manger")

    def test_module_level_helpers(self):
        result = transform_prompt("a dog on a beach", style="phone")
        assert result.modifiers_added[0] == "smartphone photo"
        assert humanize("a dog on a beach").startswith("a dog on a beach, ")
