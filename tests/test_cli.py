import json

from typer.testing import CliRunner

from data_designer_prompt_humanizer.cli import app

runner = CliRunner()


class TestCli:
    def test_analyze_json(self):
        result = runner.invoke(app, ["analyze", "portrait of a man, 8k", "--json"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["score"] == 65
        assert payload["issue_count"] == 4

    def test_analyze_alias_and_unquoted_words(self):
        result = runner.invoke(app, ["a", "portrait", "of", "a", "man,", "8k", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["score"] == 65

    def test_analyze_text_output(self):
        result = runner.invoke(app, ["analyze", "candid photo, shot on Kodak Portra 400, film grain"])
        assert result.exit_code == 0
        assert "NO ISSUES FOUND" in result.stdout

    def test_transform_seed_is_reproducible(self):
        args = ["transform", "a beautiful woman in a coffee shop, 8k", "--json", "--seed", "11", "--style", "digital"]
        first = json.loads(runner.invoke(app, args).stdout)
        second = json.loads(runner.invoke(app, args).stdout)
        assert first == second
        assert "8k" not in first["transformed"]

    def test_transform_text_output(self):
        result = runner.invoke(app, ["t", "a man in a park", "--seed", "2"])
        assert result.exit_code == 0
        assert "MODIFIERS ADDED" in result.stdout

    def test_missing_prompt_exits_nonzero(self):
        for command in ("transform", "analyze", "suggest"):
            result = runner.invoke(app, [command])
            assert result.exit_code == 1

    def test_suggest_json(self):
        result = runner.invoke(app, ["suggest", "a man walking down the street", "--json", "--seed", "5"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert len(payload["recommended_additions"]["human_details"]) == 3

    def test_modifiers_and_examples(self):
        assert runner.invoke(app, ["modifiers"]).exit_code == 0
        assert runner.invoke(app, ["e", "--seed", "1"]).exit_code == 0
