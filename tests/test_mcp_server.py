import json

from data_designer_prompt_humanizer import mcp_server


class TestMcpTools:
    def test_transform(self):
        payload = json.loads(mcp_server.transform("a person in a park", style="digital", imperfection_level="high"))
        assert payload["original"] == "a person in a park"
        assert len(payload["modifiers_added"]) == 9

    def test_analyze_includes_band(self):
        payload = json.loads(mcp_server.analyze("beautiful portrait of a woman, 8k"))
        assert payload["score"] == 90
        assert payload["band"] == "high"
        assert payload["badge"] == "\U0001f534"

    def test_analyze_empty_prompt_scores_zero(self):
        assert json.loads(mcp_server.analyze(""))["score"] == 0

    def test_invalid_prompt_returns_error(self):
        assert "error" in json.loads(mcp_server.transform("   "))
        assert "error" in json.loads(mcp_server.suggest(""))

    def test_modifiers(self):
        payload = json.loads(mcp_server.modifiers())
        assert set(payload) >= {"cameras", "lenses", "lighting", "imperfections", "human_details", "composition"}
