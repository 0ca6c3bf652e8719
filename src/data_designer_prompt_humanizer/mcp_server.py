"""MCP server for image prompt humanizing.

Tools: transform, analyze, suggest and modifiers. Each returns a JSON string.
"""

from __future__ import annotations

import json

from mcp.server.fastmcp import FastMCP

from data_designer_prompt_humanizer.bands import score_badge, score_band
from data_designer_prompt_humanizer.core import InvalidPromptError, analyze_prompt
from data_designer_prompt_humanizer.modifiers import vocabulary_tree
from data_designer_prompt_humanizer.transformer import TransformConfig, Transformer

MCP_SERVER_NAME = "prompt-humanizer"

mcp_server = FastMCP(MCP_SERVER_NAME)
_transformer = Transformer()


def _error(exc: Exception) -> str:
    return json.dumps({"error": str(exc)})


@mcp_server.tool()
def transform(prompt: str, style: str = "film", mood: str = "natural", imperfection_level: str = "medium") -> str:
    """Transform a generic AI image prompt into a realistic, photography-grounded one.

    Returns the original and rewritten prompt with both scores (0-100, higher means
    more AI-prone), the improvement, and the modifier phrases that were added.
    """
    config = TransformConfig.resolve(style, mood, imperfection_level)
    try:
        result = _transformer.transform(prompt, config)
    except InvalidPromptError as e:
        return _error(e)
    return json.dumps(result.to_payload(), indent=2)


@mcp_server.tool()
def analyze(prompt: str) -> str:
    """Analyze a prompt for AI-prone patterns without transforming it.

    Returns the score, its band and badge, the issues found, and the realism
    signals that offset the score.
    """
    try:
        result = analyze_prompt(prompt)
    except InvalidPromptError as e:
        return _error(e)
    payload = result.to_payload()
    payload["band"] = score_band(result.score)
    payload["badge"] = score_badge(result.score)
    return json.dumps(payload, indent=2)


@mcp_server.tool()
def suggest(prompt: str) -> str:
    """Get suggestions for improving a prompt without rewriting it."""
    try:
        suggestions = _transformer.suggest(prompt)
    except InvalidPromptError as e:
        return _error(e)
    return json.dumps(suggestions.to_payload(), indent=2)


@mcp_server.tool()
def modifiers() -> str:
    """List all available realism modifiers by category."""
    return json.dumps(vocabulary_tree(), indent=2)


def main() -> None:
    mcp_server.run()


if __name__ == "__main__":
    main()
