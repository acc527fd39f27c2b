# trackcard/tools.py
"""MCP tools for the track card."""

import json

from mcp.server.fastmcp import FastMCP

from .view import SearchViewController


def register_tools(mcp: FastMCP, controller: SearchViewController) -> None:
    """Register all track card MCP tools."""

    @mcp.tool()
    async def spotify_find_track(q: str) -> str:
        """
        Look up the single best Spotify track match for free text and put it on the card.
        Returns JSON with 'title' ("name — artists"), 'image_url' and the status line.
        On failure the card keeps its previous track and 'error' explains why.
        """
        await controller.activate()
        await controller.submit(q)
        return json.dumps(controller.snapshot(), indent=2, ensure_ascii=False)

    @mcp.tool()
    def ping() -> str:
        """Quick ping tool for sanity checks."""
        return "pong"
